"""Result types for the process gateway."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandOutcome:
    """Exit status and combined stdout/stderr of one command line."""

    exit_status: int
    output: str

    @property
    def succeeded(self) -> bool:
        return self.exit_status == 0
