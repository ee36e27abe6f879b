"""Fake implementation of the process gateway for testing."""

from pathlib import Path

from gush_shared.gateway.process.abc import Process
from gush_shared.gateway.process.types import CommandOutcome


class FakeProcess(Process):
    """In-memory fake that returns pre-configured outcomes per command line.

    This class has NO public setup methods. All state is provided via constructor.
    Command lines without a configured outcome succeed with empty output.

    Mutation Tracking:
    -----------------
    - run_commands: List of (cwd, line) tuples in execution order
    """

    def __init__(self, *, outcomes: dict[str, CommandOutcome] | None = None) -> None:
        """Create FakeProcess with pre-configured outcomes.

        Args:
            outcomes: Mapping of command line -> CommandOutcome
        """
        self._outcomes = outcomes or {}
        self._run_commands: list[tuple[Path, str]] = []

    def run_command(self, cwd: Path, line: str) -> CommandOutcome:
        self._run_commands.append((cwd, line))
        return self._outcomes.get(line, CommandOutcome(exit_status=0, output=""))

    @property
    def run_commands(self) -> list[tuple[Path, str]]:
        """Read-only access to executed (cwd, line) tuples for test assertions."""
        return list(self._run_commands)

    @property
    def run_lines(self) -> list[str]:
        """Executed command lines in order, without their working directory."""
        return [line for _, line in self._run_commands]
