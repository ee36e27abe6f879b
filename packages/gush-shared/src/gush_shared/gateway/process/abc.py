"""Abstract base class for running command lines."""

from abc import ABC, abstractmethod
from pathlib import Path

from gush_shared.gateway.process.types import CommandOutcome


class Process(ABC):
    """Abstract interface for executing a single command line.

    Implementations never raise for a non-zero exit status; the caller decides
    whether a failure is tolerated by inspecting the returned CommandOutcome.
    """

    @abstractmethod
    def run_command(self, cwd: Path, line: str) -> CommandOutcome:
        """Run a command line in the given directory and wait for it to finish.

        Args:
            cwd: Working directory for the command
            line: Full command line (e.g. "git remote update")

        Returns:
            CommandOutcome with the exit status and captured output
        """
        ...
