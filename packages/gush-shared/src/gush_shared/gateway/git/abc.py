"""Abstract base class for git queries."""

from abc import ABC, abstractmethod
from pathlib import Path


class Git(ABC):
    """Abstract interface for the git queries gush needs.

    Mutations (remote add, push) go through the process gateway as command
    lines so that each one can carry its own allow-failure policy.
    """

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch.

        Returns:
            Branch name, or None in detached HEAD state or outside a repository
        """
        ...

    @abstractmethod
    def get_remote_url(self, cwd: Path, remote: str) -> str:
        """Get the URL for a git remote.

        Args:
            cwd: Directory inside the repository
            remote: Remote name (e.g., "origin")

        Raises:
            ValueError: If remote doesn't exist or has no URL
        """
        ...
