"""Abstract base class for GitHub issue operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from gush_shared.github.types import IssueComment


class GitHubIssueGateway(ABC):
    """Abstract interface for GitHub issue operations.

    Pull requests share the issue comment thread, so comments on a PR go here.
    """

    @abstractmethod
    def add_comment(
        self, cwd: Path, org: str, repo: str, number: int, body: str
    ) -> IssueComment:
        """Add a comment to an issue or pull request thread.

        Args:
            cwd: Working directory for the gh invocation
            org: Owner of the repository
            repo: Name of the repository
            number: Issue or pull request number
            body: Comment body (markdown)

        Returns:
            The created comment
        """
        ...
