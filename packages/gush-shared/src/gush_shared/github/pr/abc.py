"""Abstract base class for GitHub pull request operations."""

from abc import ABC, abstractmethod
from pathlib import Path

from gush_shared.github.types import CreatedPullRequest, PullRequestDetails


class GitHubPrGateway(ABC):
    """Abstract interface for GitHub pull request operations.

    All implementations (real and fake) must implement this interface.
    Failures are raised as RemoteApiError.
    """

    @abstractmethod
    def create_pr(
        self,
        cwd: Path,
        org: str,
        repo: str,
        *,
        base: str,
        head: str,
        title: str,
        body: str,
    ) -> CreatedPullRequest:
        """Create a pull request.

        Args:
            cwd: Working directory for the gh invocation
            org: Owner of the target repository
            repo: Name of the target repository
            base: Target in "{org}:{branch}" form
            head: Source in "{user}:{branch}" form
            title: PR title
            body: PR body (markdown)

        Returns:
            The created pull request
        """
        ...

    @abstractmethod
    def get_pr(self, cwd: Path, org: str, repo: str, number: int) -> PullRequestDetails:
        """Fetch a pull request by number.

        Args:
            cwd: Working directory for the gh invocation
            org: Owner of the repository
            repo: Name of the repository
            number: Pull request number

        Returns:
            PullRequestDetails including the author's login
        """
        ...
