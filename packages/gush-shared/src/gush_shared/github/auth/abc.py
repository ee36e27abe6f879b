"""Abstract base class for GitHub authentication queries."""

from abc import ABC, abstractmethod
from pathlib import Path


class GitHubAuthGateway(ABC):
    """Abstract interface for GitHub authentication queries.

    Authentication itself is owned by the gh CLI; gush only asks who is logged in.
    """

    @abstractmethod
    def get_current_username(self, cwd: Path) -> str | None:
        """Get the login of the authenticated GitHub user.

        Returns:
            GitHub username if authenticated, None otherwise
        """
        ...
