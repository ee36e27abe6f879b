"""Fake GitHub authentication queries for testing."""

from pathlib import Path

from gush_shared.github.auth.abc import GitHubAuthGateway


class FakeGitHubAuthGateway(GitHubAuthGateway):
    """Returns a configured username.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, username: str | None = "octocat") -> None:
        self._username = username

    def get_current_username(self, cwd: Path) -> str | None:
        return self._username
