"""Fake implementation of git queries for testing."""

from pathlib import Path

from gush_shared.gateway.git.abc import Git


class FakeGit(Git):
    """In-memory fake implementation of git queries.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        current_branches: dict[Path, str | None] | None = None,
        remote_urls: dict[tuple[Path, str], str] | None = None,
    ) -> None:
        """Create FakeGit with pre-configured state.

        Args:
            current_branches: Mapping of cwd -> current branch (None = detached HEAD)
            remote_urls: Mapping of (cwd, remote_name) -> remote URL
        """
        self._current_branches = current_branches or {}
        self._remote_urls = remote_urls or {}

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branches.get(cwd)

    def get_remote_url(self, cwd: Path, remote: str) -> str:
        url = self._remote_urls.get((cwd, remote))
        if url is None:
            raise ValueError(f"Remote '{remote}' not found in repository")
        return url
