"""Fake GitHub issue operations for testing."""

from pathlib import Path

from gush_shared.github.issue.abc import GitHubIssueGateway
from gush_shared.github.types import IssueComment, RemoteApiError


class FakeGitHubIssueGateway(GitHubIssueGateway):
    """In-memory fake implementation of GitHub issue operations.

    This class has NO public setup methods. All state is provided via constructor.

    Mutation Tracking:
    -----------------
    - added_comments: List of (org, repo, number, body) tuples
    """

    def __init__(self, *, add_comment_raises: RemoteApiError | None = None) -> None:
        self._add_comment_raises = add_comment_raises
        self._added_comments: list[tuple[str, str, int, str]] = []

    def add_comment(
        self, cwd: Path, org: str, repo: str, number: int, body: str
    ) -> IssueComment:
        if self._add_comment_raises is not None:
            raise self._add_comment_raises
        self._added_comments.append((org, repo, number, body))
        comment_id = len(self._added_comments)
        return IssueComment(
            id=comment_id,
            body=body,
            html_url=f"https://github.com/{org}/{repo}/pull/{number}#issuecomment-{comment_id}",
        )

    @property
    def added_comments(self) -> list[tuple[str, str, int, str]]:
        return list(self._added_comments)
