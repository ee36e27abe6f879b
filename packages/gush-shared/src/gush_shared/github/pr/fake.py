"""Fake GitHub pull request operations for testing."""

from dataclasses import dataclass
from pathlib import Path

from gush_shared.github.pr.abc import GitHubPrGateway
from gush_shared.github.types import CreatedPullRequest, PullRequestDetails, RemoteApiError


@dataclass(frozen=True)
class CreatedPrCall:
    """Arguments of one create_pr() call."""

    org: str
    repo: str
    base: str
    head: str
    title: str
    body: str


class FakeGitHubPrGateway(GitHubPrGateway):
    """In-memory fake implementation of GitHub pull request operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.

    Mutation Tracking:
    -----------------
    - created_prs: CreatedPrCall for every successful create_pr()
    """

    def __init__(
        self,
        *,
        prs: dict[tuple[str, str, int], PullRequestDetails] | None = None,
        next_pr_number: int = 1,
        create_pr_raises: RemoteApiError | None = None,
    ) -> None:
        """Create FakeGitHubPrGateway with pre-configured state.

        Args:
            prs: Mapping of (org, repo, number) -> PullRequestDetails for get_pr()
            next_pr_number: Number assigned to the next created pull request
            create_pr_raises: Error to raise when create_pr() is called
        """
        self._prs = dict(prs or {})
        self._next_pr_number = next_pr_number
        self._create_pr_raises = create_pr_raises
        self._created_prs: list[CreatedPrCall] = []

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
        if self._create_pr_raises is not None:
            raise self._create_pr_raises

        number = self._next_pr_number
        self._next_pr_number += 1
        self._created_prs.append(
            CreatedPrCall(org=org, repo=repo, base=base, head=head, title=title, body=body)
        )
        html_url = f"https://github.com/{org}/{repo}/pull/{number}"
        self._prs[(org, repo, number)] = PullRequestDetails(
            number=number,
            title=title,
            html_url=html_url,
            author_login=head.split(":", 1)[0],
        )
        return CreatedPullRequest(number=number, html_url=html_url)

    def get_pr(self, cwd: Path, org: str, repo: str, number: int) -> PullRequestDetails:
        pr = self._prs.get((org, repo, number))
        if pr is None:
            raise RemoteApiError(f"Pull request #{number} not found in {org}/{repo}")
        return pr

    @property
    def created_prs(self) -> list[CreatedPrCall]:
        """Read-only access to create_pr() calls for test assertions."""
        return list(self._created_prs)
