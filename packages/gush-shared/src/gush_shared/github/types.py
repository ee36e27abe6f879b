"""Types returned by the GitHub gateways."""

from dataclasses import dataclass


class RemoteApiError(RuntimeError):
    """Any failure reported by GitHub: auth, network, not found or validation."""


@dataclass(frozen=True)
class GitHubRepoId:
    """Owner/name pair identifying a repository on GitHub."""

    owner: str
    repo: str


@dataclass(frozen=True)
class CreatedPullRequest:
    """Pull request returned by the create call."""

    number: int
    html_url: str


@dataclass(frozen=True)
class PullRequestDetails:
    """Subset of a pull request's metadata used by gush."""

    number: int
    title: str
    html_url: str
    author_login: str


@dataclass(frozen=True)
class IssueComment:
    """Comment posted on an issue or pull request thread."""

    id: int
    body: str
    html_url: str
