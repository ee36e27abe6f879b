"""Composite gateway for GitHub operations."""

from dataclasses import dataclass

from gush_shared.github.auth.abc import GitHubAuthGateway
from gush_shared.github.issue.abc import GitHubIssueGateway
from gush_shared.github.pr.abc import GitHubPrGateway


@dataclass(frozen=True)
class GitHubGateway:
    """Composite gateway providing access to all GitHub sub-gateways.

    Sub-gateways follow the REST API grouping used by gush:

    Usage:
        ctx.github.auth.get_current_username(cwd)
        ctx.github.pr.create_pr(cwd, org, repo, base=..., head=..., title=..., body=...)
        ctx.github.issue.add_comment(cwd, org, repo, number, body)
    """

    auth: GitHubAuthGateway
    pr: GitHubPrGateway
    issue: GitHubIssueGateway


def create_real_github_gateway() -> GitHubGateway:
    """Create a GitHubGateway backed by the gh CLI."""
    from gush_shared.github.auth.real import RealGitHubAuthGateway
    from gush_shared.github.issue.real import RealGitHubIssueGateway
    from gush_shared.github.pr.real import RealGitHubPrGateway

    return GitHubGateway(
        auth=RealGitHubAuthGateway(),
        pr=RealGitHubPrGateway(),
        issue=RealGitHubIssueGateway(),
    )


def create_fake_github_gateway(
    *,
    auth: GitHubAuthGateway | None = None,
    pr: GitHubPrGateway | None = None,
    issue: GitHubIssueGateway | None = None,
) -> GitHubGateway:
    """Create a GitHubGateway with fake sub-gateways for testing.

    Provide custom sub-gateways to override defaults.

    Example:
        >>> from gush_shared.github.pr.fake import FakeGitHubPrGateway
        >>> pr = FakeGitHubPrGateway(next_pr_number=42)
        >>> github = create_fake_github_gateway(pr=pr)
        >>> # Later: assert pr.created_prs[0].title == "Add widget"
    """
    from gush_shared.github.auth.fake import FakeGitHubAuthGateway
    from gush_shared.github.issue.fake import FakeGitHubIssueGateway
    from gush_shared.github.pr.fake import FakeGitHubPrGateway

    return GitHubGateway(
        auth=auth or FakeGitHubAuthGateway(),
        pr=pr or FakeGitHubPrGateway(),
        issue=issue or FakeGitHubIssueGateway(),
    )
