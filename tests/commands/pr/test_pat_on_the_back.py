"""Tests for gush pull-request pat-on-the-back."""

from collections.abc import Sequence

from click.testing import CliRunner
from gush_shared.github.gateway import create_fake_github_gateway
from gush_shared.github.issue.fake import FakeGitHubIssueGateway
from gush_shared.github.pr.fake import FakeGitHubPrGateway
from gush_shared.github.types import PullRequestDetails, RemoteApiError

from gush.cli.commands.pr import pr_group
from gush.core.context import GushContext
from gush.core.pats import PAT_TEMPLATES
from tests.test_utils.context_builders import DEFAULT_CWD


def _last(templates: Sequence[str]) -> str:
    return templates[-1]


def _context(issue: FakeGitHubIssueGateway) -> GushContext:
    pr = FakeGitHubPrGateway(
        prs={
            ("acme", "widgets", 12): PullRequestDetails(
                number=12,
                title="Add widget",
                html_url="https://github.com/acme/widgets/pull/12",
                author_login="bob",
            )
        }
    )
    return GushContext.for_test(
        github=create_fake_github_gateway(pr=pr, issue=issue),
        cwd=DEFAULT_CWD,
        choose=_last,
    )


def test_pat_on_the_back_posts_comment() -> None:
    runner = CliRunner()
    issue = FakeGitHubIssueGateway()

    result = runner.invoke(
        pr_group,
        ["pat-on-the-back", "--org", "acme", "--repo", "widgets", "12"],
        obj=_context(issue),
    )

    assert result.exit_code == 0, result.output
    expected_body = PAT_TEMPLATES[-1].replace("{{ author }}", "bob")
    assert issue.added_comments == [("acme", "widgets", 12, expected_body)]
    assert "Pat on the back pushed to https://github.com/acme/widgets/pull/12" in result.output


def test_pat_on_the_back_requires_pr_number() -> None:
    runner = CliRunner()

    result = runner.invoke(
        pr_group,
        ["pat-on-the-back", "--org", "acme", "--repo", "widgets"],
        obj=_context(FakeGitHubIssueGateway()),
    )

    assert result.exit_code != 0


def test_pat_on_the_back_reports_unknown_pr() -> None:
    runner = CliRunner()
    issue = FakeGitHubIssueGateway()

    result = runner.invoke(
        pr_group,
        ["pat-on-the-back", "--org", "acme", "--repo", "widgets", "404"],
        obj=_context(issue),
    )

    assert result.exit_code != 0
    assert "#404" in result.output
    assert issue.added_comments == []


def test_pat_on_the_back_reports_comment_failure() -> None:
    runner = CliRunner()
    issue = FakeGitHubIssueGateway(add_comment_raises=RemoteApiError("Resource not accessible"))

    result = runner.invoke(
        pr_group,
        ["pat-on-the-back", "--org", "acme", "--repo", "widgets", "12"],
        obj=_context(issue),
    )

    assert result.exit_code != 0
    assert "Resource not accessible" in result.output
