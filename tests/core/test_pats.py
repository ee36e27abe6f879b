"""Tests for pat templates and the pat-on-the-back flow."""

from collections.abc import Sequence
from pathlib import Path

import pytest
from gush_shared.github.gateway import create_fake_github_gateway
from gush_shared.github.issue.fake import FakeGitHubIssueGateway
from gush_shared.github.pr.fake import FakeGitHubPrGateway
from gush_shared.github.types import PullRequestDetails, RemoteApiError

from gush.core.context import GushContext
from gush.core.pat_on_the_back import give_pat_on_the_back
from gush.core.pats import PAT_TEMPLATES, choose_random, render_pat


def test_render_pat_substitutes_author() -> None:
    assert render_pat("Great job, {{ author }}!", {"author": "bob"}) == "Great job, bob!"


def test_render_pat_replaces_every_occurrence() -> None:
    assert render_pat("{{ author }} and {{ author }}", {"author": "bob"}) == "bob and bob"


def test_render_pat_leaves_unknown_placeholders() -> None:
    assert render_pat("Hi {{ reviewer }}", {"author": "bob"}) == "Hi {{ reviewer }}"


def test_render_pat_requires_exact_spacing() -> None:
    assert render_pat("Hi {{author}}", {"author": "bob"}) == "Hi {{author}}"


def test_every_template_mentions_the_author() -> None:
    assert PAT_TEMPLATES
    for template in PAT_TEMPLATES:
        assert "{{ author }}" in template


def test_choose_random_returns_a_template() -> None:
    assert choose_random(PAT_TEMPLATES) in PAT_TEMPLATES


def _first(templates: Sequence[str]) -> str:
    return templates[0]


def test_give_pat_on_the_back_comments_on_pr() -> None:
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
    issue = FakeGitHubIssueGateway()
    ctx = GushContext.for_test(
        github=create_fake_github_gateway(pr=pr, issue=issue),
        cwd=Path("/repo"),
        choose=_first,
    )

    result = give_pat_on_the_back(ctx, "acme", "widgets", 12)

    expected_body = render_pat(PAT_TEMPLATES[0], {"author": "bob"})
    assert result.author == "bob"
    assert result.body == expected_body
    assert result.pr_url == "https://github.com/acme/widgets/pull/12"
    assert issue.added_comments == [("acme", "widgets", 12, expected_body)]


def test_give_pat_on_the_back_propagates_missing_pr() -> None:
    issue = FakeGitHubIssueGateway()
    ctx = GushContext.for_test(github=create_fake_github_gateway(issue=issue))

    with pytest.raises(RemoteApiError):
        give_pat_on_the_back(ctx, "acme", "widgets", 99)

    assert issue.added_comments == []
