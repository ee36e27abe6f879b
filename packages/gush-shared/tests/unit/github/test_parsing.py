"""Tests for GitHub parsing helpers."""

import pytest

from gush_shared.github.parsing import parse_gh_json, parse_git_remote_url
from gush_shared.github.types import GitHubRepoId, RemoteApiError


@pytest.mark.parametrize(
    "url",
    [
        "git@github.com:acme/widgets.git",
        "git@github.com:acme/widgets",
        "https://github.com/acme/widgets.git",
        "https://github.com/acme/widgets",
        "https://github.com/acme/widgets/",
        "ssh://git@github.com/acme/widgets.git",
    ],
)
def test_parse_git_remote_url(url: str) -> None:
    assert parse_git_remote_url(url) == GitHubRepoId(owner="acme", repo="widgets")


def test_parse_git_remote_url_keeps_dots_in_name() -> None:
    assert parse_git_remote_url("git@github.com:acme/acme.github.io.git").repo == "acme.github.io"


def test_parse_git_remote_url_rejects_other_hosts() -> None:
    with pytest.raises(ValueError):
        parse_git_remote_url("git@gitlab.com:acme/widgets.git")


def test_parse_gh_json_rejects_non_objects() -> None:
    with pytest.raises(RemoteApiError):
        parse_gh_json("[1, 2]", operation_context="list things")
    with pytest.raises(RemoteApiError):
        parse_gh_json("not json", operation_context="list things")
