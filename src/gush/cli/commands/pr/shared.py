"""Options and helpers shared by the pull-request commands."""

from collections.abc import Callable
from typing import TypeVar

import click
from gush_shared.github.parsing import parse_git_remote_url
from gush_shared.github.types import GitHubRepoId

from gush.core.context import GushContext

F = TypeVar("F", bound=Callable[..., object])

DEFAULT_REMOTE = "origin"


def repo_options(fn: F) -> F:
    """Add --org and --repo, both defaulting to the origin remote."""
    fn = click.option(
        "--repo",
        "repo",
        default=None,
        help="Repository name (default: taken from the origin remote)",
    )(fn)
    fn = click.option(
        "--org",
        "org",
        default=None,
        help="Organization or user owning the repository (default: taken from the origin remote)",
    )(fn)
    return fn


def resolve_repo_id(ctx: GushContext, org: str | None, repo: str | None) -> GitHubRepoId:
    """Fill in whichever of org/repo was not given from the origin remote.

    Raises:
        click.UsageError: If a value is missing and origin is not a GitHub remote
    """
    if org is not None and repo is not None:
        return GitHubRepoId(owner=org, repo=repo)

    try:
        origin = parse_git_remote_url(ctx.git.get_remote_url(ctx.cwd, DEFAULT_REMOTE))
    except ValueError as e:
        raise click.UsageError(f"Pass --org and --repo explicitly ({e})") from e

    return GitHubRepoId(
        owner=org if org is not None else origin.owner,
        repo=repo if repo is not None else origin.repo,
    )
