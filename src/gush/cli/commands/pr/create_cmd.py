"""Open a pull request described by a questionary table."""

import click
from gush_shared.output.output import machine_output, user_output

from gush.cli.commands.pr.create_pipeline import (
    DEFAULT_BASE_BRANCH,
    CreateError,
    make_initial_state,
    run_create_pipeline,
)
from gush.cli.commands.pr.shared import repo_options, resolve_repo_id
from gush.core.context import GushContext


@click.command("create")
@repo_options
@click.argument("base_branch", required=False, default=DEFAULT_BASE_BRANCH)
@click.pass_obj
def pr_create(ctx: GushContext, org: str | None, repo: str | None, base_branch: str) -> None:
    """Launch a pull request from the current branch.

    Asks the questions for this kind of repository, pushes the branch to a
    remote named after your GitHub user and opens the pull request against
    BASE_BRANCH (default: master) of the organization.

    Examples:

    \b
      # PR against master of the origin organization
      gush pull-request create

      # PR against the 2.3 branch of another organization
      gush pull-request create --org symfony --repo symfony-docs 2.3
    """
    repo_id = resolve_repo_id(ctx, org, repo)
    state = make_initial_state(org=repo_id.owner, repo=repo_id.repo, base_branch=base_branch)

    result = run_create_pipeline(ctx, state)
    if isinstance(result, CreateError):
        raise click.ClickException(result.message)

    assert result.pull_request is not None
    user_output(click.style(f"Pull request #{result.pull_request.number} created", fg="green"))
    machine_output(result.pull_request.html_url)
