"""Give a pat on the back to a pull request's author."""

import click
from gush_shared.github.types import RemoteApiError
from gush_shared.output.output import machine_output, user_output

from gush.cli.commands.pr.shared import repo_options, resolve_repo_id
from gush.core.context import GushContext
from gush.core.pat_on_the_back import give_pat_on_the_back


@click.command("pat-on-the-back")
@repo_options
@click.argument("pr_number", type=int)
@click.pass_obj
def pr_pat_on_the_back(ctx: GushContext, org: str | None, repo: str | None, pr_number: int) -> None:
    """Give a pat on the back to a PR's author with a random template.

    Examples:

    \b
      gush pull-request pat-on-the-back 12
    """
    repo_id = resolve_repo_id(ctx, org, repo)
    try:
        result = give_pat_on_the_back(ctx, repo_id.owner, repo_id.repo, pr_number)
    except RemoteApiError as e:
        raise click.ClickException(str(e)) from e

    user_output(click.style(result.body, dim=True))
    machine_output(f"Pat on the back pushed to {result.pr_url}")
