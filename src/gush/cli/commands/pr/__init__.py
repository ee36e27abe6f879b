"""Pull request commands."""

import click

from gush.cli.commands.pr.create_cmd import pr_create
from gush.cli.commands.pr.pat_cmd import pr_pat_on_the_back


@click.group("pull-request")
def pr_group() -> None:
    """Create pull requests and thank their authors."""
    pass


pr_group.add_command(pr_create, name="create")
pr_group.add_command(pr_pat_on_the_back, name="pat-on-the-back")
