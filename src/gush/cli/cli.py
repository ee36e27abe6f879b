import logging

import click

from gush.cli.commands.pr import pr_group
from gush.cli.config import ConfigError
from gush.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gush")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Work with GitHub pull requests from the command line."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ConfigError as e:
            raise click.ClickException(str(e)) from e


cli.add_command(pr_group)


def main() -> None:
    """CLI entry point used by the `gush` console script."""
    cli()
