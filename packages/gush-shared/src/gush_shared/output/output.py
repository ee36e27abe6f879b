"""Output helpers that keep status messages off stdout.

stdout is reserved for results a caller may want to capture (for example the
URL of a created pull request). Everything else goes to stderr.
"""

import click


def user_output(message: str = "", *, nl: bool = True) -> None:
    """Write a status message for the user to stderr."""
    click.echo(message, err=True, nl=nl)


def machine_output(message: str) -> None:
    """Write a result line to stdout."""
    click.echo(message)
