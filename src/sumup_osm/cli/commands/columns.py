"""Known column listing command."""

import click

from sumup_osm.domain.columns import KNOWN_COLUMNS


@click.command("columns")
def list_columns():
    """List the header names a transaction report may use."""
    for column in sorted(KNOWN_COLUMNS):
        click.echo(column)


def register_commands(cli):
    """Register columns command with main CLI."""
    cli.add_command(list_columns)
