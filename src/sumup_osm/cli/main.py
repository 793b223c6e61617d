"""Main CLI entry point."""

import click

# Import and register all commands at module level
from sumup_osm.cli.commands import columns, convert


@click.group()
def cli():
    """SumUp to OSM - split processor exports into accounting lines.

    Converts a SumUp transaction report, where one row carries the sale,
    the processing fee and the payout, into Date,Reference,Amount lines
    that an accounting tool can import.
    """


# Register all commands
convert.register_commands(cli)
columns.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
