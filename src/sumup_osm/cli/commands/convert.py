"""CSV conversion command."""

import click

from sumup_osm.cli.error_handling import handle_domain_error
from sumup_osm.domain.config import DEFAULT_CURRENCY_SYMBOL, ConverterConfig, Verbosity
from sumup_osm.domain.conversion import ConversionService
from sumup_osm.domain.errors import DomainError
from sumup_osm.domain.output import render_csv
from sumup_osm.utils.logging_config import setup_logging


@click.command("convert")
@click.argument("csv_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--verbosity",
    type=click.Choice([v.value for v in Verbosity], case_sensitive=False),
    default=Verbosity.QUIET.value,
    show_default=True,
    envvar="SUMUP_OSM_VERBOSITY",
    help="Diagnostic detail on standard error",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    default=False,
    help="Shortcut for --verbosity verbose",
)
@click.option(
    "--currency-symbol",
    default=DEFAULT_CURRENCY_SYMBOL,
    show_default=True,
    envvar="SUMUP_OSM_CURRENCY_SYMBOL",
    help="Symbol used for amounts quoted in fee and payout references",
)
@click.pass_context
def convert_csv(ctx, csv_file: str, verbosity: str, verbose: bool, currency_symbol: str):
    """Convert a SumUp transaction report to Date,Reference,Amount CSV.

    Output goes to standard output; diagnostics go to standard error.
    Nothing is written to standard output unless every row converts.
    """
    config = ConverterConfig(
        verbosity=Verbosity.VERBOSE if verbose else Verbosity(verbosity.lower()),
        currency_symbol=currency_symbol,
    )
    setup_logging(config.verbosity)
    service = ConversionService(config)

    try:
        result = service.convert_file(csv_file)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)
        return

    for text in render_csv(result.lines):
        click.echo(text)


def register_commands(cli):
    """Register convert command with main CLI."""
    cli.add_command(convert_csv)
