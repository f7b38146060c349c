"""Fin Calc CLI - Command-line interface for personal finance calculations."""

import logging
import os

import click

from fincalc import __version__
from fincalc.sdk import project_inflation_impact
from fincalc.sdk.inflation import DEFAULT_YEAR_OFFSETS

from .afford_commands import afford as afford_group
from .budget_commands import budget as budget_group
from .budget_commands import streams as streams_group
from .common import calculation_errors, emit, format_option, get_profile
from .income_commands import income as income_group
from .loan_commands import loan as loan_group
from .profile_commands import profile as profile_group
from .renderers.afford_renderer import render_inflation
from .settings_commands import settings as settings_group
from .taxes_commands import taxes as taxes_group


def _configure_logging():
    """Configure logging based on LOG_LEVEL environment variable."""
    log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
        datefmt="%H:%M:%S"
    )


@click.group()
@click.version_option(version=__version__, prog_name="fin-calc")
def cli():
    """Fin Calc - Personal finance calculators.

    Income projection, tax estimates, budgets, loans, and affordability.

    Configuration is loaded from (in order):

    \b
    1. FIN_CALC_CONFIG_PATH environment variable
    2. ~/.config/fin-calc/ (XDG default)

    Run 'fin-calc profile show' to see your planning assumptions.
    """
    pass


# Add subcommand groups
cli.add_command(income_group)
cli.add_command(taxes_group)
cli.add_command(budget_group)
cli.add_command(streams_group)
cli.add_command(loan_group)
cli.add_command(afford_group)
cli.add_command(settings_group)
cli.add_command(profile_group)


def _parse_years(value: str):
    try:
        return [int(part) for part in value.split(",") if part.strip()]
    except ValueError:
        raise click.BadParameter(f"Expected comma-separated years, got '{value}'")


@cli.command("inflation")
@click.argument("present_value", type=float)
@click.option("--rate", type=float, help="Annual inflation percent (default: profile, 3.0)")
@click.option("--years", default=",".join(str(y) for y in DEFAULT_YEAR_OFFSETS), show_default=True,
              help="Comma-separated year offsets")
@format_option
def inflation(present_value, rate, years, output_format):
    """How inflation erodes the buying power of PRESENT_VALUE.

    Examples:
        fin-calc inflation 50000
        fin-calc inflation 50000 --rate 4 --years 1,2,5,20
    """
    if rate is None:
        rate = get_profile().inflation_rate_percent

    with calculation_errors():
        projections = project_inflation_impact(present_value, rate, _parse_years(years))

    data = {
        "present_value": present_value,
        "annual_rate_percent": rate,
        "projections": [p.model_dump() for p in projections],
    }
    emit(output_format, data, render_inflation)


def main():
    """Entry point for the CLI."""
    _configure_logging()
    cli()


if __name__ == "__main__":
    main()
