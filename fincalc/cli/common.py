"""Helpers shared by the CLI command modules."""

import json
from contextlib import contextmanager

import click
from rich.console import Console

from fincalc.sdk import (
    CalculationError,
    ConfigNotFoundError,
    DEFAULT_TAX_YEAR,
    ProfileNotFoundError,
    TaxRulesCache,
    get_setting,
    get_store,
    load_profile,
)

INCOME_STATE_KEY = "income-calc-state"
STREAMS_KEY = "income-streams"

format_option = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text)",
)


def echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, default=str))


def emit(output_format: str, data, renderer) -> None:
    """Print data as JSON or through a rich renderer(console, data)."""
    if output_format == "json":
        echo_json(data)
    else:
        renderer(Console(), data)


@contextmanager
def calculation_errors():
    """Turn SDK input and config errors into click errors (exit code 1)."""
    try:
        yield
    except (CalculationError, ConfigNotFoundError, ProfileNotFoundError, FileNotFoundError) as e:
        raise click.ClickException(str(e))


def get_profile():
    with calculation_errors():
        return load_profile()


def get_tax_rules(year=None):
    """Tax rules for year, else settings.json tax_year, else the default year."""
    if year is None:
        year = get_setting("tax_year", DEFAULT_TAX_YEAR)
    with calculation_errors():
        return TaxRulesCache().get(year)


def resolve_monthly_income(monthly_income):
    """Use the given monthly income, else the saved income projection's monthly rate."""
    if monthly_income is not None:
        return monthly_income

    saved = get_store().get(INCOME_STATE_KEY)
    if not saved:
        raise click.ClickException(
            "No monthly income given and no saved income projection.\n"
            "Pass --income or run: fin-calc income project START AS_OF YTD --save"
        )
    return saved["result"]["monthly_rate"]
