"""Income CLI commands for Fin Calc.

Projects annual income from a year-to-date figure and optionally saves the
result so affordability commands can default to it.
"""

import click

from fincalc.sdk import get_store, income_from_annual, parse_date, project_income

from .common import (
    INCOME_STATE_KEY,
    calculation_errors,
    echo_json,
    emit,
    format_option,
)
from .renderers.income_renderer import render_income_rates, render_projection


@click.group()
def income():
    """Project annual income from year-to-date pay."""
    pass


@income.command("project")
@click.argument("start_date")
@click.argument("as_of_date")
@click.argument("ytd_income", type=float)
@click.option("--save", is_flag=True, help="Save as the default income for other commands.")
@format_option
def income_project(start_date, as_of_date, ytd_income, save, output_format):
    """Project income from YTD_INCOME earned between START_DATE and AS_OF_DATE.

    A start date in an earlier year counts from January 1 of the as-of year.
    Dates may be YYYY-MM-DD or MM/DD/YYYY.

    Examples:
        fin-calc income project 2024-01-01 2024-06-30 42000
        fin-calc income project 2023-09-15 2024-03-31 18500 --save
    """
    with calculation_errors():
        result = project_income(start_date, as_of_date, ytd_income)
        state = {
            "start_date": parse_date(start_date).isoformat(),
            "as_of_date": parse_date(as_of_date).isoformat(),
            "ytd_income": ytd_income,
            "result": result.model_dump(),
        }

    if save:
        get_store().set(INCOME_STATE_KEY, state)

    emit(output_format, result.model_dump(), render_projection)
    if save and output_format == "text":
        click.echo("Saved as default income.")


@income.command("show")
@format_option
def income_show(output_format):
    """Show the saved income projection."""
    state = get_store().get(INCOME_STATE_KEY)
    if not state:
        raise click.ClickException("No saved income projection. Run 'fin-calc income project ... --save'.")

    if output_format == "json":
        echo_json(state)
        return

    click.echo(f"Saved projection: {state['ytd_income']:,.2f} from {state['start_date']} to {state['as_of_date']}")
    emit(output_format, state["result"], render_projection)


@income.command("clear")
def income_clear():
    """Forget the saved income projection."""
    if get_store().remove(INCOME_STATE_KEY):
        click.echo("Cleared saved income projection.")
    else:
        click.echo("No saved income projection.")


@income.command("rates")
@click.argument("annual_income", type=float)
@format_option
def income_rates(annual_income, output_format):
    """Break ANNUAL_INCOME into monthly, biweekly, weekly and hourly pay."""
    with calculation_errors():
        rates = income_from_annual(annual_income)
    emit(output_format, rates.model_dump(), render_income_rates)
