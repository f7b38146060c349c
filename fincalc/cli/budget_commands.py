"""Budget and income-stream CLI commands for Fin Calc.

Income streams are kept in the data directory's state.json under
"income-streams"; every change rewrites the whole list.
"""

import click
from pydantic import ValidationError

from fincalc.sdk import (
    BudgetProportions,
    IncomeStream,
    aggregate_income_streams,
    allocate_budget,
    budget_subcategories,
    get_store,
    new_stream_id,
    suggested_stability,
)
from fincalc.sdk.budget import INCOME_TYPE_LABELS, PERIODS_PER_YEAR

from .common import STREAMS_KEY, calculation_errors, emit, format_option, get_profile
from .renderers.budget_renderer import render_budget
from .renderers.income_renderer import render_stream_summary, render_streams


@click.group()
def budget():
    """Split net income into needs, wants and savings."""
    pass


@budget.command("allocate")
@click.argument("net_monthly", type=float)
@click.option("--needs", type=float, help="Needs share as a decimal (default: profile, 0.50)")
@click.option("--wants", type=float, help="Wants share as a decimal (default: profile, 0.30)")
@click.option("--savings", type=float, help="Savings share as a decimal (default: profile, 0.20)")
@click.option("--detail", is_flag=True, help="Include default line items (housing, groceries, ...)")
@format_option
def budget_allocate(net_monthly, needs, wants, savings, detail, output_format):
    """Allocate NET_MONTHLY income by the 50/30/20 rule (or custom shares).

    Examples:
        fin-calc budget allocate 4200
        fin-calc budget allocate 4200 --needs 0.6 --wants 0.2 --savings 0.2
    """
    defaults = get_profile().budget
    proportions = BudgetProportions(
        needs=defaults.needs if needs is None else needs,
        wants=defaults.wants if wants is None else wants,
        savings=defaults.savings if savings is None else savings,
    )

    with calculation_errors():
        allocation = allocate_budget(net_monthly, proportions)
        subcategories = budget_subcategories(net_monthly) if detail else None

    data = {
        "allocation": allocation.model_dump(),
        "subcategories": [s.model_dump() for s in subcategories] if subcategories else None,
    }
    emit(output_format, data, render_budget)


# =============================================================================
# Income streams
# =============================================================================


def _load_streams(store) -> list:
    return [IncomeStream.model_validate(raw) for raw in store.get(STREAMS_KEY, [])]


def _save_streams(store, streams: list) -> None:
    store.set(STREAMS_KEY, [s.model_dump() for s in streams])


@click.group()
def streams():
    """Track household income streams."""
    pass


@streams.command("add")
@click.argument("name")
@click.argument("amount", type=float)
@click.option("--frequency", type=click.Choice(list(PERIODS_PER_YEAR)), default="monthly",
              help="How often AMOUNT is received (default: monthly)")
@click.option("--type", "income_type", type=click.Choice(list(INCOME_TYPE_LABELS)), default="other",
              help="Income type (default: other)")
@click.option("--stability", type=click.IntRange(1, 5),
              help="1 (very variable) to 5 (very stable); default suggested by type")
def streams_add(name, amount, frequency, income_type, stability):
    """Add an income stream NAME paying AMOUNT per period.

    Examples:
        fin-calc streams add "Day job" 4000 --type w2
        fin-calc streams add "Rideshare" 500 --frequency weekly --type gig
    """
    if stability is None:
        stability = suggested_stability(income_type)

    try:
        stream = IncomeStream(
            id=new_stream_id(),
            name=name,
            amount=amount,
            frequency=frequency,
            type=income_type,
            stability_rating=stability,
        )
    except ValidationError as e:
        raise click.ClickException(f"Invalid income stream: {e}")

    store = get_store()
    existing = _load_streams(store)
    _save_streams(store, existing + [stream])
    click.echo(f"Added {stream.name} ({stream.id})")


@streams.command("list")
@format_option
def streams_list(output_format):
    """List saved income streams."""
    data = [s.model_dump() for s in _load_streams(get_store())]
    emit(output_format, data, render_streams)


@streams.command("remove")
@click.argument("stream_id")
def streams_remove(stream_id):
    """Remove the income stream STREAM_ID."""
    store = get_store()
    existing = _load_streams(store)
    remaining = [s for s in existing if s.id != stream_id]
    if len(remaining) == len(existing):
        raise click.ClickException(f"No income stream with id '{stream_id}'")
    _save_streams(store, remaining)
    click.echo(f"Removed {stream_id}")


@streams.command("clear")
def streams_clear():
    """Remove all income streams."""
    get_store().remove(STREAMS_KEY)
    click.echo("Cleared income streams.")


@streams.command("summary")
@format_option
def streams_summary(output_format):
    """Combined annual and stability-weighted income across all streams."""
    with calculation_errors():
        summary = aggregate_income_streams(_load_streams(get_store()))

    emit(output_format, summary.model_dump(), render_stream_summary)
