"""Rich renderers for income projections and income streams."""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from fincalc.sdk import format_currency, format_percent
from fincalc.sdk.budget import INCOME_TYPE_LABELS, STABILITY_LABELS


def render_projection(console: Console, data: dict) -> None:
    """Render an income projection.

    Args:
        console: Rich Console instance
        data: ProjectionResult.model_dump()
    """
    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("Period")
    table.add_column("Income", justify="right")

    table.add_row("Daily", format_currency(data["daily_rate"]))
    table.add_row("Weekly", format_currency(data["weekly_rate"]))
    table.add_row("Monthly", format_currency(data["monthly_rate"]))
    table.add_row("Annual", f"[green]{format_currency(data['annual_rate'])}[/green]")

    console.print(Panel(table, title=f"Projected Income ({data['days_worked']} days worked)", border_style="dim"))

    caps = Table(show_header=False, box=None, padding=(0, 2))
    caps.add_column("key", style="dim")
    caps.add_column("value", justify="right")
    caps.add_row("Max auto payment (12%)", format_currency(data["max_auto_payment"]))
    caps.add_row("Max rent (30%)", format_currency(data["max_rent"]))
    console.print(caps)


def render_income_rates(console: Console, data: dict) -> None:
    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("Period")
    table.add_column("Income", justify="right")
    for key in ("annual", "monthly", "biweekly", "weekly"):
        table.add_row(key.title(), format_currency(data[key]))
    table.add_row("Hourly", f"${data['hourly']:,.2f}")
    console.print(table)


def render_streams(console: Console, streams: list) -> None:
    """Render the saved income-stream collection."""
    if not streams:
        console.print("[dim]No income streams. Add one with: fin-calc streams add NAME AMOUNT[/dim]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Amount", justify="right")
    table.add_column("Frequency")
    table.add_column("Stability")

    for stream in streams:
        rating = stream["stability_rating"]
        table.add_row(
            stream["id"],
            stream["name"],
            INCOME_TYPE_LABELS.get(stream["type"], stream["type"]),
            format_currency(stream["amount"]),
            stream["frequency"],
            f"{rating} - {STABILITY_LABELS.get(rating, '?')}",
        )

    console.print(table)


def render_stream_summary(console: Console, data: dict) -> None:
    """Render aggregated income streams.

    Args:
        console: Rich Console instance
        data: StreamSummary.model_dump()
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")
    table.add_row("Streams", str(data["stream_count"]))
    table.add_row("Total annual", f"[green]{format_currency(data['total_annual'])}[/green]")
    table.add_row("Monthly", format_currency(data["monthly"]))
    table.add_row("Reliable annual", format_currency(data["reliable_annual"]))
    table.add_row("Reliability", format_percent(data["reliability_percent"]))
    console.print(Panel(table, title="Household Income", border_style="dim"))

    by_type = {k: v for k, v in data["by_type"].items() if v > 0}
    if by_type:
        breakdown = Table(show_header=True, header_style="bold", box=box.SIMPLE)
        breakdown.add_column("Type")
        breakdown.add_column("Annual", justify="right")
        breakdown.add_column("Share", justify="right")
        for income_type, amount in sorted(by_type.items(), key=lambda item: -item[1]):
            breakdown.add_row(
                INCOME_TYPE_LABELS.get(income_type, income_type),
                format_currency(amount),
                format_percent(amount / data["total_annual"] * 100),
            )
        console.print(breakdown)
