"""Rich renderer for budget allocations."""

from rich.console import Console
from rich.table import Table
from rich import box

from fincalc.sdk import format_currency, format_percent


def render_budget(console: Console, data: dict) -> None:
    """Render a needs/wants/savings split, with line items when present.

    Args:
        console: Rich Console instance
        data: {"allocation": BudgetAllocation dump, "subcategories": [...] or None}
    """
    allocation = data["allocation"]
    console.print(f"\n[bold]Budget for {format_currency(allocation['net_monthly_income'])}/month net[/bold]")

    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("Category", style="cyan")
    table.add_column("Share", justify="right")
    table.add_column("Monthly", justify="right")
    table.add_column("Weekly", justify="right")
    table.add_column("Daily", justify="right")

    for category in allocation["categories"]:
        table.add_row(
            category["name"],
            format_percent(category["proportion"] * 100, 0),
            format_currency(category["monthly"]),
            format_currency(category["weekly"]),
            format_currency(category["daily"]),
        )
    console.print(table)

    subcategories = data.get("subcategories")
    if subcategories:
        detail = Table(show_header=True, header_style="bold", box=box.SIMPLE)
        detail.add_column("Group", style="dim")
        detail.add_column("Item")
        detail.add_column("Share", justify="right")
        detail.add_column("Monthly", justify="right")
        for item in subcategories:
            detail.add_row(item["group"], item["name"], format_percent(item["percent"], 0),
                           format_currency(item["monthly"]))
        console.print(detail)
