"""Rich renderers for tax estimates."""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from fincalc.sdk import format_currency, format_percent


def render_tax_estimate(console: Console, data: dict) -> None:
    """Render an annual tax estimate.

    Args:
        console: Rich Console instance
        data: TaxEstimate.model_dump()
    """
    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("Item")
    table.add_column("Annual", justify="right")
    table.add_column("Monthly", justify="right")

    def row(label, amount, style=None):
        annual, monthly = format_currency(amount), format_currency(amount / 12)
        if style:
            annual, monthly = f"[{style}]{annual}[/{style}]", f"[{style}]{monthly}[/{style}]"
        table.add_row(label, annual, monthly)

    row("Gross income", data["gross_income"])
    row("Taxable income", data["taxable_income"])
    row("Federal income tax", data["federal_tax"])
    row("Social Security", data["social_security"])
    row("Medicare", data["medicare"])
    row("State (estimate)", data["state_tax_estimate"])
    row("Total tax", data["total_tax"], "red")
    row("Net income", data["net_income"], "green")

    console.print(Panel(
        table,
        title=f"Tax Estimate ({data['tax_year']})",
        subtitle=f"Effective rate {format_percent(data['effective_rate'] * 100)}",
        border_style="dim",
    ))


def render_gig_result(console: Console, data: dict) -> None:
    """Render self-employed gig income take-home."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")

    table.add_row("Gross (annual)", format_currency(data["gross_annual"]))
    table.add_row(f"Expenses ({format_percent(data['expense_rate'] * 100, 0)})", format_currency(data["expenses"]))
    table.add_row("Net before tax", format_currency(data["net_before_tax"]))
    table.add_row("Self-employment tax", format_currency(data["self_employment_tax"]))
    table.add_row("Income tax", format_currency(data["estimated_income_tax"]))
    table.add_row("True net income", f"[green]{format_currency(data['true_net_income'])}[/green]")
    table.add_row("Quarterly set-aside", format_currency(data["quarterly_tax_set_aside"]))
    if data.get("effective_hourly_rate") is not None:
        table.add_row("Effective hourly", f"${data['effective_hourly_rate']:,.2f}")
    table.add_row("Lender-visible income", format_currency(data["lender_visible_income"]))

    console.print(Panel(table, title=f"Gig Income ({data['platform']})", border_style="dim"))
