"""Rich renderers for loans and mortgages."""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from fincalc.sdk import format_currency

# Rows shown from each end of a schedule unless --full
SCHEDULE_PREVIEW_ROWS = 6


def render_amortization(console: Console, data: dict, full: bool = False) -> None:
    """Render a loan summary and its amortization schedule.

    Args:
        console: Rich Console instance
        data: AmortizationResult.model_dump()
        full: Show every period instead of the first and last few
    """
    summary = Table(show_header=False, box=None, padding=(0, 2))
    summary.add_column("key", style="dim")
    summary.add_column("value", justify="right")
    summary.add_row("Principal", format_currency(data["principal"]))
    summary.add_row("Rate", f"{data['annual_rate_percent']}%")
    summary.add_row("Term", f"{data['term_months']} months")
    summary.add_row("Monthly payment", f"[green]${data['monthly_payment']:,.2f}[/green]")
    summary.add_row("Total interest", format_currency(data["total_interest"]))
    summary.add_row("Total paid", format_currency(data["total_paid"]))
    console.print(Panel(summary, title="Loan", border_style="dim"))

    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Payment", justify="right")
    table.add_column("Interest", justify="right")
    table.add_column("Principal", justify="right")
    table.add_column("Balance", justify="right")

    schedule = data["schedule"]
    if full or len(schedule) <= SCHEDULE_PREVIEW_ROWS * 2:
        rows, skipped = schedule, 0
    else:
        rows = schedule[:SCHEDULE_PREVIEW_ROWS] + schedule[-SCHEDULE_PREVIEW_ROWS:]
        skipped = len(schedule) - len(rows)

    for i, period in enumerate(rows):
        if skipped and i == SCHEDULE_PREVIEW_ROWS:
            table.add_row("...", f"[dim]{skipped} more[/dim]", "", "", "")
        table.add_row(
            str(period["period"]),
            f"${period['payment']:,.2f}",
            f"${period['interest']:,.2f}",
            f"${period['principal']:,.2f}",
            f"${period['balance']:,.2f}",
        )
    console.print(table)


def render_loan_amount(console: Console, data: dict) -> None:
    console.print(
        f"A {format_currency(data['monthly_payment'])}/month payment over {data['term_months']} months "
        f"at {data['annual_rate_percent']}% supports a loan of "
        f"[green]{format_currency(data['loan_amount'])}[/green]"
    )


def render_monthly_payment(console: Console, data: dict) -> None:
    console.print(
        f"{format_currency(data['principal'])} at {data['annual_rate_percent']}% over "
        f"{data['term_months']} months: [green]${data['monthly_payment']:,.2f}/month[/green]"
    )


def render_loan_estimates(console: Console, data: list) -> None:
    """Render loan amounts by credit tier."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Credit", style="cyan")
    table.add_column("Score")
    table.add_column("APR", justify="right")
    table.add_column("Loan amount", justify="right")
    table.add_column("Total interest", justify="right")
    table.add_column("Total cost", justify="right")

    for estimate in data:
        tier = estimate["credit_tier"]
        table.add_row(
            tier["name"],
            tier["range"],
            f"{tier['apr']:.2f}%",
            f"[green]{format_currency(estimate['loan_amount'])}[/green]",
            format_currency(estimate["total_interest"]),
            format_currency(estimate["total_cost"]),
        )
    console.print(table)


def render_mortgage(console: Console, data: dict) -> None:
    """Render a mortgage PITI breakdown.

    Args:
        console: Rich Console instance
        data: MortgageResult.model_dump()
    """
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")
    table.add_row("Home price", format_currency(data["home_price"]))
    table.add_row(f"Down payment ({data['down_payment_percent']:g}%)", format_currency(data["down_payment"]))
    table.add_row("Loan amount", format_currency(data["loan_amount"]))
    table.add_row("Principal & interest", f"${data['principal_interest']:,.2f}")
    table.add_row("Property tax", f"${data['property_tax']:,.2f}")
    table.add_row("Insurance", f"${data['insurance']:,.2f}")
    if data["pmi"]:
        table.add_row("PMI", f"[yellow]${data['pmi']:,.2f}[/yellow]")
    table.add_row("Total monthly", f"[green]${data['total_monthly']:,.2f}[/green]")
    table.add_row("Total interest", format_currency(data["total_interest"]))
    console.print(Panel(table, title="Mortgage", border_style="dim"))
