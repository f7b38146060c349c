"""Rich renderers for affordability checks and inflation projections."""

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from fincalc.sdk import format_currency, format_percent

VERDICT_STYLES = {
    "comfortable": "green",
    "tight": "yellow",
    "risky": "red",
}


def _verdict(is_affordable) -> str:
    if is_affordable is None:
        return ""
    return "[green]Affordable[/green]" if is_affordable else "[red]Not affordable[/red]"


def _key_value_table() -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("key", style="dim")
    table.add_column("value", justify="right")
    return table


def render_affordability(console: Console, data: dict) -> None:
    table = _key_value_table()
    table.add_row("Income", format_currency(data["income_figure"]))
    table.add_row("Ratio", format_percent(data["ratio"] * 100))
    table.add_row("Max affordable", f"[green]{format_currency(data['max_affordable'])}[/green]")
    if data["candidate_amount"] is not None:
        table.add_row("Candidate", format_currency(data["candidate_amount"]))
        table.add_row("Verdict", _verdict(data["is_affordable"]))
    console.print(table)


def render_rent(console: Console, data: dict) -> None:
    table = _key_value_table()
    table.add_row("Monthly income", format_currency(data["monthly_income"]))
    table.add_row("Max rent (30%)", f"[green]{format_currency(data['max_rent_30'])}[/green]")
    table.add_row("Conservative (25%)", format_currency(data["max_rent_25"]))
    if data["current_rent"] is not None:
        table.add_row("Current rent", format_currency(data["current_rent"]))
        table.add_row("Share of income", format_percent(data["rent_percent"]))
        table.add_row("Verdict", _verdict(data["is_affordable"]))
    console.print(Panel(table, title="Rent", border_style="dim"))


def render_dti(console: Console, data: dict) -> None:
    """Render a debt-to-income analysis.

    Args:
        console: Rich Console instance
        data: DtiAnalysis.model_dump()
    """
    table = _key_value_table()
    table.add_row("Monthly income", format_currency(data["monthly_income"]))
    table.add_row("Housing payment", format_currency(data["housing_payment"]))
    table.add_row("Other debts", format_currency(data["other_debts"]))
    table.add_row("Front-end DTI (max 28%)", format_percent(data["front_end_dti"]))
    table.add_row("Back-end DTI (max 36%)", format_percent(data["back_end_dti"]))
    table.add_row("Verdict", _verdict(data["is_affordable"]))
    console.print(Panel(table, title="Debt-to-Income", subtitle=data["qualification"], border_style="dim"))


def render_payment_approvals(console: Console, data: list) -> None:
    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("Approach", style="cyan")
    table.add_column("PTI", justify="right")
    table.add_column("Max payment", justify="right")
    table.add_column("")
    for approval in data:
        table.add_row(
            approval["pti_type"],
            format_percent(approval["ratio"] * 100, 0),
            format_currency(approval["max_payment"]),
            f"[dim]{approval['description']}[/dim]",
        )
    console.print(table)


def render_auto_verdict(console: Console, data: dict) -> None:
    style = VERDICT_STYLES[data["verdict"]]
    table = _key_value_table()
    table.add_row("Payment", format_currency(data["monthly_payment"]))
    table.add_row("Payment-to-income", format_percent(data["payment_to_income"]))
    table.add_row("Debt-to-income", format_percent(data["debt_to_income"]))
    table.add_row("Monthly margin", format_currency(data["monthly_margin"]))
    console.print(Panel(
        table,
        title=f"[{style}]{data['verdict'].title()}[/{style}]",
        subtitle=data["explanation"],
        border_style=style,
    ))


def render_max_home_price(console: Console, data: dict) -> None:
    table = _key_value_table()
    table.add_row("Monthly income", format_currency(data["monthly_income"]))
    table.add_row("Max housing payment (28%)", format_currency(data["max_housing_payment"]))
    table.add_row("Max loan", format_currency(data["max_loan_amount"]))
    table.add_row(
        f"Est. max price ({data['down_payment_percent']:g}% down)",
        f"[green]{format_currency(data['estimated_max_price'])}[/green]",
    )
    console.print(Panel(
        table,
        title="Home Affordability",
        subtitle=f"{data['annual_rate_percent']}% over {data['term_years']} years",
        border_style="dim",
    ))


def render_salary(console: Console, data: dict) -> None:
    """Render what a single salary affords.

    Args:
        console: Rich Console instance
        data: SalaryAffordability.model_dump()
    """
    taxes = _key_value_table()
    taxes.add_row("Salary", format_currency(data["salary"]))
    taxes.add_row("Federal tax", format_currency(data["federal_tax"]))
    taxes.add_row("State tax (est.)", format_currency(data["state_tax_estimate"]))
    taxes.add_row("FICA", format_currency(data["fica_tax"]))
    taxes.add_row("Take-home", f"[green]{format_currency(data['take_home_pay'])}[/green]")
    console.print(Panel(taxes, title="Taxes", border_style="dim"))

    monthly = _key_value_table()
    monthly.add_row("Gross / net monthly", f"{format_currency(data['monthly_gross'])} / {format_currency(data['monthly_net'])}")
    monthly.add_row("Needs / wants / savings", " / ".join(
        format_currency(data[key]) for key in ("needs", "wants", "savings")
    ))
    monthly.add_row("Max rent", format_currency(data["max_rent"]))
    monthly.add_row("Max car payment", format_currency(data["max_car_payment"]))
    monthly.add_row("Max mortgage", format_currency(data["max_mortgage"]))
    monthly.add_row("Emergency fund", format_currency(data["recommended_emergency_fund"]))
    monthly.add_row("Hourly / weekly / biweekly", (
        f"${data['hourly_rate']:,.2f} / {format_currency(data['weekly_pay'])} / "
        f"{format_currency(data['biweekly_pay'])}"
    ))
    console.print(Panel(monthly, title="Monthly", border_style="dim"))


def render_salary_levels(console: Console, data: list) -> None:
    """Render a comparison table across salary levels."""
    table = Table(show_header=True, header_style="bold")
    table.add_column("Salary", justify="right", style="cyan")
    table.add_column("Take-home", justify="right")
    table.add_column("Net / month", justify="right")
    table.add_column("Max rent", justify="right")
    table.add_column("Max car", justify="right")
    table.add_column("Hourly", justify="right")
    for row in data:
        table.add_row(
            format_currency(row["salary"]),
            format_currency(row["take_home_pay"]),
            format_currency(row["monthly_net"]),
            format_currency(row["max_rent"]),
            format_currency(row["max_car_payment"]),
            f"${row['hourly_rate']:,.2f}",
        )
    console.print(table)


def render_inflation(console: Console, data: dict) -> None:
    """Render purchasing-power erosion.

    Args:
        console: Rich Console instance
        data: {"present_value", "annual_rate_percent", "projections": [...]}
    """
    if not data["projections"]:
        console.print("[dim]Nothing to project for a zero amount.[/dim]")
        return

    table = Table(show_header=True, header_style="bold", box=box.SIMPLE)
    table.add_column("Years", justify="right")
    table.add_column("Buying power", justify="right")
    table.add_column("Loss", justify="right")
    table.add_column("Raise needed", justify="right")
    for row in data["projections"]:
        table.add_row(
            str(row["year_offset"]),
            format_currency(row["purchasing_power"]),
            f"[red]{format_percent(row['percent_loss'])}[/red]",
            format_percent(row["raise_needed"]),
        )

    console.print(Panel(
        table,
        title=f"{format_currency(data['present_value'])} at {data['annual_rate_percent']}% inflation",
        border_style="dim",
    ))
