"""Tax CLI commands for Fin Calc."""

import click

from fincalc.sdk import estimate_gig_income, estimate_taxes
from fincalc.sdk.taxes import GIG_PLATFORM_EXPENSE_RATES

from .common import calculation_errors, emit, format_option, get_profile, get_tax_rules
from .renderers.tax_renderer import render_gig_result, render_tax_estimate


@click.group()
def taxes():
    """Estimate annual income taxes."""
    pass


@taxes.command("estimate")
@click.argument("gross_income", type=float)
@click.option("--year", type=int, help="Tax rules year (default: settings tax_year)")
@click.option("--state-rate", type=float, help="Flat state tax rate as a decimal (default: profile or rules)")
@format_option
def taxes_estimate(gross_income, year, state_rate, output_format):
    """Estimate federal, FICA and state tax on GROSS_INCOME.

    Examples:
        fin-calc taxes estimate 85000
        fin-calc taxes estimate 85000 --year 2025 --state-rate 0.0
    """
    if state_rate is None:
        state_rate = get_profile().state_tax_rate

    rules = get_tax_rules(year)
    with calculation_errors():
        estimate = estimate_taxes(gross_income, rules, state_rate=state_rate)

    emit(output_format, estimate.model_dump(), render_tax_estimate)


@taxes.command("gig")
@click.argument("gross_annual", type=float)
@click.option("--platform", type=click.Choice(sorted(GIG_PLATFORM_EXPENSE_RATES)), default="other",
              help="Platform preset for expenses (default: other)")
@click.option("--expense-rate", type=float, help="Override the platform's expense rate (decimal)")
@click.option("--hours", "hours_per_week", type=float, help="Hours worked per week, for an hourly rate")
@click.option("--year", type=int, help="Tax rules year (default: settings tax_year)")
@format_option
def taxes_gig(gross_annual, platform, expense_rate, hours_per_week, year, output_format):
    """Estimate true take-home on GROSS_ANNUAL self-employed gig income."""
    rules = get_tax_rules(year)
    with calculation_errors():
        result = estimate_gig_income(
            gross_annual,
            platform=platform,
            expense_rate=expense_rate,
            hours_per_week=hours_per_week,
            rules=rules,
        )

    emit(output_format, result.model_dump(), render_gig_result)
