"""Affordability CLI commands for Fin Calc.

Commands that take a monthly income default to the saved income
projection (fin-calc income project ... --save) when --income is omitted.
"""

import click

from fincalc.sdk import (
    NAMED_RATIOS,
    SALARY_LEVELS,
    analyze_dti,
    auto_payment_verdict,
    calculate_max_home_price,
    calculate_payment_approvals,
    calculate_rent_affordability,
    evaluate_affordability,
    salary_affordability,
)

from .common import (
    calculation_errors,
    emit,
    format_option,
    get_profile,
    get_tax_rules,
    resolve_monthly_income,
)
from .renderers.afford_renderer import (
    render_affordability,
    render_auto_verdict,
    render_dti,
    render_max_home_price,
    render_payment_approvals,
    render_rent,
    render_salary,
    render_salary_levels,
)

income_option = click.option(
    "--income", "monthly_income", type=float,
    help="Gross monthly income (default: saved income projection)",
)


@click.group()
def afford():
    """Check what an income can afford."""
    pass


@afford.command("check")
@click.argument("income", type=float)
@click.argument("ratio")
@click.option("--candidate", type=float, help="Amount to test against the maximum")
@format_option
def afford_check(income, ratio, candidate, output_format):
    """Maximum amount INCOME supports at RATIO.

    RATIO is a decimal (0.30) or one of: rent, rent-conservative, auto,
    mortgage, dti.

    Examples:
        fin-calc afford check 6000 0.30
        fin-calc afford check 6000 rent --candidate 1950
    """
    with calculation_errors():
        result = evaluate_affordability(income, ratio, candidate_amount=candidate)
    emit(output_format, result.model_dump(), render_affordability)


@afford.command("rent")
@income_option
@click.option("--current", "current_rent", type=float, help="Current monthly rent to evaluate")
@format_option
def afford_rent(monthly_income, current_rent, output_format):
    """Maximum rent at 30% (and 25%) of gross monthly income."""
    monthly_income = resolve_monthly_income(monthly_income)
    with calculation_errors():
        result = calculate_rent_affordability(monthly_income, current_rent)
    emit(output_format, result.model_dump(), render_rent)


@afford.command("dti")
@click.argument("housing_payment", type=float)
@income_option
@click.option("--other-debts", type=float, default=0, help="Other monthly debt payments")
@format_option
def afford_dti(housing_payment, monthly_income, other_debts, output_format):
    """Debt-to-income ratios for a monthly HOUSING_PAYMENT."""
    monthly_income = resolve_monthly_income(monthly_income)
    with calculation_errors():
        result = analyze_dti(monthly_income, housing_payment, other_debts)
    emit(output_format, result.model_dump(), render_dti)


@afford.command("auto")
@click.argument("payment", type=float, required=False)
@income_option
@click.option("--obligations", type=float, default=0, help="Existing fixed monthly obligations")
@click.option("--net-income", type=float, help="Net monthly income (default: 75% of gross)")
@format_option
def afford_auto(payment, monthly_income, obligations, net_income, output_format):
    """Car payment limits, or a verdict on a specific PAYMENT.

    Without PAYMENT, shows the maximum payment at conservative, standard and
    aggressive payment-to-income ratios.
    """
    monthly_income = resolve_monthly_income(monthly_income)
    with calculation_errors():
        if payment is None:
            approvals = calculate_payment_approvals(monthly_income)
            emit(output_format, [a.model_dump() for a in approvals], render_payment_approvals)
            return
        verdict = auto_payment_verdict(payment, monthly_income, obligations, net_income)
    emit(output_format, verdict.model_dump(), render_auto_verdict)


@afford.command("home")
@income_option
@click.option("--down", "down_payment_percent", type=float, default=20, show_default=True,
              help="Down payment percent")
@click.option("--rate", type=float, default=6.5, show_default=True, help="Annual rate percent")
@click.option("--years", "term_years", type=int, default=30, show_default=True, help="Term in years")
@format_option
def afford_home(monthly_income, down_payment_percent, rate, term_years, output_format):
    """Estimate the maximum home price for a gross monthly income."""
    monthly_income = resolve_monthly_income(monthly_income)
    with calculation_errors():
        result = calculate_max_home_price(monthly_income, down_payment_percent, rate, term_years)
    emit(output_format, result.model_dump(), render_max_home_price)


@afford.command("salary")
@click.argument("salary", type=float, required=False)
@click.option("--year", type=int, help="Tax rules year (default: settings tax_year)")
@click.option("--state-rate", type=float, help="Flat state tax rate as a decimal (default: profile or rules)")
@format_option
def afford_salary(salary, year, state_rate, output_format):
    """What SALARY affords after tax; without SALARY, compare common salary levels."""
    if state_rate is None:
        state_rate = get_profile().state_tax_rate
    rules = get_tax_rules(year)

    with calculation_errors():
        if salary is None:
            rows = [salary_affordability(level, rules, state_rate).model_dump() for level in SALARY_LEVELS]
            emit(output_format, rows, render_salary_levels)
            return
        result = salary_affordability(salary, rules, state_rate)
    emit(output_format, result.model_dump(), render_salary)


@afford.command("ratios")
def afford_ratios():
    """List the named ratios accepted by 'afford check'."""
    for name, ratio in NAMED_RATIOS.items():
        click.echo(f"  {name:<18} {ratio:.0%}")
