"""Loan CLI commands for Fin Calc."""

from functools import partial

import click

from fincalc.sdk import (
    CREDIT_TIERS,
    LoanParameters,
    amortize_loan,
    calculate_loan_amount,
    calculate_loan_estimates,
    calculate_monthly_payment,
    calculate_mortgage,
)

from .common import calculation_errors, emit, format_option, get_profile
from .renderers.loan_renderer import (
    render_amortization,
    render_loan_amount,
    render_loan_estimates,
    render_monthly_payment,
    render_mortgage,
)

# "Good" credit tier APR when neither --rate nor profile loan.annual_rate_percent is set
FALLBACK_RATE = CREDIT_TIERS[1].apr


def _loan_defaults(rate, term):
    loan = get_profile().loan
    if rate is None:
        rate = loan.annual_rate_percent if loan.annual_rate_percent is not None else FALLBACK_RATE
    if term is None:
        term = loan.term_months
    return rate, term


@click.group()
def loan():
    """Loan payments, amortization and mortgages."""
    pass


@loan.command("amortize")
@click.argument("principal", type=float)
@click.argument("rate", type=float)
@click.argument("term_months", type=int)
@click.option("--full", is_flag=True, help="Show every period of the schedule")
@format_option
def loan_amortize(principal, rate, term_months, full, output_format):
    """Amortization schedule for PRINCIPAL at RATE percent over TERM_MONTHS.

    Examples:
        fin-calc loan amortize 20000 6 60
        fin-calc loan amortize 250000 6.5 360 --format json
    """
    with calculation_errors():
        result = amortize_loan(LoanParameters(
            principal=principal,
            annual_rate_percent=rate,
            term_months=term_months,
        ))

    emit(output_format, result.model_dump(), partial(render_amortization, full=full))


@loan.command("payment")
@click.argument("principal", type=float)
@click.option("--rate", type=float, help="Annual rate percent (default: profile, else 8.49)")
@click.option("--term", type=int, help="Term in months (default: profile, else 60)")
@format_option
def loan_payment(principal, rate, term, output_format):
    """Monthly payment on a PRINCIPAL loan."""
    rate, term = _loan_defaults(rate, term)
    with calculation_errors():
        payment = calculate_monthly_payment(principal, rate, term)

    data = {"principal": principal, "annual_rate_percent": rate, "term_months": term, "monthly_payment": payment}
    emit(output_format, data, render_monthly_payment)


@loan.command("max-amount")
@click.argument("monthly_payment", type=float)
@click.option("--rate", type=float, help="Annual rate percent (default: profile, else 8.49)")
@click.option("--term", type=int, help="Term in months (default: profile, else 60)")
@format_option
def loan_max_amount(monthly_payment, rate, term, output_format):
    """Largest loan a MONTHLY_PAYMENT can pay off."""
    rate, term = _loan_defaults(rate, term)
    with calculation_errors():
        amount = calculate_loan_amount(monthly_payment, rate, term)

    data = {"monthly_payment": monthly_payment, "annual_rate_percent": rate, "term_months": term, "loan_amount": amount}
    emit(output_format, data, render_loan_amount)


@loan.command("estimates")
@click.argument("monthly_payment", type=float)
@click.option("--term", type=int, help="Term in months (default: profile, else 60)")
@format_option
def loan_estimates(monthly_payment, term, output_format):
    """Loan amount MONTHLY_PAYMENT buys at each credit tier."""
    _, term = _loan_defaults(None, term)
    with calculation_errors():
        estimates = calculate_loan_estimates(monthly_payment, term)

    emit(output_format, [e.model_dump() for e in estimates], render_loan_estimates)


@loan.command("mortgage")
@click.argument("home_price", type=float)
@click.option("--down", "down_payment_percent", type=float, default=20, show_default=True,
              help="Down payment percent")
@click.option("--rate", type=float, default=6.5, show_default=True, help="Annual rate percent")
@click.option("--years", "term_years", type=int, default=30, show_default=True, help="Term in years")
@click.option("--property-tax", "property_tax_percent", type=float, default=1.2, show_default=True,
              help="Annual property tax, percent of price")
@click.option("--insurance", "annual_insurance", type=float, default=1500, show_default=True,
              help="Annual homeowners insurance")
@format_option
def loan_mortgage(home_price, down_payment_percent, rate, term_years, property_tax_percent,
                  annual_insurance, output_format):
    """Monthly cost (PITI) of buying a home at HOME_PRICE."""
    with calculation_errors():
        result = calculate_mortgage(
            home_price,
            down_payment_percent,
            rate,
            term_years=term_years,
            property_tax_percent=property_tax_percent,
            annual_insurance=annual_insurance,
        )

    emit(output_format, result.model_dump(), render_mortgage)
