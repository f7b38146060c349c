"""Fixed-payment loan math: payments, amortization schedules and reverse amortization.

Standard annuity formula, with r = monthly rate and n = months:

    PMT = P * r(1 + r)^n / ((1 + r)^n - 1)
    P   = PMT * (1 - (1 + r)^-n) / r

A 0% rate is handled separately as P / n.
"""

import logging
from typing import List

from .errors import InvalidInputError, require_non_negative, require_positive
from .schemas import (
    AmortizationPeriod,
    AmortizationResult,
    CreditTier,
    LoanEstimate,
    LoanParameters,
    MortgageResult,
)

logger = logging.getLogger(__name__)

# Residue below this share of the principal is treated as paid off
BALANCE_RELATIVE_EPSILON = 1e-9

DEFAULT_TERM_MONTHS = 60

CREDIT_TIERS = [
    CreditTier(name="Excellent", range="750+", apr=5.99),
    CreditTier(name="Good", range="700-749", apr=8.49),
    CreditTier(name="Fair", range="650-699", apr=12.99),
    CreditTier(name="Poor", range="550-649", apr=18.99),
]

PMI_ANNUAL_RATE = 0.005
PMI_DOWN_PAYMENT_THRESHOLD = 20


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def _compound(monthly_rate: float, term_months: int) -> float:
    try:
        return (1 + monthly_rate) ** term_months
    except OverflowError:
        raise InvalidInputError(
            f"Annual rate {monthly_rate * 1200:g}% over {term_months} months is too large to compute"
        )


def _check_terms(principal: float, annual_rate_percent: float, term_months: int) -> None:
    require_positive(principal, "Principal")
    require_positive(term_months, "Term (months)")
    require_non_negative(annual_rate_percent, "Annual rate")


def calculate_monthly_payment(principal: float, annual_rate_percent: float, term_months: int) -> float:
    """Fixed monthly payment that retires principal over term_months.

    Raises:
        InvalidInputError: If principal or term is not positive, rate is negative,
            or the rate compounds beyond floating-point range
    """
    _check_terms(principal, annual_rate_percent, term_months)

    monthly_rate = _monthly_rate(annual_rate_percent)
    if monthly_rate == 0:
        return principal / term_months

    factor = _compound(monthly_rate, term_months)
    return principal * monthly_rate * factor / (factor - 1)


def amortize_loan(params: LoanParameters) -> AmortizationResult:
    """Build the full amortization schedule for a fixed-rate loan.

    Each period's interest accrues on the running balance; the principal
    portion is clamped to the balance so the last payment never overpays,
    and the final period retires whatever balance remains.
    The schedule stops early if the balance reaches zero.

    Raises:
        InvalidInputError: If principal or term is not positive, rate is negative,
            or the rate compounds beyond floating-point range
    """
    principal = params.principal
    term_months = params.term_months
    payment = calculate_monthly_payment(principal, params.annual_rate_percent, term_months)
    monthly_rate = _monthly_rate(params.annual_rate_percent)

    schedule: List[AmortizationPeriod] = []
    balance = principal
    total_interest = 0.0

    for period in range(1, term_months + 1):
        interest = balance * monthly_rate
        principal_portion = min(payment - interest, balance)
        if period == term_months or balance - principal_portion < principal * BALANCE_RELATIVE_EPSILON:
            principal_portion = balance
        balance -= principal_portion

        total_interest += interest
        schedule.append(AmortizationPeriod(
            period=period,
            payment=interest + principal_portion,
            interest=interest,
            principal=principal_portion,
            balance=balance,
        ))

        if balance == 0:
            break

    logger.debug(
        f"amortize_loan: {principal:.2f} @ {params.annual_rate_percent}% x {term_months} "
        f"-> {payment:.2f}/mo over {len(schedule)} periods"
    )

    return AmortizationResult(
        principal=principal,
        annual_rate_percent=params.annual_rate_percent,
        term_months=term_months,
        monthly_payment=payment,
        total_interest=total_interest,
        total_paid=principal + total_interest,
        schedule=schedule,
    )


def calculate_loan_amount(
    monthly_payment: float,
    annual_rate_percent: float,
    term_months: int = DEFAULT_TERM_MONTHS,
) -> float:
    """Largest principal a monthly payment can retire (reverse amortization).

    Raises:
        InvalidInputError: If payment or term is not positive, or rate is negative
    """
    _check_terms(monthly_payment, annual_rate_percent, term_months)

    monthly_rate = _monthly_rate(annual_rate_percent)
    if monthly_rate == 0:
        return monthly_payment * term_months

    return monthly_payment * (1 - (1 + monthly_rate) ** -term_months) / monthly_rate


def calculate_loan_estimates(
    monthly_payment: float,
    term_months: int = DEFAULT_TERM_MONTHS,
) -> List[LoanEstimate]:
    """Loan amount a monthly payment buys at each credit tier's average APR."""
    estimates = []
    for tier in CREDIT_TIERS:
        loan_amount = calculate_loan_amount(monthly_payment, tier.apr, term_months)
        total_cost = monthly_payment * term_months
        estimates.append(LoanEstimate(
            credit_tier=tier,
            loan_amount=loan_amount,
            total_interest=max(0.0, total_cost - loan_amount),
            total_cost=total_cost,
        ))
    return estimates


def calculate_mortgage(
    home_price: float,
    down_payment_percent: float,
    annual_rate_percent: float,
    term_years: int = 30,
    property_tax_percent: float = 1.2,
    annual_insurance: float = 1500,
) -> MortgageResult:
    """Monthly mortgage cost with PITI breakdown.

    PMI of 0.5%/yr of the loan applies when the down payment is under 20%.

    Raises:
        InvalidInputError: If price or term is not positive, down payment is
            outside [0, 100), or any rate/cost is negative
    """
    require_positive(home_price, "Home price")
    require_positive(term_years, "Term (years)")
    require_non_negative(property_tax_percent, "Property tax rate")
    require_non_negative(annual_insurance, "Annual insurance")
    if not 0 <= down_payment_percent < 100:
        raise InvalidInputError(f"Down payment percent must be in [0, 100), got {down_payment_percent}")

    down_payment = home_price * down_payment_percent / 100
    loan_amount = home_price - down_payment
    term_months = term_years * 12

    principal_interest = calculate_monthly_payment(loan_amount, annual_rate_percent, term_months)
    property_tax = home_price * property_tax_percent / 100 / 12
    insurance = annual_insurance / 12
    pmi = loan_amount * PMI_ANNUAL_RATE / 12 if down_payment_percent < PMI_DOWN_PAYMENT_THRESHOLD else 0.0
    total_payments = principal_interest * term_months

    return MortgageResult(
        home_price=home_price,
        down_payment=down_payment,
        down_payment_percent=down_payment_percent,
        loan_amount=loan_amount,
        principal_interest=principal_interest,
        property_tax=property_tax,
        insurance=insurance,
        pmi=pmi,
        total_monthly=principal_interest + property_tax + insurance + pmi,
        total_payments=total_payments,
        total_interest=max(0.0, total_payments - loan_amount),
    )
