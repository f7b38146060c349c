"""Ratio-based affordability checks.

Every check is income * ratio compared to a candidate amount. Rent and
payment caps use gross monthly income; the 50/30/20 budget uses net.

Ratios:
- Rent:                30% of gross (25% conservative)
- Auto payment (PTI):  8% conservative / 12% standard / 15% aggressive
- Mortgage front-end:  28% of gross (housing only)
- Back-end DTI:        36% of gross (all debts)
"""

import logging
from typing import List, Optional

from . import loans
from .budget import allocate_budget
from .errors import InvalidInputError, require_non_negative, require_positive
from .schemas import (
    AffordabilityResult,
    AutoPaymentVerdict,
    DtiAnalysis,
    MaxHomePrice,
    PaymentApproval,
    RentAffordability,
    SalaryAffordability,
)
from .taxes import TaxRules, estimate_taxes

logger = logging.getLogger(__name__)

RENT_RATIO = 0.30
RENT_CONSERVATIVE_RATIO = 0.25
AUTO_PAYMENT_RATIO = 0.12
MORTGAGE_FRONT_END_RATIO = 0.28
DEBT_TO_INCOME_BACK_END_RATIO = 0.36

NAMED_RATIOS = {
    "rent": RENT_RATIO,
    "rent-conservative": RENT_CONSERVATIVE_RATIO,
    "auto": AUTO_PAYMENT_RATIO,
    "mortgage": MORTGAGE_FRONT_END_RATIO,
    "dti": DEBT_TO_INCOME_BACK_END_RATIO,
}

PTI_RATIOS = [
    ("Conservative", 0.08, "Low risk, easier approval"),
    ("Standard", 0.12, "Typical auto loan guideline"),
    ("Aggressive", 0.15, "Maximum most lenders approve"),
]

# (front-end max %, back-end max %, label), checked in order
DTI_QUALIFICATIONS = [
    (28.0, 36.0, "Excellent - Well within guidelines"),
    (31.0, 43.0, "Good - May qualify with compensating factors"),
    (36.0, 50.0, "Fair - FHA/VA loans may be available"),
]
DTI_AT_RISK = "At risk - May not qualify for most loans"

# Share of the 28% housing budget assumed to go to principal and interest
PRINCIPAL_INTEREST_SHARE = 0.80

# Auto verdict thresholds: payment % of gross, DTI %, monthly margin $
PAYMENT_COMFORTABLE, PAYMENT_TIGHT = 8.0, 12.0
DTI_COMFORTABLE, DTI_TIGHT = 36.0, 43.0
MARGIN_COMFORTABLE, MARGIN_TIGHT = 500.0, 200.0
NET_TO_GROSS_FALLBACK = 0.75

EMERGENCY_FUND_MONTHS = 4
WORK_HOURS_PER_YEAR = 2080

SALARY_LEVELS = [
    30000, 35000, 40000, 45000, 50000,
    55000, 60000, 65000, 70000, 75000,
    80000, 85000, 90000, 95000, 100000,
    110000, 120000, 150000, 175000, 200000,
]


def resolve_ratio(ratio) -> float:
    """Accept a decimal ratio or a name from NAMED_RATIOS."""
    if isinstance(ratio, str):
        if ratio in NAMED_RATIOS:
            return NAMED_RATIOS[ratio]
        try:
            ratio = float(ratio)
        except ValueError:
            raise InvalidInputError(
                f"Unknown ratio '{ratio}'. Use a decimal or one of {list(NAMED_RATIOS)}"
            )
    return require_non_negative(ratio, "Ratio")


def evaluate_affordability(
    income_figure: float,
    ratio,
    candidate_amount: Optional[float] = None,
) -> AffordabilityResult:
    """Maximum affordable amount for an income and ratio, plus an optional verdict.

    Args:
        income_figure: Gross or net monthly income
        ratio: Decimal ratio (0.30) or a name ("rent", "auto", "mortgage", "dti")
        candidate_amount: Amount to test against the maximum

    Raises:
        InvalidInputError: If income, ratio or candidate is negative
    """
    require_non_negative(income_figure, "Income")
    ratio = resolve_ratio(ratio)
    max_affordable = income_figure * ratio

    is_affordable = None
    if candidate_amount is not None:
        require_non_negative(candidate_amount, "Candidate amount")
        is_affordable = candidate_amount <= max_affordable

    return AffordabilityResult(
        income_figure=income_figure,
        ratio=ratio,
        max_affordable=max_affordable,
        candidate_amount=candidate_amount,
        is_affordable=is_affordable,
    )


def calculate_payment_approvals(monthly_income: float) -> List[PaymentApproval]:
    """Maximum auto payment at each payment-to-income tier."""
    require_positive(monthly_income, "Monthly income")
    return [
        PaymentApproval(pti_type=name, ratio=ratio, max_payment=monthly_income * ratio, description=description)
        for name, ratio, description in PTI_RATIOS
    ]


def calculate_rent_affordability(monthly_income: float, current_rent: Optional[float] = None) -> RentAffordability:
    """Rent caps at 30% and 25% of gross, and how current rent compares."""
    require_positive(monthly_income, "Monthly income")
    max_rent_30 = monthly_income * RENT_RATIO

    rent_percent = None
    is_affordable = None
    if current_rent is not None:
        require_non_negative(current_rent, "Current rent")
        rent_percent = current_rent / monthly_income * 100
        is_affordable = current_rent <= max_rent_30

    return RentAffordability(
        monthly_income=monthly_income,
        max_rent_30=max_rent_30,
        max_rent_25=monthly_income * RENT_CONSERVATIVE_RATIO,
        current_rent=current_rent,
        rent_percent=rent_percent,
        is_affordable=is_affordable,
    )


def analyze_dti(monthly_income: float, housing_payment: float, other_debts: float = 0) -> DtiAnalysis:
    """Front-end and back-end debt-to-income with a mortgage qualification label."""
    require_positive(monthly_income, "Monthly income")
    require_non_negative(housing_payment, "Housing payment")
    require_non_negative(other_debts, "Other debts")

    front_end = housing_payment / monthly_income * 100
    back_end = (housing_payment + other_debts) / monthly_income * 100

    qualification = DTI_AT_RISK
    for front_max, back_max, label in DTI_QUALIFICATIONS:
        if front_end <= front_max and back_end <= back_max:
            qualification = label
            break

    return DtiAnalysis(
        monthly_income=monthly_income,
        housing_payment=housing_payment,
        other_debts=other_debts,
        front_end_dti=front_end,
        back_end_dti=back_end,
        is_affordable=(front_end <= MORTGAGE_FRONT_END_RATIO * 100
                       and back_end <= DEBT_TO_INCOME_BACK_END_RATIO * 100),
        qualification=qualification,
    )


def calculate_max_home_price(
    monthly_income: float,
    down_payment_percent: float = 20,
    annual_rate_percent: float = 6.5,
    term_years: int = 30,
) -> MaxHomePrice:
    """Estimate the most expensive home a gross monthly income supports.

    Housing is capped at 28% of gross; 80% of that is assumed to go to
    principal and interest, and the loan is grossed up by the down payment.
    """
    require_positive(monthly_income, "Monthly income")
    if not 0 <= down_payment_percent < 100:
        raise InvalidInputError(f"Down payment percent must be in [0, 100), got {down_payment_percent}")

    max_housing = monthly_income * MORTGAGE_FRONT_END_RATIO
    max_loan = loans.calculate_loan_amount(
        max_housing * PRINCIPAL_INTEREST_SHARE, annual_rate_percent, term_years * 12
    )

    return MaxHomePrice(
        monthly_income=monthly_income,
        max_housing_payment=max_housing,
        max_loan_amount=max_loan,
        estimated_max_price=max_loan / (1 - down_payment_percent / 100),
        down_payment_percent=down_payment_percent,
        annual_rate_percent=annual_rate_percent,
        term_years=term_years,
    )


def auto_payment_verdict(
    monthly_payment: float,
    monthly_gross_income: float,
    fixed_obligations: float = 0,
    monthly_net_income: Optional[float] = None,
) -> AutoPaymentVerdict:
    """Comfortable / tight / risky verdict for a car payment.

    Risky if any of: payment > 12% of gross, DTI > 43%, margin < $200.
    Tight if any of: payment > 8%, DTI > 36%, margin < $500.
    Margin is net income (75% of gross if unknown) less obligations and payment.
    """
    require_non_negative(monthly_payment, "Monthly payment")
    require_positive(monthly_gross_income, "Monthly gross income")
    require_non_negative(fixed_obligations, "Fixed obligations")

    payment_ratio = monthly_payment / monthly_gross_income * 100
    dti = (fixed_obligations + monthly_payment) / monthly_gross_income * 100
    effective_income = monthly_net_income or monthly_gross_income * NET_TO_GROSS_FALLBACK
    margin = effective_income - fixed_obligations - monthly_payment

    if payment_ratio > PAYMENT_TIGHT or dti > DTI_TIGHT or margin < MARGIN_TIGHT:
        verdict = "risky"
        if payment_ratio > PAYMENT_TIGHT:
            explanation = (f"This payment consumes {payment_ratio:.0f}% of your gross income, "
                           f"beyond the recommended {PAYMENT_TIGHT:.0f}% maximum.")
        elif dti > DTI_TIGHT:
            explanation = (f"Your total debt obligations would reach {dti:.0f}% of income, "
                           f"leaving little cushion for emergencies.")
        else:
            explanation = f"After this payment and your obligations, you'd have only ${round(margin)} monthly cushion."
    elif payment_ratio > PAYMENT_COMFORTABLE or dti > DTI_COMFORTABLE or margin < MARGIN_COMFORTABLE:
        verdict = "tight"
        if payment_ratio > PAYMENT_COMFORTABLE:
            explanation = (f"This payment is {payment_ratio:.0f}% of your income, workable but "
                           f"leaves limited margin if expenses rise.")
        elif dti > DTI_COMFORTABLE:
            explanation = (f"Your total debt-to-income of {dti:.0f}% is manageable but approaching "
                           f"limits most lenders prefer.")
        else:
            explanation = f"Your monthly cushion of ${round(margin)} is adequate but not robust against unexpected costs."
    else:
        verdict = "comfortable"
        explanation = (f"This payment is {payment_ratio:.0f}% of your income with a healthy "
                       f"{100 - dti:.0f}% margin for savings and unexpected expenses.")

    return AutoPaymentVerdict(
        monthly_payment=monthly_payment,
        payment_to_income=payment_ratio,
        debt_to_income=dti,
        monthly_margin=margin,
        verdict=verdict,
        explanation=explanation,
    )


def salary_affordability(
    salary: float,
    rules: Optional[TaxRules] = None,
    state_rate: Optional[float] = None,
) -> SalaryAffordability:
    """What an annual salary affords after tax.

    Taxes come from estimate_taxes (flat state rate), the budget splits net
    monthly 50/30/20, and rent/car/mortgage caps apply to gross monthly.
    """
    require_non_negative(salary, "Salary")
    taxes = estimate_taxes(salary, rules, state_rate=state_rate)

    monthly_gross = salary / 12
    monthly_net = taxes.net_income / 12
    budget = allocate_budget(max(0.0, monthly_net))

    logger.debug(f"salary_affordability: {salary:.0f} -> {monthly_net:.2f} net/mo")

    return SalaryAffordability(
        salary=salary,
        federal_tax=taxes.federal_tax,
        state_tax_estimate=taxes.state_tax_estimate,
        fica_tax=taxes.fica_tax,
        total_taxes=taxes.total_tax,
        take_home_pay=taxes.net_income,
        monthly_gross=monthly_gross,
        monthly_net=monthly_net,
        needs=budget.needs,
        wants=budget.wants,
        savings=budget.savings,
        max_rent=monthly_gross * RENT_RATIO,
        max_car_payment=monthly_gross * AUTO_PAYMENT_RATIO,
        max_mortgage=monthly_gross * MORTGAGE_FRONT_END_RATIO,
        recommended_emergency_fund=budget.needs * EMERGENCY_FUND_MONTHS,
        hourly_rate=salary / WORK_HOURS_PER_YEAR,
        weekly_pay=salary / 52,
        biweekly_pay=salary / 26,
    )
