"""Pydantic schemas for calculation inputs and results.

Results are frozen so a value handed to a renderer cannot drift from what
the calculation produced. All schemas use extra='forbid' so a typo in a
caller's field name is an error rather than a silently ignored key.
"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Frequency = Literal["weekly", "biweekly", "monthly", "annually"]
IncomeType = Literal["w2", "freelance", "gig", "rental", "side-hustle", "other"]
Verdict = Literal["comfortable", "tight", "risky"]


class _Result(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# Income
# =============================================================================


class ProjectionResult(_Result):
    """Annualized income extrapolated from a year-to-date figure."""

    days_worked: int = Field(..., ge=1, description="Inclusive worked days this year")
    daily_rate: float = Field(..., ge=0)
    weekly_rate: float = Field(..., ge=0, description="daily_rate * 7")
    monthly_rate: float = Field(..., ge=0, description="daily_rate * 365 / 12")
    annual_rate: float = Field(..., ge=0, description="daily_rate * 365")
    max_auto_payment: float = Field(..., ge=0, description="12% of monthly_rate")
    max_rent: float = Field(..., ge=0, description="30% of monthly_rate")


class IncomeRates(_Result):
    """Standard pay-period breakdown of an annual salary."""

    annual: float = Field(..., ge=0)
    monthly: float = Field(..., ge=0)
    biweekly: float = Field(..., ge=0)
    weekly: float = Field(..., ge=0)
    hourly: float = Field(..., ge=0, description="annual / 2080 hours")


class IncomeStream(BaseModel):
    """A single household income source."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    amount: float = Field(..., ge=0, description="Amount per frequency period")
    frequency: Frequency
    type: IncomeType = "other"
    stability_rating: int = Field(..., ge=1, le=5, description="1 = very variable, 5 = very stable")


class StreamSummary(_Result):
    """Aggregate of a household's income streams."""

    total_annual: float = Field(..., ge=0)
    reliable_annual: float = Field(..., ge=0, description="Stability-weighted annual total")
    monthly: float = Field(..., ge=0)
    reliability_percent: float = Field(..., ge=0, le=100)
    by_type: Dict[str, float]
    stream_count: int = Field(..., ge=0)


# =============================================================================
# Taxes
# =============================================================================


class FicaBreakdown(_Result):
    social_security: float = Field(..., ge=0)
    medicare: float = Field(..., ge=0)
    total: float = Field(..., ge=0)


class TaxEstimate(_Result):
    """Annual tax estimate for a gross income.

    total_tax = federal_tax + fica_tax + state_tax_estimate
    net_income = gross_income - total_tax
    """

    gross_income: float = Field(..., ge=0)
    taxable_income: float = Field(..., ge=0, description="Gross less standard deduction")
    federal_tax: float = Field(..., ge=0)
    fica_tax: float = Field(..., ge=0)
    social_security: float = Field(..., ge=0)
    medicare: float = Field(..., ge=0)
    state_tax_estimate: float = Field(..., ge=0)
    total_tax: float = Field(..., ge=0)
    net_income: float
    effective_rate: float = Field(..., ge=0, description="total_tax / gross_income")
    tax_year: int


class GigResult(_Result):
    """True take-home for self-employed gig income."""

    platform: str
    gross_annual: float = Field(..., ge=0)
    gross_monthly: float = Field(..., ge=0)
    expense_rate: float = Field(..., ge=0, le=1)
    expenses: float = Field(..., ge=0)
    net_before_tax: float = Field(..., ge=0)
    self_employment_tax: float = Field(..., ge=0)
    estimated_income_tax: float = Field(..., ge=0)
    true_net_income: float
    quarterly_tax_set_aside: float = Field(..., ge=0)
    effective_hourly_rate: Optional[float] = None
    lender_visible_income: float = Field(..., ge=0)


# =============================================================================
# Budget
# =============================================================================


class BudgetCategory(_Result):
    name: str
    proportion: float = Field(..., ge=0, le=1)
    monthly: float = Field(..., ge=0)
    weekly: float = Field(..., ge=0, description="monthly / 4.33")
    daily: float = Field(..., ge=0, description="monthly / 30")


class BudgetAllocation(_Result):
    """Split of net monthly income into needs, wants and savings."""

    net_monthly_income: float = Field(..., ge=0)
    needs: float = Field(..., ge=0)
    wants: float = Field(..., ge=0)
    savings: float = Field(..., ge=0)
    categories: List[BudgetCategory]


class BudgetSubcategory(_Result):
    group: Literal["needs", "wants", "savings"]
    name: str
    percent: float = Field(..., ge=0, le=100)
    monthly: float = Field(..., ge=0)


# =============================================================================
# Loans
# =============================================================================


class LoanParameters(BaseModel):
    """Fixed-rate loan terms. Ranges are checked by amortize_loan."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    principal: float
    annual_rate_percent: float
    term_months: int


class AmortizationPeriod(_Result):
    period: int = Field(..., ge=1)
    payment: float = Field(..., ge=0)
    interest: float = Field(..., ge=0)
    principal: float = Field(..., ge=0)
    balance: float = Field(..., ge=0, description="Remaining balance after this period")


class AmortizationResult(_Result):
    principal: float = Field(..., gt=0)
    annual_rate_percent: float = Field(..., ge=0)
    term_months: int = Field(..., gt=0)
    monthly_payment: float = Field(..., ge=0)
    total_interest: float = Field(..., ge=0)
    total_paid: float = Field(..., ge=0)
    schedule: List[AmortizationPeriod]


class CreditTier(_Result):
    name: str
    range: str
    apr: float = Field(..., ge=0, description="Average APR in percent")


class LoanEstimate(_Result):
    credit_tier: CreditTier
    loan_amount: float = Field(..., ge=0)
    total_interest: float = Field(..., ge=0)
    total_cost: float = Field(..., ge=0)


class MortgageResult(_Result):
    """Mortgage payment with PITI (principal, interest, taxes, insurance) breakdown."""

    home_price: float = Field(..., gt=0)
    down_payment: float = Field(..., ge=0)
    down_payment_percent: float = Field(..., ge=0, lt=100)
    loan_amount: float = Field(..., gt=0)
    principal_interest: float = Field(..., ge=0)
    property_tax: float = Field(..., ge=0)
    insurance: float = Field(..., ge=0)
    pmi: float = Field(..., ge=0)
    total_monthly: float = Field(..., ge=0)
    total_payments: float = Field(..., ge=0)
    total_interest: float = Field(..., ge=0)


# =============================================================================
# Affordability
# =============================================================================


class AffordabilityResult(_Result):
    income_figure: float = Field(..., ge=0)
    ratio: float = Field(..., ge=0)
    max_affordable: float = Field(..., ge=0)
    candidate_amount: Optional[float] = None
    is_affordable: Optional[bool] = Field(None, description="None when no candidate was given")


class PaymentApproval(_Result):
    pti_type: str
    ratio: float = Field(..., ge=0)
    max_payment: float = Field(..., ge=0)
    description: str


class RentAffordability(_Result):
    monthly_income: float = Field(..., gt=0)
    max_rent_30: float = Field(..., ge=0)
    max_rent_25: float = Field(..., ge=0)
    current_rent: Optional[float] = None
    rent_percent: Optional[float] = None
    is_affordable: Optional[bool] = None


class DtiAnalysis(_Result):
    monthly_income: float = Field(..., gt=0)
    housing_payment: float = Field(..., ge=0)
    other_debts: float = Field(..., ge=0)
    front_end_dti: float = Field(..., ge=0, description="Housing / income, percent")
    back_end_dti: float = Field(..., ge=0, description="All debts / income, percent")
    is_affordable: bool
    qualification: str


class MaxHomePrice(_Result):
    monthly_income: float = Field(..., gt=0)
    max_housing_payment: float = Field(..., ge=0)
    max_loan_amount: float = Field(..., ge=0)
    estimated_max_price: float = Field(..., ge=0)
    down_payment_percent: float
    annual_rate_percent: float
    term_years: int


class AutoPaymentVerdict(_Result):
    monthly_payment: float = Field(..., ge=0)
    payment_to_income: float = Field(..., ge=0, description="Percent of gross")
    debt_to_income: float = Field(..., ge=0, description="Percent of gross incl. payment")
    monthly_margin: float
    verdict: Verdict
    explanation: str


class SalaryAffordability(_Result):
    """What a given salary affords: taxes, 50/30/20 budget and payment caps."""

    salary: float = Field(..., ge=0)
    federal_tax: float = Field(..., ge=0)
    state_tax_estimate: float = Field(..., ge=0)
    fica_tax: float = Field(..., ge=0)
    total_taxes: float = Field(..., ge=0)
    take_home_pay: float
    monthly_gross: float = Field(..., ge=0)
    monthly_net: float
    needs: float
    wants: float
    savings: float
    max_rent: float = Field(..., ge=0)
    max_car_payment: float = Field(..., ge=0)
    max_mortgage: float = Field(..., ge=0)
    recommended_emergency_fund: float
    hourly_rate: float = Field(..., ge=0)
    weekly_pay: float = Field(..., ge=0)
    biweekly_pay: float = Field(..., ge=0)


# =============================================================================
# Inflation
# =============================================================================


class InflationProjection(_Result):
    year_offset: int = Field(..., ge=0)
    purchasing_power: float = Field(..., ge=0)
    percent_loss: float = Field(..., ge=0, description="Percent of value lost")
    raise_needed: float = Field(..., ge=0, description="Percent raise to keep pace")
