"""Self-employed gig income: expenses, self-employment tax and true take-home.

Gross earnings
  - platform expenses (mileage, phone, supplies)
  = net before tax
  - self-employment tax (15.3% on 92.35% of net)
  - estimated income tax
  = true net income
"""

from typing import Optional

from ..errors import InvalidInputError, require_non_negative
from ..schemas import GigResult
from .estimate import calculate_federal_income_tax
from .rules import load_tax_rules
from .schemas import TaxRules

SE_TAX_RATE = 0.153
SE_TAX_BASE_PORTION = 0.9235
LENDER_VISIBLE_PORTION = 0.75  # lenders typically count 75% of self-employment income

GIG_PLATFORM_EXPENSE_RATES = {
    "uber": 0.30,
    "lyft": 0.30,
    "doordash": 0.25,
    "instacart": 0.25,
    "upwork": 0.10,
    "other": 0.20,
}


def estimate_gig_income(
    gross_annual: float,
    platform: str = "other",
    expense_rate: Optional[float] = None,
    hours_per_week: Optional[float] = None,
    rules: Optional[TaxRules] = None,
) -> GigResult:
    """Estimate true net income for gig work.

    Args:
        gross_annual: Annual gross platform earnings
        platform: Platform id; unknown ids use the "other" expense preset
        expense_rate: Override for the platform's expense preset (decimal)
        hours_per_week: If given, an effective hourly rate is computed
        rules: Tax rules for the income tax portion (default year if omitted)
    """
    require_non_negative(gross_annual, "Gross annual income")
    platform = platform if platform in GIG_PLATFORM_EXPENSE_RATES else "other"
    if expense_rate is None:
        expense_rate = GIG_PLATFORM_EXPENSE_RATES[platform]
    if not 0 <= expense_rate <= 1:
        raise InvalidInputError(f"Expense rate must be between 0 and 1, got {expense_rate}")
    if rules is None:
        rules = load_tax_rules()

    expenses = gross_annual * expense_rate
    net_before_tax = gross_annual - expenses

    self_employment_tax = net_before_tax * SE_TAX_BASE_PORTION * SE_TAX_RATE

    # Half of SE tax is an above-the-line deduction
    adjusted_gross = net_before_tax - self_employment_tax * 0.5
    taxable_income = max(0.0, adjusted_gross - rules.standard_deduction)
    income_tax = calculate_federal_income_tax(taxable_income, rules.tax_brackets)

    true_net = net_before_tax - self_employment_tax - income_tax

    hourly = None
    if hours_per_week and hours_per_week > 0:
        hourly = true_net / (hours_per_week * 52)

    return GigResult(
        platform=platform,
        gross_annual=gross_annual,
        gross_monthly=gross_annual / 12,
        expense_rate=expense_rate,
        expenses=expenses,
        net_before_tax=net_before_tax,
        self_employment_tax=self_employment_tax,
        estimated_income_tax=income_tax,
        true_net_income=true_net,
        quarterly_tax_set_aside=(self_employment_tax + income_tax) / 4,
        effective_hourly_rate=hourly,
        lender_visible_income=net_before_tax * LENDER_VISIBLE_PORTION,
    )
