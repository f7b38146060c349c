"""Annual tax estimation: progressive federal brackets, FICA and flat state tax."""

import logging
from typing import Optional, Sequence

from ..errors import require_non_negative
from ..schemas import FicaBreakdown, TaxEstimate
from .rules import load_tax_rules
from .schemas import TaxBracket, TaxRules

logger = logging.getLogger(__name__)


def calculate_federal_income_tax(taxable_income: float, tax_brackets: Sequence[TaxBracket]) -> float:
    """Calculate federal income tax by integrating over ascending brackets.

    Income exactly at a bracket's upper bound is taxed entirely at that
    bracket's rate.
    """
    require_non_negative(taxable_income, "Taxable income")

    tax_owed = 0.0
    remaining = taxable_income
    previous_bracket_max = 0.0

    for bracket in tax_brackets:
        if remaining <= 0:
            break
        income_in_this_bracket = min(remaining, bracket.upper_bound - previous_bracket_max)
        tax_owed += income_in_this_bracket * bracket.rate
        remaining -= income_in_this_bracket
        previous_bracket_max = bracket.upper_bound

    return tax_owed


def calculate_fica(gross: float, rules: TaxRules) -> FicaBreakdown:
    """Social Security up to the wage cap plus uncapped Medicare."""
    require_non_negative(gross, "Gross income")

    ss_taxable = min(gross, rules.social_security.wage_cap)
    social_security = ss_taxable * rules.social_security.tax_rate
    medicare = gross * rules.medicare.tax_rate

    return FicaBreakdown(
        social_security=social_security,
        medicare=medicare,
        total=social_security + medicare,
    )


def estimate_taxes(
    gross_annual_income: float,
    rules: Optional[TaxRules] = None,
    state_rate: Optional[float] = None,
) -> TaxEstimate:
    """Estimate annual federal, FICA and state tax for a gross income.

    Args:
        gross_annual_income: Annual gross wages
        rules: Tax rules (default: bundled rules for the default year)
        state_rate: Flat state rate override (decimal); defaults to the rules' rate

    Returns:
        TaxEstimate with per-tax amounts, total and net income

    Raises:
        InvalidInputError: If income or state_rate is negative
    """
    require_non_negative(gross_annual_income, "Gross income")
    if rules is None:
        rules = load_tax_rules()
    if state_rate is None:
        state_rate = rules.state.flat_rate
    require_non_negative(state_rate, "State tax rate")

    taxable_income = max(0.0, gross_annual_income - rules.standard_deduction)
    federal_tax = calculate_federal_income_tax(taxable_income, rules.tax_brackets)
    fica = calculate_fica(gross_annual_income, rules)
    state_tax = gross_annual_income * state_rate

    total_tax = federal_tax + fica.total + state_tax
    effective_rate = total_tax / gross_annual_income if gross_annual_income > 0 else 0.0

    logger.debug(
        f"estimate_taxes: gross={gross_annual_income:.2f} federal={federal_tax:.2f} "
        f"fica={fica.total:.2f} state={state_tax:.2f}"
    )

    return TaxEstimate(
        gross_income=gross_annual_income,
        taxable_income=taxable_income,
        federal_tax=federal_tax,
        fica_tax=fica.total,
        social_security=fica.social_security,
        medicare=fica.medicare,
        state_tax_estimate=state_tax,
        total_tax=total_tax,
        net_income=gross_annual_income - total_tax,
        effective_rate=effective_rate,
        tax_year=rules.year,
    )
