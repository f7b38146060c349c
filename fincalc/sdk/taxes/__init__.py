"""taxes - Annual tax estimation.

Scope:
- Progressive federal income tax over a bracket table
- FICA: Social Security up to the wage cap, Medicare uncapped
- Flat-rate state tax approximation
- Self-employed (gig) take-home estimates

Constraints:
- Pure calculation - rules are passed in or loaded explicitly
- Year-specific rules loaded from taxes/rules/{year}.yaml, overridable
  from <config_dir>/tax-rules/{year}.yaml

Usage:
    from fincalc.sdk.taxes import estimate_taxes, load_tax_rules

    rules = load_tax_rules(2024)
    estimate = estimate_taxes(85000, rules)
"""

from .schemas import TaxBracket, TaxRules

from .rules import (
    DEFAULT_TAX_YEAR,
    TaxRulesCache,
    get_available_years,
    load_tax_rules,
    parse_tax_rules,
)

from .estimate import (
    calculate_federal_income_tax,
    calculate_fica,
    estimate_taxes,
)

from .gig import GIG_PLATFORM_EXPENSE_RATES, estimate_gig_income

__all__ = [
    # Rules
    "TaxBracket",
    "TaxRules",
    "DEFAULT_TAX_YEAR",
    "TaxRulesCache",
    "get_available_years",
    "load_tax_rules",
    "parse_tax_rules",
    # Estimates
    "calculate_federal_income_tax",
    "calculate_fica",
    "estimate_taxes",
    # Gig work
    "GIG_PLATFORM_EXPENSE_RATES",
    "estimate_gig_income",
]
