"""Fin Calc SDK - Core calculations for income, taxes, budgets, loans and affordability."""

from .errors import (
    CalculationError,
    InvalidConfigurationError,
    InvalidInputError,
    InvalidRangeError,
)

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    get_profile_path,
    load_profile,
    save_profile,
    get_profile_value,
    set_profile_value,
    Profile,
    ProfileNotFoundError,
    ConfigNotFoundError,
    # XDG paths
    get_data_path,
    get_store,
    set_data_dir,
    clear_data_dir,
)

from .store import JsonFileStore, KeyValueStore, MemoryStore

from .periods import days_worked, effective_start, parse_date

from .income_projection import (
    income_from_annual,
    income_from_monthly,
    project_income,
)

from .taxes import (
    DEFAULT_TAX_YEAR,
    TaxRules,
    TaxRulesCache,
    estimate_gig_income,
    estimate_taxes,
    get_available_years,
    load_tax_rules,
)

from .budget import (
    BudgetProportions,
    aggregate_income_streams,
    allocate_budget,
    budget_subcategories,
    from_annual,
    new_stream_id,
    suggested_stability,
    to_annual,
)

from .loans import (
    CREDIT_TIERS,
    amortize_loan,
    calculate_loan_amount,
    calculate_loan_estimates,
    calculate_monthly_payment,
    calculate_mortgage,
)

from .affordability import (
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

from .inflation import project_inflation_impact

from .formatting import format_currency, format_percent

from .schemas import IncomeStream, LoanParameters

__all__ = [
    # Errors
    "CalculationError",
    "InvalidConfigurationError",
    "InvalidInputError",
    "InvalidRangeError",
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "get_profile_path",
    "load_profile",
    "save_profile",
    "get_profile_value",
    "set_profile_value",
    "Profile",
    "ProfileNotFoundError",
    "ConfigNotFoundError",
    "get_data_path",
    "get_store",
    "set_data_dir",
    "clear_data_dir",
    # Store
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    # Periods
    "days_worked",
    "effective_start",
    "parse_date",
    # Income
    "income_from_annual",
    "income_from_monthly",
    "project_income",
    # Taxes
    "DEFAULT_TAX_YEAR",
    "TaxRules",
    "TaxRulesCache",
    "estimate_gig_income",
    "estimate_taxes",
    "get_available_years",
    "load_tax_rules",
    # Budget and income streams
    "BudgetProportions",
    "IncomeStream",
    "aggregate_income_streams",
    "allocate_budget",
    "budget_subcategories",
    "from_annual",
    "new_stream_id",
    "suggested_stability",
    "to_annual",
    # Loans
    "CREDIT_TIERS",
    "LoanParameters",
    "amortize_loan",
    "calculate_loan_amount",
    "calculate_loan_estimates",
    "calculate_monthly_payment",
    "calculate_mortgage",
    # Affordability
    "NAMED_RATIOS",
    "SALARY_LEVELS",
    "analyze_dti",
    "auto_payment_verdict",
    "calculate_max_home_price",
    "calculate_payment_approvals",
    "calculate_rent_affordability",
    "evaluate_affordability",
    "salary_affordability",
    # Inflation
    "project_inflation_impact",
    # Formatting
    "format_currency",
    "format_percent",
]
