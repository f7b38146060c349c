"""Income projection from a year-to-date gross figure.

Extrapolates pay received so far this year to daily, weekly, monthly and
annual rates. Annualization always uses 365 days, leap year or not.
"""

import logging

from .errors import require_non_negative
from .periods import DateLike, days_worked
from .schemas import IncomeRates, ProjectionResult

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365
WORK_HOURS_PER_YEAR = 2080

# Quick-reference caps carried with every projection
AUTO_PAYMENT_RATIO = 0.12
RENT_RATIO = 0.30


def project_income(
    start_date: DateLike,
    as_of_date: DateLike,
    ytd_income: float,
) -> ProjectionResult:
    """Project annual income from year-to-date gross pay.

    Args:
        start_date: First day worked (clamped to Jan 1 of the as-of year)
        as_of_date: Date the YTD figure is reported through
        ytd_income: Gross income received through as_of_date

    Returns:
        ProjectionResult with daily, weekly, monthly and annual rates

    Raises:
        InvalidRangeError: If as_of_date is before start_date
        InvalidInputError: If ytd_income is negative
    """
    require_non_negative(ytd_income, "YTD income")
    days = days_worked(start_date, as_of_date)

    daily = ytd_income / days
    annual = daily * DAYS_PER_YEAR
    monthly = annual / 12

    logger.debug(f"project_income: {ytd_income:.2f} over {days} days -> {annual:.2f}/yr")

    return ProjectionResult(
        days_worked=days,
        daily_rate=daily,
        weekly_rate=daily * 7,
        monthly_rate=monthly,
        annual_rate=annual,
        max_auto_payment=monthly * AUTO_PAYMENT_RATIO,
        max_rent=monthly * RENT_RATIO,
    )


def income_from_annual(annual_income: float) -> IncomeRates:
    """Break an annual salary into standard pay-period amounts."""
    require_non_negative(annual_income, "Annual income")
    return IncomeRates(
        annual=annual_income,
        monthly=annual_income / 12,
        biweekly=annual_income / 26,
        weekly=annual_income / 52,
        hourly=annual_income / WORK_HOURS_PER_YEAR,
    )


def income_from_monthly(monthly_income: float) -> IncomeRates:
    """Break a monthly income into standard pay-period amounts."""
    require_non_negative(monthly_income, "Monthly income")
    return income_from_annual(monthly_income * 12)
