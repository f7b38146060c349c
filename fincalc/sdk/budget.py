"""Budget allocation and multi-stream household income.

Two concerns share this module:
- Splitting net monthly income by fixed proportions (50/30/20 by default)
- Aggregating a household's income streams into a combined annual total
  and a stability-weighted "reliable" total
"""

import logging
import math
import uuid
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from .errors import InvalidConfigurationError, InvalidInputError, require_non_negative
from .schemas import (
    BudgetAllocation,
    BudgetCategory,
    BudgetSubcategory,
    IncomeStream,
    StreamSummary,
)

logger = logging.getLogger(__name__)

PROPORTION_TOLERANCE = 1e-6
WEEKS_PER_MONTH = 4.33
DAYS_PER_MONTH = 30

PERIODS_PER_YEAR = {
    "weekly": 52,
    "biweekly": 26,
    "monthly": 12,
    "annually": 1,
}

# Rating 5 counts in full; lower ratings discount the stream
STABILITY_WEIGHTS = {
    5: 1.00,  # Very Stable (W-2)
    4: 0.90,  # Stable
    3: 0.80,  # Moderate
    2: 0.65,  # Variable
    1: 0.50,  # Very Variable
}

STABILITY_LABELS = {
    5: "Very Stable",
    4: "Stable",
    3: "Moderate",
    2: "Variable",
    1: "Very Variable",
}

INCOME_TYPE_LABELS = {
    "w2": "W-2 Employment",
    "freelance": "Freelance",
    "gig": "Gig Work",
    "rental": "Rental Income",
    "side-hustle": "Side Hustle",
    "other": "Other",
}

SUGGESTED_STABILITY = {
    "w2": 5,
    "rental": 4,
    "freelance": 3,
    "side-hustle": 2,
    "gig": 2,
    "other": 3,
}

# Default 50/30/20 subcategories, as percent of net income
DEFAULT_SUBCATEGORIES = [
    ("needs", "Housing", 25),
    ("needs", "Utilities", 5),
    ("needs", "Groceries", 10),
    ("needs", "Transportation", 10),
    ("wants", "Dining Out", 5),
    ("wants", "Subscriptions", 5),
    ("wants", "Travel/Fun", 10),
    ("wants", "Personal", 10),
    ("savings", "Emergency Fund", 10),
    ("savings", "Investments", 5),
    ("savings", "Goals", 5),
]


# =============================================================================
# Proportional allocation
# =============================================================================


@dataclass(frozen=True)
class BudgetProportions:
    """Fractions of net income for needs, wants and savings."""

    needs: float = 0.50
    wants: float = 0.30
    savings: float = 0.20

    def validate(self) -> "BudgetProportions":
        """Raise InvalidConfigurationError unless non-negative and summing to 1.0."""
        values = {"needs": self.needs, "wants": self.wants, "savings": self.savings}
        negative = [name for name, value in values.items() if value < 0]
        if negative:
            raise InvalidConfigurationError(f"Budget proportions must be non-negative: {', '.join(negative)}")
        total = sum(values.values())
        if not math.isclose(total, 1.0, abs_tol=PROPORTION_TOLERANCE):
            raise InvalidConfigurationError(
                f"Budget proportions must sum to 1.0, got {total:.4f} "
                f"(needs={self.needs}, wants={self.wants}, savings={self.savings})"
            )
        return self


DEFAULT_PROPORTIONS = BudgetProportions()


def allocate_budget(
    net_monthly_income: float,
    proportions: Optional[BudgetProportions] = None,
) -> BudgetAllocation:
    """Split net monthly income into needs, wants and savings.

    Raises:
        InvalidInputError: If net_monthly_income is negative
        InvalidConfigurationError: If proportions don't sum to 1.0
    """
    require_non_negative(net_monthly_income, "Net monthly income")
    proportions = (proportions or DEFAULT_PROPORTIONS).validate()

    categories = []
    for name, proportion in (
        ("Needs", proportions.needs),
        ("Wants", proportions.wants),
        ("Savings", proportions.savings),
    ):
        monthly = net_monthly_income * proportion
        categories.append(BudgetCategory(
            name=name,
            proportion=proportion,
            monthly=monthly,
            weekly=monthly / WEEKS_PER_MONTH,
            daily=monthly / DAYS_PER_MONTH,
        ))

    needs, wants, savings = (c.monthly for c in categories)
    return BudgetAllocation(
        net_monthly_income=net_monthly_income,
        needs=needs,
        wants=wants,
        savings=savings,
        categories=categories,
    )


def budget_subcategories(net_monthly_income: float) -> List[BudgetSubcategory]:
    """Default 50/30/20 line items (housing, groceries, emergency fund, ...)."""
    require_non_negative(net_monthly_income, "Net monthly income")
    return [
        BudgetSubcategory(group=group, name=name, percent=percent,
                          monthly=net_monthly_income * percent / 100)
        for group, name, percent in DEFAULT_SUBCATEGORIES
    ]


# =============================================================================
# Income streams
# =============================================================================


def to_annual(amount: float, frequency: str) -> float:
    """Convert a per-period amount to an annual amount."""
    if frequency not in PERIODS_PER_YEAR:
        raise InvalidInputError(f"Unknown frequency '{frequency}'. Expected one of {list(PERIODS_PER_YEAR)}")
    return amount * PERIODS_PER_YEAR[frequency]


def from_annual(annual: float, frequency: str) -> float:
    """Convert an annual amount to a per-period amount."""
    if frequency not in PERIODS_PER_YEAR:
        raise InvalidInputError(f"Unknown frequency '{frequency}'. Expected one of {list(PERIODS_PER_YEAR)}")
    return annual / PERIODS_PER_YEAR[frequency]


def stability_weight(rating: int) -> float:
    if rating not in STABILITY_WEIGHTS:
        raise InvalidInputError(f"Stability rating must be 1-5, got {rating}")
    return STABILITY_WEIGHTS[rating]


def suggested_stability(income_type: str) -> int:
    """Suggested stability rating for a new stream of the given type."""
    return SUGGESTED_STABILITY.get(income_type, 3)


def new_stream_id() -> str:
    """Generate a unique id for a new income stream."""
    return f"stream_{uuid.uuid4().hex[:12]}"


def aggregate_income_streams(streams: Iterable[IncomeStream]) -> StreamSummary:
    """Combine income streams into annual totals.

    Order is irrelevant. Each stream is annualized by its frequency; the
    reliable total additionally weights each stream by its stability rating.
    """
    streams = list(streams)

    by_type: Dict[str, float] = {income_type: 0.0 for income_type in INCOME_TYPE_LABELS}
    total_annual = 0.0
    reliable_annual = 0.0

    for stream in streams:
        annual = to_annual(stream.amount, stream.frequency)
        total_annual += annual
        reliable_annual += annual * stability_weight(stream.stability_rating)
        by_type[stream.type] += annual

    reliability_percent = (reliable_annual / total_annual) * 100 if total_annual > 0 else 0.0
    logger.debug(f"aggregate_income_streams: {len(streams)} streams, {total_annual:.2f}/yr")

    return StreamSummary(
        total_annual=total_annual,
        reliable_annual=reliable_annual,
        monthly=total_annual / 12,
        reliability_percent=min(reliability_percent, 100.0),
        by_type=by_type,
        stream_count=len(streams),
    )
