"""Purchasing-power erosion under constant annual inflation."""

from typing import Iterable, List

from .errors import InvalidInputError, require_non_negative
from .schemas import InflationProjection

DEFAULT_YEAR_OFFSETS = (1, 3, 5, 10)


def project_inflation_impact(
    present_value: float,
    annual_rate_percent: float,
    year_offsets: Iterable[int] = DEFAULT_YEAR_OFFSETS,
) -> List[InflationProjection]:
    """What present_value buys after each year offset.

    purchasing_power = value / (1 + rate)^years
    percent_loss     = (1 - 1 / (1 + rate)^years) * 100
    raise_needed     = ((1 + rate)^years - 1) * 100

    A zero present value yields an empty list.

    Raises:
        InvalidInputError: If the value, rate or any offset is negative, or
            compounding exceeds floating-point range
    """
    require_non_negative(present_value, "Present value")
    require_non_negative(annual_rate_percent, "Inflation rate")
    if present_value == 0:
        return []

    rate = annual_rate_percent / 100
    projections = []
    for years in year_offsets:
        if years < 0:
            raise InvalidInputError(f"Year offset must be non-negative, got {years}")
        try:
            growth = (1 + rate) ** years
        except OverflowError:
            raise InvalidInputError(
                f"Inflation of {annual_rate_percent}% over {years} years is too large to compute"
            )
        purchasing_power = present_value / growth
        projections.append(InflationProjection(
            year_offset=years,
            purchasing_power=purchasing_power,
            percent_loss=max(0.0, (1 - 1 / growth) * 100),
            raise_needed=max(0.0, (growth - 1) * 100),
        ))
    return projections
