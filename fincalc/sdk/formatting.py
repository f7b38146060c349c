"""Display formatting for currency and percentages."""

from decimal import ROUND_HALF_UP, Decimal


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators: 1234.5 -> "$1,235", -1234.5 -> "-$1,235"."""
    # Decimal(str()) so 0.5 boundaries round on the printed value, not the binary one
    dollars = int(Decimal(str(abs(amount))).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    sign = "-" if amount < 0 and dollars != 0 else ""
    return f"{sign}${dollars:,}"


def format_percent(value: float, decimals: int = 1) -> str:
    """Percent value (already scaled to 0-100) with fixed decimals: 12.5 -> "12.5%"."""
    return f"{value:.{decimals}f}%"
