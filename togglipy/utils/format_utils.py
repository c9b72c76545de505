"""Formatting utility functions for togglipy."""
from decimal import Decimal, ROUND_HALF_UP
from typing import Union

HUNDREDTH = Decimal("0.01")


def round_hours(value: Union[Decimal, int, float]) -> float:
    """Round an hour value to 2 decimal places, halves away from zero.

    Floats are converted through their shortest repr so that 0.005 is
    treated as the literal 0.005 rather than its binary approximation.

    Args:
        value: Hours as Decimal, int or float

    Returns:
        Rounded hours
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return float(value.quantize(HUNDREDTH, rounding=ROUND_HALF_UP))


def seconds_to_hours(seconds: Union[int, float]) -> float:
    """Convert seconds to hours, rounded once to 2 decimal places.

    Args:
        seconds: Number of seconds

    Returns:
        Rounded hours
    """
    return round_hours(Decimal(str(seconds)) / Decimal(3600))


def format_hours(hours: float) -> str:
    """Format hours with exactly two decimals (e.g. "1.50")."""
    return f"{hours:.2f}"


def format_hm(seconds: int) -> str:
    """Format seconds as HH:MM.

    Args:
        seconds: Number of seconds (can be negative)

    Returns:
        Formatted time string (with leading '-' if negative)
    """
    if seconds < 0:
        abs_seconds = abs(seconds)
        return f"-{abs_seconds // 3600:02}:{(abs_seconds % 3600) // 60:02}"
    return f"{seconds // 3600:02}:{(seconds % 3600) // 60:02}"


def hours_to_hm(hours: float) -> str:
    """Format decimal hours as HH:MM."""
    return format_hm(int(Decimal(str(hours)) * 3600))


def table_cell(text: str) -> str:
    """Make a multi-line description safe for a single Markdown table cell."""
    return text.replace(" / \n", " / ").replace("\n", " ").replace("|", "\\|")
