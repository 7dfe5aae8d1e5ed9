"""
Display formatting for KPI cards and chart labels.
"""

from .catalog import MONTHS


def format_currency(value: float) -> str:
    """USD with thousands separators and no cents, e.g. '$150,000' or '-$1,200'."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.0f}"


def format_percentage(value: float) -> str:
    """Takes a percent (12.34) and renders it with one decimal: '12.3%'."""
    return f"{value:.1f}%"


def month_name(index: int) -> str:
    """Short label for a 1-based month index."""
    if not 1 <= index <= 12:
        raise ValueError(f"Month index out of range: {index}")
    return MONTHS[index - 1]
