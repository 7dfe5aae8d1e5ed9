"""
Fixed enumerations and the base monthly table the generator expands.
"""

from typing import Dict, List, Tuple

SUPPORTED_YEARS: Tuple[int, ...] = (2022, 2023, 2024)

REGIONS: Tuple[str, ...] = ("North", "South", "East", "West")

PRODUCT_CATEGORIES: Tuple[str, ...] = ("Electronics", "Clothing", "Home & Garden", "Sports")

MONTHS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

MEASURES: Tuple[str, ...] = ("sales", "orders", "revenue", "profit", "customers")

# Multiplier band applied to every expanded record
VARIATION_BAND: Tuple[float, float] = (0.9, 1.1)

# (month, sales, orders, revenue, profit, customers)
_BASE_ROWS = {
    2022: [
        ("Jan", 1200, 240, 120000, 40000, 180),
        ("Feb", 1500, 280, 150000, 50000, 220),
        ("Mar", 1800, 320, 180000, 60000, 250),
        ("Apr", 2000, 350, 200000, 70000, 280),
        ("May", 2200, 380, 220000, 75000, 310),
        ("Jun", 2500, 400, 250000, 85000, 350),
        ("Jul", 2800, 420, 280000, 90000, 380),
        ("Aug", 3000, 450, 300000, 100000, 400),
        ("Sep", 2800, 420, 280000, 95000, 380),
        ("Oct", 3200, 480, 320000, 110000, 420),
        ("Nov", 3500, 500, 350000, 120000, 450),
        ("Dec", 4000, 600, 400000, 140000, 500),
    ],
    2023: [
        ("Jan", 1500, 300, 150000, 50000, 220),
        ("Feb", 1800, 330, 180000, 60000, 250),
        ("Mar", 2100, 360, 210000, 70000, 280),
        ("Apr", 2300, 390, 230000, 75000, 310),
        ("May", 2500, 420, 250000, 80000, 340),
        ("Jun", 2800, 450, 280000, 90000, 380),
        ("Jul", 3100, 480, 310000, 100000, 410),
        ("Aug", 3300, 510, 330000, 110000, 440),
        ("Sep", 3500, 540, 350000, 115000, 470),
        ("Oct", 3800, 570, 380000, 125000, 500),
        ("Nov", 4200, 630, 420000, 140000, 550),
        ("Dec", 5000, 750, 500000, 170000, 650),
    ],
    # Only the first half of the year is published
    2024: [
        ("Jan", 2000, 400, 200000, 70000, 300),
        ("Feb", 2300, 430, 230000, 80000, 330),
        ("Mar", 2600, 460, 260000, 90000, 360),
        ("Apr", 2900, 490, 290000, 100000, 390),
        ("May", 3200, 520, 320000, 110000, 420),
        ("Jun", 3500, 550, 350000, 120000, 450),
    ],
}

BASE_TABLE: Dict[int, List[Dict]] = {
    year: [dict(zip(("month",) + MEASURES, row)) for row in rows]
    for year, rows in _BASE_ROWS.items()
}


def month_index(label: str) -> int:
    """
    Calendar index (1-12) for a short month label.

    Raises:
        ValueError: if the label is not one of MONTHS
    """
    try:
        return MONTHS.index(label) + 1
    except ValueError:
        raise ValueError(f"Unknown month label: {label!r}")


def is_supported_year(year) -> bool:
    """True only for int years in SUPPORTED_YEARS; 2023.0 and True are rejected."""
    return isinstance(year, int) and not isinstance(year, bool) and year in SUPPORTED_YEARS
