"""
RecordGenerator - fabricates the synthetic sales dataset.

Every base monthly row for a year is expanded into one record per
(region, product category) pair. Each expanded record gets its own random
multiplier, applied to all five measures.
"""

import logging
import math
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional

import numpy as np

from .catalog import (
    BASE_TABLE,
    PRODUCT_CATEGORIES,
    REGIONS,
    SUPPORTED_YEARS,
    VARIATION_BAND,
    is_supported_year,
    month_index,
)

logger = logging.getLogger(__name__)


class UnsupportedYear(ValueError):
    """Raised when a year outside SUPPORTED_YEARS is requested."""

    def __init__(self, year):
        self.year = year
        supported = ", ".join(str(y) for y in SUPPORTED_YEARS)
        super().__init__(f"Unsupported year: {year} (supported: {supported})")


class GenerationFailure(RuntimeError):
    """Raised when synthetic generation fails for a supported year."""

    def __init__(self, year, cause: Optional[BaseException] = None):
        self.year = year
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Failed to fetch sales data for {year}{detail}")


@dataclass(frozen=True)
class SalesRecord:
    year: int
    month: str
    month_index: int
    region: str
    product_category: str
    sales: int
    orders: int
    revenue: int
    profit: int
    customers: int

    def to_dict(self) -> Dict:
        return asdict(self)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def base_rows(year: int) -> int:
    """Number of base monthly rows published for a year."""
    if not is_supported_year(year):
        raise UnsupportedYear(year)
    return len(BASE_TABLE[year])


class RecordGenerator:
    """
    Expands the base table into region x category records.

    The random source is injected so callers can make generation
    reproducible. Anything with a ``uniform(low, high)`` method works:
    a numpy Generator, a ``random.Random`` or a test stub.

    Usage:
        gen = RecordGenerator(rng=np.random.default_rng(7))
        records = gen.generate(2023)
    """

    def __init__(self, rng=None, seed: Optional[int] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def generate(self, year: int) -> List[SalesRecord]:
        """
        Build a fresh record set for one year.

        Returns:
            base_rows(year) * len(REGIONS) * len(PRODUCT_CATEGORIES) records

        Raises:
            UnsupportedYear: if year is not in SUPPORTED_YEARS
        """
        if not is_supported_year(year):
            raise UnsupportedYear(year)

        low, high = VARIATION_BAND
        records = []
        for row in BASE_TABLE[year]:
            for region in REGIONS:
                for category in PRODUCT_CATEGORIES:
                    variation = float(self.rng.uniform(low, high))
                    records.append(SalesRecord(
                        year=year,
                        month=row["month"],
                        month_index=month_index(row["month"]),
                        region=region,
                        product_category=category,
                        sales=round_half_up(row["sales"] * variation),
                        orders=round_half_up(row["orders"] * variation),
                        revenue=round_half_up(row["revenue"] * variation),
                        profit=round_half_up(row["profit"] * variation),
                        customers=round_half_up(row["customers"] * variation),
                    ))

        logger.debug(f"Generated {len(records)} records for {year}")
        return records


def generate(year: int, rng=None) -> List[SalesRecord]:
    """One-shot generation with an optional random source."""
    return RecordGenerator(rng=rng).generate(year)
