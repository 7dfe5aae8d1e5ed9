"""
Filter/query layer - selects record subsets and orders them for charts.

Optional filters are None when absent. Presence is checked with
`is not None`, never truthiness, so a zero threshold or an empty string
is applied as given.
"""

from dataclasses import asdict, dataclass, fields
from typing import Dict, List, Mapping, Optional, Sequence, Union

from .catalog import month_index
from .generator import SalesRecord


@dataclass(frozen=True)
class SalesQuery:
    year: int
    region: Optional[str] = None
    category: Optional[str] = None
    min_sales: Optional[float] = None

    @classmethod
    def from_mapping(cls, spec: Mapping) -> "SalesQuery":
        """
        Build a query from a dict such as request args.

        Unknown keys are rejected so a typo cannot silently widen a filter.
        """
        known = {f.name for f in fields(cls)}
        unknown = set(spec) - known
        if unknown:
            raise ValueError(f"Unknown filter field(s): {', '.join(sorted(unknown))}")
        if 'year' not in spec:
            raise ValueError("A query needs a year")
        return cls(**spec)

    def to_dict(self) -> Dict:
        return asdict(self)

    def matches(self, record: SalesRecord) -> bool:
        if record.year != self.year:
            return False
        if self.region is not None and record.region != self.region:
            return False
        if self.category is not None and record.product_category != self.category:
            return False
        if self.min_sales is not None and record.sales < self.min_sales:
            return False
        return True


def query(records: Sequence[SalesRecord],
          spec: Union[SalesQuery, Mapping]) -> List[SalesRecord]:
    """
    Return the records matching every present filter, in input order.

    Args:
        records: Record list to filter (not modified)
        spec: A SalesQuery, or a mapping with 'year' and optional
              'region', 'category', 'min_sales'
    """
    if not isinstance(spec, SalesQuery):
        spec = SalesQuery.from_mapping(spec)
    return [r for r in records if spec.matches(r)]


def sort_by_month(records: Sequence[SalesRecord]) -> List[SalesRecord]:
    """Calendar order (Jan..Dec) by month label; stable within a month."""
    return sorted(records, key=lambda r: month_index(r.month))
