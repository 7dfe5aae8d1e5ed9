"""
Aggregation - yearly summaries, growth rates and period KPIs.

All functions are pure: they read a record list and return new values.
"""

from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Sequence

import pandas as pd

from .catalog import MEASURES, month_index
from .generator import SalesRecord, round_half_up

BREAKDOWN_DIMENSIONS = ("region", "product_category")

# Assumed average transaction value, and how much of sales growth shows up as
# transaction growth
AVERAGE_TRANSACTION_VALUE = 150
TRANSACTION_GROWTH_SHARE = 0.8


@dataclass(frozen=True)
class YearlySummary:
    year: int
    total_sales: int
    total_revenue: int
    total_profit: int
    total_orders: int
    total_customers: int
    average_order_value: float

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class PeriodKpis:
    total_sales: int
    average_sales: float
    best_month: str
    best_month_sales: int
    sales_growth: float
    average_growth: float
    best_month_vs_average: float
    total_transactions: int
    transactions_growth: float

    def to_dict(self) -> Dict:
        return asdict(self)


def summarize(records: Sequence[SalesRecord], year: int) -> Optional[YearlySummary]:
    """
    Totals for one year.

    Returns None when no record has that year, so callers can tell
    "no data" apart from a year whose measures really sum to zero.
    The average order value divides by max(total_orders, 1).
    """
    year_records = [r for r in records if r.year == year]
    if not year_records:
        return None

    total_revenue = sum(r.revenue for r in year_records)
    total_orders = sum(r.orders for r in year_records)

    return YearlySummary(
        year=year,
        total_sales=sum(r.sales for r in year_records),
        total_revenue=total_revenue,
        total_profit=sum(r.profit for r in year_records),
        total_orders=total_orders,
        total_customers=sum(r.customers for r in year_records),
        average_order_value=total_revenue / (total_orders or 1),
    )


def growth_rate(current: float, previous: float) -> float:
    """Percent change from previous to current; 0.0 when previous is 0."""
    if previous == 0:
        return 0.0
    return (current - previous) / previous * 100


def period_kpis(current: Sequence[SalesRecord],
                previous: Optional[Sequence[SalesRecord]] = None) -> PeriodKpis:
    """
    Headline KPIs for a period, compared against an optional previous period.

    Both periods are first summed per month, so the average is an average
    monthly sales figure and the best month is a whole month across every
    region and category. Growth figures are 0 when there is no previous data.
    """
    months = monthly_totals(current)
    if not months:
        total, average, best_month, best_sales = 0, 0.0, "", 0
    else:
        total = sum(m["sales"] for m in months)
        average = total / len(months)
        best = max(months, key=lambda m: m["sales"])
        best_month, best_sales = best["month"], best["sales"]

    previous_months = monthly_totals(previous or [])
    if previous_months:
        prev_total = sum(m["sales"] for m in previous_months)
        prev_average = prev_total / len(previous_months)
        sales_growth = growth_rate(total, prev_total)
        average_growth = growth_rate(average, prev_average)
    else:
        sales_growth = average_growth = 0.0

    return PeriodKpis(
        total_sales=total,
        average_sales=average,
        best_month=best_month,
        best_month_sales=best_sales,
        sales_growth=sales_growth,
        average_growth=average_growth,
        best_month_vs_average=growth_rate(best_sales, average),
        total_transactions=round_half_up(total / AVERAGE_TRANSACTION_VALUE),
        transactions_growth=sales_growth * TRANSACTION_GROWTH_SHARE,
    )


def records_to_frame(records: Sequence[SalesRecord]) -> pd.DataFrame:
    """Records as a DataFrame with one column per SalesRecord field."""
    columns = ["year", "month", "month_index", "region", "product_category", *MEASURES]
    if not records:
        return pd.DataFrame(columns=columns)
    return pd.DataFrame([r.to_dict() for r in records], columns=columns)


def monthly_totals(records: Sequence[SalesRecord]) -> List[Dict]:
    """
    Sum every measure per month across regions and categories.

    Rows come back in calendar order as
    {'month', 'month_index', 'sales', 'orders', 'revenue', 'profit', 'customers'}.
    """
    df = records_to_frame(records)
    if df.empty:
        return []

    # Recompute the index from the label so stored values cannot reorder months
    df["month_index"] = df["month"].map(month_index)
    grouped = (
        df.groupby(["month_index", "month"], as_index=False)[list(MEASURES)]
          .sum()
          .sort_values("month_index")
    )
    return [
        {"month": row["month"], "month_index": int(row["month_index"]),
         **{m: int(row[m]) for m in MEASURES}}
        for row in grouped.to_dict(orient="records")
    ]


def breakdown(records: Sequence[SalesRecord], by: str = "region") -> List[Dict]:
    """
    Totals per region or product category, highest sales first.

    Raises:
        ValueError: if `by` is not a breakdown dimension
    """
    if by not in BREAKDOWN_DIMENSIONS:
        raise ValueError(f"Cannot break down by {by!r}; use one of {', '.join(BREAKDOWN_DIMENSIONS)}")

    df = records_to_frame(records)
    if df.empty:
        return []

    grouped = (
        df.groupby(by, as_index=False)[list(MEASURES)]
          .sum()
          .sort_values(["sales", by], ascending=[False, True])
    )
    total_sales = grouped["sales"].sum()
    rows = []
    for row in grouped.to_dict(orient="records"):
        rows.append({
            by: row[by],
            **{m: int(row[m]) for m in MEASURES},
            "share": float(row["sales"] / total_sales * 100) if total_sales else 0.0,
        })
    return rows
