from .catalog import SUPPORTED_YEARS, REGIONS, PRODUCT_CATEGORIES, MONTHS, month_index, is_supported_year
from .generator import (
    SalesRecord,
    RecordGenerator,
    UnsupportedYear,
    GenerationFailure,
    generate,
    base_rows,
)
from .aggregation import (
    YearlySummary,
    PeriodKpis,
    summarize,
    growth_rate,
    period_kpis,
    monthly_totals,
    breakdown,
    records_to_frame,
)
from .filters import SalesQuery, query, sort_by_month
from .charts import (
    ChartKind,
    ChartSelector,
    LineChartPayload,
    BarChartPayload,
    PieChartPayload,
    build_chart,
    to_figure,
)
from .formatting import format_currency, format_percentage, month_name
from .config import Settings
from .store import SalesStore, resolve_current_year

__all__ = [
    "SUPPORTED_YEARS",
    "REGIONS",
    "PRODUCT_CATEGORIES",
    "MONTHS",
    "month_index",
    "is_supported_year",
    "SalesRecord",
    "RecordGenerator",
    "UnsupportedYear",
    "GenerationFailure",
    "generate",
    "base_rows",
    "YearlySummary",
    "PeriodKpis",
    "summarize",
    "growth_rate",
    "period_kpis",
    "monthly_totals",
    "breakdown",
    "records_to_frame",
    "SalesQuery",
    "query",
    "sort_by_month",
    "ChartKind",
    "ChartSelector",
    "LineChartPayload",
    "BarChartPayload",
    "PieChartPayload",
    "build_chart",
    "to_figure",
    "format_currency",
    "format_percentage",
    "month_name",
    "Settings",
    "SalesStore",
    "resolve_current_year",
]
