"""
Chart adapters - turn filtered records into chart payloads and Plotly figures.

Each chart kind has its own payload type with the fields that kind needs.
ChartSelector holds which kind the dashboard is currently showing.
"""

from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Union

import plotly.graph_objects as go

from .aggregation import monthly_totals
from .formatting import format_currency
from .generator import SalesRecord

PALETTE = ['#3b82f6', '#8b5cf6', '#10b981', '#f59e0b', '#ef4444']


class ChartKind(str, Enum):
    LINE = 'line'
    BAR = 'bar'
    PIE = 'pie'

    @classmethod
    def parse(cls, value) -> "ChartKind":
        try:
            return cls(value)
        except ValueError:
            allowed = ', '.join(k.value for k in cls)
            raise ValueError(f"Unknown chart type: {value!r} (expected one of {allowed})")


@dataclass(frozen=True)
class LineChartPayload:
    months: List[str]
    sales: List[int]
    series_name: str = 'Sales'
    kind: str = field(default=ChartKind.LINE.value, init=False)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class BarChartPayload:
    months: List[str]
    sales: List[int]
    series_name: str = 'Sales'
    kind: str = field(default=ChartKind.BAR.value, init=False)

    def to_dict(self) -> Dict:
        return asdict(self)


@dataclass(frozen=True)
class PieChartPayload:
    labels: List[str]
    values: List[int]
    slice_labels: List[str]
    colors: List[str]
    kind: str = field(default=ChartKind.PIE.value, init=False)

    def to_dict(self) -> Dict:
        return asdict(self)


ChartPayload = Union[LineChartPayload, BarChartPayload, PieChartPayload]


class ChartSelector:
    """
    Which chart kind is on screen. Starts at line; any kind can follow any
    other. Selecting never touches the data being charted.
    """

    def __init__(self):
        self.kind = ChartKind.LINE

    def select(self, kind) -> ChartKind:
        self.kind = ChartKind.parse(kind)
        return self.kind


def build_chart(kind, records: Sequence[SalesRecord],
                min_sales: Optional[float] = None) -> ChartPayload:
    """
    Build a chart payload from records.

    Records are summed per month (calendar order). When min_sales is given,
    months whose total sales fall below it are dropped.
    """
    kind = ChartKind.parse(kind)
    months = monthly_totals(records)
    if min_sales is not None:
        months = [m for m in months if m['sales'] >= min_sales]

    labels = [m['month'] for m in months]
    sales = [m['sales'] for m in months]

    if kind is ChartKind.LINE:
        return LineChartPayload(months=labels, sales=sales)
    if kind is ChartKind.BAR:
        return BarChartPayload(months=labels, sales=sales)
    return PieChartPayload(
        labels=labels,
        values=sales,
        slice_labels=[f"{m}: {format_currency(s)}" for m, s in zip(labels, sales)],
        colors=[PALETTE[i % len(PALETTE)] for i in range(len(labels))],
    )


def to_figure(payload: ChartPayload) -> go.Figure:
    """Render a payload as a Plotly figure."""
    fig = go.Figure()

    if isinstance(payload, LineChartPayload):
        fig.add_scatter(x=payload.months, y=payload.sales, mode='lines',
                        name=payload.series_name, line=dict(color=PALETTE[0], width=2),
                        hovertemplate='%{x}<br>Sales: $%{y:,}<extra></extra>')
    elif isinstance(payload, BarChartPayload):
        fig.add_bar(x=payload.months, y=payload.sales, name=payload.series_name,
                    marker_color=PALETTE[0],
                    hovertemplate='%{x}<br>Sales: $%{y:,}<extra></extra>')
    elif isinstance(payload, PieChartPayload):
        fig.add_pie(labels=payload.labels, values=payload.values,
                    text=payload.slice_labels, textinfo='text',
                    marker=dict(colors=payload.colors, line=dict(color='#fff', width=1)),
                    hovertemplate='%{label}<br>Sales: $%{value:,}<extra></extra>')
    else:
        raise TypeError(f"Not a chart payload: {type(payload).__name__}")

    if payload.kind != ChartKind.PIE.value:
        fig.update_layout(
            xaxis=dict(title='Month'),
            yaxis=dict(title='Sales', tickprefix='$', separatethousands=True),
        )
    fig.update_layout(
        height=400,
        margin=dict(l=20, r=30, t=10, b=20),
        plot_bgcolor='white',
        paper_bgcolor='white',
        legend=dict(orientation='h', yanchor='bottom', y=1.02, xanchor='right', x=1),
    )
    return fig
