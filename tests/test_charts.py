import random

import pytest

from salesboard import (
    BarChartPayload,
    ChartKind,
    ChartSelector,
    LineChartPayload,
    PieChartPayload,
    build_chart,
    to_figure,
)
from salesboard.catalog import MONTHS


def test_selector_starts_on_line():
    assert ChartSelector().kind is ChartKind.LINE


@pytest.mark.parametrize('path', [['bar', 'pie', 'line'], ['pie', 'pie'], ['line', 'bar', 'line']])
def test_selector_moves_between_any_kinds(path):
    selector = ChartSelector()
    for kind in path:
        assert selector.select(kind).value == kind
    assert selector.kind.value == path[-1]


def test_selector_rejects_unknown_kind_and_keeps_state():
    selector = ChartSelector()
    selector.select('bar')
    with pytest.raises(ValueError, match='scatter'):
        selector.select('scatter')
    assert selector.kind is ChartKind.BAR


def test_line_payload_is_monthly_and_ordered(records_2023):
    shuffled = list(records_2023)
    random.Random(2).shuffle(shuffled)
    payload = build_chart('line', shuffled)
    assert isinstance(payload, LineChartPayload)
    assert payload.kind == 'line'
    assert payload.months == list(MONTHS)
    assert payload.sales[0] == 1500 * 16


def test_bar_payload(records_2023):
    payload = build_chart(ChartKind.BAR, records_2023)
    assert isinstance(payload, BarChartPayload)
    assert payload.to_dict()['kind'] == 'bar'


def test_pie_payload_labels(make_record):
    records = [make_record(month='Feb', sales=2000), make_record(month='Jan', sales=1500)]
    payload = build_chart('pie', records)
    assert isinstance(payload, PieChartPayload)
    assert payload.labels == ['Jan', 'Feb']
    assert payload.values == [1500, 2000]
    assert payload.slice_labels == ['Jan: $1,500', 'Feb: $2,000']
    assert len(payload.colors) == 2


def test_threshold_applies_to_monthly_totals(make_record):
    records = [make_record(month='Jan', sales=600), make_record(month='Jan', sales=600),
               make_record(month='Feb', sales=900)]
    payload = build_chart('bar', records, min_sales=1000)
    assert payload.months == ['Jan']
    assert payload.sales == [1200]


def test_zero_threshold_keeps_every_month(make_record):
    records = [make_record(month='Jan', sales=0), make_record(month='Feb', sales=10)]
    assert build_chart('line', records, min_sales=0).months == ['Jan', 'Feb']


def test_build_chart_rejects_unknown_kind(records_2023):
    with pytest.raises(ValueError):
        build_chart('donut', records_2023)


def test_empty_records_give_empty_payload():
    payload = build_chart('line', [])
    assert payload.months == [] and payload.sales == []


@pytest.mark.parametrize('kind, trace_type', [('line', 'scatter'), ('bar', 'bar'), ('pie', 'pie')])
def test_figure_trace_matches_kind(records_2023, kind, trace_type):
    fig = to_figure(build_chart(kind, records_2023))
    assert len(fig.data) == 1
    assert fig.data[0].type == trace_type


def test_to_figure_rejects_other_objects():
    with pytest.raises(TypeError):
        to_figure({'kind': 'line'})
