import random

import pytest

from salesboard import SalesQuery, query, sort_by_month
from salesboard.catalog import MONTHS


def test_year_only_returns_year_subset(records_2023, make_record):
    records = records_2023 + [make_record(year=2022)]
    result = query(records, SalesQuery(year=2023))
    assert result == records_2023


def test_zero_threshold_matches_no_threshold(records_2023, make_record):
    records = records_2023 + [make_record(sales=0)]
    with_zero = query(records, SalesQuery(year=2023, min_sales=0))
    without = query(records, SalesQuery(year=2023))
    assert with_zero == without
    assert any(r.sales == 0 for r in with_zero)


def test_threshold_is_inclusive(make_record):
    records = [make_record(sales=999), make_record(sales=1000), make_record(sales=1001)]
    result = query(records, SalesQuery(year=2023, min_sales=1000))
    assert [r.sales for r in result] == [1000, 1001]


def test_filters_are_anded(records_2023):
    result = query(records_2023, SalesQuery(year=2023, region='West', category='Sports', min_sales=3000))
    assert result
    assert all(r.region == 'West' and r.product_category == 'Sports' and r.sales >= 3000 for r in result)
    assert {r.month for r in result} == {'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec'}


def test_region_filter(records_2023):
    result = query(records_2023, SalesQuery(year=2023, region='North'))
    assert len(result) == 12 * 4
    assert {r.region for r in result} == {'North'}


def test_empty_string_is_a_real_filter_value(records_2023):
    assert query(records_2023, SalesQuery(year=2023, region='')) == []


def test_query_accepts_mapping(records_2023):
    result = query(records_2023, {'year': 2023, 'category': 'Clothing', 'min_sales': None})
    assert len(result) == 12 * 4


def test_mapping_with_unknown_field_is_rejected(records_2023):
    with pytest.raises(ValueError, match='minSales'):
        query(records_2023, {'year': 2023, 'minSales': 10})


def test_mapping_without_year_is_rejected(records_2023):
    with pytest.raises(ValueError):
        query(records_2023, {'region': 'North'})


def test_sort_by_month_uses_calendar_order(make_record):
    records = [make_record(month=m) for m in MONTHS]
    random.Random(4).shuffle(records)
    result = sort_by_month(records)
    assert [r.month for r in result] == list(MONTHS)
    assert [r.month for r in result] != sorted(MONTHS)


def test_sort_by_month_handles_partial_years(make_record):
    records = [make_record(month=m) for m in ('Mar', 'Jan', 'Feb')]
    assert [r.month for r in sort_by_month(records)] == ['Jan', 'Feb', 'Mar']


def test_sort_by_month_is_stable_within_month(make_record):
    records = [make_record(month='Feb', region='West'), make_record(month='Jan'),
               make_record(month='Feb', region='East')]
    result = sort_by_month(records)
    assert [(r.month, r.region) for r in result] == [('Jan', 'North'), ('Feb', 'West'), ('Feb', 'East')]


def test_query_does_not_modify_input(records_2023):
    before = list(records_2023)
    query(records_2023, SalesQuery(year=2023, region='East'))
    assert records_2023 == before
