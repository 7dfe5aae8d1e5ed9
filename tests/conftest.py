import os

os.environ.setdefault('SALESBOARD_FETCH_DELAY', '0')

import pytest

from salesboard import RecordGenerator, SalesRecord, SalesStore, month_index


class FixedRng:
    """Random source that always returns the same multiplier."""

    def __init__(self, value=1.0):
        self.value = value
        self.calls = 0

    def uniform(self, low, high):
        self.calls += 1
        return self.value


@pytest.fixture
def fixed_rng():
    return FixedRng(1.0)


@pytest.fixture
def generator(fixed_rng):
    return RecordGenerator(rng=fixed_rng)


@pytest.fixture
def store(generator):
    return SalesStore(generator, fetch_delay=0, default_year=2023)


@pytest.fixture
def records_2023(generator):
    return generator.generate(2023)


@pytest.fixture
def make_record():
    def _make(year=2023, month='Jan', region='North', category='Electronics',
              sales=100, orders=10, revenue=1000, profit=300, customers=8):
        return SalesRecord(
            year=year, month=month, month_index=month_index(month),
            region=region, product_category=category,
            sales=sales, orders=orders, revenue=revenue, profit=profit, customers=customers,
        )
    return _make


class FlakyGenerator(RecordGenerator):
    """Fails the first `failures` calls, then behaves normally."""

    def __init__(self, failures=1):
        super().__init__(rng=FixedRng(1.0))
        self.failures = failures

    def generate(self, year):
        if self.failures:
            self.failures -= 1
            raise RuntimeError("backend unavailable")
        return super().generate(year)
