"""
SalesStore - the session that owns the current record set.

The store is passed by reference to whatever presents the data. Its record
list is only ever replaced wholesale, through replace() or a completed fetch.
"""

import datetime
import logging
import threading
import time
from typing import Callable, List, Optional, Sequence

from .aggregation import YearlySummary, summarize
from .catalog import PRODUCT_CATEGORIES, REGIONS, SUPPORTED_YEARS, is_supported_year
from .filters import SalesQuery, query, sort_by_month
from .generator import GenerationFailure, RecordGenerator, SalesRecord, UnsupportedYear

logger = logging.getLogger(__name__)


def resolve_current_year(default_year: int, today: Optional[datetime.date] = None) -> int:
    """The calendar year if it is supported, otherwise default_year."""
    year = (today or datetime.date.today()).year
    return year if is_supported_year(year) else default_year


class SalesStore:
    """
    Holds one year's records plus loading/error state.

    Every fetch is tagged with a generation id. When a newer fetch has
    started by the time an older one finishes, the older result is
    dropped instead of overwriting fresher data.

    Usage:
        store = SalesStore(RecordGenerator(seed=7), fetch_delay=0)
        store.fetch(2023)
        summary = store.summary()
    """

    def __init__(self, generator: Optional[RecordGenerator] = None,
                 fetch_delay: float = 0.5, default_year: int = 2023,
                 sleep: Callable[[float], None] = time.sleep):
        if not is_supported_year(default_year):
            raise UnsupportedYear(default_year)
        self.generator = generator or RecordGenerator()
        self.fetch_delay = fetch_delay
        self.default_year = default_year
        self._sleep = sleep

        self.records: List[SalesRecord] = []
        # Previous year, regenerated and replaced together with records
        self.previous_records: List[SalesRecord] = []
        self.current_year: int = resolve_current_year(default_year)
        self.is_loading = False
        self.error: Optional[str] = None

        self._lock = threading.Lock()
        self._generation = 0

    # --- state ---

    @property
    def generation(self) -> int:
        """Id of the most recently started fetch."""
        return self._generation

    @property
    def regions(self) -> List[str]:
        return list(REGIONS)

    @property
    def product_categories(self) -> List[str]:
        return list(PRODUCT_CATEGORIES)

    def available_years(self) -> List[int]:
        return list(SUPPORTED_YEARS)

    def replace(self, records: Sequence[SalesRecord]):
        """Swap in a new record set. The previous list is left untouched."""
        with self._lock:
            self.records = list(records)

    # --- fetching ---

    def fetch(self, year: int) -> bool:
        """
        Regenerate records for `year` after the simulated latency.

        Returns:
            True if the result was stored; False if generation failed
            (see self.error) or a newer fetch superseded this one

        Raises:
            UnsupportedYear: before any state changes
        """
        if not is_supported_year(year):
            raise UnsupportedYear(year)

        with self._lock:
            self._generation += 1
            generation = self._generation
            self.current_year = year
            self.is_loading = True

        try:
            if self.fetch_delay:
                self._sleep(self.fetch_delay)
            records = self.generator.generate(year)
            previous = self.generator.generate(year - 1) if is_supported_year(year - 1) else []
        except Exception as e:
            failure = e if isinstance(e, GenerationFailure) else GenerationFailure(year, e)
            logger.exception(f"Generation {generation} for {year} failed")
            return self._finish(generation, [], [], str(failure))

        stored = self._finish(generation, records, previous, None)
        if stored:
            logger.info(f"Loaded {len(records)} records for {year} (generation {generation})")
        return stored

    def _finish(self, generation: int, records: List[SalesRecord],
                previous: List[SalesRecord], error: Optional[str]) -> bool:
        with self._lock:
            if generation != self._generation:
                logger.warning(f"Dropping stale generation {generation}; latest is {self._generation}")
                return False
            self.records = records
            self.previous_records = previous
            self.error = error
            self.is_loading = False
        return error is None

    def refresh(self) -> bool:
        """Regenerate the year last fetched, replacing everything held now."""
        return self.fetch(self.current_year)

    def retry(self) -> bool:
        """
        Re-run the last fetch if it failed.

        Returns False without fetching when there is no error to recover from.
        """
        if self.error is None:
            return False
        return self.fetch(self.current_year)

    # --- views ---

    def summary(self, year: Optional[int] = None) -> Optional[YearlySummary]:
        return summarize(self.records, self.current_year if year is None else year)

    def previous_period(self) -> List[SalesRecord]:
        """
        Previous-year records for the months the current year has.

        A half-published year is compared against the same half of the
        year before, not the whole of it.
        """
        months = {r.month for r in self.records}
        return [r for r in self.previous_records if r.month in months]

    def filtered(self, spec: SalesQuery) -> List[SalesRecord]:
        """Records matching spec, in calendar order."""
        return sort_by_month(query(self.records, spec))
