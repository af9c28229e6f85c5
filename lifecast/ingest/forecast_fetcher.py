"""Forecast fetcher: retrieves, parses and caches forecasts per grid cell."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from lifecast.forecast.aggregator import parse
from lifecast.ingest.base_time import base_date_time
from lifecast.ingest.kma_client import KmaClient
from lifecast.ingest.staleness import cache_age_minutes, is_cache_fresh
from lifecast.models.common import utc_now
from lifecast.models.forecast import StructuredForecast
from lifecast.models.geo import GridCell

logger = logging.getLogger(__name__)

DEFAULT_FRESHNESS_MINUTES = 10


@dataclass(frozen=True)
class CachedForecast:
    forecast: StructuredForecast
    fetched_at: datetime
    base_date: str
    base_time: str


class ForecastFetcher:
    def __init__(
        self,
        kma_client: KmaClient,
        freshness_minutes: float = DEFAULT_FRESHNESS_MINUTES,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.kma = kma_client
        self.freshness_minutes = freshness_minutes
        self.clock = clock
        self._cache: dict[GridCell, CachedForecast] = {}

    def fetch(self, cell: GridCell) -> StructuredForecast:
        """Return the forecast for a grid cell.

        A cached forecast younger than the freshness window is returned
        without a request. Storing a new entry drops every stale one, so the
        cache only holds cells looked up within the window. Concurrent misses
        may both fetch; the last one stored wins. API and parse errors
        propagate.
        """
        now = self.clock()
        cached = self._cache.get(cell)
        if cached is not None and is_cache_fresh(
            cached.fetched_at, self.freshness_minutes, now
        ):
            logger.debug(
                "Cache hit for grid %s (%.1f min old)",
                cell, cache_age_minutes(cached.fetched_at, now),
            )
            return cached.forecast

        base_date, base_time = base_date_time(now)
        items = self.kma.get_village_forecast(base_date, base_time, cell)
        forecast = parse(items)
        self._evict_stale(now)
        self._cache[cell] = CachedForecast(
            forecast=forecast,
            fetched_at=now,
            base_date=base_date,
            base_time=base_time,
        )
        logger.info(
            "Fetched %d records for grid %s (issued %s %s)",
            len(items), cell, base_date, base_time,
        )
        return forecast

    def cached(self, cell: GridCell) -> CachedForecast | None:
        return self._cache.get(cell)

    def _evict_stale(self, now: datetime) -> None:
        stale = [
            cell
            for cell, entry in self._cache.items()
            if not is_cache_fresh(entry.fetched_at, self.freshness_minutes, now)
        ]
        for cell in stale:
            del self._cache[cell]
        if stale:
            logger.debug("Evicted %d stale forecast(s)", len(stale))

    def clear_cache(self) -> None:
        self._cache.clear()
