"""Lookup pipeline: location -> grid cell -> forecast -> life indices."""

import logging
import time

from lifecast.config.defaults import find_city
from lifecast.config.schema import LifecastConfig
from lifecast.grid.projection import ProjectionParams, build_params, to_grid
from lifecast.indices.engine import calculate_all
from lifecast.ingest.forecast_fetcher import ForecastFetcher
from lifecast.ingest.kma_client import KmaClient
from lifecast.models.geo import GeoPoint, GridCell
from lifecast.models.reporting import LookupResult

logger = logging.getLogger(__name__)

UNNAMED_LOCATION = "Selected location"


class UnknownCityError(LookupError):
    pass


class LookupPipeline:
    def __init__(
        self,
        config: LifecastConfig,
        fetcher: ForecastFetcher | None = None,
        params: ProjectionParams | None = None,
    ):
        self.config = config
        self.params = params or build_params()
        self.fetcher = fetcher or ForecastFetcher(
            KmaClient.from_config(config.kma),
            freshness_minutes=config.cache.freshness_minutes,
        )

    def run(self, latitude: float, longitude: float, name: str = "") -> LookupResult:
        """Score the forecast at a coordinate."""
        cell = to_grid(self.params, latitude, longitude)
        return self._run(GeoPoint(latitude, longitude), cell, name or UNNAMED_LOCATION)

    def run_city(self, name: str) -> LookupResult:
        """Score the forecast for a configured city, using its stored grid cell."""
        city = find_city(name, self.config.cities)
        if city is None:
            raise UnknownCityError(f"Unknown city: {name}")
        return self._run(city.point, city.cell, city.name)

    def run_default(self) -> LookupResult:
        loc = self.config.location
        return self.run(loc.latitude, loc.longitude, loc.name)

    def _run(self, point: GeoPoint, cell: GridCell, name: str) -> LookupResult:
        start_time = time.monotonic()
        logger.info(
            "Lookup %s (%.4f, %.4f) -> grid %s",
            name, point.latitude, point.longitude, cell,
        )
        try:
            forecast = self.fetcher.fetch(cell)
        except Exception:
            logger.exception("Forecast lookup failed for %s at grid %s", name, cell)
            raise

        indices = calculate_all(forecast)
        return LookupResult(
            location_name=name,
            point=point,
            cell=cell,
            forecast=forecast,
            indices=indices,
            duration_seconds=time.monotonic() - start_time,
        )
