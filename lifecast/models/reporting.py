"""Lookup result models."""

from dataclasses import dataclass

from lifecast.models.forecast import StructuredForecast
from lifecast.models.geo import GeoPoint, GridCell
from lifecast.models.index import LifeIndex


@dataclass(frozen=True)
class LookupResult:
    location_name: str
    point: GeoPoint
    cell: GridCell
    forecast: StructuredForecast
    indices: list[LifeIndex]
    duration_seconds: float = 0.0
