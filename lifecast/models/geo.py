"""Geographic and forecast-grid coordinate models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GeoPoint:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class GridCell:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
