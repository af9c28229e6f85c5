"""Life index engine: runs every index calculator over one forecast."""

from lifecast.indices import (
    camping,
    car_wash,
    cold_warning,
    dog_walk,
    exercise,
    food_safety,
    laundry,
    stargazing,
)
from lifecast.indices.rules import Conditions
from lifecast.models.forecast import StructuredForecast
from lifecast.models.index import LifeIndex

# Fixed output order; callers that want a ranking sort themselves.
CALCULATORS = (
    laundry.calculate,
    car_wash.calculate,
    dog_walk.calculate,
    camping.calculate,
    exercise.calculate,
    stargazing.calculate,
    food_safety.calculate,
    cold_warning.calculate,
)


def calculate_all(forecast: StructuredForecast) -> list[LifeIndex]:
    """Compute all 8 indices. Each sees only the forecast, never another index."""
    conditions = Conditions(current=forecast.current, daily=forecast.daily)
    return [calculate(conditions) for calculate in CALCULATORS]


def top_indices(indices: list[LifeIndex], n: int = 3) -> list[LifeIndex]:
    """Highest-scoring indices first; ties keep their engine order."""
    return sorted(indices, key=lambda i: i.score, reverse=True)[:n]
