"""Car wash index: how many of the next three days look rainy."""

from lifecast.indices.banding import build_index
from lifecast.indices.rules import Absolute, Conditions, FirstMatch, evaluate
from lifecast.models.index import IndexId, LifeIndex

LOOKAHEAD_DAYS = 3
RAINY_DAY_PROBABILITY = 40


def rainy_days(conditions: Conditions) -> int:
    """Days among the next three whose max rain probability is >= 40%."""
    return sum(
        1
        for day in conditions.daily[:LOOKAHEAD_DAYS]
        if day.max_rain_probability >= RAINY_DAY_PROBABILITY
    )


RULES = (
    FirstMatch(
        Absolute(lambda c: rainy_days(c) == 0, 100, "No rain expected for the next 3 days"),
        Absolute(lambda c: rainy_days(c) == 1, 60, "Rain may arrive within a day or two"),
        Absolute(lambda c: rainy_days(c) >= 2, 20, "Several rainy days ahead"),
    ),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.CAR_WASH,
        "Car wash",
        "🚗",
        evaluate(RULES, conditions, baseline=100),
        activity="washing the car",
        placeholder="No rain expected for the next 3 days",
        recommendations=(
            "A great day to wash the car!",
            "Rain may spoil a fresh wash",
            "Better to put the car wash off",
        ),
    )
