"""Stargazing index: sky cover, zeroed by any precipitation."""

from lifecast.forecast.categories import SKY_CLEAR, SKY_MOSTLY_CLOUDY
from lifecast.indices.banding import build_index
from lifecast.indices.rules import (
    Absolute,
    Conditions,
    FirstMatch,
    Override,
    always,
    evaluate,
    precipitating,
    sky_is,
)
from lifecast.models.index import IndexId, LifeIndex

RULES = (
    FirstMatch(
        Absolute(sky_is(SKY_CLEAR), 100, "Clear skies, perfect for stargazing"),
        Absolute(sky_is(SKY_MOSTLY_CLOUDY), 50, "Clouds may hide the stars"),
        Absolute(always, 10, "Overcast skies make stargazing hard"),
    ),
    Override(precipitating, 0, "Rain or snow rules out stargazing"),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.STARGAZING,
        "Stargazing",
        "⭐",
        evaluate(RULES, conditions, baseline=100),
        activity="stargazing",
        placeholder="Clear skies, perfect for stargazing",
        recommendations=(
            "A great night for the stars!",
            "You may catch stars between the clouds",
            "Stargazing will be difficult",
        ),
    )
