"""Laundry drying index: rain, humidity, wind and sky."""

from lifecast.forecast.categories import SKY_CLEAR, SKY_OVERCAST
from lifecast.indices.banding import build_index
from lifecast.indices.rules import (
    Conditions,
    FirstMatch,
    Rule,
    above,
    at_least,
    at_most,
    between,
    evaluate,
    sky_is,
)
from lifecast.models.index import IndexId, LifeIndex

RULES = (
    FirstMatch(
        Rule(at_least("rain_probability", 70), -50, "High chance of rain"),
        Rule(at_least("rain_probability", 40), -30, "Rain is possible"),
    ),
    FirstMatch(
        Rule(at_least("humidity", 80), -30, "Humidity is very high"),
        Rule(at_least("humidity", 60), -15, "Humidity is on the high side"),
        Rule(at_most("humidity", 40), 10, "Low humidity dries clothes fast"),
    ),
    FirstMatch(
        Rule(between("wind_speed", 4, 8), 10, "A steady breeze helps drying"),
        Rule(above("wind_speed", 10), -20, "Wind is too strong"),
    ),
    FirstMatch(
        Rule(sky_is(SKY_CLEAR), 15, "Clear skies"),
        Rule(sky_is(SKY_OVERCAST), -10, "Overcast skies"),
    ),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.LAUNDRY,
        "Laundry drying",
        "👕",
        evaluate(RULES, conditions, baseline=100),
        activity="drying laundry",
        placeholder="Average drying conditions",
        recommendations=(
            "A great day to do the laundry!",
            "Consider drying indoors",
            "Better to put the laundry off",
        ),
    )
