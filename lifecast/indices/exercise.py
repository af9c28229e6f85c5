"""Outdoor exercise index: temperature, humidity and rain chance."""

from lifecast.indices.banding import build_index
from lifecast.indices.rules import (
    Conditions,
    FirstMatch,
    Rule,
    at_least,
    at_most,
    between,
    evaluate,
)
from lifecast.models.index import IndexId, LifeIndex

RULES = (
    FirstMatch(
        Rule(at_least("temperature", 28), -40, "Hot out, watch for heatstroke"),
        Rule(at_least("temperature", 25), -20, "Warm out, stay hydrated"),
        Rule(at_most("temperature", 0), -30, "Cold out, warm up properly"),
        Rule(between("temperature", 15, 22), 15, "Ideal exercise temperature"),
    ),
    Rule(at_least("humidity", 80), -25, "Muggy, high humidity"),
    Rule(at_least("rain_probability", 60), -30, "Rain is likely"),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.EXERCISE,
        "Outdoor exercise",
        "🏃",
        evaluate(RULES, conditions, baseline=100),
        activity="exercising outdoors",
        placeholder="Good weather for exercise",
        recommendations=(
            "Great for a workout outside!",
            "Consider exercising indoors",
            "Indoor exercise is recommended",
        ),
    )
