"""Camping index: wind (tent safety), today's rain chance and temperature."""

from lifecast.indices.banding import build_index
from lifecast.indices.rules import (
    Conditions,
    FirstMatch,
    Predicate,
    Rule,
    at_least,
    at_most,
    between,
    evaluate,
)
from lifecast.models.index import IndexId, LifeIndex


def today_rain_at_least(threshold: int) -> Predicate:
    def check(conditions: Conditions) -> bool:
        today = conditions.today
        return today is not None and today.max_rain_probability >= threshold

    return check


RULES = (
    FirstMatch(
        Rule(at_least("wind_speed", 10), -50, "Gale-force wind makes pitching a tent dangerous"),
        Rule(at_least("wind_speed", 7), -25, "Fairly strong wind"),
    ),
    FirstMatch(
        Rule(today_rain_at_least(60), -40, "High chance of rain today"),
        Rule(today_rain_at_least(30), -20, "Rain is possible today"),
    ),
    FirstMatch(
        Rule(at_most("temperature", 5), -30, "Cold out, pack winter gear"),
        Rule(at_least("temperature", 30), -20, "Hot out, bring a sunshade"),
        Rule(between("temperature", 15, 25), 10, "Ideal camping temperature"),
    ),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.CAMPING,
        "Camping",
        "⛺",
        evaluate(RULES, conditions, baseline=100),
        activity="camping",
        placeholder="Good weather for camping",
        recommendations=(
            "Great for camping!",
            "Keep an eye on changing weather",
            "Better to postpone the trip",
        ),
    )
