"""Health (cold warning) index: diurnal range, dry air and cold."""

from lifecast.indices.banding import build_index
from lifecast.indices.rules import (
    Conditions,
    FirstMatch,
    Predicate,
    Rule,
    at_least,
    at_most,
    evaluate,
)
from lifecast.models.index import IndexId, LifeIndex


def diurnal_range(conditions: Conditions) -> float | None:
    """Today's TMX - TMN, or None unless both were reported."""
    today = conditions.today
    if today is None or today.max_temperature is None or today.min_temperature is None:
        return None
    return today.max_temperature - today.min_temperature


def range_at_least(threshold: float) -> Predicate:
    def check(conditions: Conditions) -> bool:
        spread = diurnal_range(conditions)
        return spread is not None and spread >= threshold

    return check


RULES = (
    FirstMatch(
        Rule(
            range_at_least(15),
            -50,
            lambda c: f"Very large daily temperature range of {diurnal_range(c):.1f}°C",
        ),
        Rule(
            range_at_least(10),
            -30,
            lambda c: f"Large daily temperature range of {diurnal_range(c):.1f}°C",
        ),
    ),
    # humidity and cold add up, they are not ranked against the range
    Rule(at_most("humidity", 30), -20, "Dry air, watch for respiratory illness"),
    Rule(at_most("temperature", 5), -20, "Cold weather"),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.HEALTH,
        "Health",
        "💊",
        evaluate(RULES, conditions, baseline=100),
        activity="staying healthy",
        placeholder="Good weather for staying healthy",
        recommendations=(
            "Good weather for staying healthy",
            "Dress with the temperature swings in mind",
            "Watch out for colds and keep warm",
        ),
    )
