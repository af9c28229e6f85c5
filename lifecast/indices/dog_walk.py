"""Dog walk index: precipitation, temperature and wind."""

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
    precipitating,
)
from lifecast.models.index import IndexId, LifeIndex

RULES = (
    FirstMatch(
        Rule(precipitating, -60, lambda c: f"{c.current.precipitation} in the forecast"),
        Rule(at_least("rain_probability", 50), -30, "Rain is likely"),
    ),
    FirstMatch(
        Rule(at_least("temperature", 30), -40, "Too hot, risky for dogs"),
        Rule(at_least("temperature", 25), -20, "Hot out, keep to the shade"),
        Rule(at_most("temperature", -10), -40, "Far too cold"),
        Rule(at_most("temperature", 0), -20, "Cold out, a dog coat helps"),
        Rule(between("temperature", 15, 22), 10, "Comfortable walking temperature"),
    ),
    Rule(above("wind_speed", 10), -20, "Strong wind"),
)


def calculate(conditions: Conditions) -> LifeIndex:
    return build_index(
        IndexId.DOG_WALK,
        "Dog walk",
        "🐕",
        evaluate(RULES, conditions, baseline=100),
        activity="walking the dog",
        placeholder="Good weather for a walk",
        recommendations=(
            "Great for a walk!",
            "Keep the walk short",
            "Indoor play is a better idea",
        ),
    )
