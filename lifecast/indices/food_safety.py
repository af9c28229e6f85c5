"""Food safety index.

Rules score food-poisoning *danger* (heat plus humidity); the published score
is the inverted safety value, 100 - danger.
"""

from lifecast.indices.banding import build_index, pick_by_score
from lifecast.indices.rules import (
    Absolute,
    Conditions,
    FirstMatch,
    Outcome,
    all_of,
    always,
    at_least,
    evaluate,
)
from lifecast.models.index import IndexId, LifeIndex

DANGER_RULES = (
    FirstMatch(
        Absolute(
            all_of(at_least("temperature", 25), at_least("humidity", 60)),
            80,
            "Hot and humid, high food-poisoning risk",
        ),
        Absolute(
            all_of(at_least("temperature", 20), at_least("humidity", 50)),
            50,
            "Take care with food storage",
        ),
        Absolute(always, 20, "Low food-poisoning risk"),
    ),
)


def calculate(conditions: Conditions) -> LifeIndex:
    danger = evaluate(DANGER_RULES, conditions, baseline=0)
    safety = 100 - danger.score
    return build_index(
        IndexId.FOOD_SAFETY,
        "Food safety",
        "🍱",
        Outcome(safety, danger.reasons),
        activity="food storage",
        placeholder="Low food-poisoning risk",
        recommendations=(
            "Food keeps relatively safely",
            "Keep food refrigerated",
            "Eat food quickly or keep it refrigerated",
        ),
        description=pick_by_score(
            safety,
            "Food storage is safe",
            "Be careful with food storage",
            "Take extra care with food storage",
        ),
    )
