"""Score banding shared by every life index."""

from lifecast.indices.rules import Outcome, clamp_score
from lifecast.models.index import Grade, IndexId, LifeIndex

# (min score, grade, color, description template), highest band first
BANDS: tuple[tuple[int, Grade, str, str], ...] = (
    (80, Grade.VERY_GOOD, "#4CAF50", "Very good for {activity}"),
    (60, Grade.GOOD, "#8BC34A", "Good for {activity}"),
    (40, Grade.AVERAGE, "#FFC107", "Fair for {activity}"),
    (20, Grade.POOR, "#FF9800", "Not good for {activity}"),
    (0, Grade.VERY_POOR, "#F44336", "Very bad for {activity}"),
)

# recommendation breakpoints: >= 70 high, >= 40 mid, else low
RECOMMEND_HIGH = 70
RECOMMEND_MID = 40


def _band(score: int) -> tuple[int, Grade, str, str]:
    for band in BANDS:
        if score >= band[0]:
            return band
    return BANDS[-1]


def grade_for(score: int) -> Grade:
    return _band(score)[1]


def color_for(score: int) -> str:
    return _band(score)[2]


def describe(score: int, activity: str) -> str:
    return _band(score)[3].format(activity=activity)


def pick_by_score(score: int, high: str, mid: str, low: str) -> str:
    if score >= RECOMMEND_HIGH:
        return high
    if score >= RECOMMEND_MID:
        return mid
    return low


def build_index(
    index_id: IndexId,
    name: str,
    icon: str,
    outcome: Outcome,
    *,
    activity: str,
    placeholder: str,
    recommendations: tuple[str, str, str],
    description: str | None = None,
) -> LifeIndex:
    """Clamp the outcome score and derive the banded fields from it."""
    score = clamp_score(outcome.score)
    return LifeIndex(
        id=index_id,
        name=name,
        icon=icon,
        score=score,
        grade=grade_for(score),
        color=color_for(score),
        description=description if description is not None else describe(score, activity),
        reasons=outcome.reasons or (placeholder,),
        recommendation=pick_by_score(score, *recommendations),
    )
