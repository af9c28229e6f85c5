"""Life index models."""

from dataclasses import dataclass
from enum import StrEnum


class IndexId(StrEnum):
    LAUNDRY = "laundry"
    CAR_WASH = "carwash"
    DOG_WALK = "dogwalk"
    CAMPING = "camping"
    EXERCISE = "exercise"
    STARGAZING = "stargazing"
    FOOD_SAFETY = "foodsafety"
    HEALTH = "health"


class Grade(StrEnum):
    VERY_GOOD = "very good"
    GOOD = "good"
    AVERAGE = "average"
    POOR = "poor"
    VERY_POOR = "very poor"


@dataclass(frozen=True)
class LifeIndex:
    id: IndexId
    name: str
    icon: str
    score: int
    grade: Grade
    color: str
    description: str
    reasons: tuple[str, ...]
    recommendation: str
