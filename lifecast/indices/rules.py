"""Rule evaluation for life indices.

An index is an ordered tuple of rules folded over a running (score, reasons)
outcome. Every rule that matches contributes exactly one reason:

- ``Rule``: adds ``delta`` to the score.
- ``Absolute``: sets the score outright.
- ``Override``: sets the score and replaces every reason gathered so far.
- ``FirstMatch``: wraps a ranked group; only its first matching rule fires.

Predicates read a ``Conditions`` snapshot. A field that was not reported
(None) never satisfies a threshold predicate.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from lifecast.models.forecast import DailyAggregate, TimeSlot


@dataclass(frozen=True)
class Conditions:
    current: TimeSlot
    daily: tuple[DailyAggregate, ...]

    @property
    def today(self) -> DailyAggregate | None:
        return self.daily[0] if self.daily else None


@dataclass(frozen=True)
class Outcome:
    score: int
    reasons: tuple[str, ...] = ()


Predicate = Callable[[Conditions], bool]
Reason = str | Callable[[Conditions], str]


def _render(reason: Reason, conditions: Conditions) -> str:
    return reason(conditions) if callable(reason) else reason


@dataclass(frozen=True)
class Rule:
    when: Predicate
    delta: int
    reason: Reason

    def matches(self, conditions: Conditions) -> bool:
        return self.when(conditions)

    def apply(self, outcome: Outcome, conditions: Conditions) -> Outcome:
        return Outcome(
            outcome.score + self.delta,
            outcome.reasons + (_render(self.reason, conditions),),
        )


@dataclass(frozen=True)
class Absolute:
    when: Predicate
    score: int
    reason: Reason

    def matches(self, conditions: Conditions) -> bool:
        return self.when(conditions)

    def apply(self, outcome: Outcome, conditions: Conditions) -> Outcome:
        return Outcome(self.score, outcome.reasons + (_render(self.reason, conditions),))


@dataclass(frozen=True)
class Override:
    when: Predicate
    score: int
    reason: Reason

    def matches(self, conditions: Conditions) -> bool:
        return self.when(conditions)

    def apply(self, outcome: Outcome, conditions: Conditions) -> Outcome:
        return Outcome(self.score, (_render(self.reason, conditions),))


ScoringRule = Rule | Absolute | Override


class FirstMatch:
    def __init__(self, *rules: ScoringRule):
        self.rules = rules

    def matches(self, conditions: Conditions) -> bool:
        return any(rule.matches(conditions) for rule in self.rules)

    def apply(self, outcome: Outcome, conditions: Conditions) -> Outcome:
        for rule in self.rules:
            if rule.matches(conditions):
                return rule.apply(outcome, conditions)
        return outcome


def evaluate(
    rules: Sequence[ScoringRule | FirstMatch], conditions: Conditions, baseline: int
) -> Outcome:
    """Fold rules over the baseline. The score is not clamped here."""
    outcome = Outcome(baseline)
    for rule in rules:
        if rule.matches(conditions):
            outcome = rule.apply(outcome, conditions)
    return outcome


def clamp_score(score: float) -> int:
    return int(max(0, min(100, score)))


# -- predicates ---------------------------------------------------------------


def always(conditions: Conditions) -> bool:
    return True


def at_least(field: str, threshold: float) -> Predicate:
    def check(conditions: Conditions) -> bool:
        value = getattr(conditions.current, field)
        return value is not None and value >= threshold

    return check


def at_most(field: str, threshold: float) -> Predicate:
    def check(conditions: Conditions) -> bool:
        value = getattr(conditions.current, field)
        return value is not None and value <= threshold

    return check


def above(field: str, threshold: float) -> Predicate:
    def check(conditions: Conditions) -> bool:
        value = getattr(conditions.current, field)
        return value is not None and value > threshold

    return check


def between(field: str, low: float, high: float) -> Predicate:
    """Inclusive on both ends."""

    def check(conditions: Conditions) -> bool:
        value = getattr(conditions.current, field)
        return value is not None and low <= value <= high

    return check


def sky_is(code: str) -> Predicate:
    def check(conditions: Conditions) -> bool:
        return conditions.current.sky_code == code

    return check


def precipitating(conditions: Conditions) -> bool:
    return conditions.current.is_precipitating


def all_of(*predicates: Predicate) -> Predicate:
    def check(conditions: Conditions) -> bool:
        return all(p(conditions) for p in predicates)

    return check
