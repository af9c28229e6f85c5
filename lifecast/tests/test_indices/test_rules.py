"""Tests for the rule fold used by every life index."""

from lifecast.indices.rules import (
    Absolute,
    Conditions,
    FirstMatch,
    Override,
    Rule,
    above,
    all_of,
    always,
    at_least,
    at_most,
    between,
    clamp_score,
    evaluate,
    precipitating,
    sky_is,
)
from lifecast.models.forecast import TimeSlot
from lifecast.tests.factories import make_day


def never(conditions):
    return False


def _conditions(daily=(), **fields) -> Conditions:
    return Conditions(current=TimeSlot(**fields), daily=daily)


class TestEvaluate:
    def test_no_rules_keeps_baseline(self):
        assert evaluate((), _conditions(), baseline=100).score == 100

    def test_additive_rules_accumulate(self):
        rules = (Rule(always, -10, "a"), Rule(always, -5, "b"), Rule(never, -50, "c"))
        outcome = evaluate(rules, _conditions(), baseline=100)
        assert outcome.score == 85
        assert outcome.reasons == ("a", "b")

    def test_absolute_sets_score_keeps_reasons(self):
        rules = (Rule(always, -10, "a"), Absolute(always, 40, "b"))
        outcome = evaluate(rules, _conditions(), baseline=100)
        assert outcome.score == 40
        assert outcome.reasons == ("a", "b")

    def test_override_replaces_reasons(self):
        rules = (Rule(always, -10, "a"), Rule(always, -10, "b"), Override(always, 0, "c"))
        outcome = evaluate(rules, _conditions(), baseline=100)
        assert outcome.score == 0
        assert outcome.reasons == ("c",)

    def test_first_match_fires_once(self):
        group = FirstMatch(
            Rule(always, -30, "first"),
            Rule(always, -20, "second"),
        )
        outcome = evaluate((group,), _conditions(), baseline=100)
        assert outcome.score == 70
        assert outcome.reasons == ("first",)

    def test_first_match_skips_non_matching(self):
        group = FirstMatch(Rule(never, -30, "first"), Rule(always, -20, "second"))
        outcome = evaluate((group,), _conditions(), baseline=100)
        assert outcome.score == 80
        assert outcome.reasons == ("second",)

    def test_first_match_nothing_matches(self):
        group = FirstMatch(Rule(never, -30, "first"))
        outcome = evaluate((group,), _conditions(), baseline=100)
        assert outcome.score == 100
        assert outcome.reasons == ()

    def test_score_not_clamped(self):
        outcome = evaluate((Rule(always, 50, "up"),), _conditions(), baseline=100)
        assert outcome.score == 150

    def test_callable_reason(self):
        rule = Rule(always, 0, lambda c: f"{c.current.temperature} degrees")
        outcome = evaluate((rule,), _conditions(temperature=12.0), baseline=0)
        assert outcome.reasons == ("12.0 degrees",)


class TestClampScore:
    def test_bounds(self):
        assert clamp_score(-15) == 0
        assert clamp_score(130) == 100
        assert clamp_score(55) == 55

    def test_returns_int(self):
        assert isinstance(clamp_score(55.0), int)


class TestPredicates:
    def test_at_least_inclusive(self):
        check = at_least("humidity", 60)
        assert check(_conditions(humidity=60))
        assert not check(_conditions(humidity=59))

    def test_at_most_inclusive(self):
        check = at_most("temperature", 0)
        assert check(_conditions(temperature=0.0))
        assert not check(_conditions(temperature=0.5))

    def test_above_exclusive(self):
        check = above("wind_speed", 10)
        assert check(_conditions(wind_speed=10.1))
        assert not check(_conditions(wind_speed=10.0))

    def test_between_inclusive(self):
        check = between("temperature", 15, 22)
        assert check(_conditions(temperature=15.0))
        assert check(_conditions(temperature=22.0))
        assert not check(_conditions(temperature=22.1))

    def test_missing_value_never_matches(self):
        conditions = _conditions()
        assert not at_least("humidity", 0)(conditions)
        assert not at_most("humidity", 100)(conditions)
        assert not above("wind_speed", -1)(conditions)
        assert not between("temperature", -50, 50)(conditions)

    def test_sky_is(self):
        assert sky_is("1")(_conditions(sky_code="1"))
        assert not sky_is("1")(_conditions(sky_code="4"))

    def test_precipitating(self):
        assert precipitating(_conditions(precipitation_code="1"))
        assert not precipitating(_conditions(precipitation_code="0"))
        assert not precipitating(_conditions())

    def test_all_of(self):
        check = all_of(at_least("temperature", 25), at_least("humidity", 60))
        assert check(_conditions(temperature=25.0, humidity=60))
        assert not check(_conditions(temperature=25.0, humidity=59))


class TestConditions:
    def test_today_is_first_day(self):
        day = make_day(date="20261017")
        conditions = _conditions(daily=(day, make_day(date="20261018")))
        assert conditions.today is day

    def test_today_none_without_daily(self):
        assert _conditions().today is None
