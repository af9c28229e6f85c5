"""Freshness checks for cached forecasts."""

from datetime import UTC, datetime


def cache_age_minutes(fetched_at: datetime, now: datetime | None = None) -> float:
    """Minutes elapsed since a cache entry was stored."""
    if now is None:
        now = datetime.now(UTC)
    return (now - fetched_at).total_seconds() / 60


def is_cache_fresh(
    fetched_at: datetime, max_age_minutes: float, now: datetime | None = None
) -> bool:
    """True while the entry is strictly younger than max_age_minutes."""
    return cache_age_minutes(fetched_at, now) < max_age_minutes
