"""Common helpers shared across models."""

from datetime import UTC, datetime, timedelta, timezone

# KMA issues and labels forecasts in Korea Standard Time (no DST).
KST = timezone(timedelta(hours=9), name="KST")


def utc_now() -> datetime:
    return datetime.now(UTC)


def kst_now() -> datetime:
    return datetime.now(KST)
