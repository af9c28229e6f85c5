"""Formatting helpers for KMA YYYYMMDD dates and HHMM times."""

from datetime import datetime


def format_date(date_str: str) -> str:
    """'20261017' -> '2026-10-17'. Anything not 8 characters passes through."""
    if len(date_str) != 8:
        return date_str
    return f"{date_str[:4]}-{date_str[4:6]}-{date_str[6:]}"


def format_time(time_str: str) -> str:
    """'1500' -> '15:00'. Anything not 4 characters passes through."""
    if len(time_str) != 4:
        return time_str
    return f"{time_str[:2]}:{time_str[2:]}"


def readable_date_time(date_str: str, time_str: str) -> str:
    if not date_str or not time_str:
        return ""
    return f"{format_date(date_str)} {format_time(time_str)}"


def day_of_week(date_str: str) -> str:
    """English weekday name for a YYYYMMDD date, '' when it is not a date."""
    try:
        return datetime.strptime(date_str, "%Y%m%d").strftime("%A")
    except ValueError:
        return ""
