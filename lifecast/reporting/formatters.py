"""Output formatters for lookup results."""

import json
import math
from dataclasses import asdict
from typing import Any

from lifecast.indices.engine import top_indices
from lifecast.models.forecast import TimeSlot
from lifecast.models.index import LifeIndex
from lifecast.models.reporting import LookupResult

SHARE_TOP_N = 3


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_temperature(slot: TimeSlot) -> str:
    if slot.temperature is None:
        return "--°C"
    return f"{_round_half_up(slot.temperature)}°C"


def weather_icon(slot: TimeSlot) -> str:
    if slot.is_precipitating:
        if slot.precipitation_code == "3":
            return "❄️"
        if slot.precipitation_code == "2":
            return "🌨️"
        return "🌧️"
    return {"1": "☀️", "3": "⛅", "4": "☁️"}.get(slot.sky_code or "", "🌤️")


def weather_description(slot: TimeSlot) -> str:
    """Precipitation wins over sky cover when it is falling."""
    if slot.is_precipitating and slot.precipitation:
        return slot.precipitation
    return slot.sky or "Unknown"


def format_current_text(result: LookupResult) -> str:
    c = result.forecast.current
    lines = [
        f"=== {result.location_name} | grid {result.cell} ===",
        f"{weather_icon(c)} {format_temperature(c)} {weather_description(c)}"
        + (f" ({c.date_time})" if c.date_time else ""),
        f"Humidity: {c.humidity or 0}% | Rain: {c.rain_probability or 0}% | "
        f"Wind: {c.wind_speed or 0}m/s {c.wind_direction or '-'}",
    ]
    return "\n".join(lines)


def format_index_text(index: LifeIndex) -> str:
    lines = [
        f"{index.icon} {index.name}: {index.score} ({index.grade})",
        f"  {index.description}",
    ]
    lines.extend(f"  • {reason}" for reason in index.reasons)
    lines.append(f"  → {index.recommendation}")
    return "\n".join(lines)


def format_indices_text(result: LookupResult) -> str:
    """Plain text report: current conditions followed by every index."""
    parts = [format_current_text(result)]
    parts.extend(format_index_text(i) for i in result.indices)
    return "\n\n".join(parts)


def index_to_dict(index: LifeIndex) -> dict[str, Any]:
    data = asdict(index)
    data["id"] = str(index.id)
    data["grade"] = str(index.grade)
    data["reasons"] = list(index.reasons)
    return data


def result_to_dict(result: LookupResult) -> dict[str, Any]:
    current = asdict(result.forecast.current)
    daily = [
        {
            "date": d.date,
            "date_formatted": d.date_formatted,
            "day_of_week": d.day_of_week,
            "avg_temperature": d.avg_temperature,
            "min_temperature": d.min_temperature,
            "max_temperature": d.max_temperature,
            "max_rain_probability": d.max_rain_probability,
            "avg_humidity": d.avg_humidity,
            "max_wind_speed": d.max_wind_speed,
        }
        for d in result.forecast.daily
    ]
    return {
        "location": {
            "name": result.location_name,
            "latitude": result.point.latitude,
            "longitude": result.point.longitude,
            "grid": {"x": result.cell.x, "y": result.cell.y},
        },
        "current": current,
        "hourly": [asdict(s) for s in result.forecast.hourly],
        "daily": daily,
        "indices": [index_to_dict(i) for i in result.indices],
    }


def format_indices_json(result: LookupResult) -> str:
    """JSON report for programmatic consumption."""
    return json.dumps(result_to_dict(result), indent=2, ensure_ascii=False)


def format_share_summary(result: LookupResult, top_n: int = SHARE_TOP_N) -> str:
    """Short shareable summary: headline conditions plus the best indices."""
    c = result.forecast.current
    top = top_indices(result.indices, top_n)
    lines = [
        f"{result.location_name} weather life indices",
        f"🌡️ {format_temperature(c)} | {c.sky or 'Unknown'}",
        "",
    ]
    lines.extend(f"{i.icon} {i.name}: {i.grade}" for i in top)
    return "\n".join(lines)
