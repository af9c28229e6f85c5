"""Forecast aggregator: flat KMA category records -> current/hourly/daily forecast."""

import logging
import math
from collections.abc import Iterable, Mapping
from typing import Any

from lifecast.forecast.categories import (
    Category,
    precipitation_label,
    sky_label,
    wind_direction,
)
from lifecast.forecast.dates import day_of_week, format_date, readable_date_time
from lifecast.models.forecast import (
    DailyAggregate,
    ForecastRecord,
    StructuredForecast,
    TimeSlot,
)

logger = logging.getLogger(__name__)

HOURLY_SLOTS = 24

# API item keys, in ForecastRecord field order
_ITEM_KEYS = (
    ("fcstDate", "date"),
    ("fcstTime", "time"),
    ("category", "category"),
    ("fcstValue", "value"),
)


class ParseError(ValueError):
    """Raised when a forecast record batch cannot be turned into a forecast."""

    def __init__(self, message: str, record: ForecastRecord | Mapping[str, Any] | None = None):
        super().__init__(message)
        self.record = record


def parse(records: Iterable[ForecastRecord | Mapping[str, Any]]) -> StructuredForecast:
    """Merge records into time slots and derive the structured forecast.

    Records are ForecastRecord instances or raw API items
    (fcstDate/fcstTime/category/fcstValue). Raises ParseError on an empty
    batch, a record missing a field, or a non-numeric value for a numeric
    category.
    """
    records = list(records)
    if not records:
        raise ParseError("No forecast records to parse")

    slots: dict[tuple[str, str], dict[str, Any]] = {}
    for raw in records:
        record = _coerce_record(raw)
        fields = slots.setdefault(
            (record.date, record.time),
            {
                "date": record.date,
                "time": record.time,
                "date_time": readable_date_time(record.date, record.time),
            },
        )
        fields.update(_category_fields(record))

    ordered = sorted(
        (TimeSlot(**fields) for fields in slots.values()),
        key=lambda s: int(s.date + s.time),
    )
    daily = _aggregate_daily(ordered)

    logger.debug(
        "Parsed %d records into %d slots over %d days",
        len(records), len(ordered), len(daily),
    )

    return StructuredForecast(
        current=ordered[0] if ordered else TimeSlot(),
        hourly=tuple(ordered[:HOURLY_SLOTS]),
        daily=daily,
    )


def _coerce_record(raw: ForecastRecord | Mapping[str, Any]) -> ForecastRecord:
    if isinstance(raw, ForecastRecord):
        values = [raw.date, raw.time, raw.category, raw.value]
    elif isinstance(raw, Mapping):
        values = [raw.get(api_key, raw.get(field)) for api_key, field in _ITEM_KEYS]
    else:
        raise ParseError(f"Unsupported forecast record type: {type(raw).__name__}")

    missing = [field for (_, field), v in zip(_ITEM_KEYS, values) if v is None or v == ""]
    if missing:
        raise ParseError(f"Forecast record missing {', '.join(missing)}: {raw!r}", raw)

    record = ForecastRecord(*(str(v).strip() for v in values))
    if len(record.date) != 8 or not record.date.isdigit():
        raise ParseError(f"Malformed forecast date {record.date!r}", raw)
    if len(record.time) != 4 or not record.time.isdigit():
        raise ParseError(f"Malformed forecast time {record.time!r}", raw)
    return record


def _category_fields(record: ForecastRecord) -> dict[str, Any]:
    """Slot fields contributed by one record. Unknown categories add nothing."""
    category = record.category
    if category == Category.TEMPERATURE:
        return {"temperature": _number(record)}
    elif category == Category.MIN_TEMPERATURE:
        return {"min_temperature": _number(record)}
    elif category == Category.MAX_TEMPERATURE:
        return {"max_temperature": _number(record)}
    elif category == Category.SKY:
        return {"sky": sky_label(record.value), "sky_code": record.value}
    elif category == Category.PRECIPITATION_TYPE:
        return {
            "precipitation": precipitation_label(record.value),
            "precipitation_code": record.value,
        }
    elif category == Category.RAIN_PROBABILITY:
        return {"rain_probability": int(_number(record))}
    elif category == Category.RAINFALL:
        return {"rainfall": record.value}
    elif category == Category.HUMIDITY:
        return {"humidity": int(_number(record))}
    elif category == Category.SNOWFALL:
        return {"snowfall": record.value}
    elif category == Category.WIND_SPEED:
        return {"wind_speed": _number(record)}
    elif category == Category.WIND_DIRECTION:
        degree = _number(record)
        return {"wind_degree": int(degree), "wind_direction": wind_direction(degree)}
    elif category == Category.WAVE_HEIGHT:
        return {"wave_height": _number(record)}
    return {}


def _number(record: ForecastRecord) -> float:
    try:
        value = float(record.value)
    except ValueError:
        value = math.nan
    if not math.isfinite(value):
        raise ParseError(
            f"Non-numeric {record.category} value {record.value!r} "
            f"at {record.date} {record.time}",
            record,
        )
    return value


def _aggregate_daily(slots: list[TimeSlot]) -> tuple[DailyAggregate, ...]:
    by_date: dict[str, list[TimeSlot]] = {}
    for slot in slots:
        by_date.setdefault(slot.date, []).append(slot)
    return tuple(_aggregate_day(date, day_slots) for date, day_slots in by_date.items())


def _aggregate_day(date: str, slots: list[TimeSlot]) -> DailyAggregate:
    temperatures = tuple(s.temperature for s in slots if s.temperature is not None)
    rain_probabilities = tuple(
        s.rain_probability for s in slots if s.rain_probability is not None
    )
    humidities = tuple(s.humidity for s in slots if s.humidity is not None)
    wind_speeds = tuple(s.wind_speed for s in slots if s.wind_speed is not None)

    # TMN/TMX arrive on a single slot per day; the last report wins
    min_temperature = None
    max_temperature = None
    for slot in slots:
        if slot.min_temperature is not None:
            min_temperature = slot.min_temperature
        if slot.max_temperature is not None:
            max_temperature = slot.max_temperature

    return DailyAggregate(
        date=date,
        date_formatted=format_date(date),
        day_of_week=day_of_week(date),
        temperatures=temperatures,
        rain_probabilities=rain_probabilities,
        humidities=humidities,
        wind_speeds=wind_speeds,
        avg_temperature=_average(temperatures),
        # 0 floor: a day with no POP reports reads the same as 0%
        max_rain_probability=max((*rain_probabilities, 0)),
        avg_humidity=_average(humidities),
        max_wind_speed=max((*wind_speeds, 0.0)),
        min_temperature=min_temperature,
        max_temperature=max_temperature,
        slots=tuple(slots),
    )


def _average(values: tuple[float, ...]) -> float:
    if not values:
        return 0.0
    # one decimal, half rounded up
    return math.floor(sum(values) / len(values) * 10 + 0.5) / 10
