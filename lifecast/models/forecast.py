"""KMA village forecast data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastRecord:
    date: str  # YYYYMMDD
    time: str  # HHMM
    category: str
    value: str


@dataclass(frozen=True)
class TimeSlot:
    """All categories reported for one (date, time) pair.

    Category fields stay None when the batch did not report them.
    """

    date: str = ""
    time: str = ""
    date_time: str = ""
    temperature: float | None = None
    min_temperature: float | None = None
    max_temperature: float | None = None
    sky: str | None = None
    sky_code: str | None = None
    precipitation: str | None = None
    precipitation_code: str | None = None
    rain_probability: int | None = None
    rainfall: str | None = None
    humidity: int | None = None
    snowfall: str | None = None
    wind_speed: float | None = None
    wind_direction: str | None = None
    wind_degree: int | None = None
    wave_height: float | None = None

    @property
    def is_precipitating(self) -> bool:
        return self.precipitation_code is not None and self.precipitation_code != "0"


@dataclass(frozen=True)
class DailyAggregate:
    date: str
    date_formatted: str
    day_of_week: str
    temperatures: tuple[float, ...]
    rain_probabilities: tuple[int, ...]
    humidities: tuple[int, ...]
    wind_speeds: tuple[float, ...]
    avg_temperature: float
    max_rain_probability: int
    avg_humidity: float
    max_wind_speed: float
    min_temperature: float | None = None
    max_temperature: float | None = None
    slots: tuple[TimeSlot, ...] = ()


@dataclass(frozen=True)
class StructuredForecast:
    current: TimeSlot
    hourly: tuple[TimeSlot, ...]
    daily: tuple[DailyAggregate, ...]
