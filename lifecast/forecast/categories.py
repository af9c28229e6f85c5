"""KMA village forecast category codes and their value vocabularies."""

from enum import StrEnum


class Category(StrEnum):
    TEMPERATURE = "TMP"
    MIN_TEMPERATURE = "TMN"
    MAX_TEMPERATURE = "TMX"
    SKY = "SKY"
    PRECIPITATION_TYPE = "PTY"
    RAIN_PROBABILITY = "POP"
    RAINFALL = "PCP"
    HUMIDITY = "REH"
    SNOWFALL = "SNO"
    WIND_SPEED = "WSD"
    WIND_DIRECTION = "VEC"
    WAVE_HEIGHT = "WAV"


SKY_CLEAR = "1"
SKY_MOSTLY_CLOUDY = "3"
SKY_OVERCAST = "4"

SKY_LABELS = {
    SKY_CLEAR: "Clear",
    SKY_MOSTLY_CLOUDY: "Mostly cloudy",
    SKY_OVERCAST: "Overcast",
}
UNKNOWN_SKY = "Unknown"

PRECIPITATION_NONE = "0"

PRECIPITATION_LABELS = {
    PRECIPITATION_NONE: "None",
    "1": "Rain",
    "2": "Rain/snow",
    "3": "Snow",
    "4": "Shower",
    "5": "Drizzle",
    "6": "Drizzle/snow flurries",
    "7": "Snow flurries",
}

COMPASS_POINTS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def sky_label(code: str) -> str:
    return SKY_LABELS.get(code, UNKNOWN_SKY)


def precipitation_label(code: str) -> str:
    return PRECIPITATION_LABELS.get(code, PRECIPITATION_LABELS[PRECIPITATION_NONE])


def wind_direction(degree: float) -> str:
    """8-point compass label for a wind bearing in degrees."""
    # round half up, as the bearing sectors are centred on the points
    index = int(degree / 45 + 0.5) % len(COMPASS_POINTS)
    return COMPASS_POINTS[index]
