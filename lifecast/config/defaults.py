"""Major cities with canonical coordinates and pre-resolved forecast grid cells.

Each grid cell is what ``to_grid`` yields for the listed coordinates; the
table only saves the projection for well-known lookups.
"""

from lifecast.config.schema import CityConfig

DEFAULT_CITIES: list[CityConfig] = [
    CityConfig(name="Seoul", slug="seoul", latitude=37.5665, longitude=126.9780, grid_x=60, grid_y=127),
    CityConfig(name="Busan", slug="busan", latitude=35.1796, longitude=129.0756, grid_x=98, grid_y=76),
    CityConfig(name="Daegu", slug="daegu", latitude=35.8714, longitude=128.6014, grid_x=89, grid_y=91),
    CityConfig(name="Incheon", slug="incheon", latitude=37.4563, longitude=126.7052, grid_x=55, grid_y=124),
    CityConfig(name="Gwangju", slug="gwangju", latitude=35.1595, longitude=126.8526, grid_x=58, grid_y=74),
    CityConfig(name="Daejeon", slug="daejeon", latitude=36.3504, longitude=127.3845, grid_x=67, grid_y=100),
    CityConfig(name="Ulsan", slug="ulsan", latitude=35.5384, longitude=129.3114, grid_x=102, grid_y=84),
    CityConfig(name="Sejong", slug="sejong", latitude=36.4800, longitude=127.2890, grid_x=66, grid_y=103),
    CityConfig(name="Jeju", slug="jeju", latitude=33.4996, longitude=126.5312, grid_x=53, grid_y=38),
    CityConfig(name="Gangneung", slug="gangneung", latitude=37.7519, longitude=128.8761, grid_x=92, grid_y=132),
    CityConfig(name="Jeonju", slug="jeonju", latitude=35.8242, longitude=127.1480, grid_x=63, grid_y=89),
    CityConfig(name="Cheonan", slug="cheonan", latitude=36.8151, longitude=127.1139, grid_x=62, grid_y=110),
    CityConfig(name="Cheongju", slug="cheongju", latitude=36.6424, longitude=127.4890, grid_x=69, grid_y=107),
    CityConfig(name="Pohang", slug="pohang", latitude=36.0190, longitude=129.3435, grid_x=102, grid_y=94),
    CityConfig(name="Yeosu", slug="yeosu", latitude=34.7604, longitude=127.6622, grid_x=73, grid_y=66),
]


def find_city(name: str, cities: list[CityConfig] | None = None) -> CityConfig | None:
    """Look a city up by slug or display name, case-insensitively."""
    key = name.strip().lower()
    for city in cities if cities is not None else DEFAULT_CITIES:
        if key in (city.slug.lower(), city.name.lower()):
            return city
    return None
