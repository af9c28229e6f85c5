"""Lambert Conformal Conic projection between lat/lon and the KMA forecast grid.

The village forecast is published on a 5 km grid whose cells are addressed by
integer (x, y). The projection constants below are the ones KMA publishes for
that grid; ``build_params`` derives the cone constant, scale factor and origin
radius from them once, and the result is passed to ``to_grid``/``to_latlon``.
"""

import math
import sys
from dataclasses import dataclass

from lifecast.models.geo import GeoPoint, GridCell

EARTH_RADIUS_KM = 6371.00877
GRID_SPACING_KM = 5.0
STANDARD_PARALLEL_1 = 30.0
STANDARD_PARALLEL_2 = 60.0
ORIGIN_LON = 126.0
ORIGIN_LAT = 38.0
ORIGIN_X = 43
ORIGIN_Y = 136

DEGRAD = math.pi / 180.0
RADDEG = 180.0 / math.pi


@dataclass(frozen=True)
class ProjectionParams:
    re: float  # earth radius in grid units
    olon: float  # origin longitude, radians
    xo: int
    yo: int
    sn: float  # cone constant
    sf: float  # scale factor
    ro: float  # radius at the origin latitude, grid units


def build_params(
    earth_radius_km: float = EARTH_RADIUS_KM,
    grid_spacing_km: float = GRID_SPACING_KM,
    slat1: float = STANDARD_PARALLEL_1,
    slat2: float = STANDARD_PARALLEL_2,
    olon: float = ORIGIN_LON,
    olat: float = ORIGIN_LAT,
    xo: int = ORIGIN_X,
    yo: int = ORIGIN_Y,
) -> ProjectionParams:
    """Derive the projection constants for a grid definition (degrees, km)."""
    re = earth_radius_km / grid_spacing_km
    slat1_r = slat1 * DEGRAD
    slat2_r = slat2 * DEGRAD
    olat_r = olat * DEGRAD

    sn = math.tan(math.pi * 0.25 + slat2_r * 0.5) / math.tan(math.pi * 0.25 + slat1_r * 0.5)
    sn = math.log(math.cos(slat1_r) / math.cos(slat2_r)) / math.log(sn)
    sf = math.tan(math.pi * 0.25 + slat1_r * 0.5)
    sf = sf**sn * math.cos(slat1_r) / sn
    ro = math.tan(math.pi * 0.25 + olat_r * 0.5)
    ro = re * sf / ro**sn

    return ProjectionParams(
        re=re, olon=olon * DEGRAD, xo=xo, yo=yo, sn=sn, sf=sf, ro=ro
    )


def to_grid(params: ProjectionParams, lat: float, lon: float) -> GridCell:
    """Project a lat/lon (degrees) onto the nearest grid cell."""
    lat = max(-90.0, min(90.0, lat))
    # tan() reaches 0 at the south pole; floor it so the radius stays finite
    ra = max(math.tan(math.pi * 0.25 + lat * DEGRAD * 0.5), sys.float_info.min)
    ra = params.re * params.sf / ra**params.sn

    theta = lon * DEGRAD - params.olon
    if theta > math.pi:
        theta -= 2.0 * math.pi
    if theta < -math.pi:
        theta += 2.0 * math.pi
    theta *= params.sn

    x = math.floor(ra * math.sin(theta) + params.xo + 0.5)
    y = math.floor(params.ro - ra * math.cos(theta) + params.yo + 0.5)
    return GridCell(x=x, y=y)


def to_latlon(params: ProjectionParams, x: float, y: float) -> GeoPoint:
    """Inverse projection: grid cell (x, y) back to lat/lon in degrees."""
    xn = x - params.xo
    yn = params.ro - y + params.yo
    ra = math.hypot(xn, yn)

    if ra == 0.0:
        alat = math.inf
    else:
        alat = (params.re * params.sf / ra) ** (1.0 / params.sn)
    if params.sn <= 0.0:
        alat = -alat
    alat = 2.0 * math.atan(alat) - math.pi * 0.5

    if abs(xn) <= 0.0:
        theta = 0.0
    elif abs(yn) <= 0.0:
        theta = math.pi * 0.5
        if xn < 0.0:
            theta = -theta
    else:
        theta = math.atan2(xn, yn)

    alon = theta / params.sn + params.olon
    return GeoPoint(latitude=alat * RADDEG, longitude=alon * RADDEG)
