"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

from lifecast.models.geo import GeoPoint, GridCell

KMA_BASE_URL = "https://apis.data.go.kr/1360000/VilageFcstInfoService_2.0"


class CityConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str
    slug: str
    latitude: float = Field(ge=-90.0, le=90.0)
    longitude: float = Field(ge=-180.0, le=180.0)
    grid_x: int
    grid_y: int

    @property
    def point(self) -> GeoPoint:
        return GeoPoint(self.latitude, self.longitude)

    @property
    def cell(self) -> GridCell:
        return GridCell(self.grid_x, self.grid_y)


class KmaConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = KMA_BASE_URL
    service_key: str = ""
    timeout: float = Field(default=30.0, gt=0.0)
    max_retries: int = Field(default=3, ge=0)
    retry_base_delay: float = Field(default=2.0, ge=0.0)
    num_of_rows: int = Field(default=1000, ge=1, le=1000)


class CacheConfig(BaseModel):
    model_config = {"extra": "forbid"}

    freshness_minutes: int = Field(default=10, ge=0)


class LocationConfig(BaseModel):
    model_config = {"extra": "forbid"}

    name: str = "Seoul"
    latitude: float = Field(default=37.5665, ge=-90.0, le=90.0)
    longitude: float = Field(default=126.9780, ge=-180.0, le=180.0)


class LifecastConfig(BaseModel):
    model_config = {"extra": "forbid"}

    kma: KmaConfig = KmaConfig()
    cache: CacheConfig = CacheConfig()
    location: LocationConfig = LocationConfig()
    cities: list[CityConfig] = []
