"""Tests for the pydantic config schema."""

import pytest
from pydantic import ValidationError

from lifecast.config.defaults import DEFAULT_CITIES
from lifecast.config.schema import CityConfig, KmaConfig, LifecastConfig
from lifecast.models.geo import GeoPoint, GridCell


class TestSchema:
    def test_defaults(self):
        config = LifecastConfig()
        assert config.kma.num_of_rows == 1000
        assert config.cache.freshness_minutes == 10
        assert config.cities == []

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            LifecastConfig(unknown=1)

    def test_nested_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            KmaConfig(api_key="typo")

    def test_negative_retries_rejected(self):
        with pytest.raises(ValidationError):
            KmaConfig(max_retries=-1)

    def test_too_many_rows_rejected(self):
        with pytest.raises(ValidationError):
            KmaConfig(num_of_rows=5000)

    def test_latitude_bounds(self):
        with pytest.raises(ValidationError):
            CityConfig(name="X", slug="x", latitude=91.0, longitude=0.0, grid_x=1, grid_y=1)


class TestCityConfig:
    def test_point_and_cell(self):
        seoul = DEFAULT_CITIES[0]
        assert seoul.point == GeoPoint(37.5665, 126.9780)
        assert seoul.cell == GridCell(60, 127)
        assert str(seoul.cell) == "(60, 127)"

    def test_slugs_unique(self):
        slugs = [c.slug for c in DEFAULT_CITIES]
        assert len(slugs) == len(set(slugs)) == 15
