"""Shared test fixtures."""

import json
from pathlib import Path

import pytest
import yaml

from lifecast.config.defaults import DEFAULT_CITIES
from lifecast.config.schema import LifecastConfig
from lifecast.grid.projection import ProjectionParams, build_params
from lifecast.models.forecast import StructuredForecast
from lifecast.tests.factories import make_day, make_forecast


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def seoul_response(fixtures_dir: Path) -> dict:
    with open(fixtures_dir / "kma_forecast_seoul.json") as f:
        return json.load(f)


@pytest.fixture
def seoul_items(seoul_response: dict) -> list[dict]:
    return seoul_response["response"]["body"]["items"]["item"]


@pytest.fixture
def default_config() -> LifecastConfig:
    """Return default LifecastConfig with default cities."""
    return LifecastConfig(cities=DEFAULT_CITIES)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "kma": {"service_key": "yaml-key", "max_retries": 1},
        "cache": {"freshness_minutes": 5},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path


@pytest.fixture(scope="session")
def params() -> ProjectionParams:
    return build_params()


@pytest.fixture
def mild_forecast() -> StructuredForecast:
    """Pleasant autumn afternoon: nothing should fire a penalty."""
    return make_forecast(
        daily=(make_day(max_rain_probability=10),),
        temperature=18.0,
        humidity=50,
        rain_probability=10,
        precipitation="None",
        precipitation_code="0",
        sky="Clear",
        sky_code="1",
        wind_speed=2.0,
    )
