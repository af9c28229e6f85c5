"""Tests for config loading, env overrides, and dotted-key lookup."""

from pathlib import Path

import pytest
import yaml

from lifecast.config.defaults import DEFAULT_CITIES, find_city
from lifecast.config.loader import SERVICE_KEY_ENV, get_config_value, load_config
from lifecast.config.schema import KMA_BASE_URL


@pytest.fixture(autouse=True)
def _no_service_key_env(monkeypatch):
    monkeypatch.delenv(SERVICE_KEY_ENV, raising=False)


class TestLoadConfig:
    def test_load_from_yaml(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.kma.service_key == "yaml-key"
        assert config.kma.max_retries == 1
        assert config.cache.freshness_minutes == 5

    def test_unset_sections_take_defaults(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert config.kma.base_url == KMA_BASE_URL
        assert config.kma.timeout == 30.0
        assert config.location.name == "Seoul"

    def test_default_cities_injected(self, config_yaml_path: Path):
        config = load_config(config_yaml_path)
        assert len(config.cities) == len(DEFAULT_CITIES)
        assert config.cities[0].slug == "seoul"

    def test_explicit_cities_not_overridden(self, tmp_path: Path):
        data = {
            "cities": [
                {
                    "name": "Test Town",
                    "slug": "test",
                    "latitude": 36.0,
                    "longitude": 127.0,
                    "grid_x": 62,
                    "grid_y": 95,
                }
            ]
        }
        path = tmp_path / "custom.yaml"
        with open(path, "w") as f:
            yaml.dump(data, f)
        config = load_config(path)
        assert len(config.cities) == 1
        assert config.cities[0].slug == "test"

    def test_empty_yaml_uses_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        config = load_config(path)
        assert config.cache.freshness_minutes == 10
        assert len(config.cities) == len(DEFAULT_CITIES)

    def test_no_path_uses_defaults(self):
        config = load_config()
        assert config.kma.service_key == ""
        assert config.location.latitude == 37.5665

    def test_fixtures_config(self, fixtures_dir: Path):
        config = load_config(fixtures_dir / "config_default.yaml")
        assert config.kma.service_key == "test-key"
        assert config.kma.max_retries == 2
        assert config.location.name == "Busan"

    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_env_overrides_service_key(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv(SERVICE_KEY_ENV, "env-key")
        assert load_config(config_yaml_path).kma.service_key == "env-key"

    def test_env_creates_kma_section(self, tmp_path: Path, monkeypatch):
        monkeypatch.setenv(SERVICE_KEY_ENV, "env-key")
        path = tmp_path / "bare.yaml"
        path.write_text("cache:\n  freshness_minutes: 3\n")
        config = load_config(path)
        assert config.kma.service_key == "env-key"
        assert config.cache.freshness_minutes == 3

    def test_empty_env_ignored(self, config_yaml_path: Path, monkeypatch):
        monkeypatch.setenv(SERVICE_KEY_ENV, "")
        assert load_config(config_yaml_path).kma.service_key == "yaml-key"


class TestGetConfigValue:
    def test_nested(self, default_config):
        assert get_config_value(default_config, "cache.freshness_minutes") == 10
        assert get_config_value(default_config, "kma.max_retries") == 3

    def test_list_index(self, default_config):
        assert get_config_value(default_config, "cities.1.slug") == "busan"

    def test_missing_key(self, default_config):
        with pytest.raises(KeyError, match="kma.nope"):
            get_config_value(default_config, "kma.nope")


class TestFindCity:
    def test_by_slug(self):
        assert find_city("busan").grid_x == 98

    def test_by_name_case_insensitive(self):
        city = find_city("  JEJU ")
        assert city is not None
        assert city.cell.y == 38

    def test_unknown(self):
        assert find_city("Atlantis") is None

    def test_custom_table(self, default_config):
        assert find_city("seoul", cities=[]) is None
        assert find_city("seoul", cities=default_config.cities).slug == "seoul"
