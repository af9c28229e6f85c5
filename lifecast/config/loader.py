"""YAML config loader with environment overrides and dotted-key lookup."""

import os
from pathlib import Path
from typing import Any

import yaml

from lifecast.config.defaults import DEFAULT_CITIES
from lifecast.config.schema import LifecastConfig

SERVICE_KEY_ENV = "KMA_SERVICE_KEY"


def load_config(path: str | Path | None = None) -> LifecastConfig:
    """Load and validate config from a YAML file.

    With no path, every section takes its defaults. If no cities are
    specified, injects DEFAULT_CITIES. ``KMA_SERVICE_KEY`` in the
    environment overrides ``kma.service_key``.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        with open(Path(path)) as f:
            raw = yaml.safe_load(f) or {}

    if "cities" not in raw or not raw["cities"]:
        raw["cities"] = [c.model_dump() for c in DEFAULT_CITIES]

    service_key = os.environ.get(SERVICE_KEY_ENV)
    if service_key:
        raw.setdefault("kma", {})["service_key"] = service_key

    return LifecastConfig(**raw)


def get_config_value(config: LifecastConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'cache.freshness_minutes'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj
