"""CLI entry point for the weather life index service."""

import argparse
import json
import logging

import httpx
from pydantic import BaseModel

from lifecast.config.loader import get_config_value, load_config
from lifecast.config.schema import LifecastConfig
from lifecast.forecast.aggregator import ParseError
from lifecast.grid.projection import ProjectionParams, build_params, to_grid, to_latlon
from lifecast.ingest.kma_client import KmaApiError
from lifecast.pipeline.lookup_pipeline import LookupPipeline, UnknownCityError
from lifecast.reporting.formatters import (
    format_indices_json,
    format_indices_text,
    format_share_summary,
)

FORMATTERS = {
    "text": format_indices_text,
    "json": format_indices_json,
    "share": format_share_summary,
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="lifecast",
        description="Weather life indices from the KMA village forecast",
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # grid / latlon
    grid_p = sub.add_parser("grid", help="Convert lat/lon to a forecast grid cell")
    grid_p.add_argument("lat", type=float)
    grid_p.add_argument("lon", type=float)
    latlon_p = sub.add_parser("latlon", help="Convert a grid cell to lat/lon")
    latlon_p.add_argument("x", type=int)
    latlon_p.add_argument("y", type=int)

    # cities
    sub.add_parser("cities", help="List known cities and their grid cells")

    # lookup
    lookup_p = sub.add_parser("lookup", help="Fetch a forecast and score life indices")
    lookup_p.add_argument("--lat", type=float, help="Latitude")
    lookup_p.add_argument("--lon", type=float, help="Longitude")
    lookup_p.add_argument("--name", default="", help="Location label")
    lookup_p.add_argument("--city", help="Known city name or slug")
    lookup_p.add_argument(
        "--format", choices=sorted(FORMATTERS), default="text", help="Output format"
    )

    # config show / get
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    get_p = config_sub.add_parser("get", help="Read one value by dotted key")
    get_p.add_argument("key", help="Dotted key, e.g. cache.freshness_minutes")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    params = build_params()

    if args.command == "grid":
        return _cmd_grid(params, args)
    elif args.command == "latlon":
        return _cmd_latlon(params, args)
    elif args.command == "cities":
        return _cmd_cities(config)
    elif args.command == "lookup":
        return _cmd_lookup(config, params, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_grid(params: ProjectionParams, args) -> int:
    cell = to_grid(params, args.lat, args.lon)
    print(f"nx={cell.x} ny={cell.y}")
    return 0


def _cmd_latlon(params: ProjectionParams, args) -> int:
    point = to_latlon(params, args.x, args.y)
    print(f"lat={point.latitude:.4f} lon={point.longitude:.4f}")
    return 0


def _cmd_cities(config: LifecastConfig) -> int:
    for city in config.cities:
        print(
            f"{city.slug:<12} {city.name:<12} "
            f"({city.latitude:.4f}, {city.longitude:.4f}) -> "
            f"nx={city.grid_x} ny={city.grid_y}"
        )
    return 0


def _cmd_lookup(config: LifecastConfig, params: ProjectionParams, args) -> int:
    if (args.lat is None) != (args.lon is None):
        print("Error: --lat and --lon must be given together")
        return 1

    pipeline = LookupPipeline(config, params=params)
    try:
        if args.city:
            result = pipeline.run_city(args.city)
        elif args.lat is not None:
            result = pipeline.run(args.lat, args.lon, args.name)
        else:
            result = pipeline.run_default()
    except UnknownCityError as e:
        print(f"Error: {e}")
        return 1
    except (KmaApiError, ParseError, httpx.HTTPError) as e:
        print(f"Error: failed to fetch the forecast: {e}")
        return 1

    print(FORMATTERS[args.format](result))
    return 0


def _cmd_config(config: LifecastConfig, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    elif args.config_command == "get":
        try:
            value = get_config_value(config, args.key)
        except (KeyError, IndexError, ValueError) as e:
            print(f"Error: {e}")
            return 1
        if isinstance(value, BaseModel):
            print(value.model_dump_json(indent=2))
        elif isinstance(value, list):
            print(json.dumps(
                [v.model_dump() if isinstance(v, BaseModel) else v for v in value],
                indent=2, ensure_ascii=False,
            ))
        else:
            print(value)
        return 0
    print("Use: config show | config get KEY")
    return 1
