"""CLI entry point: print an SMHI point forecast as a table."""

import argparse
import logging
import sys

import yaml
from pydantic import ValidationError

from smhi.config.loader import load_config, set_config_value
from smhi.config.schema import SmhiConfig
from smhi.errors import SmhiError
from smhi.ingest.smhi_client import SmhiClient
from smhi.models.forecast import Forecast
from smhi.reporting.formatters import format_forecast_table, format_parameter_catalog
from smhi.storage.forecast_file import load_forecast, save_forecast

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smhi",
        description="Show the SMHI 10 day point forecast for a coordinate",
    )
    parser.add_argument("-lon", "--lon", type=float, default=0.0, help="Longitude")
    parser.add_argument("-lat", "--lat", type=float, default=0.0, help="Latitude")
    parser.add_argument(
        "-file", "--file", default=None, help="Read data from file (ignores lon/lat)"
    )
    parser.add_argument(
        "-save", "--save", default=None, help="Also write the forecast JSON to this path"
    )
    parser.add_argument("--config", default=None, help="Config YAML path")
    parser.add_argument(
        "--set",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value, e.g. api.timeout=10",
    )
    parser.add_argument(
        "--params", action="store_true", help="List the forecast parameter codes and exit"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = _load_config(args)
    except (OSError, KeyError, ValueError, ValidationError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level.value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.params:
        print(format_parameter_catalog())
        return 0

    try:
        forecast = _read_forecast(config, args)
        if args.save:
            save_forecast(forecast, args.save)
    except SmhiError as e:
        print(e, file=sys.stderr)
        return 1

    print(format_forecast_table(forecast, time_format=config.display.time_format))
    return 0


def _load_config(args) -> SmhiConfig:
    config = load_config(args.config)
    for kv in args.set:
        if "=" not in kv:
            raise ValueError(f"use key=value format: {kv}")
        key, value = kv.split("=", 1)
        config = set_config_value(config, key.strip(), value.strip())
    return config


def _read_forecast(config: SmhiConfig, args) -> Forecast:
    if args.file:
        logger.info("Reading forecast from %s", args.file)
        return load_forecast(args.file)

    client = SmhiClient(
        base_url=config.api.base_url,
        user_agent=config.api.user_agent,
        timeout=config.api.timeout,
    )
    logger.info("Fetching forecast for lon=%f lat=%f", args.lon, args.lat)
    return client.get_forecast(args.lon, args.lat)


def run() -> None:
    sys.exit(main())
