"""Load and save forecasts as JSON files in the API's wire format."""

import logging
from pathlib import Path

from smhi.errors import FileError
from smhi.models.forecast import Forecast, parse_forecast

logger = logging.getLogger(__name__)


def load_forecast(path: str | Path) -> Forecast:
    """Read a forecast previously saved (or downloaded) as JSON.

    Raises FileError if the file cannot be read and ParseError if it does
    not hold a forecast document.
    """
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise FileError(f"cannot read {path}: {e}", path=str(path)) from e
    forecast = parse_forecast(data)
    logger.debug("Loaded %d time series items from %s", len(forecast.time_series), path)
    return forecast


def save_forecast(forecast: Forecast, path: str | Path) -> Path:
    """Write a forecast as JSON. Returns the path written."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(forecast.to_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise FileError(f"cannot write {path}: {e}", path=str(path)) from e
    logger.info("Saved forecast to %s", path)
    return path
