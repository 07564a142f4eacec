"""Shared test fixtures."""

from pathlib import Path

import pytest
import yaml

from smhi.models.forecast import Forecast, parse_forecast

FIXTURE_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return FIXTURE_DIR


@pytest.fixture
def forecast_json() -> str:
    """Raw forecast document for Stockholm, 12 hourly items."""
    return (FIXTURE_DIR / "forecast_stockholm.json").read_text(encoding="utf-8")


@pytest.fixture
def forecast(forecast_json: str) -> Forecast:
    return parse_forecast(forecast_json)


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"base_url": "https://test-smhi.example.com", "timeout": 2.5},
        "display": {"time_format": "%H:%M"},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
