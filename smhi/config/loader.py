"""YAML config loader with runtime overrides by dotted key."""

import json
from pathlib import Path
from typing import Any

import yaml

from smhi.config.schema import SmhiConfig


def load_config(path: str | Path | None = None) -> SmhiConfig:
    """Load and validate config from a YAML file.

    With no path, or an empty file, every setting takes its default.
    """
    if path is None:
        return SmhiConfig()
    path = Path(path)
    with open(path) as f:
        raw = yaml.safe_load(f) or {}
    return SmhiConfig(**raw)


def set_config_value(config: SmhiConfig, dotted_key: str, value: Any) -> SmhiConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new SmhiConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        if part not in target:
            raise KeyError(f"Config key not found: {dotted_key}")
        target = target[part]
    if parts[-1] not in target:
        raise KeyError(f"Config key not found: {dotted_key}")
    # Attempt type coercion for common cases
    old_value = target[parts[-1]]
    if isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    target[parts[-1]] = value
    return SmhiConfig(**data)
