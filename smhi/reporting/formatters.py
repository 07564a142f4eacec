"""Plain text table formatters for forecasts and the parameter catalog."""

from datetime import tzinfo

from smhi.models.forecast import Forecast
from smhi.models.parameters import PARAMETER_DESCRIPTIONS

DEFAULT_TIME_FORMAT = "%a %H:%M"
CELL_PADDING = 2

FORECAST_HEADER = ["Time", "Weather", "Temperature", "Max precipitation", "Wind speed"]
CATALOG_HEADER = ["Name", "Description", "Unit", "Level", "Values"]


def tabulate(rows: list[list[str]], padding: int = CELL_PADDING) -> str:
    """Align cells into columns.

    Widths are counted in code points, so a two column glyph must be
    followed by a zero width character to line up with a one column glyph
    plus a space. The last cell of each row is never padded.
    """
    widths: list[int] = []
    for row in rows:
        for i, cell in enumerate(row[:-1]):
            if i == len(widths):
                widths.append(0)
            widths[i] = max(widths[i], len(cell))

    lines = []
    for row in rows:
        cells = [cell.ljust(widths[i] + padding) for i, cell in enumerate(row[:-1])]
        if row:
            cells.append(row[-1])
        lines.append("".join(cells))
    return "\n".join(lines)


def format_forecast_table(
    forecast: Forecast,
    time_format: str = DEFAULT_TIME_FORMAT,
    tz: tzinfo | None = None,
) -> str:
    """One row per time series item, times shown in local time (or tz)."""
    rows = [list(FORECAST_HEADER)]
    for item in forecast.time_series:
        symbol = item.weather_symbol()
        rows.append([
            item.valid_time.astimezone(tz).strftime(time_format),
            f"{symbol.fixed_width()} {symbol.meaning}",
            f"{item.temperature():.1f}°C",
            f"{item.max_precipitation():.1f} mm/h",
            f"{item.wind_speed():.1f} m/s",
        ])
    return tabulate(rows)


def format_parameter_catalog() -> str:
    rows = [list(CATALOG_HEADER)]
    for desc in PARAMETER_DESCRIPTIONS.values():
        rows.append([
            desc.name,
            desc.description,
            desc.unit,
            f"{desc.level_type} {desc.level}",
            desc.value_range,
        ])
    return tabulate(rows)
