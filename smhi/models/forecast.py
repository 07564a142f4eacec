"""Forecast data models for the SMHI point forecast (pmp3g) API.

See https://opendata.smhi.se/apidocs/metfcst/get-forecast.html
"""

from datetime import UTC, datetime
from typing import Annotated, TypeAlias

from pydantic import AfterValidator, BaseModel, Field, ValidationError

from smhi.errors import ParseError
from smhi.models.symbols import WeatherSymbol, lookup_weather_symbol

# Parameter names as they appear in the API payload
TEMPERATURE = "t"
MAX_PRECIPITATION = "pmax"
WIND_SPEED = "ws"
WEATHER_SYMBOL = "Wsymb2"

Point: TypeAlias = tuple[float, float]  # (longitude, latitude)

# Strict: no string-to-number or number-to-datetime coercion, no NaN/Infinity
_WIRE = {
    "extra": "ignore",
    "frozen": True,
    "populate_by_name": True,
    "strict": True,
    "allow_inf_nan": False,
}


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


# Naive timestamps in a document are read as UTC
Timestamp: TypeAlias = Annotated[datetime, AfterValidator(_assume_utc)]


class Parameter(BaseModel):
    model_config = _WIRE

    name: str
    level_type: str = Field(default="", alias="levelType")
    level: int = 0
    unit: str = ""
    values: list[float] = Field(min_length=1)


class TimeSeriesItem(BaseModel):
    """Forecast values valid at one point in time."""

    model_config = _WIRE

    valid_time: Timestamp = Field(alias="validTime")
    parameters: list[Parameter] = []

    def find_param(self, name: str) -> Parameter | None:
        """First parameter with the given name, or None when absent."""
        for p in self.parameters:
            if p.name == name:
                return p
        return None

    def number_param(self, name: str) -> float:
        """First value of the named parameter; 0.0 when absent."""
        p = self.find_param(name)
        if p is None:
            return 0.0
        return p.values[0]

    def integer_param(self, name: str) -> int:
        return int(self.number_param(name))

    def temperature(self) -> float:
        return self.number_param(TEMPERATURE)

    def max_precipitation(self) -> float:
        return self.number_param(MAX_PRECIPITATION)

    def wind_speed(self) -> float:
        return self.number_param(WIND_SPEED)

    def weather_symbol(self) -> WeatherSymbol:
        return lookup_weather_symbol(self.integer_param(WEATHER_SYMBOL))


class Geometry(BaseModel):
    model_config = _WIRE

    type: str = ""
    coordinates: list[Point] = []


class Forecast(BaseModel):
    """One API response snapshot: metadata plus an ordered time series."""

    model_config = _WIRE

    approved_time: Timestamp = Field(alias="approvedTime")
    reference_time: Timestamp = Field(alias="referenceTime")
    geometry: Geometry = Geometry()
    time_series: list[TimeSeriesItem] = Field(default=[], alias="timeSeries")

    @classmethod
    def from_json(cls, data: str | bytes) -> "Forecast":
        return parse_forecast(data)

    def to_json(self, indent: int | None = None) -> str:
        """Serialize using the API's field names."""
        return self.model_dump_json(by_alias=True, indent=indent)


def parse_forecast(data: str | bytes) -> Forecast:
    """Parse a forecast JSON document.

    Raises ParseError if the document is not JSON or does not have the
    forecast shape.
    """
    try:
        return Forecast.model_validate_json(data)
    except ValidationError as e:
        raise ParseError(f"invalid forecast document: {e}") from e
