"""Reference descriptions of the forecast parameters.

See https://opendata.smhi.se/apidocs/metfcst/parameters.html
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ParameterDescription:
    name: str
    level_type: str
    level: int
    unit: str
    description: str
    value_range: str


def _describe(
    name: str,
    level_type: str,
    level: int,
    unit: str,
    description: str,
    value_range: str,
) -> tuple[str, ParameterDescription]:
    return name, ParameterDescription(
        name=name,
        level_type=level_type,
        level=level,
        unit=unit,
        description=description,
        value_range=value_range,
    )


# Level types: "hmsl" is height above mean sea level, "hl" height above ground
PARAMETER_DESCRIPTIONS: dict[str, ParameterDescription] = dict([
    _describe("msl", "hmsl", 0, "hPa", "Air pressure", "Decimal number, one decimal"),
    _describe("t", "hl", 2, "C", "Air temperature", "Decimal number, one decimal"),
    _describe("vis", "hl", 2, "km", "Horizontal visibility", "Decimal number, one decimal"),
    _describe("wd", "hl", 10, "degree", "Wind direction", "Integer"),
    _describe("ws", "hl", 10, "m/s", "Wind speed", "Decimal number, one decimal"),
    _describe("r", "hl", 2, "%", "Relative humidity", "Integer, 0-100"),
    _describe("tstm", "hl", 0, "%", "Thunder probability", "Integer, 0-100"),
    _describe("tcc_mean", "hl", 0, "octas", "Mean value of total cloud cover", "Integer, 0-8"),
    _describe("lcc_mean", "hl", 0, "octas", "Mean value of low level cloud cover", "Integer, 0-8"),
    _describe(
        "mcc_mean", "hl", 0, "octas", "Mean value of medium level cloud cover", "Integer, 0-8"
    ),
    _describe("hcc_mean", "hl", 0, "octas", "Mean value of high level cloud cover", "Integer, 0-8"),
    _describe("gust", "hl", 10, "m/s", "Wind gust speed", "Decimal number, one decimal"),
    _describe(
        "pmin", "hl", 0, "mm/h", "Minimum precipitation intensity", "Decimal number, one decimal"
    ),
    _describe(
        "pmax", "hl", 0, "mm/h", "Maximum precipitation intensity", "Decimal number, one decimal"
    ),
    _describe(
        "spp", "hl", 0, "%", "Percent of precipitation in frozen form", "Integer, -9 or 0-100"
    ),
    _describe("pcat", "hl", 0, "category", "Precipitation category", "Integer, 0-6"),
    _describe(
        "pmean", "hl", 0, "mm/h", "Mean precipitation intensity", "Decimal number, one decimal"
    ),
    _describe(
        "pmedian", "hl", 0, "mm/h", "Median precipitation intensity", "Decimal number, one decimal"
    ),
    _describe("wsymb2", "hl", 0, "code", "Weather symbol", "Integer, 1-27"),
])


def describe_parameter(name: str) -> ParameterDescription | None:
    """Look up the reference description of a parameter code.

    Returns None for codes the catalog does not know about.
    """
    return PARAMETER_DESCRIPTIONS.get(name)
