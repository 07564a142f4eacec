"""Tests for the parameter catalog."""

import pytest

from smhi.models.parameters import (
    PARAMETER_DESCRIPTIONS,
    ParameterDescription,
    describe_parameter,
)


class TestParameterCatalog:
    def test_keyed_by_name(self):
        for name, desc in PARAMETER_DESCRIPTIONS.items():
            assert desc.name == name

    def test_known_codes(self):
        assert set(PARAMETER_DESCRIPTIONS) == {
            "msl", "t", "vis", "wd", "ws", "r", "tstm",
            "tcc_mean", "lcc_mean", "mcc_mean", "hcc_mean",
            "gust", "pmin", "pmax", "spp", "pcat", "pmean", "pmedian",
            "wsymb2",
        }

    def test_temperature(self):
        desc = describe_parameter("t")
        assert desc == ParameterDescription(
            name="t",
            level_type="hl",
            level=2,
            unit="C",
            description="Air temperature",
            value_range="Decimal number, one decimal",
        )

    def test_air_pressure_level_type(self):
        desc = describe_parameter("msl")
        assert desc is not None
        assert desc.level_type == "hmsl"
        assert desc.unit == "hPa"

    def test_wind_at_ten_metres(self):
        assert describe_parameter("ws").level == 10
        assert describe_parameter("gust").level == 10

    def test_unknown_returns_none(self):
        assert describe_parameter("nonexistent") is None

    def test_lookup_is_case_sensitive(self):
        assert describe_parameter("wsymb2") is not None
        assert describe_parameter("Wsymb2") is None

    def test_frozen(self):
        with pytest.raises(AttributeError):
            describe_parameter("t").unit = "F"  # type: ignore[union-attr]
