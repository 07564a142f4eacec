"""Weather symbol codes (Wsymb2) and their terminal glyphs."""

from dataclasses import dataclass

ZERO_WIDTH_SPACE = "\u200b"


@dataclass(frozen=True)
class WeatherSymbol:
    value: int = 0
    meaning: str = ""
    glyph: str = ""
    display_width: int = 0

    def fixed_width(self) -> str:
        """Glyph padded so that every symbol spans two terminal columns."""
        if self.display_width == 1:
            return self.glyph + " "
        return self.glyph + ZERO_WIDTH_SPACE


# Indexed by code; 0 is reserved for unknown weather
WEATHER_SYMBOLS: tuple[WeatherSymbol, ...] = (
    WeatherSymbol(0, "No weather", "?", 1),
    WeatherSymbol(1, "Clear sky", "\u2600", 1),
    WeatherSymbol(2, "Nearly clear sky", "\u26c5", 2),
    WeatherSymbol(3, "Variable cloudiness", "\u26c5", 2),
    WeatherSymbol(4, "Halfclear sky", "\u26c5", 2),
    WeatherSymbol(5, "Cloudy sky", "\u2601", 1),
    WeatherSymbol(6, "Overcast", "\u2601", 1),
    WeatherSymbol(7, "Fog", "\U0001f32b", 1),
    WeatherSymbol(8, "Light rain showers", "\U0001f326", 1),
    WeatherSymbol(9, "Moderate rain showers", "\U0001f326", 1),
    WeatherSymbol(10, "Heavy rain showers", "\U0001f327", 1),
    WeatherSymbol(11, "Thunderstorm", "\u26a1", 2),
    WeatherSymbol(12, "Light sleet showers", "\U0001f328", 1),
    WeatherSymbol(13, "Moderate sleet showers", "\U0001f328", 1),
    WeatherSymbol(14, "Heavy sleet showers", "\U0001f328", 1),
    WeatherSymbol(15, "Light snow showers", "\U0001f328", 1),
    WeatherSymbol(16, "Moderate snow showers", "\U0001f328", 1),
    WeatherSymbol(17, "Heavy snow showers", "\U0001f328", 1),
    WeatherSymbol(18, "Light rain", "\U0001f327", 1),
    WeatherSymbol(19, "Moderate rain", "\U0001f327", 1),
    WeatherSymbol(20, "Heavy rain", "\U0001f327", 1),
    WeatherSymbol(21, "Thunder", "\u26a1", 2),
    WeatherSymbol(22, "Light sleet", "\U0001f328", 1),
    WeatherSymbol(23, "Moderate sleet", "\U0001f328", 1),
    WeatherSymbol(24, "Heavy sleet", "\U0001f328", 1),
    WeatherSymbol(25, "Light snowfall", "\U0001f328", 1),
    WeatherSymbol(26, "Moderate snowfall", "\U0001f328", 1),
    WeatherSymbol(27, "Heavy snowfall", "\U0001f328", 1),
)

UNKNOWN_SYMBOL = WeatherSymbol()


def lookup_weather_symbol(code: int) -> WeatherSymbol:
    """Return the table entry for a code, or the zero-value symbol when out of range."""
    if 1 <= code < len(WEATHER_SYMBOLS):
        return WEATHER_SYMBOLS[code]
    return UNKNOWN_SYMBOL
