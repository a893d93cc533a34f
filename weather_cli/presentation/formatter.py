"""Color and emoji rendering of weather records."""

import math
from decimal import Decimal

from rich.text import Text

from weather_cli.console import console
from weather_cli.models.weather import WeatherRecord

VALUE_STYLE = "bold green"
CITY_STYLE = "bold bright_white"

# Upper bound (exclusive), style, emoji. Temperatures at or above the last
# bound fall through to HOT_BAND.
TEMPERATURE_BANDS = [
    (0, "cyan", "🫢"),
    (10, "blue", "🥶"),
    (20, "bright_green", "😊"),
    (30, "yellow", "🌞"),
]
HOT_BAND = ("red", "🔥")

DESCRIPTION_STYLES = {
    "clear sky": ("bright_yellow", "🌄"),
    "few clouds": ("bright_blue", "🌤️"),
    "overcast clouds": ("bright_blue", "🌤️"),
    "scattered clouds": ("bright_blue", "🌥️"),
    "broken clouds": ("bright_blue", "🌫️"),
    "shower rain": ("bright_cyan", "🌧️"),
    "light rain": ("bright_cyan", "🌧️"),
    "rain": ("bright_cyan", "🌧️"),
    "light snow": ("bright_cyan", "🌨️"),
    "snow": ("bright_cyan", "🌨️"),
    "thunderstorm": ("bright_cyan", "⛈️"),
    "mist": ("dim", "🌫️"),
}


def format_number(value: float) -> str:
    """Shortest round-trip digits of a reading in fixed-point notation.

    No exponent is ever used and a trailing ``.0`` is dropped, so ``1013.0``
    renders as ``1013``, ``1e-07`` as ``0.0000001`` and ``-0.0`` as ``-0``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    digits = format(Decimal(repr(value)), "f")
    if "." in digits:
        digits = digits.rstrip("0").rstrip(".")
    return digits


def temperature_text(temperature: float) -> Text:
    """Render a Celsius temperature with its band color and emoji."""
    style, emoji = HOT_BAND
    for upper_bound, band_style, band_emoji in TEMPERATURE_BANDS:
        if temperature < upper_bound:
            style, emoji = band_style, band_emoji
            break
    return Text(f"{format_number(temperature)}°C {emoji}", style=style)


def description_text(description: str) -> Text:
    """Render a weather description; unknown ones are left unstyled."""
    if description not in DESCRIPTION_STYLES:
        return Text(description)
    style, emoji = DESCRIPTION_STYLES[description]
    return Text(f"{description} {emoji}", style=style)


def _reading(label: str, value: float, unit: str) -> Text:
    """Build one ``> Label: value unit`` line with the value highlighted.

    Args:
        label: Reading name shown before the colon.
        value: Numeric reading.
        unit: Suffix printed after the value, including any leading space.

    Returns:
        The assembled line.
    """
    return Text.assemble(
        f"> {label}: ", (format_number(value), VALUE_STYLE), unit
    )


def format_and_print(record: WeatherRecord) -> None:
    """Print the report block for one query."""
    console.print()
    console.print()
    console.print(Text(record.city_name.upper(), style=CITY_STYLE))
    console.print()
    console.print(Text.assemble("> Weather: ", description_text(record.description)))
    console.print(
        Text.assemble("> Temperature: ", temperature_text(record.temperature_celsius))
    )
    console.print(_reading("Pressure", record.pressure_hpa, " hPa"))
    console.print(_reading("Humidity", record.humidity_percent, "%"))
    console.print(_reading("Wind speed", record.wind_speed_mps, " m/s"))
    console.print()
    console.print()
