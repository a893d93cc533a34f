import io

import pytest
from rich.console import Console

from weather_cli.models.weather import WeatherRecord
from weather_cli.presentation import formatter
from weather_cli.presentation.formatter import (
    description_text,
    format_and_print,
    format_number,
    temperature_text,
)

LISBON_PAYLOAD = {
    "weather": [{"description": "clear sky"}],
    "main": {"temp": 22.5, "pressure": 1013, "humidity": 60},
    "wind": {"speed": 3.4},
    "name": "lisbon",
}


class RecordingConsole:
    def __init__(self):
        self.printed = []

    def print(self, *objects, **kwargs):
        self.printed.extend(objects)


@pytest.mark.parametrize(
    "value, expected",
    [
        (1013.0, "1013"),
        (1013, "1013"),
        (22.5, "22.5"),
        (-3.0, "-3"),
        (3.4, "3.4"),
        (1e-7, "0.0000001"),
        (1e16, "10000000000000000"),
        (-0.0, "-0"),
    ],
)
def test_format_number(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "temperature, style, emoji",
    [
        (-12.3, "cyan", "🫢"),
        (-0.01, "cyan", "🫢"),
        (0, "blue", "🥶"),
        (9.99, "blue", "🥶"),
        (10, "bright_green", "😊"),
        (19.5, "bright_green", "😊"),
        (20, "yellow", "🌞"),
        (29.99, "yellow", "🌞"),
        (30, "red", "🔥"),
        (41.7, "red", "🔥"),
    ],
)
def test_temperature_text(temperature, style, emoji):
    text = temperature_text(temperature)
    assert text.style == style
    assert text.plain == f"{format_number(temperature)}°C {emoji}"


@pytest.mark.parametrize(
    "description, style, emoji",
    [
        ("clear sky", "bright_yellow", "🌄"),
        ("few clouds", "bright_blue", "🌤️"),
        ("overcast clouds", "bright_blue", "🌤️"),
        ("scattered clouds", "bright_blue", "🌥️"),
        ("broken clouds", "bright_blue", "🌫️"),
        ("shower rain", "bright_cyan", "🌧️"),
        ("light rain", "bright_cyan", "🌧️"),
        ("rain", "bright_cyan", "🌧️"),
        ("light snow", "bright_cyan", "🌨️"),
        ("snow", "bright_cyan", "🌨️"),
        ("thunderstorm", "bright_cyan", "⛈️"),
        ("mist", "dim", "🌫️"),
    ],
)
def test_description_text(description, style, emoji):
    text = description_text(description)
    assert text.style == style
    assert text.plain == f"{description} {emoji}"


@pytest.mark.parametrize("description", ["Clear sky", "CLEAR SKY", "haze", "moderate rain"])
def test_unknown_description_is_unstyled(description):
    text = description_text(description)
    assert text.style == ""
    assert text.plain == description


def test_format_and_print_styles(monkeypatch):
    console = RecordingConsole()
    monkeypatch.setattr(formatter, "console", console)

    format_and_print(WeatherRecord.from_api_response(LISBON_PAYLOAD))

    heading, weather, temperature, pressure, humidity, wind = console.printed
    assert heading.plain == "LISBON"
    assert heading.style == "bold bright_white"
    assert weather.plain == "> Weather: clear sky 🌄"
    assert [span.style for span in weather.spans] == ["bright_yellow"]
    assert temperature.plain == "> Temperature: 22.5°C 🌞"
    assert [span.style for span in temperature.spans] == ["yellow"]
    assert pressure.plain == "> Pressure: 1013 hPa"
    assert humidity.plain == "> Humidity: 60%"
    assert wind.plain == "> Wind speed: 3.4 m/s"
    for line in (pressure, humidity, wind):
        assert [span.style for span in line.spans] == ["bold green"]


def test_format_and_print_layout(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(
        formatter,
        "console",
        Console(file=buffer, color_system=None, highlight=False, soft_wrap=True),
    )

    format_and_print(WeatherRecord.from_api_response(LISBON_PAYLOAD))

    out = buffer.getvalue()
    assert out == (
        "\n\nLISBON\n\n"
        "> Weather: clear sky 🌄\n"
        "> Temperature: 22.5°C 🌞\n"
        "> Pressure: 1013 hPa\n"
        "> Humidity: 60%\n"
        "> Wind speed: 3.4 m/s\n"
        "\n\n"
    )
