"""Blocking prompts for the interactive session."""

from rich.text import Text

from weather_cli.console import console

CITY_PROMPT = "Enter city name: "
COUNTRY_CODE_PROMPT = "Enter country code: "
CONTINUE_PROMPT = "Do you want to get weather info for another city? (y/n) "


def _read_non_empty(prompt: str) -> str:
    """Prompt repeatedly until a non-blank line is entered.

    Args:
        prompt: Text shown before each read.

    Returns:
        The entered line with surrounding whitespace removed.
    """
    value = ""
    while not value:
        value = console.input(Text(prompt, style="white")).strip()
    return value


def read_city_name() -> str:
    """Prompt until a non-blank city name is entered."""
    return _read_non_empty(CITY_PROMPT)


def read_country_code() -> str:
    """Prompt until a non-blank country code is entered."""
    return _read_non_empty(COUNTRY_CODE_PROMPT)


def read_continue_choice() -> bool:
    """Ask once whether to run another query.

    Returns:
        True only for an exact ``y`` answer.
    """
    return console.input(CONTINUE_PROMPT).strip() == "y"
