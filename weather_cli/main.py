"""Interactive entry point: prompt, fetch, print, repeat."""

from rich.text import Text

from weather_cli.console import error_console
from weather_cli.credentials.api_key import CredentialError, load_api_key
from weather_cli.logging_config import logger
from weather_cli.presentation.formatter import format_and_print
from weather_cli.prompts.prompts import (
    read_city_name,
    read_continue_choice,
    read_country_code,
)
from weather_cli.weather_service.weather import FetchError, fetch_weather


def run(api_key: str) -> None:
    """Run queries until the user declines another one.

    Args:
        api_key: OpenWeatherMap API key used for every query.
    """
    while True:
        city = read_city_name()
        country_code = read_country_code()
        try:
            record = fetch_weather(city, country_code, api_key)
        except FetchError as exc:
            error_console.print(Text(f"Error: {exc}"))
        else:
            format_and_print(record)

        if not read_continue_choice():
            break


def main() -> None:
    """Console script entry point."""
    try:
        api_key = load_api_key()
    except CredentialError:
        return

    try:
        run(api_key)
    except (EOFError, KeyboardInterrupt):
        logger.info("SESSION_INTERRUPTED")
        error_console.print()


if __name__ == "__main__":
    main()
