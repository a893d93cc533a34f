"""API key lookup from the environment and an optional .env file."""

import os

from dotenv import load_dotenv
from rich.text import Text

from weather_cli.console import error_console
from weather_cli.logging_config import logger

API_KEY_NAME = "API_KEY"
API_KEY_SIGNUP_URL = "https://openweathermap.org/appid"


class CredentialError(Exception):
    """Base exception for credential lookup failures."""
    pass


class MissingCredentialError(CredentialError):
    """Raised when the API key is not configured."""
    pass


def load_api_key(env_file: str | os.PathLike = ".env") -> str:
    """Return the weather provider API key.

    Variables from ``env_file`` are loaded first without overriding the ones
    already present in the environment. A missing file is ignored.

    Args:
        env_file: Path of the dotenv file to read.

    Returns:
        The non-empty API key.

    Raises:
        MissingCredentialError: If the key is unset or empty.
    """
    load_dotenv(env_file)
    if api_key := os.getenv(API_KEY_NAME):
        return api_key

    logger.warning("API_KEY_MISSING", variable=API_KEY_NAME)
    error_console.print(
        Text(
            f"ENVIRONMENT VARIABLE NOT FOUND: {API_KEY_NAME} is not set in the environment or .env file. "
            f"Visit {API_KEY_SIGNUP_URL} to get an API key.",
            style="red",
        )
    )
    raise MissingCredentialError(f"{API_KEY_NAME} is not set")
