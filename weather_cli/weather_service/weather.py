"""Current-weather lookup against the OpenWeatherMap API."""

import httpx
from pydantic import ValidationError

from weather_cli.logging_config import logger
from weather_cli.models.location import Location
from weather_cli.models.weather import WeatherRecord

WEATHER_API_URL = "http://api.openweathermap.org/data/2.5/weather"
UNITS = "metric"


class FetchError(Exception):
    """Base exception for weather lookup failures."""
    pass


class NetworkError(FetchError):
    """Raised when the request cannot be sent or answered."""
    pass


class DecodeError(FetchError):
    """Raised when the response body is not a usable weather payload."""
    pass


def _decode_failure_detail(payload, exc: Exception) -> str:
    """Describe why a payload could not be decoded.

    Provider error bodies such as ``{"cod": "404", "message": "city not found"}``
    are described by their message.
    """
    if isinstance(payload, dict) and payload.get("message"):
        return str(payload["message"])
    if isinstance(exc, KeyError):
        return f"missing field {exc}"
    return str(exc)


def fetch_weather(city: str, country_code: str, api_key: str) -> WeatherRecord:
    """Fetch the current weather for a city.

    A single attempt is made, with httpx's default timeout.

    Args:
        city: City name as typed by the user.
        country_code: Country code as typed by the user.
        api_key: OpenWeatherMap API key.

    Returns:
        The decoded WeatherRecord.

    Raises:
        NetworkError: On transport failures (DNS, connect, timeout).
        DecodeError: If the body is not JSON or does not match the schema,
            including provider error responses.
    """
    location = Location(city=city, country_code=country_code)
    logger.info("WEATHER_REQUEST", location=location.query)
    try:
        response = httpx.get(
            WEATHER_API_URL,
            params={"q": location.query, "appid": api_key, "units": UNITS},
        )
    except httpx.RequestError as exc:
        logger.warning(
            "WEATHER_REQUEST_FAILED", location=location.query, error=str(exc)
        )
        raise NetworkError(f"error sending request: {exc}") from exc

    logger.info(
        "WEATHER_RESPONSE", location=location.query, status=response.status_code
    )

    payload = None
    try:
        payload = response.json()
        return WeatherRecord.from_api_response(payload)
    except (ValueError, KeyError, TypeError, ValidationError) as exc:
        logger.warning(
            "WEATHER_BAD_PAYLOAD",
            location=location.query,
            status=response.status_code,
            error=str(exc),
        )
        raise DecodeError(
            f"error decoding response body: {_decode_failure_detail(payload, exc)}"
        ) from exc
