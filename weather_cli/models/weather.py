"""Weather record decoded from the current-weather payload."""

from pydantic import BaseModel, Field, StrictFloat, StrictStr


class Condition(BaseModel):
    """One entry of the provider's ``weather`` list."""

    description: StrictStr


class WeatherRecord(BaseModel):
    """Current weather for a single query."""

    city_name: StrictStr
    conditions: list[Condition] = Field(min_length=1)
    temperature_celsius: StrictFloat
    pressure_hpa: StrictFloat
    humidity_percent: StrictFloat
    wind_speed_mps: StrictFloat

    @property
    def description(self) -> str:
        """Description of the first reported condition."""
        return self.conditions[0].description

    @classmethod
    def from_api_response(cls, api_data: dict) -> "WeatherRecord":
        """Create a WeatherRecord from the external API payload.

        Args:
            api_data: Decoded JSON body of the current-weather endpoint.

        Returns:
            A populated WeatherRecord.

        Raises:
            KeyError: If a required section or field is missing.
            TypeError: If the payload is not shaped like a JSON object.
            pydantic.ValidationError: If values have the wrong type or the
                conditions list is empty.
        """
        main = api_data["main"]
        return cls(
            city_name=api_data["name"],
            conditions=api_data["weather"],
            temperature_celsius=main["temp"],
            pressure_hpa=main["pressure"],
            humidity_percent=main["humidity"],
            wind_speed_mps=api_data["wind"]["speed"],
        )
