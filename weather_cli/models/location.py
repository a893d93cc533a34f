"""Location model for provider queries."""

from pydantic import BaseModel


class Location(BaseModel):
    """City and country code as typed by the user."""

    city: str
    country_code: str

    @property
    def query(self) -> str:
        """Value for the provider's ``q`` parameter."""
        return f"{self.city},{self.country_code}"
