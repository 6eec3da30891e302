"""
Error taxonomy for location resolution and weather fetches.

Every error carries a ``user_message`` that the dashboard shows in place
of the weather panels until the next successful fetch.
"""

from typing import Optional


class WeatherError(Exception):
    """Base class for failures surfaced to the dashboard user."""

    user_message = "An unexpected error occurred. Please try again."

    def __init__(self, message: Optional[str] = None):
        self.user_message = message or self.user_message
        super().__init__(self.user_message)


class EmptyInput(WeatherError):
    user_message = "Please enter a city name to search."


class LocationNotFound(WeatherError):
    user_message = "City not found. Please check the spelling and try again."


class InvalidCredentials(WeatherError):
    user_message = "Invalid API key. Please check your secrets configuration."


class ServerError(WeatherError):
    """Any HTTP error status other than 401 and 404."""

    def __init__(self, status: int):
        self.status = status
        super().__init__(f"Server error: {status}. Please try again later.")


class NetworkError(WeatherError):
    user_message = "Network error. Please check your internet connection."


class UnknownError(WeatherError):
    pass


class GeolocationUnavailable(WeatherError):
    user_message = "Unable to retrieve your location. Please try searching by city."


class GeolocationError(Exception):
    """Raised by a geolocation capability on denial or lookup failure."""
