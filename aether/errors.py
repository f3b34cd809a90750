"""Error kinds raised by the weather client and location providers."""


class AetherError(Exception):
    """Base error. `user_message` is the fixed text shown to the user."""

    user_message = "Failed to fetch weather data"


class EmptyInput(AetherError):
    """Blank place name. Guarded by the controller, never shown."""

    user_message = ""


class NotFound(AetherError):
    user_message = "City not found"


class FetchFailed(AetherError):
    user_message = "Failed to fetch weather data"


class LocationDenied(AetherError):
    user_message = "Location access denied. Please search for a city."


class LocationPermissionDenied(LocationDenied):
    pass


class LocationUnavailable(LocationDenied):
    user_message = "Geolocation not supported. Please search for a city."
