"""Error types raised by the services and mapped to HTTP responses by ``app.py``."""


class WeatherAppError(Exception):
    """Base class; ``status`` and ``public_message`` are what the caller sees."""

    status = 500
    public_message = "Internal server error"


class InvalidZipCodeError(WeatherAppError, ValueError):
    status = 400
    public_message = "Invalid zip code format. Must be 5 digits."


class LocationNotFoundError(WeatherAppError):
    status = 400
    public_message = "Zip code not found"


class WeatherServiceError(WeatherAppError):
    # transport failure, non-2xx status or a body that is not JSON
    public_message = "Failed to fetch weather data"


class WeatherSchemaError(WeatherAppError):
    # upstream answered, but not in the shape we expect
    public_message = "Invalid weather data received"
