"""
weather_app – current conditions, tonight's 3 AM temperature and the next
three days of highs/lows for a US zip code.

The Flask server in ``app.py`` and the CLI in ``weather_app.main`` both go
through ``WeatherReportService``; the pure time and formatting helpers are
exported here too so tests and scripts can reach them directly:

    >>> from weather_app import format_location
    >>> format_location("Coeur d'Alene", "ID")
    "Coeur d'Alene, ID"
"""

__all__ = [
    "VERSION",
    "ZipLookupService",
    "OpenMeteoService",
    "WeatherReportService",
    "is_before_sunset",
    "find_evening_forecast",
    "format_location",
]

# mirrors [project].version in pyproject.toml
VERSION = "0.1.0"

from .services import (  # noqa: F401, E402
    ZipLookupService,
    OpenMeteoService,
    WeatherReportService,
)
from .utils import is_before_sunset, find_evening_forecast, format_location  # noqa: F401, E402
