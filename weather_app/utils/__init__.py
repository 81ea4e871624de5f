"""
utils – side-effect free helpers used by the report service.

The time helpers drive the sunset comparison and the evening forecast;
``format_location`` builds the display name for a place.
"""

from .formatting import format_location   # noqa: F401
from .time_utils import (                  # noqa: F401
    find_evening_forecast,
    is_before_sunset,
    local_tz,
    parse_instant,
)

__all__ = [
    "format_location",
    "find_evening_forecast",
    "is_before_sunset",
    "local_tz",
    "parse_instant",
]
