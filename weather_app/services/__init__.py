"""
services – one class per upstream API (Zippopotam, Open-Meteo) and the
``WeatherReportService`` that stitches their answers into a report.
"""

from .zip_lookup import ZipLookupService        # noqa: F401
from .open_meteo import OpenMeteoService        # noqa: F401
from .report     import WeatherReportService    # noqa: F401

__all__ = [
    "ZipLookupService",
    "OpenMeteoService",
    "WeatherReportService",
]
