import logging
import re
from typing import Optional

from ..config import TEMPERATURE_UNIT, UNIT_LABELS
from ..errors import InvalidZipCodeError, LocationNotFoundError
from ..models import DailyForecast, WeatherReport
from ..utils import (
    find_evening_forecast,
    format_location,
    is_before_sunset,
    local_tz,
    parse_instant,
)
from .open_meteo import OpenMeteoService
from .schemas import Daily
from .zip_lookup import ZipLookupService

log = logging.getLogger(__name__)

ZIP_CODE_RE = re.compile(r"^\d{5}$", re.ASCII)
DAILY_FORECAST_DAYS = 3


def validate_zip_code(zip_code: str) -> str:
    if not isinstance(zip_code, str) or not ZIP_CODE_RE.fullmatch(zip_code):
        raise InvalidZipCodeError(f"Invalid zip code: {zip_code!r}")
    return zip_code


def upcoming_days(daily: Daily, days: int = DAILY_FORECAST_DAYS) -> tuple:
    """High/low for the days after today (index 0), at most ``days`` of them."""
    rows = zip(daily.time, daily.temperature_2m_max, daily.temperature_2m_min)
    return tuple(
        DailyForecast(date=date, high_temp=high, low_temp=low)
        for date, high, low in list(rows)[1:days + 1]
    )


class WeatherReportService:
    """Zip code → location → Open-Meteo forecast → ``WeatherReport``."""

    def __init__(
        self,
        zip_service: Optional[ZipLookupService] = None,
        weather_service: Optional[OpenMeteoService] = None,
        unit: Optional[str] = None,
    ):
        self.zip_service = zip_service or ZipLookupService()
        self.weather_service = weather_service or OpenMeteoService()
        self.unit = unit or UNIT_LABELS.get(TEMPERATURE_UNIT, TEMPERATURE_UNIT)

    def get_report(self, zip_code: str) -> WeatherReport:
        validate_zip_code(zip_code)

        location = self.zip_service.lookup(zip_code)
        if location is None:
            raise LocationNotFoundError(f"Zip code {zip_code} not found")

        forecast = self.weather_service.get_forecast(location.latitude, location.longitude)

        # Open-Meteo reports naive local times; pin them to the location's offset
        tz = local_tz(forecast.utc_offset_seconds)
        now = parse_instant(forecast.current.time, tz)
        sunset_raw = forecast.daily.sunset[0]
        before_sunset = is_before_sunset(now, parse_instant(sunset_raw, tz))

        evening = None
        if before_sunset:
            # hourly times share the location's wall clock, so they are read as given
            evening = find_evening_forecast(
                forecast.hourly.time, forecast.hourly.temperature_2m, now
            )
            if evening is None:
                log.info("No 3 AM sample for the day after %s", now.isoformat())

        return WeatherReport(
            temperature=forecast.current.temperature_2m,
            humidity=forecast.current.relative_humidity_2m,
            location=format_location(location.city, location.region),
            zipcode=zip_code,
            unit=self.unit,
            sunset=sunset_raw,
            is_before_sunset=before_sunset,
            evening_forecast=evening,
            daily_forecast=upcoming_days(forecast.daily),
        )
