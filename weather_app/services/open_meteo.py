import logging
from typing import Optional

import requests
from pydantic import ValidationError

from ..config import (
    FORECAST_DAYS,
    OPEN_METEO_URL,
    REQUEST_TIMEOUT,
    TEMPERATURE_UNIT,
    USER_AGENT,
)
from ..errors import WeatherSchemaError, WeatherServiceError
from .schemas import OpenMeteoForecast

log = logging.getLogger(__name__)


class OpenMeteoService:
    """Wraps the Open-Meteo forecast API (no API key required)."""

    CURRENT_FIELDS = "temperature_2m,relative_humidity_2m"
    HOURLY_FIELDS = "temperature_2m"
    DAILY_FIELDS = "sunset,temperature_2m_max,temperature_2m_min"

    def __init__(
        self,
        base_url: str = OPEN_METEO_URL,
        timeout: float = REQUEST_TIMEOUT,
        temperature_unit: str = TEMPERATURE_UNIT,
        forecast_days: int = FORECAST_DAYS,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.temperature_unit = temperature_unit
        self.forecast_days = forecast_days
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def _params(self, lat: float, lon: float) -> dict:
        return {
            "latitude": lat,
            "longitude": lon,
            "current": self.CURRENT_FIELDS,
            "hourly": self.HOURLY_FIELDS,
            "daily": self.DAILY_FIELDS,
            "temperature_unit": self.temperature_unit,
            # local times plus utc_offset_seconds for the location
            "timezone": "auto",
            "forecast_days": self.forecast_days,
        }

    def _fetch(self, lat: float, lon: float) -> dict:
        log.info("Fetching Open-Meteo forecast for %.4f, %.4f", lat, lon)
        try:
            resp = self.session.get(self.base_url, params=self._params(lat, lon), timeout=self.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            raise WeatherServiceError(f"Open-Meteo request failed for ({lat}, {lon}): {exc}") from exc

        try:
            return resp.json()
        except ValueError as exc:
            raise WeatherServiceError(f"Invalid JSON from Open-Meteo: {exc}") from exc

    def get_forecast(self, lat: float, lon: float) -> OpenMeteoForecast:
        """
        Fetch current conditions, the hourly temperature series and the daily
        sunset/high/low series, validated against ``OpenMeteoForecast``.
        """
        payload = self._fetch(lat, lon)
        try:
            return OpenMeteoForecast.model_validate(payload)
        except ValidationError as exc:
            raise WeatherSchemaError(f"Open-Meteo payload failed validation: {exc}") from exc
