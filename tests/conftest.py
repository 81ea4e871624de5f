# shared fixtures; nothing here touches the network

import copy
import json
from pathlib import Path

import pytest
import requests

from weather_app.models import ZipLocation
from weather_app.services.schemas import OpenMeteoForecast

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def forecast_payload() -> dict:
    # Open-Meteo response for New Braunfels, TX (trimmed hourly series)
    payload = json.loads((DATA_DIR / "open_meteo_forecast.json").read_text(encoding="utf-8"))
    return copy.deepcopy(payload)


@pytest.fixture
def new_braunfels() -> ZipLocation:
    return ZipLocation(
        city="New Braunfels",
        region="TX",
        zipcode="78130",
        latitude=29.7252,
        longitude=-98.0937,
    )


class FakeZipService:
    def __init__(self, location):
        self.location = location
        self.calls = []

    def lookup(self, zip_code):
        self.calls.append(zip_code)
        return self.location


class FakeWeatherService:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.calls = []

    def get_forecast(self, lat, lon):
        self.calls.append((lat, lon))
        if self.error is not None:
            raise self.error
        return OpenMeteoForecast.model_validate(self.payload)


class FakeResponse:
    def __init__(self, status_code=200, json_data=None, text=""):
        self.status_code = status_code
        self._json = json_data
        self.text = text

    def json(self):
        if self._json is None:
            raise ValueError("No JSON object could be decoded")
        return self._json

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


class FakeSession:
    """Stands in for ``requests.Session``; records every GET."""

    def __init__(self, response=None, error=None):
        self.headers = {}
        self.response = response
        self.error = error
        self.calls = []

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        if self.error is not None:
            raise self.error
        return self.response
