# value objects passed between the services and the web layer

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class Location:
    city: str
    region: str


@dataclass(frozen=True)
class ZipLocation(Location):
    # what the geocoding lookup resolves a zip code to
    zipcode: str
    latitude: float
    longitude: float


@dataclass(frozen=True)
class ForecastSample:
    temperature: float
    time: str  # upstream timestamp, echoed unchanged

    def to_dict(self) -> dict:
        return {"temperature": self.temperature, "time": self.time}


@dataclass(frozen=True)
class DailyForecast:
    date: str
    high_temp: Optional[float]
    low_temp: Optional[float]

    def to_dict(self) -> dict:
        return {"date": self.date, "highTemp": self.high_temp, "lowTemp": self.low_temp}


@dataclass(frozen=True)
class WeatherReport:
    temperature: float
    humidity: float
    location: str
    zipcode: str
    unit: str
    sunset: str
    is_before_sunset: bool
    evening_forecast: Optional[ForecastSample]
    daily_forecast: Tuple[DailyForecast, ...] = ()

    def to_dict(self) -> dict:
        """JSON body returned by ``GET /api/weather/<zipcode>``."""
        return {
            "temperature": self.temperature,
            "humidity": self.humidity,
            "location": self.location,
            "zipcode": self.zipcode,
            "unit": self.unit,
            "sunset": self.sunset,
            "isBeforeSunset": self.is_before_sunset,
            "eveningForecast": (
                self.evening_forecast.to_dict() if self.evening_forecast else None
            ),
            "dailyForecast": [day.to_dict() for day in self.daily_forecast],
        }
