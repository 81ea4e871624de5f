import os

from dotenv import load_dotenv

load_dotenv()

# ----------------------------------------------------------------------
# Upstream services
# ----------------------------------------------------------------------
OPEN_METEO_URL = os.getenv("OPEN_METEO_URL", "https://api.open-meteo.com/v1/forecast")
ZIPPOPOTAM_URL = os.getenv("ZIPPOPOTAM_URL", "http://api.zippopotam.us")
USER_AGENT = os.getenv("USER_AGENT", "weather-app/0.1.0")
REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))

# Today plus the three days shown in the daily forecast
FORECAST_DAYS = int(os.getenv("FORECAST_DAYS", "4"))
TEMPERATURE_UNIT = os.getenv("TEMPERATURE_UNIT", "fahrenheit")
UNIT_LABELS = {"fahrenheit": "°F", "celsius": "°C"}

# ----------------------------------------------------------------------
# Web server / logging
# ----------------------------------------------------------------------
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3000"))
DEBUG = os.getenv("FLASK_DEBUG", "0") == "1"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
