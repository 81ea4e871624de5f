import logging
from typing import Optional

import requests

from ..config import REQUEST_TIMEOUT, USER_AGENT, ZIPPOPOTAM_URL
from ..errors import WeatherServiceError
from ..models import ZipLocation

log = logging.getLogger(__name__)


class ZipLookupService:
    """Resolve a US ZIP → city, state and lat/lon using Zippopotam."""

    def __init__(
        self,
        base_url: str = ZIPPOPOTAM_URL,
        timeout: float = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def lookup(self, zip_code: str) -> Optional[ZipLocation]:
        """
        Return the first place Zippopotam lists for ``zip_code``, or None when
        the ZIP is unknown.
        """
        url = f"{self.base_url}/us/{zip_code}"
        log.info("Resolving zip %s", zip_code)
        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            raise WeatherServiceError(f"Zip lookup failed for {zip_code!r}: {exc}") from exc

        if resp.status_code == 404:
            return None
        if resp.status_code != 200:
            raise WeatherServiceError(f"Zip lookup returned HTTP {resp.status_code} for {zip_code!r}")

        try:
            places = resp.json().get("places") or []
        except ValueError as exc:
            raise WeatherServiceError(f"Invalid JSON from zip lookup for {zip_code!r}") from exc
        if not places:
            return None

        place = places[0]
        try:
            return ZipLocation(
                city=place["place name"],
                region=place["state abbreviation"],
                zipcode=zip_code,
                latitude=float(place["latitude"]),
                longitude=float(place["longitude"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise WeatherServiceError(f"Unexpected zip lookup payload for {zip_code!r}") from exc
