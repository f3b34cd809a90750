"""OpenWeatherMap client returning current conditions and forecast as one pair."""

import logging

import httpx

from aether.config.schema import ApiConfig
from aether.errors import EmptyInput, FetchFailed, NotFound
from aether.ingest.payloads import is_not_found, parse_current, parse_forecast
from aether.models.common import Coordinates, Location
from aether.models.weather import WeatherReport

logger = logging.getLogger(__name__)

UNITS = "metric"


class WeatherClient:
    """Fetches the current-conditions and forecast endpoints for a location.

    Either both requests succeed and a `WeatherReport` is returned, or the
    call raises `NotFound` / `FetchFailed`; partial results are never
    returned. Pass `http` to share a client; otherwise one is opened per
    fetch.
    """

    def __init__(self, config: ApiConfig, http: httpx.AsyncClient | None = None):
        self.config = config
        self.http = http

    async def fetch_by_coordinates(self, lat: float, lon: float) -> WeatherReport:
        return await self._fetch(Coordinates(lat, lon), {"lat": lat, "lon": lon})

    async def fetch_by_place_name(self, name: str) -> WeatherReport:
        if not name.strip():
            raise EmptyInput("place name is blank")
        return await self._fetch(name, {"q": name.strip()})

    async def _fetch(self, location: Location, params: dict) -> WeatherReport:
        params = {**params, "units": UNITS, "appid": self.config.api_key}
        if self.http is not None:
            return await self._fetch_pair(self.http, location, params)
        async with httpx.AsyncClient(timeout=self.config.timeout) as http:
            return await self._fetch_pair(http, location, params)

    async def _fetch_pair(
        self, http: httpx.AsyncClient, location: Location, params: dict
    ) -> WeatherReport:
        current_raw = await self._get_json(http, "weather", params, location)
        if is_not_found(current_raw):
            logger.info("Place not found: %s", location)
            raise NotFound(f"place not found: {location}")
        forecast_raw = await self._get_json(http, "forecast", params, location)

        try:
            current = parse_current(current_raw)
            forecast = parse_forecast(forecast_raw)
        except (ValueError, TypeError, AttributeError, LookupError) as e:
            logger.error("Malformed weather payload for %s: %s", location, e)
            raise FetchFailed(f"malformed payload for {location}") from e

        return WeatherReport(
            location=location,
            place_name=current.place_name,
            current=current,
            forecast=forecast,
        )

    async def _get_json(
        self, http: httpx.AsyncClient, endpoint: str, params: dict, location: Location
    ) -> dict:
        url = f"{self.config.base_url}/{endpoint}"
        try:
            resp = await http.get(url, params=params, timeout=self.config.timeout)
        except httpx.RequestError as e:
            logger.error("Weather request failed for %s (%s): %s", location, endpoint, e)
            raise FetchFailed(f"{endpoint} request failed") from e

        if resp.status_code == 404 and endpoint == "weather":
            return {"cod": "404"}
        if resp.is_error:
            logger.error(
                "Weather API %s returned %d for %s", endpoint, resp.status_code, location
            )
            raise FetchFailed(f"{endpoint} returned {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            logger.error("Weather API %s returned invalid JSON: %s", endpoint, e)
            raise FetchFailed(f"{endpoint} returned invalid JSON") from e
        if not isinstance(data, dict):
            raise FetchFailed(f"{endpoint} returned {type(data).__name__}, expected object")
        return data
