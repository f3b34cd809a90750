"""Shared test fixtures: OpenWeatherMap payload builders and reports."""

from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

import pytest
import yaml

from aether.ingest.payloads import parse_current, parse_forecast
from aether.models.weather import WeatherReport

BASE_DT = 1780272000  # 2026-06-01 00:00 UTC, a Monday
THREE_HOURS = 3 * 3600


def _forecast_item(dt: int, temp: float = 20.0, gust: float | None = None) -> dict:
    item = {
        "dt": dt,
        "main": {
            "temp": temp,
            "feels_like": temp - 1,
            "temp_min": temp - 2,
            "temp_max": temp + 2,
            "pressure": 1012,
            "sea_level": 1012,
            "grnd_level": 1001,
            "humidity": 55,
        },
        "weather": [{"id": 800, "main": "Clear", "description": "clear sky", "icon": "01d"}],
        "clouds": {"all": 5},
        "wind": {"speed": 3.6, "deg": 200},
        "visibility": 10000,
        "pop": 0.1,
        "dt_txt": datetime.fromtimestamp(dt, UTC).strftime("%Y-%m-%d %H:%M:%S"),
    }
    if gust is not None:
        item["wind"]["gust"] = gust
    return item


@pytest.fixture
def current_payload() -> Callable[..., dict]:
    """Build an OWM /weather response. Defaults describe Toronto."""

    def build(name: str = "Toronto", temp: float = 21.4, **overrides) -> dict:
        payload = {
            "coord": {"lon": -79.38, "lat": 43.65},
            "weather": [
                {"id": 803, "main": "Clouds", "description": "broken clouds", "icon": "04d"}
            ],
            "base": "stations",
            "main": {
                "temp": temp,
                "feels_like": temp - 0.6,
                "temp_min": temp - 2.1,
                "temp_max": temp + 1.9,
                "pressure": 1015,
                "humidity": 64,
                "sea_level": 1015,
                "grnd_level": 1004,
            },
            "visibility": 9000,
            "wind": {"speed": 4.63, "deg": 250, "gust": 8.2},
            "clouds": {"all": 75},
            "dt": BASE_DT + 15 * 3600,
            "sys": {"country": "CA", "sunrise": BASE_DT + 9 * 3600 + 36 * 60, "sunset": BASE_DT + 24 * 3600 + 58 * 60},
            "timezone": -14400,
            "id": 6167865,
            "name": name,
            "cod": 200,
        }
        payload.update(overrides)
        return payload

    return build


@pytest.fixture
def forecast_payload() -> Callable[..., dict]:
    """Build an OWM /forecast response with `count` samples every 3 hours."""

    def build(start: int = BASE_DT, count: int = 40, temp: float = 20.0) -> dict:
        return {
            "cod": "200",
            "message": 0,
            "cnt": count,
            "list": [
                _forecast_item(start + i * THREE_HOURS, temp=temp + i * 0.5)
                for i in range(count)
            ],
            "city": {"id": 6167865, "name": "Toronto", "country": "CA"},
        }

    return build


@pytest.fixture
def make_report(current_payload, forecast_payload) -> Callable[..., WeatherReport]:
    def build(name: str = "Toronto", temp: float = 21.4, count: int = 40) -> WeatherReport:
        current = parse_current(current_payload(name=name, temp=temp))
        return WeatherReport(
            location=name,
            place_name=current.place_name,
            current=current,
            forecast=parse_forecast(forecast_payload(count=count)),
        )

    return build


@pytest.fixture
def config_yaml_path(tmp_path: Path) -> Path:
    """Write a minimal valid config YAML and return its path."""
    data = {
        "api": {"api_key": "file-key", "base_url": "https://test-owm.example.com"},
        "location": {"enabled": True, "latitude": 43.65, "longitude": -79.38},
        "display": {"fahrenheit": False, "dark": True, "color": False},
    }
    path = tmp_path / "test_config.yaml"
    with open(path, "w") as f:
        yaml.dump(data, f)
    return path
