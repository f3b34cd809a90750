"""Pydantic v2 configuration schema with strict validation."""

from pydantic import BaseModel, Field

OWM_BASE_URL = "https://api.openweathermap.org/data/2.5"


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api_key: str = ""
    base_url: str = OWM_BASE_URL
    timeout: float = Field(default=10.0, gt=0.0)


class LocationConfig(BaseModel):
    """Coordinates handed out by the configured device-location provider."""

    model_config = {"extra": "forbid"}

    enabled: bool = False
    allowed: bool = True
    latitude: float = Field(default=0.0, ge=-90.0, le=90.0)
    longitude: float = Field(default=0.0, ge=-180.0, le=180.0)


class DisplayConfig(BaseModel):
    model_config = {"extra": "forbid"}

    fahrenheit: bool = False
    dark: bool = True
    color: bool = True


class DashboardConfig(BaseModel):
    model_config = {"extra": "forbid"}

    host: str = "127.0.0.1"
    port: int = Field(default=8777, ge=1, le=65535)


class AetherConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    location: LocationConfig = LocationConfig()
    display: DisplayConfig = DisplayConfig()
    dashboard: DashboardConfig = DashboardConfig()
