"""Weather payload models. Temperatures are always stored in Celsius."""

from pydantic import BaseModel, Field

from aether.models.common import Location


class Wind(BaseModel):
    model_config = {"frozen": True}

    speed: float  # m/s
    deg: float = 0.0
    gust: float | None = None


class Conditions(BaseModel):
    """Fields shared by the current snapshot and forecast samples."""

    model_config = {"frozen": True}

    dt: int  # epoch seconds
    temp: float
    feels_like: float
    temp_min: float
    temp_max: float
    humidity: int = Field(ge=0, le=100)
    pressure: int  # hPa
    sea_level: int | None = None
    grnd_level: int | None = None
    visibility: int = 10000  # meters
    clouds: int = Field(ge=0, le=100)
    wind: Wind
    condition: str  # weather group, e.g. "Clouds"
    description: str


class CurrentConditions(Conditions):
    sunrise: int
    sunset: int
    place_name: str


class ForecastEntry(Conditions):
    pop: float | None = None  # probability of precipitation, 0-1


class WeatherReport(BaseModel):
    """Current conditions and forecast for one location, fetched as a pair."""

    model_config = {"frozen": True}

    location: Location
    place_name: str
    current: CurrentConditions
    forecast: tuple[ForecastEntry, ...]
