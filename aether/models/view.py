"""View state models consumed by the presentation layer."""

from dataclasses import dataclass
from enum import StrEnum

from aether.models.weather import ForecastEntry, WeatherReport


class PanelKind(StrEnum):
    HUMIDITY = "humidity"
    WIND = "wind"
    PRESSURE = "pressure"
    VISIBILITY = "visibility"
    CLOUDS = "clouds"
    SUNRISE = "sunrise"
    SUNSET = "sunset"
    FORECAST_DAY = "forecast-day"


@dataclass(frozen=True)
class DisplayPreferences:
    fahrenheit: bool = False
    dark: bool = True


@dataclass(frozen=True)
class PanelSelection:
    kind: PanelKind
    entry: ForecastEntry | None = None

    def __post_init__(self):
        if self.kind == PanelKind.FORECAST_DAY and self.entry is None:
            raise ValueError("forecast-day panel requires a forecast entry")
        if self.kind != PanelKind.FORECAST_DAY and self.entry is not None:
            raise ValueError(f"{self.kind} panel does not take a forecast entry")


@dataclass(frozen=True)
class ViewState:
    report: WeatherReport | None = None
    loading: bool = False
    error: str | None = None
    preferences: DisplayPreferences = DisplayPreferences()
    panel: PanelSelection | None = None
    search_text: str = ""
