"""Detail panel contents for each measurement category and forecast days."""

from dataclasses import dataclass, field
from datetime import tzinfo

from aether.display.timefmt import (
    compass_direction,
    day_length_hours,
    format_clock_time,
    format_day_label,
)
from aether.display.units import format_speed, format_temperature, format_visibility
from aether.models.view import DisplayPreferences, PanelKind, PanelSelection
from aether.models.weather import CurrentConditions, ForecastEntry


@dataclass(frozen=True)
class PanelView:
    title: str
    main_value: str
    subtitle: str = ""
    rows: list[tuple[str, str]] = field(default_factory=list)


def dew_point(temp: float, humidity: int) -> float:
    """Rough dew point approximation: T - (100 - RH) / 5."""
    return temp - (100 - humidity) / 5


def comfort_level(humidity: int) -> str:
    if humidity > 60:
        return "High"
    if humidity > 30:
        return "Normal"
    return "Low"


def visibility_clarity(meters: int) -> str:
    if meters > 8000:
        return "Excellent"
    if meters > 5000:
        return "Good"
    return "Moderate"


def _hpa(value: int | None) -> str:
    return f"{value} hPa" if value is not None else "N/A"


def build_panel(
    kind: PanelKind,
    current: CurrentConditions,
    prefs: DisplayPreferences,
    tz: tzinfo | None = None,
) -> PanelView:
    f = prefs.fahrenheit
    if kind == PanelKind.HUMIDITY:
        return PanelView(
            "HUMIDITY",
            f"{current.humidity}%",
            rows=[
                ("Current Level", f"{current.humidity}%"),
                ("Dew Point", format_temperature(dew_point(current.temp, current.humidity), f)),
                ("Comfort Level", comfort_level(current.humidity)),
            ],
        )
    if kind == PanelKind.WIND:
        wind = current.wind
        return PanelView(
            "WIND",
            format_speed(wind.speed),
            rows=[
                ("Speed", format_speed(wind.speed)),
                ("Direction", f"{compass_direction(wind.deg)} ({wind.deg:g}°)"),
                ("Gust", format_speed(wind.gust) if wind.gust is not None else "N/A"),
            ],
        )
    if kind == PanelKind.PRESSURE:
        return PanelView(
            "PRESSURE",
            _hpa(current.pressure),
            rows=[
                ("Atmospheric Pressure", _hpa(current.pressure)),
                ("Sea Level", _hpa(current.sea_level)),
                ("Ground Level", _hpa(current.grnd_level)),
            ],
        )
    if kind == PanelKind.VISIBILITY:
        return PanelView(
            "VISIBILITY",
            format_visibility(current.visibility),
            rows=[
                ("Distance", format_visibility(current.visibility)),
                ("Clarity", visibility_clarity(current.visibility)),
            ],
        )
    if kind == PanelKind.CLOUDS:
        return PanelView(
            "CLOUD COVERAGE",
            f"{current.clouds}%",
            rows=[
                ("Coverage", f"{current.clouds}%"),
                ("Type", current.condition),
                ("Description", current.description),
            ],
        )
    if kind in (PanelKind.SUNRISE, PanelKind.SUNSET):
        ts = current.sunrise if kind == PanelKind.SUNRISE else current.sunset
        length = day_length_hours(current.sunrise, current.sunset)
        return PanelView(
            kind.upper(),
            format_clock_time(ts, tz),
            rows=[
                ("Time", format_clock_time(ts, tz)),
                ("Day Length", f"{length} hours"),
            ],
        )
    raise ValueError(f"{kind} panel needs a forecast entry")


def build_forecast_day_panel(
    entry: ForecastEntry, prefs: DisplayPreferences, tz: tzinfo | None = None
) -> PanelView:
    f = prefs.fahrenheit
    rows = [
        ("FEELS LIKE", format_temperature(entry.feels_like, f)),
        ("HUMIDITY", f"{entry.humidity}%"),
        ("WIND SPEED", format_speed(entry.wind.speed)),
        ("DIRECTION", f"{compass_direction(entry.wind.deg)} ({entry.wind.deg:g}°)"),
        ("PRESSURE", _hpa(entry.pressure)),
        ("CLOUDS", f"{entry.clouds}%"),
        ("MIN TEMP", format_temperature(entry.temp_min, f)),
        ("MAX TEMP", format_temperature(entry.temp_max, f)),
    ]
    if entry.wind.gust is not None:
        rows.append(("WIND GUST", format_speed(entry.wind.gust)))
    return PanelView(
        format_day_label(entry.dt, tz),
        format_temperature(entry.temp, f),
        subtitle=entry.description.upper(),
        rows=rows,
    )


def build_selected_panel(
    selection: PanelSelection,
    current: CurrentConditions,
    prefs: DisplayPreferences,
    tz: tzinfo | None = None,
) -> PanelView:
    if selection.kind == PanelKind.FORECAST_DAY:
        return build_forecast_day_panel(selection.entry, prefs, tz)
    return build_panel(selection.kind, current, prefs, tz)
