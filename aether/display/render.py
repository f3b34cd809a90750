"""Text and JSON renderers for the view state."""

from datetime import tzinfo

from aether.display.panels import PanelView, build_selected_panel
from aether.display.timefmt import compass_direction, format_clock_time, format_day_label
from aether.display.units import (
    convert_temperature,
    format_speed,
    format_temperature,
    format_visibility,
    temperature_unit_label,
)
from aether.forecast.aggregator import ForecastAggregator
from aether.models.view import DisplayPreferences, ViewState
from aether.models.weather import ForecastEntry

RESET = "\033[0m"
PALETTES = {
    # (primary, muted)
    True: ("\033[97m", "\033[90m"),
    False: ("\033[30m", "\033[37m"),
}


class _Painter:
    def __init__(self, dark: bool, color: bool):
        self.primary, self.muted = PALETTES[dark] if color else ("", "")
        self.reset = RESET if color else ""

    def strong(self, text: str) -> str:
        return f"{self.primary}{text}{self.reset}"

    def dim(self, text: str) -> str:
        return f"{self.muted}{text}{self.reset}"


def render_text(state: ViewState, tz: tzinfo | None = None, color: bool = False) -> str:
    """Render the whole view the way the single-page app lays it out."""
    p = _Painter(state.preferences.dark, color)
    prefs = state.preferences

    if state.loading and state.report is None:
        return p.dim("LOADING...")
    if state.report is None:
        if state.error:
            return "\n".join([p.strong(state.error), p.dim("Search for a city with --city NAME")])
        return p.dim("No weather data")

    report = state.report
    cur = report.current
    f = prefs.fahrenheit
    lines = [
        p.strong(f"AETHER | {report.place_name}")
        + p.dim(f"  [{temperature_unit_label(f)}, {'dark' if prefs.dark else 'light'}]"),
    ]
    if state.error:
        lines.append(p.strong(f"! {state.error}"))
    lines += [
        "",
        p.strong(format_temperature(cur.temp, f)) + "  " + cur.description.upper(),
        p.dim(
            f"HIGH {format_temperature(cur.temp_max, f)}  "
            f"LOW {format_temperature(cur.temp_min, f)}  "
            f"FEELS {format_temperature(cur.feels_like, f)}"
        ),
        "",
        f"HUMIDITY {cur.humidity}%  WIND {format_speed(cur.wind.speed)} "
        f"{compass_direction(cur.wind.deg)}  PRESSURE {cur.pressure} hPa",
        f"VISIBILITY {format_visibility(cur.visibility)}  CLOUDS {cur.clouds}%  "
        f"SUNRISE {format_clock_time(cur.sunrise, tz)}  SUNSET {format_clock_time(cur.sunset, tz)}",
    ]

    aggregator = ForecastAggregator(report.forecast, tz)
    hourly = aggregator.hourly()
    if hourly:
        lines += ["", p.strong("HOURLY")]
        lines += [_forecast_line(e, format_clock_time(e.dt, tz), f) for e in hourly]
    daily = aggregator.daily()
    if daily:
        lines += ["", p.strong("5-DAY FORECAST")]
        lines += [_forecast_line(e, format_day_label(e.dt, tz, short=True), f) for e in daily]

    if state.panel is not None:
        panel = build_selected_panel(state.panel, cur, prefs, tz)
        lines += ["", *_panel_lines(panel, p)]
    return "\n".join(lines)


def _forecast_line(entry: ForecastEntry, label: str, fahrenheit: bool) -> str:
    return (
        f"  {label:<12} {format_temperature(entry.temp, fahrenheit):>5}  "
        f"{entry.humidity:>3}%  {format_speed(entry.wind.speed):>7}  {entry.description}"
    )


def _panel_lines(panel: PanelView, p: _Painter) -> list[str]:
    lines = [p.strong(f"== {panel.title} =="), p.strong(panel.main_value)]
    if panel.subtitle:
        lines.append(p.dim(panel.subtitle))
    width = max((len(label) for label, _ in panel.rows), default=0)
    lines += [f"  {label.ljust(width)}  {value}" for label, value in panel.rows]
    return lines


def _entry_dict(entry: ForecastEntry, prefs: DisplayPreferences, label: str) -> dict:
    return {
        "dt": entry.dt,
        "label": label,
        "temp": convert_temperature(entry.temp, prefs.fahrenheit),
        "humidity": entry.humidity,
        "wind_speed": entry.wind.speed,
        "description": entry.description,
    }


def state_to_dict(state: ViewState, tz: tzinfo | None = None) -> dict:
    """JSON-ready view: raw report plus display-unit values and derived slices."""
    prefs = state.preferences
    data: dict = {
        "loading": state.loading,
        "error": state.error,
        "preferences": {"fahrenheit": prefs.fahrenheit, "dark": prefs.dark},
        "search_text": state.search_text,
        "panel": None,
        "weather": None,
    }
    report = state.report
    if report is None:
        return data

    cur = report.current
    aggregator = ForecastAggregator(report.forecast, tz)
    data["weather"] = {
        "place_name": report.place_name,
        "unit": temperature_unit_label(prefs.fahrenheit),
        "temp": convert_temperature(cur.temp, prefs.fahrenheit),
        "feels_like": convert_temperature(cur.feels_like, prefs.fahrenheit),
        "temp_min": convert_temperature(cur.temp_min, prefs.fahrenheit),
        "temp_max": convert_temperature(cur.temp_max, prefs.fahrenheit),
        "description": cur.description,
        "current": cur.model_dump(),
        "hourly": [
            _entry_dict(e, prefs, format_clock_time(e.dt, tz)) for e in aggregator.hourly()
        ],
        "daily": [
            _entry_dict(e, prefs, format_day_label(e.dt, tz, short=True))
            for e in aggregator.daily()
        ],
    }
    if state.panel is not None:
        panel = build_selected_panel(state.panel, cur, prefs, tz)
        data["panel"] = {
            "kind": str(state.panel.kind),
            "title": panel.title,
            "main_value": panel.main_value,
            "subtitle": panel.subtitle,
            "rows": [list(row) for row in panel.rows],
        }
    return data
