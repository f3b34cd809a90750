"""Flatten OpenWeatherMap 2.5 JSON into typed models.

Required fields are passed through as-is (possibly None) so that pydantic
rejects incomplete payloads with a ValidationError.
"""

from aether.models.weather import CurrentConditions, ForecastEntry


def is_not_found(raw: dict) -> bool:
    """OWM reports unknown places with `cod` "404" (string or int)."""
    return str(raw.get("cod", "")) == "404"


def _conditions_fields(raw: dict) -> dict:
    main = raw.get("main") or {}
    wind = raw.get("wind") or {}
    weather = raw.get("weather") or [{}]
    if not isinstance(weather, list):
        raise ValueError("'weather' is not an array")
    weather = weather[0]
    fields = {
        "dt": raw.get("dt"),
        "temp": main.get("temp"),
        "feels_like": main.get("feels_like"),
        "temp_min": main.get("temp_min"),
        "temp_max": main.get("temp_max"),
        "humidity": main.get("humidity"),
        "pressure": main.get("pressure"),
        "sea_level": main.get("sea_level"),
        "grnd_level": main.get("grnd_level"),
        "clouds": (raw.get("clouds") or {}).get("all"),
        "wind": {
            "speed": wind.get("speed"),
            "deg": wind.get("deg", 0),
            "gust": wind.get("gust"),
        },
        "condition": weather.get("main"),
        "description": weather.get("description"),
    }
    if raw.get("visibility") is not None:
        fields["visibility"] = raw["visibility"]
    return fields


def parse_current(raw: dict) -> CurrentConditions:
    sys = raw.get("sys") or {}
    return CurrentConditions(
        **_conditions_fields(raw),
        sunrise=sys.get("sunrise"),
        sunset=sys.get("sunset"),
        place_name=raw.get("name"),
    )


def parse_forecast(raw: dict) -> tuple[ForecastEntry, ...]:
    items = raw.get("list")
    if not isinstance(items, list):
        raise ValueError("forecast payload has no 'list' array")
    return tuple(
        ForecastEntry(**_conditions_fields(item), pop=item.get("pop"))
        for item in items
    )
