"""Clock, date and compass helpers.

All functions take epoch seconds. `tz=None` renders in the viewer's local
time zone.
"""

from datetime import date, datetime, tzinfo

from aether.display.units import round_half_away

DIRECTIONS = ("N", "NE", "E", "SE", "S", "SW", "W", "NW")


def _to_datetime(epoch: int, tz: tzinfo | None) -> datetime:
    if tz is None:
        return datetime.fromtimestamp(epoch).astimezone()
    return datetime.fromtimestamp(epoch, tz)


def local_date(epoch: int, tz: tzinfo | None = None) -> date:
    return _to_datetime(epoch, tz).date()


def format_clock_time(epoch: int, tz: tzinfo | None = None) -> str:
    """24-hour HH:MM."""
    return _to_datetime(epoch, tz).strftime("%H:%M")


def format_day_label(epoch: int, tz: tzinfo | None = None, short: bool = False) -> str:
    """'Monday, June 2', or 'Mon, Jun 2' for forecast tiles."""
    dt = _to_datetime(epoch, tz)
    fmt = "%a, %b" if short else "%A, %B"
    return f"{dt.strftime(fmt)} {dt.day}"


def compass_direction(degrees: float) -> str:
    """Map a bearing to one of eight 45° sectors centred on N, NE, ... NW.

    Bearings outside [0, 360) are normalised first. Sector midpoints round
    away from zero, so 22.5 is NE and 22.4 is N.
    """
    normalized = degrees % 360
    return DIRECTIONS[round_half_away(normalized / 45) % 8]


def day_length_hours(sunrise: int, sunset: int) -> int:
    return round_half_away((sunset - sunrise) / 3600)
