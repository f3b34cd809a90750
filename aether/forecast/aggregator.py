"""Derive display slices from a chronological forecast sequence."""

from collections.abc import Sequence
from datetime import date, tzinfo

from aether.display.timefmt import local_date
from aether.models.weather import ForecastEntry

HOURLY_LIMIT = 8
DAILY_LIMIT = 5


def hourly_slice(entries: Sequence[ForecastEntry]) -> tuple[ForecastEntry, ...]:
    """The first 8 samples, in feed order."""
    return tuple(entries[:HOURLY_LIMIT])


def daily_slice(
    entries: Sequence[ForecastEntry], tz: tzinfo | None = None
) -> tuple[ForecastEntry, ...]:
    """The first sample seen for each local calendar date, at most 5 dates.

    The kept sample is whichever one the feed lists first for that date, not
    a midday one.
    """
    seen: set[date] = set()
    daily: list[ForecastEntry] = []
    for entry in entries:
        day = local_date(entry.dt, tz)
        if day in seen:
            continue
        seen.add(day)
        daily.append(entry)
        if len(daily) == DAILY_LIMIT:
            break
    return tuple(daily)


class ForecastAggregator:
    """Read-only view over a forecast sequence. Slices are recomputed per call."""

    def __init__(self, entries: Sequence[ForecastEntry], tz: tzinfo | None = None):
        self.entries = entries
        self.tz = tz

    def hourly(self) -> tuple[ForecastEntry, ...]:
        return hourly_slice(self.entries)

    def daily(self) -> tuple[ForecastEntry, ...]:
        return daily_slice(self.entries, self.tz)
