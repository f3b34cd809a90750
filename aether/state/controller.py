"""View state controller: owns fetched data, flags, preferences and panels."""

import logging
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from dataclasses import replace

from aether.errors import AetherError, FetchFailed, LocationDenied
from aether.ingest.geolocation import LocationProvider
from aether.ingest.weather_client import WeatherClient
from aether.models.view import DisplayPreferences, PanelKind, PanelSelection, ViewState
from aether.models.weather import WeatherReport

logger = logging.getLogger(__name__)


class ScrollLock:
    """Host-side background scroll suppression while a panel is open."""

    def __init__(self):
        self.suppressed = False

    def suppress(self) -> None:
        self.suppressed = True

    def restore(self) -> None:
        self.suppressed = False


class ViewStateController:
    """Mediates between the weather client and the presentation layer.

    Every fetch is numbered when it starts; only the most recently started
    fetch may commit its report or error. Errors never propagate out of
    the controller: they become the fixed user-facing message in `state.error`.
    A failed fetch keeps the previously displayed report.
    """

    def __init__(
        self,
        client: WeatherClient,
        location_provider: LocationProvider,
        preferences: DisplayPreferences | None = None,
        scroll_lock: ScrollLock | None = None,
    ):
        self.client = client
        self.location_provider = location_provider
        self.scroll_lock = scroll_lock or ScrollLock()
        self._state = ViewState(preferences=preferences or DisplayPreferences())
        self._generation = 0

    @property
    def state(self) -> ViewState:
        return self._state

    # ── Fetching ────────────────────────────────────────────────

    async def request_device_location(self) -> ViewState:
        generation = self._begin()
        try:
            coords = await self.location_provider.locate()
        except LocationDenied as e:
            self._settle(generation, error=e.user_message)
            return self._state
        return await self._load(
            generation,
            lambda: self.client.fetch_by_coordinates(coords.latitude, coords.longitude),
        )

    async def submit_search(self, text: str) -> ViewState:
        """Fetch by place name. Blank input is ignored without any request."""
        if not text.strip():
            return self._state
        generation = self._begin()
        return await self._load(
            generation, lambda: self.client.fetch_by_place_name(text), clear_search=True
        )

    def set_search_text(self, text: str) -> None:
        self._state = replace(self._state, search_text=text)

    def _begin(self) -> int:
        self._generation += 1
        self._state = replace(self._state, loading=True)
        return self._generation

    async def _load(
        self,
        generation: int,
        fetch: Callable[[], Awaitable[WeatherReport]],
        clear_search: bool = False,
    ) -> ViewState:
        try:
            report = await fetch()
        except AetherError as e:
            self._settle(generation, error=e.user_message)
        except Exception:
            logger.exception("Unexpected error while fetching weather")
            self._settle(generation, error=FetchFailed.user_message)
        else:
            self._settle(generation, report=report, clear_search=clear_search)
        return self._state

    def _settle(
        self,
        generation: int,
        report: WeatherReport | None = None,
        error: str | None = None,
        clear_search: bool = False,
    ) -> None:
        if generation != self._generation:
            logger.debug(
                "Dropping stale fetch result %d (latest is %d)", generation, self._generation
            )
            return
        if report is not None:
            # A forecast-day panel holds an entry from the previous report.
            panel = self._state.panel
            if panel is not None and panel.kind == PanelKind.FORECAST_DAY:
                self.close_panel()
            self._state = replace(
                self._state,
                report=report,
                error=None,
                loading=False,
                search_text="" if clear_search else self._state.search_text,
            )
            logger.info("Weather updated for %s", report.place_name)
        else:
            self._state = replace(self._state, error=error, loading=False)
            logger.warning("Weather fetch failed: %s", error)

    # ── Preferences ─────────────────────────────────────────────

    def set_unit(self, fahrenheit: bool) -> None:
        prefs = replace(self._state.preferences, fahrenheit=fahrenheit)
        self._state = replace(self._state, preferences=prefs)

    def set_theme(self, dark: bool) -> None:
        prefs = replace(self._state.preferences, dark=dark)
        self._state = replace(self._state, preferences=prefs)

    def toggle_unit(self) -> None:
        self.set_unit(not self._state.preferences.fahrenheit)

    def toggle_theme(self) -> None:
        self.set_theme(not self._state.preferences.dark)

    # ── Panels ──────────────────────────────────────────────────

    def open_panel(self, selection: PanelSelection) -> None:
        self.scroll_lock.suppress()
        self._state = replace(self._state, panel=selection)

    def close_panel(self) -> None:
        self._state = replace(self._state, panel=None)
        self.scroll_lock.restore()

    @contextmanager
    def panel_scope(self, selection: PanelSelection) -> Iterator[ViewState]:
        """Open a panel for the duration of the block; always closes it."""
        self.open_panel(selection)
        try:
            yield self._state
        finally:
            self.close_panel()

    def teardown(self) -> None:
        self.close_panel()
