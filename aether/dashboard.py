"""AETHER dashboard: FastAPI backend holding one session's view state."""

import html
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, Field

from aether.config.schema import AetherConfig
from aether.display.render import render_text, state_to_dict
from aether.forecast.aggregator import daily_slice
from aether.ingest.geolocation import LocationProvider, provider_from_config
from aether.ingest.weather_client import WeatherClient
from aether.models.view import DisplayPreferences, PanelKind, PanelSelection
from aether.state.controller import ViewStateController


class SearchRequest(BaseModel):
    text: str


class PreferencesUpdate(BaseModel):
    """Partial preference update; only provided fields are changed."""
    fahrenheit: bool | None = None
    dark: bool | None = None


class PanelRequest(BaseModel):
    kind: PanelKind
    day: int | None = Field(default=None, ge=1)


def create_app(
    config: AetherConfig,
    client: WeatherClient | None = None,
    location_provider: LocationProvider | None = None,
) -> FastAPI:
    controller = ViewStateController(
        client or WeatherClient(config.api),
        location_provider or provider_from_config(config.location),
        DisplayPreferences(fahrenheit=config.display.fahrenheit, dark=config.display.dark),
    )

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Locate once on startup, like the page asking for position on load.
        if config.location.enabled:
            await controller.request_device_location()
        try:
            yield
        finally:
            controller.teardown()

    app = FastAPI(title="AETHER Weather Dashboard", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.controller = controller

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/state")
    def get_state():
        return state_to_dict(controller.state)

    @app.get("/api/health")
    def get_health():
        return {"ok": True, "has_data": controller.state.report is not None}

    # ── User actions ────────────────────────────────────────────────

    @app.post("/api/locate")
    async def locate():
        await controller.request_device_location()
        return state_to_dict(controller.state)

    @app.post("/api/search")
    async def search(req: SearchRequest):
        if req.text.strip():
            controller.set_search_text(req.text)
        await controller.submit_search(req.text)
        return state_to_dict(controller.state)

    @app.post("/api/preferences")
    def update_preferences(update: PreferencesUpdate):
        if update.fahrenheit is not None:
            controller.set_unit(update.fahrenheit)
        if update.dark is not None:
            controller.set_theme(update.dark)
        return state_to_dict(controller.state)

    @app.post("/api/panel")
    def open_panel(req: PanelRequest):
        report = controller.state.report
        if report is None:
            raise HTTPException(409, "No weather data loaded")
        if req.kind == PanelKind.FORECAST_DAY:
            daily = daily_slice(report.forecast)
            if req.day is None or req.day > len(daily):
                raise HTTPException(422, f"day must be between 1 and {len(daily)}")
            selection = PanelSelection(req.kind, daily[req.day - 1])
        else:
            selection = PanelSelection(req.kind)
        controller.open_panel(selection)
        return state_to_dict(controller.state)

    @app.delete("/api/panel")
    def close_panel():
        controller.close_panel()
        return state_to_dict(controller.state)

    # ── Text view ───────────────────────────────────────────────────

    @app.get("/")
    def serve_dashboard():
        body = html.escape(render_text(controller.state))
        return HTMLResponse(f"<html><head><title>AETHER</title></head><body><pre>{body}</pre></body></html>")

    return app
