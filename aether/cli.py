"""CLI entry point for the AETHER weather client."""

import argparse
import asyncio
import json
import logging

from aether.config.loader import load_config, redacted_dump
from aether.config.schema import AetherConfig
from aether.display.render import render_text, state_to_dict
from aether.forecast.aggregator import daily_slice
from aether.ingest.geolocation import provider_from_config
from aether.ingest.weather_client import WeatherClient
from aether.models.view import DisplayPreferences, PanelKind, PanelSelection
from aether.state.controller import ViewStateController

DEFAULT_CONFIG = "aether.yaml"
PANEL_CHOICES = [k.value for k in PanelKind if k != PanelKind.FORECAST_DAY]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aether",
        description="Current conditions and 5-day forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG, help="Config YAML path"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command")

    # now
    now_p = sub.add_parser("now", help="Show weather for a place or this device")
    where = now_p.add_mutually_exclusive_group(required=True)
    where.add_argument("--city", help="Place name to search for")
    where.add_argument("--here", action="store_true", help="Use device location")
    now_p.add_argument("--fahrenheit", action="store_true", help="Show °F")
    now_p.add_argument("--light", action="store_true", help="Light palette")
    now_p.add_argument("--panel", choices=PANEL_CHOICES, help="Open a detail panel")
    now_p.add_argument("--day", type=int, help="Open the detail panel for forecast day N (1-5)")
    now_p.add_argument("--json", action="store_true", help="Print JSON instead of text")
    now_p.add_argument("--no-color", action="store_true", help="Disable ANSI colors")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    # serve
    serve_p = sub.add_parser("serve", help="Run the dashboard API")
    serve_p.add_argument("--host", help="Bind address")
    serve_p.add_argument("--port", type=int, help="Bind port")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "now":
        return _cmd_now(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_now(config: AetherConfig, args) -> int:
    prefs = DisplayPreferences(
        fahrenheit=args.fahrenheit or config.display.fahrenheit,
        dark=config.display.dark and not args.light,
    )
    controller = ViewStateController(
        WeatherClient(config.api), provider_from_config(config.location), prefs
    )
    if args.here:
        asyncio.run(controller.request_device_location())
    else:
        asyncio.run(controller.submit_search(args.city))

    state = controller.state
    color = config.display.color and not args.no_color and not args.json
    if state.report is None:
        print(json.dumps(state_to_dict(state), indent=2) if args.json else render_text(state, color=color))
        return 1

    selection = None
    if args.day is not None:
        daily = daily_slice(state.report.forecast)
        if not 1 <= args.day <= len(daily):
            print(f"Error: --day must be between 1 and {len(daily)}")
            return 1
        selection = PanelSelection(PanelKind.FORECAST_DAY, daily[args.day - 1])
    elif args.panel:
        selection = PanelSelection(PanelKind(args.panel))

    if selection is None:
        _print_state(controller, args.json, color)
    else:
        with controller.panel_scope(selection):
            _print_state(controller, args.json, color)
    return 0


def _print_state(controller: ViewStateController, as_json: bool, color: bool) -> None:
    if as_json:
        print(json.dumps(state_to_dict(controller.state), indent=2))
    else:
        print(render_text(controller.state, color=color))


def _cmd_config(config: AetherConfig, args) -> int:
    if args.config_command == "show":
        print(redacted_dump(config))
        return 0
    print("Use: config show")
    return 1


def _cmd_serve(config: AetherConfig, args) -> int:
    import uvicorn

    from aether.dashboard import create_app

    app = create_app(config)
    uvicorn.run(
        app,
        host=args.host or config.dashboard.host,
        port=args.port or config.dashboard.port,
    )
    return 0
