"""YAML config loader with environment override for the API key."""

import os
from pathlib import Path

import yaml

from aether.config.schema import AetherConfig

API_KEY_ENV = "AETHER_API_KEY"


def load_config(path: str | Path | None = None) -> AetherConfig:
    """Load and validate config from a YAML file.

    A missing or empty file yields the defaults. `AETHER_API_KEY` in the
    environment takes precedence over `api.api_key` from the file.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}

    api_key = os.environ.get(API_KEY_ENV)
    if api_key:
        raw.setdefault("api", {})["api_key"] = api_key

    return AetherConfig(**raw)


def redacted_dump(config: AetherConfig) -> str:
    """JSON dump of the config with the API key masked."""
    masked = config.model_copy(
        update={
            "api": config.api.model_copy(
                update={"api_key": "***" if config.api.api_key else ""}
            )
        }
    )
    return masked.model_dump_json(indent=2)
