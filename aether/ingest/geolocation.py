"""Device-location providers.

A provider is a one-shot async call that returns coordinates or raises
`LocationPermissionDenied` / `LocationUnavailable`. Nothing here retries.
"""

import logging
from typing import Protocol

from aether.config.schema import LocationConfig
from aether.errors import LocationPermissionDenied, LocationUnavailable
from aether.models.common import Coordinates

logger = logging.getLogger(__name__)


class LocationProvider(Protocol):
    async def locate(self) -> Coordinates: ...


class FixedLocationProvider:
    """Reports a fixed position, standing in for a device sensor."""

    def __init__(self, coordinates: Coordinates, allowed: bool = True):
        self.coordinates = coordinates
        self.allowed = allowed

    async def locate(self) -> Coordinates:
        if not self.allowed:
            logger.info("Location permission denied")
            raise LocationPermissionDenied("location permission denied")
        return self.coordinates


class UnsupportedLocationProvider:
    async def locate(self) -> Coordinates:
        raise LocationUnavailable("geolocation not supported on this host")


def provider_from_config(config: LocationConfig) -> LocationProvider:
    if not config.enabled:
        return UnsupportedLocationProvider()
    return FixedLocationProvider(
        Coordinates(config.latitude, config.longitude), allowed=config.allowed
    )
