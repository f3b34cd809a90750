"""Common types shared across models."""

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Coordinates:
    latitude: float
    longitude: float


# A location is either a coordinate pair or a free-text place name.
Location: TypeAlias = Coordinates | str
