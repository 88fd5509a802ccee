"""pyParkingGrid package."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from .builder import ParkingBuilder
from .engine import AllocationEngine
from .exceptions import (
    ConfigurationError,
    InvalidBayIndex,
    InvalidVehicleTag,
    ParkingGridError,
)
from .grid import BayGrid
from .models import Bay, BayState, LayoutManifest
from .parking import Parking
from .render import LaneRenderer, snake_order

try:
    __version__ = version("pyparkinggrid")
except PackageNotFoundError:  # pragma: no cover - not installed
    __version__ = "0.0.0"

__all__ = [
    "AllocationEngine",
    "Bay",
    "BayGrid",
    "BayState",
    "ConfigurationError",
    "InvalidBayIndex",
    "InvalidVehicleTag",
    "LaneRenderer",
    "LayoutManifest",
    "Parking",
    "ParkingBuilder",
    "ParkingGridError",
    "__version__",
    "snake_order",
]
