"""Shared utilities for validation and normalization."""

from __future__ import annotations

from collections.abc import Iterable

from .const import RESERVED_VEHICLE_TAGS
from .exceptions import ConfigurationError, InvalidBayIndex, InvalidVehicleTag


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def validate_lane_size(lane_size: int) -> int:
    if not _is_int(lane_size):
        raise ConfigurationError("lane_size must be an integer.")
    if lane_size <= 0:
        raise ConfigurationError("lane_size must be greater than zero.")
    return lane_size


def validate_bay_indices(indices: Iterable[int], total: int, *, label: str) -> tuple[int, ...]:
    validated: list[int] = []
    for index in indices:
        if not _is_int(index):
            raise ConfigurationError(f"{label} indices must be integers.")
        if index < 0 or index >= total:
            raise ConfigurationError(f"{label} index {index} is outside the grid [0, {total}).")
        if index in validated:
            raise ConfigurationError(f"{label} index {index} is listed more than once.")
        validated.append(index)
    return tuple(validated)


def ensure_disjoint(pedestrian_exits: Iterable[int], disabled_bays: Iterable[int]) -> None:
    overlap = sorted(set(pedestrian_exits) & set(disabled_bays))
    if overlap:
        joined = ", ".join(str(index) for index in overlap)
        raise ConfigurationError(f"Bays cannot be both pedestrian exit and disabled: {joined}.")


def ensure_bay_index(index: int, total: int) -> int:
    if not _is_int(index):
        raise InvalidBayIndex("Bay index must be an integer.")
    if index < 0 or index >= total:
        raise InvalidBayIndex(f"Bay index {index} is outside the grid [0, {total}).")
    return index


def normalize_vehicle_tag(vehicle: str) -> str:
    if not isinstance(vehicle, str) or len(vehicle) != 1:
        raise InvalidVehicleTag("Vehicle tag must be a single character.")
    if vehicle.splitlines() != [vehicle]:
        raise InvalidVehicleTag("Vehicle tag must not break a line.")
    if vehicle in RESERVED_VEHICLE_TAGS:
        raise InvalidVehicleTag(f"Vehicle tag {vehicle!r} is reserved.")
    return vehicle
