"""Fluent assembly of a parking."""

from __future__ import annotations

from .parking import Parking


class ParkingBuilder:
    """Collect lane size, exits and disabled bays, then build a parking.

    Values are only gathered here; :class:`Parking` validates them.
    """

    def __init__(self) -> None:
        self._lane_size: int | None = None
        self._pedestrian_exits: list[int] = []
        self._disabled_bays: list[int] = []

    def with_square_size(self, lane_size: int) -> ParkingBuilder:
        self._lane_size = lane_size
        return self

    def with_pedestrian_exit(self, index: int) -> ParkingBuilder:
        self._pedestrian_exits.append(index)
        return self

    def with_disabled_bay(self, index: int) -> ParkingBuilder:
        self._disabled_bays.append(index)
        return self

    def build(self) -> Parking:
        return Parking(self._lane_size, self._pedestrian_exits, self._disabled_bays)
