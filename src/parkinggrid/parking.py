"""Parking facade tying storage, allocation and rendering together."""

from __future__ import annotations

from collections.abc import Iterable

from .engine import AllocationEngine
from .grid import BayGrid
from .loader import get_layout
from .models import Bay
from .render import LaneRenderer


class Parking:
    """A square parking whose vehicles park closest to a pedestrian exit."""

    def __init__(
        self,
        lane_size: int,
        pedestrian_exits: Iterable[int] = (),
        disabled_bays: Iterable[int] = (),
    ) -> None:
        self._grid = BayGrid(lane_size, pedestrian_exits, disabled_bays)
        self._engine = AllocationEngine(self._grid)
        self._renderer = LaneRenderer(self._grid)

    @classmethod
    def from_layout(cls, layout_id: str) -> Parking:
        layout = get_layout(layout_id)
        return cls(layout.lane_size, layout.pedestrian_exits, layout.disabled_bays)

    @property
    def grid(self) -> BayGrid:
        return self._grid

    @property
    def lane_size(self) -> int:
        return self._grid.lane_size

    @property
    def parked_cars(self) -> int:
        return self._grid.parked_cars

    def bay(self, index: int) -> Bay:
        return self._grid.bay(index)

    def available_bays(self) -> int:
        return self._grid.available_bays()

    def free_bays_for(self, vehicle: str) -> int:
        return self._engine.free_bays_for(vehicle)

    def park(self, vehicle: str) -> int | None:
        return self._engine.park(vehicle)

    def unpark(self, index: int) -> bool:
        return self._engine.unpark(index)

    def render(self) -> str:
        return self._renderer.render()

    def __str__(self) -> str:
        return self.render()
