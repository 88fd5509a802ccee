"""Park and unpark vehicles against a bay grid."""

from __future__ import annotations

import logging

from .const import DISABLED_VEHICLE
from .grid import BayGrid
from .models import BayState
from .util import ensure_bay_index, normalize_vehicle_tag

_LOGGER = logging.getLogger(__name__)

# Bay next to an exit placed at the entrance (index 0).
ENTRANCE_BAY = 1


class AllocationEngine:
    """Nearest-to-exit allocation over a :class:`BayGrid`."""

    def __init__(self, grid: BayGrid) -> None:
        self._grid = grid

    @property
    def grid(self) -> BayGrid:
        return self._grid

    def park(self, vehicle: str) -> int | None:
        """Park ``vehicle`` in the free bay closest to a pedestrian exit.

        Bays are searched in rings of growing radius around each exit, in the
        order the exits were registered, left side before right side. The
        disabled tag ``D`` only fits disabled bays and every other tag only
        fits general bays. Returns the bay index, or ``None`` when no bay fits.
        """
        vehicle = normalize_vehicle_tag(vehicle)
        _LOGGER.debug("park %r started", vehicle)
        if self._grid.available_bays() == 0:
            _LOGGER.debug("park %r found no bay: grid is full", vehicle)
            return None
        if self._grid.pedestrian_exits:
            index = self._ring_search(vehicle)
        else:
            index = self._entrance_scan(vehicle)
        if index is None:
            _LOGGER.debug("park %r found no matching bay", vehicle)
        else:
            _LOGGER.debug("park %r completed at bay %s", vehicle, index)
        return index

    def unpark(self, index: int) -> bool:
        """Free the bay at ``index``; ``False`` when nothing was parked there."""
        index = ensure_bay_index(index, self._grid.total)
        bay = self._grid[index]
        if not bay.is_taken:
            _LOGGER.debug("unpark bay %s: nothing to remove (%s)", index, bay.state.value)
            return False
        self._grid.release(index)
        _LOGGER.debug("unpark bay %s completed", index)
        return True

    def free_bays_for(self, vehicle: str) -> int:
        """Count the bays the type rule lets ``vehicle`` use right now."""
        wanted = self._wanted_state(normalize_vehicle_tag(vehicle))
        return sum(1 for bay in self._grid if bay.state is wanted)

    def _ring_search(self, vehicle: str) -> int | None:
        radius = 1
        while True:
            in_reach = False
            for exit_index in self._grid.pedestrian_exits:
                if exit_index == 0 and self._entrance_bay_free():
                    self._grid.occupy(ENTRANCE_BAY, vehicle, disabled=False)
                    return ENTRANCE_BAY
                for candidate in (exit_index - radius, exit_index + radius):
                    if not self._grid.in_bounds(candidate):
                        continue
                    in_reach = True
                    if self._try_occupy(candidate, vehicle):
                        return candidate
            # Every exit has run past both grid edges.
            if not in_reach:
                return None
            radius += 1

    def _entrance_scan(self, vehicle: str) -> int | None:
        for index in range(self._grid.total):
            if self._try_occupy(index, vehicle):
                return index
        return None

    def _entrance_bay_free(self) -> bool:
        return (
            self._grid.in_bounds(ENTRANCE_BAY)
            and self._grid[ENTRANCE_BAY].state is BayState.FREE
        )

    def _try_occupy(self, index: int, vehicle: str) -> bool:
        if self._grid[index].state is not self._wanted_state(vehicle):
            return False
        self._grid.occupy(index, vehicle, disabled=vehicle == DISABLED_VEHICLE)
        return True

    @staticmethod
    def _wanted_state(vehicle: str) -> BayState:
        if vehicle == DISABLED_VEHICLE:
            return BayState.DISABLED_FREE
        return BayState.FREE
