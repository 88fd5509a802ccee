"""Bay storage for a square parking grid."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .models import (
    DISABLED_FREE_BAY,
    DISABLED_TAKEN_BAY,
    FREE_BAY,
    PEDESTRIAN_EXIT_BAY,
    Bay,
    BayState,
)
from .util import (
    ensure_bay_index,
    ensure_disjoint,
    validate_bay_indices,
    validate_lane_size,
)


class BayGrid:
    """Row-major sequence of ``lane_size * lane_size`` bays.

    Pedestrian exits never change state and disabled bays only toggle between
    free and taken. Only the allocation engine mutates bays, through
    :meth:`occupy` and :meth:`release`, which keep ``parked_cars`` in step.
    """

    def __init__(
        self,
        lane_size: int,
        pedestrian_exits: Iterable[int] = (),
        disabled_bays: Iterable[int] = (),
    ) -> None:
        self._lane_size = validate_lane_size(lane_size)
        self._total = self._lane_size * self._lane_size
        self._pedestrian_exits = validate_bay_indices(
            pedestrian_exits, self._total, label="Pedestrian exit"
        )
        self._disabled_bays = validate_bay_indices(disabled_bays, self._total, label="Disabled bay")
        ensure_disjoint(self._pedestrian_exits, self._disabled_bays)
        self._exit_lookup = frozenset(self._pedestrian_exits)
        self._disabled_lookup = frozenset(self._disabled_bays)
        self._bays = [self._initial_bay(index) for index in range(self._total)]
        self._parked_cars = 0

    def _initial_bay(self, index: int) -> Bay:
        if self.is_pedestrian_exit(index):
            return PEDESTRIAN_EXIT_BAY
        if self.is_disabled_bay(index):
            return DISABLED_FREE_BAY
        return FREE_BAY

    @property
    def lane_size(self) -> int:
        return self._lane_size

    @property
    def total(self) -> int:
        return self._total

    @property
    def pedestrian_exits(self) -> tuple[int, ...]:
        return self._pedestrian_exits

    @property
    def disabled_bays(self) -> tuple[int, ...]:
        return self._disabled_bays

    @property
    def parked_cars(self) -> int:
        return self._parked_cars

    def __len__(self) -> int:
        return self._total

    def __iter__(self) -> Iterator[Bay]:
        return iter(self._bays)

    def __getitem__(self, index: int) -> Bay:
        return self.bay(index)

    def bay(self, index: int) -> Bay:
        return self._bays[ensure_bay_index(index, self._total)]

    def in_bounds(self, index: int) -> bool:
        return 0 <= index < self._total

    def is_pedestrian_exit(self, index: int) -> bool:
        return index in self._exit_lookup

    def is_disabled_bay(self, index: int) -> bool:
        return index in self._disabled_lookup

    def available_bays(self) -> int:
        """Return general capacity left.

        Disabled-only bays are counted whatever vehicle asks, so a general
        vehicle may see capacity it cannot use. See
        :meth:`parkinggrid.engine.AllocationEngine.free_bays_for`.
        """
        return self._total - len(self._pedestrian_exits) - self._parked_cars

    def symbols(self) -> list[str]:
        return [bay.symbol for bay in self._bays]

    def occupy(self, index: int, vehicle: str, *, disabled: bool) -> None:
        if disabled:
            self._bays[index] = DISABLED_TAKEN_BAY
        else:
            self._bays[index] = Bay(BayState.OCCUPIED, vehicle)
        self._parked_cars += 1

    def release(self, index: int) -> None:
        if self._bays[index].state is BayState.DISABLED_TAKEN:
            self._bays[index] = DISABLED_FREE_BAY
        else:
            self._bays[index] = FREE_BAY
        self._parked_cars -= 1
