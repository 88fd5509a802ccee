"""Public data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .const import (
    DISABLED_FREE_SYMBOL,
    DISABLED_TAKEN_SYMBOL,
    FREE_SYMBOL,
    PEDESTRIAN_EXIT_SYMBOL,
)


class BayState(Enum):
    PEDESTRIAN_EXIT = "pedestrian_exit"
    DISABLED_FREE = "disabled_free"
    DISABLED_TAKEN = "disabled_taken"
    FREE = "free"
    OCCUPIED = "occupied"


_STATE_SYMBOLS = {
    BayState.PEDESTRIAN_EXIT: PEDESTRIAN_EXIT_SYMBOL,
    BayState.DISABLED_FREE: DISABLED_FREE_SYMBOL,
    BayState.DISABLED_TAKEN: DISABLED_TAKEN_SYMBOL,
    BayState.FREE: FREE_SYMBOL,
}


@dataclass(frozen=True, slots=True)
class Bay:
    """State of one bay; ``vehicle`` is only set for occupied general bays."""

    state: BayState
    vehicle: str | None = None

    @property
    def symbol(self) -> str:
        if self.state is BayState.OCCUPIED:
            return self.vehicle or ""
        return _STATE_SYMBOLS[self.state]

    @property
    def is_taken(self) -> bool:
        return self.state in (BayState.OCCUPIED, BayState.DISABLED_TAKEN)


PEDESTRIAN_EXIT_BAY = Bay(BayState.PEDESTRIAN_EXIT)
DISABLED_FREE_BAY = Bay(BayState.DISABLED_FREE)
DISABLED_TAKEN_BAY = Bay(BayState.DISABLED_TAKEN)
FREE_BAY = Bay(BayState.FREE)


@dataclass(frozen=True, slots=True)
class LayoutManifest:
    id: str
    name: str
    lane_size: int
    pedestrian_exits: tuple[int, ...]
    disabled_bays: tuple[int, ...]
