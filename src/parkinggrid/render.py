"""Text rendering of a bay grid."""

from __future__ import annotations

from .grid import BayGrid
from .util import validate_lane_size


def lane_indices(lane_size: int, row: int) -> range:
    """Bay indices of ``row`` in driving order.

    Even lanes run left to right and odd lanes right to left, since vehicles
    U-turn at the end of each lane.
    """
    start = row * lane_size
    if row % 2 == 0:
        return range(start, start + lane_size)
    return range(start + lane_size - 1, start - 1, -1)


def snake_order(lane_size: int) -> list[int]:
    lane_size = validate_lane_size(lane_size)
    return [index for row in range(lane_size) for index in lane_indices(lane_size, row)]


class LaneRenderer:
    """Render a grid as ``lane_size`` lines, one per lane.

    ``=`` pedestrian exit, ``@`` free disabled bay, ``D`` taken disabled bay,
    ``U`` free bay, otherwise the tag of the parked vehicle.
    """

    def __init__(self, grid: BayGrid) -> None:
        self._grid = grid

    def rows(self) -> list[str]:
        symbols = self._grid.symbols()
        lane_size = self._grid.lane_size
        return [
            "".join(symbols[index] for index in lane_indices(lane_size, row))
            for row in range(lane_size)
        ]

    def render(self) -> str:
        return "".join(f"{row}\n" for row in self.rows())
