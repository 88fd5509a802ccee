import pytest

from parkinggrid.exceptions import ConfigurationError, InvalidBayIndex
from parkinggrid.grid import BayGrid
from parkinggrid.models import BayState


def test_initial_bays() -> None:
    grid = BayGrid(2, [0])
    assert grid.total == 4
    assert grid.symbols() == ["=", "U", "U", "U"]
    assert grid.parked_cars == 0
    assert grid.available_bays() == 3


def test_exits_and_disabled_are_stamped() -> None:
    grid = BayGrid(3, [4, 0], [8, 2])
    assert grid.pedestrian_exits == (4, 0)
    assert grid.disabled_bays == (8, 2)
    assert grid.symbols() == ["=", "U", "@", "U", "=", "U", "U", "U", "@"]
    assert grid.is_pedestrian_exit(4)
    assert not grid.is_pedestrian_exit(2)
    assert grid.is_disabled_bay(8)
    assert grid.available_bays() == 7


def test_available_bays_counts_disabled_bays() -> None:
    grid = BayGrid(2, [], [0, 1, 2, 3])
    assert grid.available_bays() == 4


def test_occupy_and_release_keep_counter() -> None:
    grid = BayGrid(2, [0], [3])
    grid.occupy(1, "C", disabled=False)
    grid.occupy(3, "D", disabled=True)
    assert grid[1].state is BayState.OCCUPIED
    assert grid[1].symbol == "C"
    assert grid[3].state is BayState.DISABLED_TAKEN
    assert grid.parked_cars == 2
    assert grid.available_bays() == 1

    grid.release(3)
    grid.release(1)
    assert grid[3].state is BayState.DISABLED_FREE
    assert grid[1].state is BayState.FREE
    assert grid.parked_cars == 0


def test_bay_out_of_range() -> None:
    grid = BayGrid(2)
    with pytest.raises(InvalidBayIndex):
        grid.bay(4)
    with pytest.raises(InvalidBayIndex):
        grid.bay(-1)


@pytest.mark.parametrize(
    ("lane_size", "exits", "disabled"),
    [
        (0, [], []),
        (-3, [], []),
        (2, [4], []),
        (2, [], [-1]),
        (3, [1, 1], []),
        (3, [], [2, 2]),
        (3, [4], [4]),
    ],
)
def test_invalid_configuration(lane_size: int, exits: list[int], disabled: list[int]) -> None:
    with pytest.raises(ConfigurationError):
        BayGrid(lane_size, exits, disabled)


def test_membership_lookups_match_stamped_bays() -> None:
    grid = BayGrid(4, [15, 3], [0, 9])
    for index, bay in enumerate(grid):
        assert grid.is_pedestrian_exit(index) == (bay.state is BayState.PEDESTRIAN_EXIT)
        assert grid.is_disabled_bay(index) == (bay.state is BayState.DISABLED_FREE)
