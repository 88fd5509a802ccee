import pytest

from parkinggrid.engine import AllocationEngine
from parkinggrid.exceptions import ConfigurationError
from parkinggrid.grid import BayGrid
from parkinggrid.render import LaneRenderer, lane_indices, snake_order


def test_lane_indices_alternate_direction() -> None:
    assert list(lane_indices(3, 0)) == [0, 1, 2]
    assert list(lane_indices(3, 1)) == [5, 4, 3]
    assert list(lane_indices(3, 2)) == [6, 7, 8]


def test_snake_order() -> None:
    assert snake_order(1) == [0]
    assert snake_order(2) == [0, 1, 3, 2]
    assert snake_order(3) == [0, 1, 2, 5, 4, 3, 6, 7, 8]


@pytest.mark.parametrize("lane_size", range(1, 10))
def test_snake_order_covers_every_bay_once(lane_size: int) -> None:
    order = snake_order(lane_size)
    assert len(order) == lane_size * lane_size
    assert sorted(order) == list(range(lane_size * lane_size))


def test_snake_order_rejects_bad_lane_size() -> None:
    with pytest.raises(ConfigurationError):
        snake_order(0)


@pytest.mark.parametrize("lane_size", [1, 2, 3, 4, 7])
def test_render_shape(lane_size: int) -> None:
    rendered = LaneRenderer(BayGrid(lane_size)).render()
    lines = rendered.splitlines()
    assert rendered.endswith("\n")
    assert len(lines) == lane_size
    assert all(line == "U" * lane_size for line in lines)


def test_render_fixed_bays() -> None:
    renderer = LaneRenderer(BayGrid(3, [4], [0]))
    assert renderer.render() == "@UU\nU=U\nUUU\n"


def test_render_reverses_odd_lanes() -> None:
    grid = BayGrid(3)
    engine = AllocationEngine(grid)
    for tag in "ABCEF":
        engine.park(tag)
    assert LaneRenderer(grid).rows() == ["ABC", "UFE", "UUU"]


def test_render_taken_disabled_bay() -> None:
    grid = BayGrid(2, [1], [2])
    engine = AllocationEngine(grid)
    assert engine.park("D") == 2
    assert engine.park("C") == 0
    assert LaneRenderer(grid).render() == "C=\nUD\n"
