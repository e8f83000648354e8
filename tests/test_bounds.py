import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from hexswarm.bounds import (
    hexagon_side_length,
    in_hexagon_interior,
    rhombus_side_length,
)

_OFFSETS = [(1, 0), (0, 1), (-1, 1), (-1, 0), (0, -1), (1, -1)]


def _walk_ring(directions, side):
    x, y = 0, 0
    ring = set()
    for d in directions:
        dx, dy = _OFFSETS[d]
        for _ in range(side):
            ring.add((x, y))
            x, y = x + dx, y + dy
    return ring


def test_default_demo_sizes():
    assert hexagon_side_length(30) == 8
    assert rhombus_side_length(30) == 14


def test_zero_particles_gives_empty_ring():
    assert hexagon_side_length(0) == 0
    assert rhombus_side_length(0) == 0


@pytest.mark.parametrize("func", [hexagon_side_length, rhombus_side_length])
def test_negative_count_rejected(func):
    with pytest.raises(ValueError):
        func(-1)


@given(st.integers(min_value=0, max_value=100_000))
def test_side_lengths_close_to_scaled_root(n):
    assert abs(hexagon_side_length(n) - 1.4 * math.sqrt(n)) <= 0.5
    assert abs(rhombus_side_length(n) - 2.6 * math.sqrt(n)) <= 0.5


@given(st.integers(min_value=0, max_value=10_000))
def test_side_lengths_monotonic(n):
    assert hexagon_side_length(n + 1) >= hexagon_side_length(n)
    assert rhombus_side_length(n + 1) >= rhombus_side_length(n)
    assert rhombus_side_length(n) >= hexagon_side_length(n)


@pytest.mark.parametrize("side", [1, 2, 3, 5, 8])
def test_interior_is_enclosed_by_ring(side):
    ring = _walk_ring(range(6), side)
    assert len(ring) == 6 * side
    assert not any(in_hexagon_interior(x, y, side) for x, y in ring)

    interior = {
        (x, y)
        for x in range(-2 * side - 2, 2 * side + 3)
        for y in range(-2 * side - 2, 2 * side + 3)
        if in_hexagon_interior(x, y, side)
    }
    assert interior
    for x, y in interior:
        for dx, dy in _OFFSETS:
            nbr = (x + dx, y + dy)
            assert nbr in interior or nbr in ring


@pytest.mark.parametrize("side", [1, 2, 4, 7])
def test_hexagon_center_is_interior(side):
    assert in_hexagon_interior(0, side, side)


def test_smallest_hexagon_has_single_interior_node():
    interior = [
        (x, y)
        for x in range(-3, 4)
        for y in range(-3, 4)
        if in_hexagon_interior(x, y, 1)
    ]
    assert interior == [(0, 1)]


@pytest.mark.parametrize("side", [0, -2])
def test_degenerate_side_has_no_interior(side):
    assert not any(
        in_hexagon_interior(x, y, side) for x in range(-4, 5) for y in range(-4, 5)
    )


@pytest.mark.parametrize("n", [2, 10, 30, 100])
def test_rhombus_ring_closes(n):
    side = rhombus_side_length(n)
    ring = _walk_ring([0, 1, 3, 4], side)
    assert len(ring) == 4 * side
    assert (side, 0) in ring and (side, side) in ring and (0, side) in ring