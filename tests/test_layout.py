import pytest
from hypothesis import given, strategies as st

from hexswarm.layout import (
    compression_positions,
    hexagon_position,
    hexagon_positions,
    line_positions,
)

_OFFSETS = [(1, 0), (0, 1), (-1, 1), (-1, 0), (0, -1), (1, -1)]


def _neighbours(node):
    return {(node[0] + dx, node[1] + dy) for dx, dy in _OFFSETS}


def _hex_distance(node):
    x, y = node
    return max(abs(x), abs(y), abs(x + y))


def test_first_particle_at_origin():
    assert hexagon_position(0) == (0, 0)


@pytest.mark.parametrize("rings", [1, 2, 3, 4])
def test_full_rings_fill_hexagon(rings):
    count = 1 + 3 * rings * (rings + 1)
    positions = hexagon_positions(count)
    expected = {
        (x, y)
        for x in range(-rings, rings + 1)
        for y in range(-rings, rings + 1)
        if _hex_distance((x, y)) <= rings
    }
    assert len(positions) == count
    assert set(positions) == expected


def test_first_ring_surrounds_origin():
    assert set(hexagon_positions(7)) == {(0, 0)} | _neighbours((0, 0))


@given(st.integers(min_value=1, max_value=200))
def test_hexagon_prefix_is_connected_and_distinct(count):
    positions = hexagon_positions(count)
    assert len(set(positions)) == count
    seen = {positions[0]}
    for node in positions[1:]:
        assert _neighbours(node) & seen
        seen.add(node)


@given(st.integers(min_value=0, max_value=100), st.integers(min_value=0, max_value=100))
def test_hexagon_positions_share_prefix(a, b):
    short, long = sorted((a, b))
    assert hexagon_positions(long)[:short] == hexagon_positions(short)


@given(st.integers(min_value=0, max_value=300))
def test_hexagon_position_matches_list(index):
    assert hexagon_positions(index + 1)[-1] == hexagon_position(index)


def test_hexagon_zero_count_is_empty():
    assert hexagon_positions(0) == []


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        hexagon_position(-1)


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        hexagon_positions(-3)
    with pytest.raises(ValueError):
        line_positions(-1)


def test_line_positions():
    assert line_positions(4) == [(0, 0), (1, 0), (2, 0), (3, 0)]


@given(st.integers(min_value=0, max_value=50))
def test_line_positions_along_x_axis(count):
    positions = line_positions(count)
    assert len(positions) == count
    assert all(y == 0 for _, y in positions)
    assert [x for x, _ in positions] == list(range(count))


def test_compression_low_bias_is_hexagon():
    assert compression_positions(19, 2.17) == hexagon_positions(19)
    assert compression_positions(19, 1.5) == hexagon_positions(19)


def test_compression_high_bias_is_line():
    assert compression_positions(19, 2.18) == line_positions(19)
    assert compression_positions(19, 4.0) == line_positions(19)


@pytest.mark.parametrize("bias", [1.0, 0.5, -2.0])
def test_compression_bias_must_exceed_one(bias):
    with pytest.raises(ValueError):
        compression_positions(10, bias)