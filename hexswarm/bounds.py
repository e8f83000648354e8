"""Sizes and interiors of the rings of objects that enclose demo systems.

A hexagonal ring of side ``s`` is built by walking ``s`` steps in each of the
six lattice directions in turn, starting from the origin. A rhombic ring of
side ``s`` walks ``s`` steps in directions 0, 1, 3 and 4.
"""

from __future__ import annotations

import math

# Side length per square root of the particle count. The hexagon then encloses
# an area of roughly 3.7 times the particle count, the rhombus roughly 6 times.
_HEXAGON_FACTOR = 1.4
_RHOMBUS_FACTOR = 2.6


def _round_half_up(value: float) -> int:
    # Rounds halves away from zero, which for non-negative values is upward.
    return math.floor(value + 0.5)


def _check_particles(num_particles: int) -> None:
    if num_particles < 0:
        raise ValueError(f"num_particles must be non-negative, got {num_particles}")


def hexagon_side_length(num_particles: int) -> int:
    """Side length of a hexagonal ring that leaves room for ``num_particles``."""
    _check_particles(num_particles)
    return _round_half_up(_HEXAGON_FACTOR * math.sqrt(num_particles))


def in_hexagon_interior(x: int, y: int, side_length: int) -> bool:
    """Return True if node ``(x, y)`` lies strictly inside the hexagonal ring.

    The interior nodes satisfy ``-s < x < s``, ``0 < y < 2s`` and
    ``0 < x + y < 2s`` for side length ``s``.
    """
    s = side_length
    return -s < x < s and 0 < y < 2 * s and 0 < x + y < 2 * s


def rhombus_side_length(num_particles: int) -> int:
    """Side length of a rhombic ring that leaves room for ``num_particles``."""
    _check_particles(num_particles)
    return _round_half_up(_RHOMBUS_FACTOR * math.sqrt(num_particles))