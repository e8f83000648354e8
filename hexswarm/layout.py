"""Initial placements of particles on the triangular lattice.

Nodes are ``(x, y)`` pairs whose six neighbours lie at offsets
``(1, 0)``, ``(0, 1)``, ``(-1, 1)``, ``(-1, 0)``, ``(0, -1)`` and ``(1, -1)``.
"""

from __future__ import annotations

Node = tuple[int, int]

# Above this bias a compressing system starts as a line instead of a hexagon.
EXPANSION_BIAS_LIMIT = 2.17


def _check_count(count: int) -> None:
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")


def hexagon_position(index: int) -> Node:
    """Node of the ``index``-th particle (from 0) of a hexagon grown ring by ring.

    Particle 0 sits at the origin; the following particles spiral outward so
    that every prefix of the sequence is connected.
    """
    if index < 0:
        raise ValueError(f"index must be non-negative, got {index}")

    layer = 1
    position = index
    while position >= 6 * layer:
        position -= 6 * layer
        layer += 1

    side, offset = divmod(position, layer)
    if side == 0:
        x, y = layer, offset - layer
        if offset == 0:
            x, y = x - 1, y + 1
    elif side == 1:
        x, y = layer - offset, offset
    elif side == 2:
        x, y = -offset, layer
    elif side == 3:
        x, y = -layer, layer - offset
    elif side == 4:
        x, y = offset - layer, -offset
    else:
        x, y = offset, -layer
    return (x, y)


def hexagon_positions(count: int) -> list[Node]:
    """Nodes of ``count`` particles packed into a hexagon around the origin."""
    _check_count(count)
    return [hexagon_position(i) for i in range(count)]


def line_positions(count: int) -> list[Node]:
    """Nodes of ``count`` particles laid out in a straight line from the origin."""
    _check_count(count)
    return [(i, 0) for i in range(count)]


def compression_positions(count: int, bias: float) -> list[Node]:
    """Starting nodes for a compression system with the given bias.

    In the proven range of expansion (``bias <= 2.17``) the particles start
    as a hexagon; otherwise they start as a straight line. The bias must be
    greater than 1.
    """
    if bias <= 1:
        raise ValueError(f"bias must be greater than 1, got {bias}")
    if bias <= EXPANSION_BIAS_LIMIT:
        return hexagon_positions(count)
    return line_positions(count)