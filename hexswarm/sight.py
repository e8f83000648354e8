"""Line-of-sight sensing and the activation rule of noisy swarm aggregation.

Each particle looks along one ray of the triangular lattice and rotates its
center of rotation depending on whether another particle lies in its cone of
vision. Two forms of noise are supported: deadlock perturbation, which breaks
symmetry after a number of consecutive blocked activations, and error
probability, which flips the sensor reading at random.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Sequence

_DIRECTIONS = 6
_MIN_BOX_PARTICLES = 50
_BOX_FACTOR = 0.25


class NoiseMode(str, Enum):
    """The form of noise applied to the aggregation rule."""

    DEADLOCK = "d"
    ERROR = "e"


@dataclass(frozen=True)
class AggregationState:
    """The memory of one aggregating particle."""

    center: int
    perturb: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.center < _DIRECTIONS:
            raise ValueError(f"center must be in [0, 6), got {self.center}")
        if self.perturb < 0:
            raise ValueError(f"perturb must be non-negative, got {self.perturb}")


@dataclass(frozen=True)
class StepResult:
    """Outcome of one activation: the new memory and the direction moved, if any."""

    state: AggregationState
    move_dir: int | None = None

    @property
    def moved(self) -> bool:
        """True if the particle moved during the activation."""
        return self.move_dir is not None


def sight_direction(center: int) -> int:
    """The lattice direction along which a particle with this center looks."""
    if not 0 <= center < _DIRECTIONS:
        raise ValueError(f"center must be in [0, 6), got {center}")
    return (center + 5) % _DIRECTIONS


def _in_scope(scope: int, dx: int, dy: int) -> bool:
    adx, ady = abs(dx), abs(dy)
    if scope == 0:
        return dy > 0 and dx >= 0
    if scope == 1:
        return dy > 0 and dx < 0 and ady >= adx
    if scope == 2:
        return dy >= 0 and dx < 0 and ady < adx
    if scope == 3:
        return dy < 0 and dx <= 0
    if scope == 4:
        return dy < 0 and dx > 0 and ady >= adx
    return dy <= 0 and dx > 0 and ady < adx


def particle_in_sight(
    center: int, head: Sequence[int], others: Iterable[Sequence[int]]
) -> bool:
    """Return True if any of ``others`` lies in the cone of vision from ``head``.

    The cone runs from direction ``(center + 4) % 6`` (excluded) to
    ``(center + 5) % 6`` (included). A node equal to ``head`` is never seen.
    """
    if not 0 <= center < _DIRECTIONS:
        raise ValueError(f"center must be in [0, 6), got {center}")
    scope = (center + 4) % _DIRECTIONS
    hx, hy = head[0], head[1]
    return any(_in_scope(scope, p[0] - hx, p[1] - hy) for p in others)


def aggregation_step(
    state: AggregationState,
    in_sight: bool,
    blocked: bool,
    mode: NoiseMode | str = NoiseMode.DEADLOCK,
    noise: float = 3.0,
    rng: random.Random | None = None,
) -> StepResult:
    """Apply one activation of the aggregation rule.

    ``blocked`` tells whether the node in direction ``(center + 1) % 6`` is
    occupied. In deadlock mode ``noise`` is the number of consecutive blocked
    activations before the particle rotates in place; in error mode it is the
    probability that the sensor reading is flipped.
    """
    mode = NoiseMode(mode)
    if noise < 0:
        raise ValueError(f"noise must be non-negative, got {noise}")

    rotated = (state.center + 5) % _DIRECTIONS
    move_dir = (state.center + 1) % _DIRECTIONS

    if mode is NoiseMode.DEADLOCK:
        if in_sight:
            return StepResult(AggregationState(rotated, 0))
        if not blocked:
            return StepResult(replace(state, center=rotated), move_dir)
        perturb = state.perturb + 1
        if perturb >= int(noise):
            return StepResult(AggregationState(rotated, 0))
        return StepResult(replace(state, perturb=perturb))

    rng = rng if rng is not None else random.Random()
    if rng.random() < noise:
        in_sight = not in_sight
    if in_sight:
        return StepResult(replace(state, center=rotated))
    if not blocked:
        return StepResult(replace(state, center=rotated), move_dir)
    return StepResult(state)


def aggregation_box_radius(num_particles: int) -> int:
    """Half-width of the square in which an aggregation system is scattered."""
    if num_particles <= 0:
        raise ValueError(f"num_particles must be positive, got {num_particles}")
    count = max(num_particles, _MIN_BOX_PARTICLES)
    return math.floor(count * _BOX_FACTOR + 0.5)