# hexswarm

Pure-Python building blocks for working with self-organizing particle systems
(amoebots) on the triangular lattice. It provides system-wide geometric
measures, the sensing and movement rule of noisy swarm aggregation, starting
layouts, and the sizes of enclosing rings. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Coordinates

Nodes are `(x, y)` integer pairs in axial coordinates. The six neighbours of a
node lie at offsets `(1, 0)`, `(0, 1)`, `(-1, 1)`, `(-1, 0)`, `(0, -1)` and
`(1, -1)`. Functions that make random choices take an optional
`random.Random`, so runs can be reproduced.

## Modules

### `hexswarm.geometry`

- `to_cartesian(x, y)` maps a lattice node to the plane as
  `(x + y / 2, y * sqrt(3) / 2)`.
- `distance(a, b)` is the Euclidean distance between two points.
- `Circle(center, radius)` is a frozen dataclass; `Circle.contains(point)`
  tells whether a point is inside or on it.
- `circle_from_two(a, b)`, `circle_from_three(a, b, c)` (raises `ValueError`
  for collinear points), `is_valid_circle(circle, points)` and
  `min_circle_trivial(points)` (at most three points) build and check circles.
- `smallest_enclosing_circle(points, rng=None)` computes the smallest
  enclosing disc with a randomised incremental algorithm.
- System measures over lattice nodes: `sed_circumference(nodes, rng=None)`,
  `convex_hull_perimeter(nodes)`, `dispersion(nodes)` (sum of distances to the
  centroid) and `max_distance(nodes)`. `convex_hull_perimeter` and
  `dispersion` raise `ValueError` for an empty input.

### `hexswarm.sight`

- `NoiseMode` is `DEADLOCK` (`"d"`) or `ERROR` (`"e"`).
- `AggregationState(center, perturb=0)` is the memory of one particle;
  `center` must be in `0..5`.
- `sight_direction(center)` is the direction the particle looks along,
  `(center + 5) % 6`.
- `particle_in_sight(center, head, others)` tells whether any of the other
  nodes lies in the particle's cone of vision.
- `aggregation_step(state, in_sight, blocked, mode="d", noise=3.0, rng=None)`
  applies one activation and returns a `StepResult` holding the new `state`
  and `move_dir` (the direction moved, or `None`); `StepResult.moved` tells
  whether it moved. In deadlock mode `noise` is the number of consecutive
  blocked activations before rotating in place; in error mode it is the
  probability of flipping the sensor reading.
- `aggregation_box_radius(num_particles)` is the half-width of the square in
  which particles are scattered at the start.

### `hexswarm.layout`

- `hexagon_position(index)` and `hexagon_positions(count)` place particles in
  a hexagon spiralling outward from the origin.
- `line_positions(count)` places them on a line from the origin.
- `compression_positions(count, bias)` returns a hexagon when
  `bias <= EXPANSION_BIAS_LIMIT` (2.17) and a line otherwise; `bias` must be
  greater than 1.

### `hexswarm.bounds`

- `hexagon_side_length(num_particles)` and
  `rhombus_side_length(num_particles)` size the rings of objects that enclose
  a system.
- `in_hexagon_interior(x, y, side_length)` tells whether a node lies strictly
  inside a hexagonal ring.

## Example

```python
import random

from hexswarm.geometry import convex_hull_perimeter, sed_circumference
from hexswarm.layout import hexagon_positions
from hexswarm.sight import AggregationState, NoiseMode, aggregation_step

nodes = hexagon_positions(19)
print(convex_hull_perimeter(nodes))
print(sed_circumference(nodes, random.Random(1)))

result = aggregation_step(
    AggregationState(center=2), in_sight=False, blocked=False, mode=NoiseMode.DEADLOCK
)
print(result.state.center, result.move_dir)
```

## What it does not do

hexswarm is a library of pieces, not a simulator. It keeps no particle
system: there is no scheduler that activates particles, no expansion,
contraction or handover of particles, no store of which nodes are occupied,
no energy distribution or shape formation, no display, and no command-line
program. A caller keeps the positions and state of its particles and uses
these functions to place, move and measure them.