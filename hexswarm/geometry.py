"""Planar geometry over triangular-lattice nodes and the system-wide measures built on it."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from itertools import combinations
from typing import Iterable, Sequence

Point = tuple[float, float]

_SQRT3_2 = math.sqrt(3.0) / 2.0
_EPSILON = 1e-9


@dataclass(frozen=True)
class Circle:
    """A circle in the Cartesian plane."""

    center: Point
    radius: float

    def contains(self, point: Sequence[float]) -> bool:
        """Return True if ``point`` lies inside or on the circle."""
        return distance(self.center, point) <= self.radius


def to_cartesian(x: int, y: int) -> Point:
    """Map a triangular-lattice node to its Cartesian position."""
    return (x + y / 2.0, y * _SQRT3_2)


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def circle_from_two(a: Sequence[float], b: Sequence[float]) -> Circle:
    """The circle having segment ``ab`` as its diameter."""
    center = ((a[0] + b[0]) / 2.0, (a[1] + b[1]) / 2.0)
    return Circle(center, distance(a, b) / 2.0)


def circle_from_three(
    a: Sequence[float], b: Sequence[float], c: Sequence[float]
) -> Circle:
    """The circle passing through three non-collinear points."""
    ax, ay = a[0], a[1]
    bx, by = b[0], b[1]
    cx, cy = c[0], c[1]
    d = 2.0 * (ax * (by - cy) + bx * (cy - ay) + cx * (ay - by))
    if d == 0:
        raise ValueError("points are collinear; no unique circle passes through them")
    a2 = ax * ax + ay * ay
    b2 = bx * bx + by * by
    c2 = cx * cx + cy * cy
    ux = (a2 * (by - cy) + b2 * (cy - ay) + c2 * (ay - by)) / d
    uy = (a2 * (cx - bx) + b2 * (ax - cx) + c2 * (bx - ax)) / d
    center = (ux, uy)
    return Circle(center, distance(center, b))


def is_valid_circle(circle: Circle, points: Iterable[Sequence[float]]) -> bool:
    """Return True if every point lies within ``circle``."""
    return all(circle.contains(p) for p in points)


def min_circle_trivial(points: Sequence[Sequence[float]]) -> Circle:
    """Smallest circle enclosing at most three points."""
    if len(points) > 3:
        raise ValueError("at most three points are allowed")
    if not points:
        return Circle((0.0, 0.0), 0.0)
    if len(points) == 1:
        return Circle((float(points[0][0]), float(points[0][1])), 0.0)
    if len(points) == 2:
        return circle_from_two(points[0], points[1])

    for p, q in combinations(points, 2):
        circle = circle_from_two(p, q)
        if all(_covers(circle, r) for r in points):
            return circle
    return circle_from_three(points[0], points[1], points[2])


def _covers(circle: Circle, point: Sequence[float]) -> bool:
    return distance(circle.center, point) <= circle.radius + _EPSILON * max(
        1.0, circle.radius
    )


def smallest_enclosing_circle(
    points: Iterable[Sequence[float]], rng: random.Random | None = None
) -> Circle:
    """Smallest enclosing disc of the points (randomised incremental Welzl)."""
    rng = rng if rng is not None else random.Random()
    pts = [(float(p[0]), float(p[1])) for p in points]
    rng.shuffle(pts)

    circle = Circle((0.0, 0.0), 0.0)
    for i, p in enumerate(pts):
        if i > 0 and _covers(circle, p):
            continue
        circle = Circle(p, 0.0)
        for j, q in enumerate(pts[:i]):
            if _covers(circle, q):
                continue
            circle = circle_from_two(p, q)
            for r in pts[:j]:
                if not _covers(circle, r):
                    circle = min_circle_trivial([p, q, r])
    return circle


def _cartesian_points(nodes: Iterable[Sequence[int]]) -> list[Point]:
    return [to_cartesian(n[0], n[1]) for n in nodes]


def sed_circumference(
    nodes: Iterable[Sequence[int]], rng: random.Random | None = None
) -> float:
    """Circumference of the smallest disc enclosing the given lattice nodes."""
    circle = smallest_enclosing_circle(_cartesian_points(nodes), rng)
    return circle.radius * 2.0 * math.pi


def _cross(o: Point, a: Point, b: Point) -> float:
    return (a[0] - o[0]) * (b[1] - o[1]) - (a[1] - o[1]) * (b[0] - o[0])


def convex_hull_perimeter(nodes: Iterable[Sequence[int]]) -> float:
    """Perimeter of the convex hull of the given lattice nodes."""
    pts = sorted(set(_cartesian_points(nodes)))
    if not pts:
        raise ValueError("convex hull of no points is undefined")
    if len(pts) == 1:
        return 0.0

    def half(seq: Iterable[Point]) -> list[Point]:
        chain: list[Point] = []
        for p in seq:
            while len(chain) >= 2 and _cross(chain[-2], chain[-1], p) <= 0:
                chain.pop()
            chain.append(p)
        return chain

    lower = half(pts)
    upper = half(reversed(pts))
    hull = lower[:-1] + upper[:-1]
    return sum(distance(a, b) for a, b in zip(hull, hull[1:] + hull[:1]))


def dispersion(nodes: Iterable[Sequence[int]]) -> float:
    """Sum of distances from every node to the centroid of all nodes."""
    pts = _cartesian_points(nodes)
    if not pts:
        raise ValueError("dispersion of no points is undefined")
    n = len(pts)
    centroid = (sum(p[0] for p in pts) / n, sum(p[1] for p in pts) / n)
    return sum(distance(centroid, p) for p in pts)


def max_distance(nodes: Iterable[Sequence[int]]) -> float:
    """Largest Cartesian distance between any two of the given nodes."""
    pts = _cartesian_points(nodes)
    return max((distance(a, b) for a, b in combinations(pts, 2)), default=0.0)