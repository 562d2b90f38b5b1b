"""Leaf-node geometry helpers. No model imports."""

from __future__ import annotations

import math

import numpy as np


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.hypot(a[0] - b[0], a[1] - b[1])


def regular_polygon_vertices(
    position: tuple[float, float],
    radius: float,
    angle: float,
    n: int,
) -> list[tuple[float, float]]:
    """Vertices of a regular n-gon, pointy-top when angle == 0.

    Vertex i sits at position + radius * (cos t, sin t) with
    t = i * sector + pi/2 + sector/2 + angle and sector = 2*pi/n.
    """
    if n < 1:
        raise ValueError(f"A regular polygon needs at least one vertex, got n={n}")

    sector = 2 * np.pi / n
    start = np.pi / 2 + sector / 2
    thetas = np.arange(n) * sector + start + angle
    xs = position[0] + radius * np.cos(thetas)
    ys = position[1] + radius * np.sin(thetas)
    return [(float(x), float(y)) for x, y in zip(xs, ys)]
