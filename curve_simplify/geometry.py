from __future__ import annotations
from math import hypot, sqrt
from typing import NamedTuple, Sequence

import numpy as np


class Point(NamedTuple):
    x: float
    y: float


def as_curve(points) -> np.ndarray:
    """
    Convert points to a curve array.
    points: (N,2) array, or a sequence of (x, y) pairs / Point
    Returns: (N,2) float64 copy. Empty input gives shape (0,2).
    """
    pts = np.asarray(points, dtype=float)
    if pts.ndim == 1 and pts.size == 0:
        return np.empty((0, 2), dtype=float)
    if pts.ndim != 2 or pts.shape[1] != 2:
        raise ValueError(f"points must have shape (N,2), got {pts.shape}")
    if not np.all(np.isfinite(pts)):
        raise ValueError("points must be finite")
    return pts.copy()


def curve_from_xy(xs: Sequence[float], ys: Sequence[float]) -> np.ndarray:
    """
    Zip two parallel coordinate sequences into an (N,2) curve.
    """
    x = np.asarray(xs, dtype=float).ravel()
    y = np.asarray(ys, dtype=float).ravel()
    if x.shape[0] != y.shape[0]:
        raise ValueError(f"xs and ys must have same length, got {x.shape[0]} and {y.shape[0]}")
    return as_curve(np.stack([x, y], axis=1))


def to_points(curve: np.ndarray) -> list[Point]:
    pts = as_curve(curve)
    return [Point(float(x), float(y)) for x, y in pts]


def point_distance(p, q) -> float:
    return hypot(float(p[0]) - float(q[0]), float(p[1]) - float(q[1]))


def line_distance(p, a, b) -> float:
    """
    Distance from p to the infinite line through a and b (not clipped to the segment).
    For a.x == b.x (vertical line, or a == b) this is |p.x - a.x|.
    """
    px, py = float(p[0]), float(p[1])
    ax, ay = float(a[0]), float(a[1])
    bx, by = float(b[0]), float(b[1])
    if ax == bx:
        return abs(px - ax)
    m = (by - ay) / (bx - ax)
    c = ay - m * ax
    return abs(m * px - py + c) / sqrt(m * m + 1.0)


def line_distances(points: np.ndarray, a, b) -> np.ndarray:
    """
    Vectorised line_distance for points: (K,2). Returns (K,).
    """
    pts = np.asarray(points, dtype=float).reshape(-1, 2)
    ax, ay = float(a[0]), float(a[1])
    bx, by = float(b[0]), float(b[1])
    if ax == bx:
        return np.abs(pts[:, 0] - ax)
    m = (by - ay) / (bx - ax)
    c = ay - m * ax
    return np.abs(m * pts[:, 0] - pts[:, 1] + c) / sqrt(m * m + 1.0)


def max_distance_in_range(points: np.ndarray, start: int, end: int) -> tuple[float, int]:
    """
    Farthest point strictly between start and end from the line (points[start], points[end]).
    Ties go to the first index in scan order.
    Returns (max_distance, max_index); (-1.0, start) if there is no interior point.
    """
    if end <= start + 1:
        return -1.0, start
    pts = np.asarray(points, dtype=float)
    d = line_distances(pts[start + 1:end], pts[start], pts[end])
    k = int(np.argmax(d))
    return float(d[k]), start + 1 + k
