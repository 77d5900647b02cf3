from __future__ import annotations
import numpy as np

from curve_simplify.geometry import as_curve, line_distance, point_distance


def radial_indices(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Indices kept by radial-distance filtering.
    A point is kept when it is at least epsilon away from the last kept point.
    The last point is always kept.
    """
    pts = as_curve(points_xy)
    n = pts.shape[0]
    if n <= 2:
        return np.arange(n)

    keep = [0]
    anchor = pts[0]
    for i in range(1, n - 1):
        if point_distance(anchor, pts[i]) >= epsilon:
            keep.append(i)
            anchor = pts[i]
    keep.append(n - 1)
    return np.asarray(keep, dtype=int)


def simplify_radial(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    pts = as_curve(points_xy)
    return pts[radial_indices(pts, epsilon)]


def perpendicular_indices(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Indices kept by perpendicular-distance filtering.

    Point i is tested against the line (last kept point, point i+1). If it is
    closer than epsilon it is dropped and point i+1 is kept straight away, so
    the scan jumps to i+2.
    """
    pts = as_curve(points_xy)
    n = pts.shape[0]
    if n <= 2:
        return np.arange(n)

    keep = [0]
    left = pts[0]
    i = 1
    while i < n - 1:
        if line_distance(pts[i], left, pts[i + 1]) >= epsilon:
            keep.append(i)
            left = pts[i]
            i += 1
        else:
            keep.append(i + 1)
            left = pts[i + 1]
            i += 2
    if i == n - 1:
        keep.append(n - 1)
    return np.asarray(keep, dtype=int)


def simplify_perpendicular(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    pts = as_curve(points_xy)
    return pts[perpendicular_indices(pts, epsilon)]
