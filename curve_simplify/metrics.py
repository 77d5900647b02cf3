from __future__ import annotations
import numpy as np

from curve_simplify.geometry import as_curve, line_distances


def max_deviation(points_xy: np.ndarray, kept_indices: np.ndarray) -> float:
    """
    Largest distance of a dropped point from the line through the two kept
    points that bracket it.
    points_xy: (N,2) original curve
    kept_indices: ascending indices of the simplified curve (must include 0 and N-1)
    Returns 0.0 when nothing was dropped.
    """
    pts = as_curve(points_xy)
    idx = np.asarray(kept_indices, dtype=int).ravel()
    n = pts.shape[0]
    if idx.size == 0 or n <= 2:
        return 0.0
    if np.any(np.diff(idx) <= 0):
        raise ValueError("kept_indices must be strictly increasing")
    if idx[0] != 0 or idx[-1] != n - 1:
        raise ValueError("kept_indices must include the first and last point")

    worst = 0.0
    for a, b in zip(idx[:-1], idx[1:]):
        if b <= a + 1:
            continue
        d = line_distances(pts[a + 1:b], pts[a], pts[b])
        worst = max(worst, float(d.max()))
    return worst


def reduction_ratio(n_in: int, n_out: int) -> float:
    """
    n_out / n_in (1.0 for an empty input).
    """
    if n_in < 0 or n_out < 0:
        raise ValueError("point counts must be >= 0")
    if n_in == 0:
        return 1.0
    return float(n_out) / float(n_in)


def path_length(points_xy: np.ndarray) -> float:
    pts = as_curve(points_xy)
    if pts.shape[0] < 2:
        return 0.0
    return float(np.linalg.norm(np.diff(pts, axis=0), axis=1).sum())
