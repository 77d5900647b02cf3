from __future__ import annotations
import heapq
from typing import Optional

import numpy as np

from curve_simplify.geometry import as_curve, max_distance_in_range


def rdp_indices(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Ramer-Douglas-Peucker: indices of the points kept for tolerance epsilon.
    Uses an explicit stack of (start, end) ranges instead of recursion.
    """
    pts = as_curve(points_xy)
    n = pts.shape[0]
    if n <= 2:
        return np.arange(n)

    keep = np.zeros(n, dtype=bool)
    keep[0] = True
    keep[-1] = True

    stack = [(0, n - 1)]
    while stack:
        i, j = stack.pop()
        if j <= i + 1:
            continue

        max_d, kmax = max_distance_in_range(pts, i, j)
        if max_d > epsilon:
            keep[kmax] = True
            stack.append((i, kmax))
            stack.append((kmax, j))

    return np.nonzero(keep)[0]


def rdp(points_xy: np.ndarray, epsilon: float) -> np.ndarray:
    """
    Ramer-Douglas-Peucker polyline simplification.
    points_xy: (N,2) float
    epsilon: max allowed deviation from the infinite line through each chord
    """
    pts = as_curve(points_xy)
    return pts[rdp_indices(pts, epsilon)]


def resolve_count_edge_case(n_points: int, n: int) -> Optional[np.ndarray]:
    """
    Indices for the trivial cases of count-targeted simplification,
    or None when the ranked traversal has to run.
    """
    if n <= 0 or n_points == 0:
        return np.arange(0)
    if n == 1:
        return np.arange(1)
    if n == 2 and n_points >= 2:
        return np.array([0, n_points - 1])
    if n >= n_points:
        return np.arange(n_points)
    return None


def _split_candidates(pts: np.ndarray) -> list[tuple[float, int]]:
    # max-heap on (distance, index); endpoints ride on +inf so they always survive
    n = pts.shape[0]
    heap = [(-np.inf, 0), (-np.inf, -(n - 1))]
    heapq.heapify(heap)

    stack = [(0, n - 1)]
    while stack:
        i, j = stack.pop()
        if j <= i + 1:
            continue
        max_d, kmax = max_distance_in_range(pts, i, j)
        heapq.heappush(heap, (-max_d, -kmax))
        stack.append((i, kmax))
        stack.append((kmax, j))
    return heap


def extract_top_indices(heap: list[tuple[float, int]], size: int) -> np.ndarray:
    """
    Pop the `size` largest-distance candidates from a negated max-heap.
    heap entries: (-distance, -index)
    Returns the popped indices sorted ascending.
    """
    if len(heap) < size:
        raise ValueError(f"cannot extract {size} points from {len(heap)} ranked candidates")
    out = [-heapq.heappop(heap)[1] for _ in range(size)]
    return np.sort(np.asarray(out, dtype=int))


def rdp_count_indices(points_xy: np.ndarray, n: int) -> np.ndarray:
    """
    Count-targeted Douglas-Peucker: indices of the n most significant points.

    Every range is split down to adjacent indices (no tolerance cutoff), each
    split point is ranked by its distance from the chord it was found on, and
    the n highest ranked points are returned. Greedy, not an optimal n-point
    approximation.
    """
    pts = as_curve(points_xy)
    n = int(n)
    trivial = resolve_count_edge_case(pts.shape[0], n)
    if trivial is not None:
        return trivial

    heap = _split_candidates(pts)
    return extract_top_indices(heap, n)


def rdp_count(points_xy: np.ndarray, n: int) -> np.ndarray:
    pts = as_curve(points_xy)
    return pts[rdp_count_indices(pts, n)]
