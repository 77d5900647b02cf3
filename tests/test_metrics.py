import numpy as np
import pytest

from curve_simplify.metrics import max_deviation, path_length, reduction_ratio
from curve_simplify.polyline import rdp_indices


def test_max_deviation_is_bounded_by_rdp_tolerance():
    rng = np.random.default_rng(4)
    pts = np.cumsum(rng.normal(size=(300, 2)), axis=0)
    for eps in (0.5, 1.0, 3.0):
        idx = rdp_indices(pts, eps)
        assert max_deviation(pts, idx) <= eps


def test_max_deviation_of_known_drop():
    pts = np.array([(0, 0), (1, 2), (2, 0)], dtype=float)
    assert max_deviation(pts, [0, 2]) == pytest.approx(2.0)
    assert max_deviation(pts, [0, 1, 2]) == 0.0


def test_max_deviation_validates_indices():
    pts = np.array([(0, 0), (1, 2), (2, 0), (3, 0)], dtype=float)
    with pytest.raises(ValueError):
        max_deviation(pts, [0, 2, 1, 3])
    with pytest.raises(ValueError):
        max_deviation(pts, [1, 3])


def test_reduction_ratio():
    assert reduction_ratio(10, 4) == pytest.approx(0.4)
    assert reduction_ratio(0, 0) == 1.0
    with pytest.raises(ValueError):
        reduction_ratio(-1, 0)


def test_path_length():
    assert path_length([(0, 0), (3, 4), (3, 5)]) == pytest.approx(6.0)
    assert path_length([(1, 1)]) == 0.0
    assert path_length([]) == 0.0
