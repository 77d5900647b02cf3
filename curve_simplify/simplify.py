from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Union

import numpy as np

from curve_simplify.filters import (
    perpendicular_indices,
    radial_indices,
    simplify_perpendicular,
    simplify_radial,
)
from curve_simplify.geometry import as_curve
from curve_simplify.polyline import rdp, rdp_count, rdp_count_indices, rdp_indices

simplify_douglas_peucker = rdp
simplify_by_count = rdp_count


class Method(str, Enum):
    RADIAL = "radial"
    PERPENDICULAR = "perpendicular"
    DOUGLAS_PEUCKER = "douglas_peucker"
    COUNT = "count"

    @property
    def uses_count(self) -> bool:
        return self is Method.COUNT


# method -> function returning kept indices for (curve, parameter)
_INDEX_FUNCS: Dict[Method, Callable[[np.ndarray, float], np.ndarray]] = {
    Method.RADIAL: radial_indices,
    Method.PERPENDICULAR: perpendicular_indices,
    Method.DOUGLAS_PEUCKER: rdp_indices,
    Method.COUNT: rdp_count_indices,
}


@dataclass(frozen=True)
class SimplifyConfig:
    method: Union[Method, str] = Method.DOUGLAS_PEUCKER
    epsilon: Optional[float] = 1.0   # tolerance for radial / perpendicular / douglas_peucker
    n: Optional[int] = None          # target size for count

    def __post_init__(self):
        try:
            method = Method(self.method)
        except ValueError:
            choices = ", ".join(m.value for m in Method)
            raise ValueError(f"method must be one of: {choices}, got {self.method!r}") from None
        object.__setattr__(self, "method", method)

        if method.uses_count:
            if self.n is None:
                raise ValueError("method 'count' requires n")
        else:
            if self.epsilon is None:
                raise ValueError(f"method '{method.value}' requires epsilon")
            if self.epsilon < 0:
                raise ValueError("epsilon must be >= 0")

    @property
    def parameter(self):
        return int(self.n) if self.method.uses_count else float(self.epsilon)


def simplify_indices(points_xy: np.ndarray, cfg: SimplifyConfig = SimplifyConfig()) -> np.ndarray:
    """
    Indices of the points kept by cfg.method, ascending.
    """
    return _INDEX_FUNCS[cfg.method](points_xy, cfg.parameter)


def simplify(points_xy: np.ndarray, cfg: SimplifyConfig = SimplifyConfig()) -> np.ndarray:
    """
    Simplify a curve with the method and parameter from cfg.
    points_xy: (N,2)
    Returns: (K,2) ordered subsequence of the input, K <= N.
    """
    pts = as_curve(points_xy)
    return pts[simplify_indices(pts, cfg)]


__all__ = [
    "Method",
    "SimplifyConfig",
    "simplify",
    "simplify_indices",
    "simplify_radial",
    "simplify_perpendicular",
    "simplify_douglas_peucker",
    "simplify_by_count",
]
