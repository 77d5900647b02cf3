from __future__ import annotations
import argparse
import os
from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from curve_simplify.geometry import as_curve
from curve_simplify.metrics import max_deviation, path_length, reduction_ratio
from curve_simplify.simplify import Method, SimplifyConfig, simplify_indices


def synthetic_curve(n: int = 400, noise: float = 0.05, seed: int = 0) -> np.ndarray:
    """
    Noisy sine wave sampled densely along x. Returns (n,2).
    """
    rng = np.random.default_rng(seed)
    x = np.linspace(0.0, 4.0 * np.pi, n)
    y = np.sin(x) + 0.3 * np.sin(3.0 * x) + noise * rng.standard_normal(n)
    return np.stack([x, y], axis=1)


def load_curve(path: str) -> np.ndarray:
    """
    Read x,y rows from a text file (comma or whitespace separated, '#' comments).
    """
    with open(path, "r", encoding="utf-8") as f:
        rows = [line.split("#", 1)[0].strip() for line in f]
    rows = [r for r in rows if r]
    if not rows:
        return as_curve([])
    delimiter = "," if "," in rows[0] else None
    data = np.loadtxt(rows, delimiter=delimiter, ndmin=2)
    return as_curve(data)


def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Simplify a 2D polyline")
    ap.add_argument("--in", dest="inp", type=str, default=None, help="Input text file with x,y rows")
    ap.add_argument("--synthetic", action="store_true", help="Use a generated noisy sine curve")
    ap.add_argument("--method", type=str, default="douglas_peucker", choices=[m.value for m in Method])
    ap.add_argument("--epsilon", type=float, default=0.1, help="Tolerance for radial/perpendicular/douglas_peucker")
    ap.add_argument("--n", type=int, default=None, help="Target point count for method=count")
    ap.add_argument("--out", type=str, default=None, help="Where to write the simplified x,y rows")
    ap.add_argument("--plot", action="store_true", help="Show input vs simplified curve")
    args = ap.parse_args(argv)

    if args.synthetic or args.inp is None:
        pts = synthetic_curve()
    else:
        if not os.path.isfile(args.inp):
            raise SystemExit(f"Could not read curve: {args.inp}")
        pts = load_curve(args.inp)

    try:
        cfg = SimplifyConfig(method=args.method, epsilon=args.epsilon, n=args.n)
    except ValueError as e:
        raise SystemExit(f"Invalid arguments: {e}")

    idx = simplify_indices(pts, cfg)
    out = pts[idx]

    print(f"method: {cfg.method.value}  parameter: {cfg.parameter}")
    print(f"points: {pts.shape[0]} -> {out.shape[0]}  (ratio {reduction_ratio(pts.shape[0], out.shape[0]):.3f})")
    if out.shape[0] >= 2:
        print(f"max deviation: {max_deviation(pts, idx):.6f}")
        print(f"length: {path_length(pts):.4f} -> {path_length(out):.4f}")

    if args.out:
        os.makedirs(os.path.dirname(args.out) or ".", exist_ok=True)
        np.savetxt(args.out, out, delimiter=",", fmt="%.10g")
        print("Saved:", args.out)

    if args.plot:
        plt.figure(figsize=(10, 4))
        plt.plot(pts[:, 0], pts[:, 1], linewidth=1, alpha=0.6, label=f"input ({pts.shape[0]})")
        plt.plot(out[:, 0], out[:, 1], marker="o", markersize=3, linewidth=1.5, label=f"simplified ({out.shape[0]})")
        plt.gca().set_aspect("equal", adjustable="box")
        plt.title(f"{cfg.method.value} simplification")
        plt.legend()
        plt.tight_layout()
        plt.show()

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
