# scripts/bench_ndarray_add_dot.py
"""
Microbench: DefaultNDArray `add` (same-rank and broadcast) and `dot`.

What it measures
----------------
- Per-op latency of the Python-level broadcasting traversal in `add`.
- Per-op latency of `dot` (matrix @ matrix and matrix @ vector).
- Uses warmup iterations (not recorded), then repeats with median/p95.

Notes
-----
- `add` walks every element through `Point` validation, so it is expected to
  be orders of magnitude slower than NumPy's own broadcasting. The numbers are
  useful for spotting regressions, not for comparing against NumPy.

Example
-------
python scripts/bench_ndarray_add_dot.py --ops add add_bcast dot dot_vec \
    --rows 64 --cols 32 --warmup 5 --repeats 50
"""

from __future__ import annotations

import argparse
import os
import statistics
import sys
import time
from dataclasses import dataclass
from typing import Callable, Dict, List

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from intnd import Shape, ones, zeros  # noqa: E402


@dataclass
class BenchResult:
    op: str
    median_ms: float
    p95_ms: float
    repeats: int


def _percentile(xs: List[float], q: float) -> float:
    ordered = sorted(xs)
    k = max(0, min(len(ordered) - 1, int(round(q * (len(ordered) - 1)))))
    return ordered[k]


def _time_op(fn: Callable[[], object], warmup: int, repeats: int) -> List[float]:
    for _ in range(warmup):
        fn()
    samples: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        samples.append((time.perf_counter() - t0) * 1e3)
    return samples


def _build_ops(rows: int, cols: int) -> Dict[str, Callable[[], object]]:
    a = zeros(Shape(rows, cols))
    same = ones(Shape(rows, cols))
    bcast = ones(Shape(rows))
    rhs = ones(Shape(cols, rows))
    vec = ones(Shape(cols))

    return {
        "add": lambda: a.add(same),
        "add_bcast": lambda: a.add(bcast),
        "dot": lambda: a.dot(rhs),
        "dot_vec": lambda: a.dot(vec),
    }


def main() -> None:
    p = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    p.add_argument(
        "--ops", nargs="+", default=["add", "add_bcast", "dot", "dot_vec"]
    )
    p.add_argument("--rows", type=int, default=64)
    p.add_argument("--cols", type=int, default=32)
    p.add_argument("--warmup", type=int, default=5)
    p.add_argument("--repeats", type=int, default=50)
    args = p.parse_args()

    ops = _build_ops(args.rows, args.cols)
    unknown = [o for o in args.ops if o not in ops]
    if unknown:
        p.error(f"unknown ops: {unknown}; choose from {sorted(ops)}")

    results: List[BenchResult] = []
    for name in args.ops:
        samples = _time_op(ops[name], args.warmup, args.repeats)
        results.append(
            BenchResult(
                op=name,
                median_ms=statistics.median(samples),
                p95_ms=_percentile(samples, 0.95),
                repeats=args.repeats,
            )
        )

    print(f"shape=({args.rows}, {args.cols}) warmup={args.warmup}")
    print(f"{'op':<12}{'median_ms':>12}{'p95_ms':>12}")
    for r in results:
        print(f"{r.op:<12}{r.median_ms:>12.3f}{r.p95_ms:>12.3f}")


if __name__ == "__main__":
    main()
