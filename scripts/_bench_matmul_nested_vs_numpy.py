"""
scripts/_bench_matmul_nested_vs_numpy.py

NestedArray vs numpy microbenchmark (NOT a unit test) for nestarray.

Benchmarks, per case:
- matrix_multiply(a, b)        (a @ b)
- matrix_add(a, b)             (a + b)
- to_double_array(a)           (row-major flat export)

Timing policy
-------------
- Operands are built once per case, outside the timed region.
- Uses warmup iterations before timed repeats.
- Reports the median of the timed repeats.

Usage
-----
python scripts/_bench_matmul_nested_vs_numpy.py --presets
python scripts/_bench_matmul_nested_vs_numpy.py --rows 64 --inner 64 --cols 64 --sanity
"""

from __future__ import annotations

import argparse
import os
import statistics
import sys
import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

# -------------------------
# Make repo_root/src importable
# -------------------------
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from nestarray import NestedArray


def _median(xs: list[float]) -> float:
    return statistics.median(xs)


def _fmt_seconds(x: float) -> str:
    if x < 1e-6:
        return f"{x*1e9:.2f} ns"
    if x < 1e-3:
        return f"{x*1e6:.2f} µs"
    if x < 1:
        return f"{x*1e3:.2f} ms"
    return f"{x:.3f} s"


def _slowdown(nested_s: float, numpy_s: float) -> float:
    return (nested_s / numpy_s) if numpy_s > 0 else float("inf")


def _time_one(fn: Callable[[], None], *, warmup: int, repeats: int) -> list[float]:
    for _ in range(warmup):
        fn()
    ts: list[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        ts.append(t1 - t0)
    return ts


@dataclass(frozen=True)
class Case:
    name: str
    rows: int
    inner: int
    cols: int


def bench_case(case: Case, *, warmup: int, repeats: int, sanity: bool, seed: int) -> None:
    rng = np.random.default_rng(seed)

    a_np = rng.standard_normal((case.rows, case.inner))
    b_np = rng.standard_normal((case.inner, case.cols))
    c_np = rng.standard_normal((case.rows, case.inner))

    a = NestedArray.construct_matrix(a_np.tolist())
    b = NestedArray.construct_matrix(b_np.tolist())
    c = NestedArray.construct_matrix(c_np.tolist())

    # -------------------------
    # Sanity check (not timed)
    # -------------------------
    if sanity:
        np.testing.assert_allclose(
            np.asarray(a.matrix_multiply(b).to_list()), a_np @ b_np, rtol=1e-10, atol=1e-10
        )
        np.testing.assert_allclose(np.asarray((a + c).to_list()), a_np + c_np)
        np.testing.assert_array_equal(a.to_double_array(), a_np.ravel())

    ops = {
        "matmul": (lambda: a.matrix_multiply(b), lambda: a_np @ b_np),
        "add": (lambda: a.matrix_add(c), lambda: a_np + c_np),
        "flatten": (lambda: a.to_double_array(), lambda: a_np.ravel().copy()),
    }

    for op, (nested_fn, numpy_fn) in ops.items():
        t_nested = _median(_time_one(nested_fn, warmup=warmup, repeats=repeats))
        t_numpy = _median(_time_one(numpy_fn, warmup=warmup, repeats=repeats))
        print(
            f"{case.name:>10} {op:>8}: "
            f"shape=({case.rows}x{case.inner})@({case.inner}x{case.cols}) | "
            f"nested={_fmt_seconds(t_nested):>10}  numpy={_fmt_seconds(t_numpy):>10}  "
            f"slowdown={_slowdown(t_nested, t_numpy):>9.1f}x"
        )


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--rows", type=int, default=32)
    ap.add_argument("--inner", type=int, default=32)
    ap.add_argument("--cols", type=int, default=32)
    ap.add_argument("--warmup", type=int, default=3)
    ap.add_argument("--repeats", type=int, default=20)
    ap.add_argument("--presets", action="store_true")
    ap.add_argument("--sanity", action="store_true")
    ap.add_argument("--seed", type=int, default=0)
    args = ap.parse_args()

    if args.presets:
        cases = [
            Case("tiny", 4, 4, 4),
            Case("small", 16, 16, 16),
            Case("mid", 64, 64, 64),
            Case("tall", 256, 16, 8),
        ]
    else:
        cases = [Case("single", args.rows, args.inner, args.cols)]

    print("\n" + "=" * 100)
    print(
        f"NestedArray vs numpy benchmark "
        f"(warmup={args.warmup}, repeats={args.repeats}, sanity={args.sanity})"
    )
    print("=" * 100)

    for c in cases:
        bench_case(
            c,
            warmup=args.warmup,
            repeats=args.repeats,
            sanity=args.sanity,
            seed=args.seed,
        )


if __name__ == "__main__":
    main()
