#!/usr/bin/env python3
"""Benchmark the level-2 backends against NumPy.

For each square size ``n`` and each backend this times:
  - gemv with NoTranspose
  - gemv with Transpose
  - ger

and checks every result against the equivalent NumPy expression
(``alpha * op(A) @ x + beta * y`` and ``alpha * outer(x, y) + A``).
"""

from __future__ import annotations

import argparse
import statistics
import sys
import time
from pathlib import Path
from typing import Any, Callable, Sequence

import numpy as np
import yaml

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from blas.loader import (  # noqa: E402
    BACKENDS,
    apply_parameters,
    get_level2,
    resolve_backend_name,
)
from core.parameters.config_io import load_data, parameters_from_data  # noqa: E402
from core.parameters.global_parameters import GlobalParameters  # noqa: E402
from core.transposition import Transposition  # noqa: E402
from matrix.dense import DenseMatrix, DenseVector  # noqa: E402
from runtime.logging_config import setup_logging  # noqa: E402

ALPHA = 1.5
BETA = 0.5


def _timed(fn: Callable[[], Any], repeats: int) -> dict[str, float]:
    times: list[float] = []
    for _ in range(int(repeats)):
        t0 = time.perf_counter()
        fn()
        times.append(float(time.perf_counter() - t0))
    return {
        "runs": int(repeats),
        "mean": float(statistics.fmean(times)),
        "median": float(statistics.median(times)),
        "min": float(min(times)),
        "max": float(max(times)),
    }


def _bench_case(backend: str, n: int, repeats: int, rng: np.random.Generator):
    impl = get_level2(backend)
    a_np = rng.normal(size=(n, n))
    x_np = rng.normal(size=n)
    y_np = rng.normal(size=n)
    # Exercise the zero-skip branch on a fraction of the columns.
    x_np[::4] = 0.0

    rows: list[dict[str, Any]] = []

    for trans in (Transposition.NO_TRANSPOSE, Transposition.TRANSPOSE):
        a = DenseMatrix.from_array(a_np)
        x = DenseVector(x_np)
        op_a = a_np if trans is Transposition.NO_TRANSPOSE else a_np.T
        expected = ALPHA * op_a @ x_np + BETA * y_np

        # Each timed call restarts from the same y so the last one is checkable.
        y = DenseVector(y_np)

        def run(y=y, trans=trans, a=a, x=x):
            for i in range(n):
                y[i] = y_np[i]
            impl.gemv(trans, ALPHA, a, x, BETA, y)

        timing = _timed(run, repeats)
        err = float(np.max(np.abs(y.to_array() - expected))) if n else 0.0
        rows.append(
            {
                "backend": backend,
                "kernel": f"gemv_{trans.label}",
                "n": int(n),
                "timing_seconds": timing,
                "max_abs_error": err,
            }
        )

    x = DenseVector(x_np)
    yv = DenseVector(y_np)
    expected_a = ALPHA * np.outer(x_np, y_np) + a_np
    a = DenseMatrix.from_array(a_np)

    def run_ger():
        # ger accumulates, so restore A first.
        for j in range(n):
            for i in range(n):
                a[i, j] = a_np[i, j]
        impl.ger(ALPHA, x, yv, a)

    timing = _timed(run_ger, repeats)
    err = float(np.max(np.abs(a.to_array() - expected_a))) if n else 0.0
    rows.append(
        {
            "backend": backend,
            "kernel": "ger",
            "n": int(n),
            "timing_seconds": timing,
            "max_abs_error": err,
        }
    )
    return rows


def run_benchmark(
    sizes: Sequence[int],
    repeats: int,
    backends: Sequence[str] | None = None,
    seed: int = 0,
) -> list[dict[str, Any]]:
    """Time every kernel for every backend and size.

    Returns
    -------
    list[dict]
        One row per (backend, kernel, n) with ``timing_seconds`` statistics and
        the ``max_abs_error`` against NumPy.
    """
    if repeats < 1:
        raise ValueError(f"repeats must be at least 1, got {repeats}")
    backends = list(backends) if backends else sorted(BACKENDS)
    rng = np.random.default_rng(seed)

    results: list[dict[str, Any]] = []
    for n in sizes:
        for backend in backends:
            results.extend(_bench_case(backend, int(n), repeats, rng))
    return results


def _print_table(results: list[dict[str, Any]]) -> None:
    print(f"{'Backend':<10} | {'Kernel':<18} | {'n':>5} | {'Median':>10} | {'Max err':>10}")
    print("-" * 65)
    for row in results:
        print(
            f"{row['backend']:<10} | {row['kernel']:<18} | {row['n']:>5} | "
            f"{row['timing_seconds']['median']:>10.6f} | {row['max_abs_error']:>10.2e}"
        )


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    ap.add_argument("--config", help="YAML/JSON file with global_parameters")
    ap.add_argument("--sizes", type=int, nargs="+")
    ap.add_argument("--repeats", type=int)
    ap.add_argument(
        "--backend",
        action="append",
        choices=sorted(BACKENDS),
        help="Backend to time (repeatable). Defaults to the config's "
        "level2_backend, or every backend without one.",
    )
    ap.add_argument("--output", help="Write the report as YAML to this path")
    ap.add_argument("--log-file")
    ap.add_argument("--quiet", action="store_true")
    ap.add_argument(
        "--debug",
        action="store_true",
        help="Log every kernel call with its shape and scalars",
    )
    args = ap.parse_args(argv)

    logger = setup_logging(args.log_file, quiet=args.quiet, debug=args.debug)

    params = GlobalParameters()
    backends = args.backend
    if args.config:
        data = load_data(args.config)
        params = parameters_from_data(data, params, source=args.config)
        configured = data.get("global_parameters", {}).get("level2_backend")
        if backends is None and configured:
            backends = [resolve_backend_name(configured)]
        apply_parameters(params)
    sizes = args.sizes or params.get("benchmark_sizes")
    repeats = args.repeats or int(params.get("benchmark_repeats"))

    logger.info(f"Benchmarking level-2 kernels for sizes {list(sizes)}")
    results = run_benchmark(
        sizes, repeats, backends=backends, seed=int(params.get("seed", 0))
    )
    _print_table(results)

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(yaml.safe_dump(results, sort_keys=False), encoding="utf-8")
        logger.info(f"Wrote benchmark report to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
