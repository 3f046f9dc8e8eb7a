"""Literal level-2 definitions without fast paths.

Every product is formed, including those with a zero factor, and ``beta``
always multiplies the incoming ``y``. NaN and Inf therefore propagate exactly
as IEEE arithmetic dictates. The traversal is row by row, independent of the
column-major ordering used by ``NaiveLevel2``, which makes this backend a
useful cross-check.
"""

from __future__ import annotations

import logging

from blas.level2 import Level2Interface
from core.transposition import Transposition

logger = logging.getLogger("dense_blas")


class ReferenceLevel2(Level2Interface):
    name = "reference"

    def gemv(self, trans, alpha, a, x, beta, y):
        dims = self.check_gemv_dimensions(trans, a, x, y)
        op_rows, op_cols = trans.op_dimensions(dims)
        logger.debug(
            f"reference gemv({trans.label}) A={dims[0]}x{dims[1]} "
            f"alpha={alpha!r} beta={beta!r}"
        )

        transposed = trans is Transposition.TRANSPOSE
        for i in range(op_rows):
            t = 0.0
            for k in range(op_cols):
                aik = a[k, i] if transposed else a[i, k]
                t += aik * x[k]
            y[i] = alpha * t + beta * y[i]

    def ger(self, alpha, x, y, a):
        m, n = self.check_ger_dimensions(x, y, a)
        logger.debug(f"reference ger A={m}x{n} alpha={alpha!r}")

        for i in range(m):
            for j in range(n):
                a[i, j] = alpha * x[i] * y[j] + a[i, j]


__all__ = ["ReferenceLevel2"]
