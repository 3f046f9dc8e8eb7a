"""BLAS level 2: matrix-vector products and rank-1 updates.

Level-2 routines touch O(n^2) elements and perform O(n^2) flops. Compared with
the Fortran reference API, matrix and vector sizes, strides and leading
dimensions are carried by the ``MatrixLike``/``VectorLike`` arguments, and the
``TRANS`` character argument is a ``Transposition`` member.

Note on IEEE semantics
----------------------
``NaiveLevel2`` skips work whose contribution is an exact zero: columns ``j``
with ``x[j] == 0`` in ``gemv`` without transposition, columns with
``y[j] == 0`` in ``ger``, and the whole update when ``alpha == 0``. With
``beta == 0`` the output is overwritten rather than scaled. For finite inputs
this gives the same result as the literal formula, but a NaN or Inf in ``A``
(or in the incoming ``y`` when ``beta == 0``) is not propagated through a
skipped zero, whereas ``0 * NaN`` would be NaN. ``ReferenceLevel2`` in
``blas.reference`` follows the literal formula.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

from core.exceptions import DimensionMismatchError
from core.transposition import Transposition
from matrix.capabilities import MatrixLike, VectorLike

logger = logging.getLogger("dense_blas")


class Level2Interface(ABC):
    """Contract shared by every level-2 implementation."""

    name = "abstract"

    @abstractmethod
    def gemv(
        self,
        trans: Transposition,
        alpha: float,
        a: MatrixLike,
        x: VectorLike,
        beta: float,
        y: VectorLike,
    ) -> None:
        """Compute ``y := alpha * op(A) * x + beta * y`` in place.

        ``op(A)`` is ``A`` for ``Transposition.NO_TRANSPOSE`` and ``A^T`` for
        ``Transposition.TRANSPOSE``.

        Raises
        ------
        DimensionMismatchError
            If ``len(y)`` and ``len(x)`` do not match the rows and columns of
            ``op(A)``. Nothing is written in that case.
        """

    @abstractmethod
    def ger(self, alpha: float, x: VectorLike, y: VectorLike, a: MatrixLike) -> None:
        """Compute the rank-1 update ``A := alpha * x * y^T + A`` in place.

        Raises
        ------
        DimensionMismatchError
            Unless ``(len(x), len(y)) == A.dimensions``. Nothing is written
            in that case.
        """

    def check_gemv_dimensions(
        self, trans: Transposition, a: MatrixLike, x: VectorLike, y: VectorLike
    ) -> tuple[int, int]:
        """Validate ``gemv`` arguments and return ``A.dimensions``."""
        if not isinstance(trans, Transposition):
            raise TypeError(f"trans must be a Transposition member, got {trans!r}")
        dims = a.dimensions
        op_rows, op_cols = trans.op_dimensions(dims)
        if y.length != op_rows or x.length != op_cols:
            err = DimensionMismatchError(
                "gemv",
                matrix_shape=dims,
                x_length=x.length,
                y_length=y.length,
                trans=trans,
            )
            logger.error(str(err))
            raise err
        return dims

    def check_ger_dimensions(
        self, x: VectorLike, y: VectorLike, a: MatrixLike
    ) -> tuple[int, int]:
        """Validate ``ger`` arguments and return ``A.dimensions``."""
        dims = a.dimensions
        if (x.length, y.length) != tuple(dims):
            err = DimensionMismatchError(
                "ger", matrix_shape=dims, x_length=x.length, y_length=y.length
            )
            logger.error(str(err))
            raise err
        return dims

    def __repr__(self) -> str:  # pragma: no cover - simple utility
        return f"{self.__class__.__name__}()"


class NaiveLevel2(Level2Interface):
    """Straightforward loops ordered for column-major storage."""

    name = "naive"

    def gemv(self, trans, alpha, a, x, beta, y):
        m, n = self.check_gemv_dimensions(trans, a, x, y)
        logger.debug(
            f"gemv({trans.label}) A={m}x{n} alpha={alpha!r} beta={beta!r}"
        )

        # y := beta y
        if beta == 0:
            for i in range(y.length):
                y[i] = 0.0
        elif beta != 1:
            for i in range(y.length):
                y[i] *= beta

        if alpha == 0:
            return

        # y += alpha op(A) x
        if trans is Transposition.NO_TRANSPOSE:
            for j in range(n):
                xj = x[j]
                if xj != 0:
                    t = alpha * xj
                    for i in range(m):
                        y[i] += t * a[i, j]
        else:
            for j in range(n):
                t = 0.0
                for i in range(m):
                    t += a[i, j] * x[i]
                y[j] += alpha * t

    def ger(self, alpha, x, y, a):
        m, n = self.check_ger_dimensions(x, y, a)
        logger.debug(f"ger A={m}x{n} alpha={alpha!r}")

        if alpha == 0:
            return

        for j in range(n):
            yj = y[j]
            if yj != 0:
                t = alpha * yj
                for i in range(m):
                    a[i, j] += x[i] * t


__all__ = ["Level2Interface", "NaiveLevel2"]
