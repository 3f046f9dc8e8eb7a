"""Dense BLAS level-2 kernels.

``gemv`` and ``ger`` dispatch to the implementation returned by
``blas.loader.get_level2``; ``NaiveLevel2`` unless configured otherwise
through ``DENSE_BLAS_LEVEL2`` or ``apply_parameters(params)``.
"""

from __future__ import annotations

from core.transposition import Transposition
from matrix.capabilities import MatrixLike, VectorLike

from .level2 import Level2Interface, NaiveLevel2
from .loader import apply_parameters, get_level2, reset_level2_cache
from .reference import ReferenceLevel2


def gemv(
    trans: Transposition,
    alpha: float,
    a: MatrixLike,
    x: VectorLike,
    beta: float,
    y: VectorLike,
) -> None:
    """``y := alpha * op(A) * x + beta * y``; see ``Level2Interface.gemv``."""
    get_level2().gemv(trans, alpha, a, x, beta, y)


def ger(alpha: float, x: VectorLike, y: VectorLike, a: MatrixLike) -> None:
    """``A := alpha * x * y^T + A``; see ``Level2Interface.ger``."""
    get_level2().ger(alpha, x, y, a)


__all__ = [
    "Level2Interface",
    "NaiveLevel2",
    "ReferenceLevel2",
    "apply_parameters",
    "gemv",
    "ger",
    "get_level2",
    "reset_level2_cache",
]
