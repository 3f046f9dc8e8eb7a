"""Package entry point for dense-blas.

The implementation lives in the top-level packages `core/`, `matrix/` and
`blas/`. This package re-exports the public surface so callers can simply
`from dense_blas import gemv, ger, DenseMatrix, DenseVector, NoTranspose`.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

from blas import Level2Interface, NaiveLevel2, ReferenceLevel2, gemv, ger, get_level2
from core.exceptions import DenseBlasError, DimensionMismatchError
from core.transposition import NoTranspose, Transpose, Transposition
from matrix import (
    DenseMatrix,
    DenseVector,
    MatrixLike,
    StridedVector,
    SubMatrix,
    TransposedMatrix,
    VectorLike,
)

try:
    __version__ = version("dense-blas")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "DenseBlasError",
    "DenseMatrix",
    "DenseVector",
    "DimensionMismatchError",
    "Level2Interface",
    "MatrixLike",
    "NaiveLevel2",
    "NoTranspose",
    "ReferenceLevel2",
    "StridedVector",
    "SubMatrix",
    "Transpose",
    "TransposedMatrix",
    "Transposition",
    "VectorLike",
    "gemv",
    "ger",
    "get_level2",
]
