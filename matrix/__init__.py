"""Vector and matrix containers implementing the kernel capabilities."""

from .capabilities import MatrixLike, VectorLike
from .dense import DenseMatrix, DenseVector
from .views import StridedVector, SubMatrix, TransposedMatrix

__all__ = [
    "MatrixLike",
    "VectorLike",
    "DenseMatrix",
    "DenseVector",
    "StridedVector",
    "SubMatrix",
    "TransposedMatrix",
]
