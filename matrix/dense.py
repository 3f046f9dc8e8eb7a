"""Contiguous float64 storage for vectors and column-major matrices."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from matrix.capabilities import MatrixLike, VectorLike, check_index
from matrix.views import StridedVector


class DenseVector(VectorLike):
    """Vector backed by its own contiguous float64 NumPy buffer."""

    def __init__(self, values: Iterable[float]) -> None:
        if not isinstance(values, np.ndarray):
            values = list(values)
        data = np.array(values, dtype=np.float64)
        if data.ndim != 1:
            raise ValueError(f"DenseVector expects a flat sequence, got shape {data.shape}")
        self._data = data

    @classmethod
    def zeros(cls, length: int) -> "DenseVector":
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        return cls(np.zeros(length, dtype=np.float64))

    @property
    def length(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, i: int) -> float:
        check_index(i, self._data.shape[0])
        return float(self._data[i])

    def __setitem__(self, i: int, value: float) -> None:
        check_index(i, self._data.shape[0])
        self._data[i] = value

    def to_array(self) -> np.ndarray:
        return self._data.copy()


class DenseMatrix(MatrixLike):
    """Column-major matrix stored in one contiguous float64 buffer.

    Element ``(i, j)`` lives at ``buffer[i + j * rows]``, i.e. the leading
    dimension equals the number of rows. Each column is therefore a
    contiguous run, which is the access pattern the level-2 kernels favour.
    """

    def __init__(self, rows: int, cols: int, buffer: np.ndarray | None = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"dimensions must be non-negative, got {rows}x{cols}")
        if buffer is None:
            buffer = np.zeros(rows * cols, dtype=np.float64)
        elif buffer.shape != (rows * cols,) or buffer.dtype != np.float64:
            raise ValueError(
                f"buffer must be a flat float64 array of size {rows * cols}"
            )
        self._rows = rows
        self._cols = cols
        self._buffer = buffer

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "DenseMatrix":
        """Build a matrix from a row-major nested literal like ``[[1, 2], [3, 4]]``."""
        rows = [list(r) for r in rows]
        n_cols = len(rows[0]) if rows else 0
        if any(len(r) != n_cols for r in rows):
            raise ValueError("all rows must have the same number of columns")
        if not rows:
            return cls(0, 0)
        return cls.from_array(np.array(rows, dtype=np.float64))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "DenseMatrix":
        """Copy a 2-D array into column-major storage."""
        arr = np.asarray(array, dtype=np.float64)
        if arr.ndim != 2:
            raise ValueError(f"DenseMatrix expects a 2-D array, got shape {arr.shape}")
        rows, cols = arr.shape
        return cls(rows, cols, arr.ravel(order="F").copy())

    @classmethod
    def identity(cls, n: int) -> "DenseMatrix":
        out = cls(n, n)
        for i in range(n):
            out[i, i] = 1.0
        return out

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._rows, self._cols

    def _offset(self, index: tuple[int, int]) -> int:
        i, j = index
        check_index(i, self._rows, "row")
        check_index(j, self._cols, "column")
        return i + j * self._rows

    def __getitem__(self, index: tuple[int, int]) -> float:
        return float(self._buffer[self._offset(index)])

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        self._buffer[self._offset(index)] = value

    def column(self, j: int) -> StridedVector:
        """Return column ``j`` as a view sharing this matrix's storage."""
        check_index(j, self._cols, "column")
        return StridedVector(self._buffer, offset=j * self._rows, stride=1, length=self._rows)

    def row(self, i: int) -> StridedVector:
        """Return row ``i`` as a view sharing this matrix's storage."""
        check_index(i, self._rows, "row")
        return StridedVector(self._buffer, offset=i, stride=self._rows, length=self._cols)

    def to_array(self) -> np.ndarray:
        return self._buffer.reshape((self._rows, self._cols), order="F").copy()


__all__ = ["DenseVector", "DenseMatrix"]
