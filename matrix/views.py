"""Non-owning views that implement the vector and matrix capabilities."""

from __future__ import annotations

import numpy as np

from matrix.capabilities import MatrixLike, VectorLike, check_index


class StridedVector(VectorLike):
    """Vector over a 1-D buffer with a BLAS-style increment.

    Element ``i`` lives at ``buffer[offset + i * stride]``. Writes go straight
    to ``buffer``, so a strided view can expose a row or column of a dense
    matrix, or a caller-owned NumPy array, without copying.

    Parameters
    ----------
    buffer : np.ndarray
        One-dimensional backing storage. It is borrowed, never copied.
    offset : int
        Position of element 0 in ``buffer``.
    stride : int
        Distance between consecutive elements. May be negative, never zero.
    length : int | None
        Number of elements. Defaults to as many as fit after ``offset`` when
        ``stride`` is positive; required when ``stride`` is negative.
    """

    def __init__(
        self,
        buffer: np.ndarray,
        offset: int = 0,
        stride: int = 1,
        length: int | None = None,
    ) -> None:
        if not isinstance(buffer, np.ndarray) or buffer.ndim != 1:
            raise ValueError("StridedVector requires a one-dimensional NumPy buffer")
        if stride == 0:
            raise ValueError("StridedVector stride must be non-zero")
        size = buffer.shape[0]
        if length is None:
            if stride < 0:
                raise ValueError("length is required for a negative stride")
            length = max(0, (size - offset + stride - 1) // stride)
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        if length > 0:
            last = offset + (length - 1) * stride
            if not (0 <= offset < size and 0 <= last < size):
                raise ValueError(
                    f"view (offset={offset}, stride={stride}, length={length}) "
                    f"does not fit in a buffer of size {size}"
                )

        self._buffer = buffer
        self._offset = int(offset)
        self._stride = int(stride)
        self._length = int(length)

    @property
    def length(self) -> int:
        return self._length

    @property
    def stride(self) -> int:
        return self._stride

    def __getitem__(self, i: int) -> float:
        check_index(i, self._length)
        return float(self._buffer[self._offset + i * self._stride])

    def __setitem__(self, i: int, value: float) -> None:
        check_index(i, self._length)
        self._buffer[self._offset + i * self._stride] = value


class SubMatrix(MatrixLike):
    """Rectangular window ``parent[row_start:row_start+rows, col_start:col_start+cols]``."""

    def __init__(
        self,
        parent: MatrixLike,
        row_start: int,
        col_start: int,
        rows: int,
        cols: int,
    ) -> None:
        parent_rows, parent_cols = parent.dimensions
        if min(row_start, col_start, rows, cols) < 0:
            raise ValueError("SubMatrix offsets and sizes must be non-negative")
        if row_start + rows > parent_rows or col_start + cols > parent_cols:
            raise ValueError(
                f"SubMatrix window ({row_start}+{rows}, {col_start}+{cols}) exceeds "
                f"parent dimensions {parent_rows}x{parent_cols}"
            )
        self.parent = parent
        self.row_start = row_start
        self.col_start = col_start
        self._dimensions = (rows, cols)

    @property
    def dimensions(self) -> tuple[int, int]:
        return self._dimensions

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        check_index(i, self._dimensions[0], "row")
        check_index(j, self._dimensions[1], "column")
        return self.parent[self.row_start + i, self.col_start + j]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        check_index(i, self._dimensions[0], "row")
        check_index(j, self._dimensions[1], "column")
        self.parent[self.row_start + i, self.col_start + j] = value


class TransposedMatrix(MatrixLike):
    """Zero-copy transpose: element ``(i, j)`` is ``parent[j, i]``."""

    def __init__(self, parent: MatrixLike) -> None:
        self.parent = parent

    @property
    def dimensions(self) -> tuple[int, int]:
        rows, cols = self.parent.dimensions
        return cols, rows

    def __getitem__(self, index: tuple[int, int]) -> float:
        i, j = index
        return self.parent[j, i]

    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        i, j = index
        self.parent[j, i] = value


__all__ = ["StridedVector", "SubMatrix", "TransposedMatrix"]
