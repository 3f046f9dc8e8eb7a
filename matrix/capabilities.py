"""Abstract element-access capabilities consumed by the BLAS kernels.

The kernels never assume a storage layout. Anything that exposes its shape
and indexed element reads/writes through these two interfaces can be passed
to ``gemv`` and ``ger``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

import numpy as np


def check_index(index: int, size: int, axis: str = "index") -> int:
    """Return ``index`` if ``0 <= index < size``, otherwise raise ``IndexError``."""
    if not 0 <= index < size:
        raise IndexError(f"{axis} {index} out of range for size {size}")
    return index


class VectorLike(ABC):
    """One-dimensional sequence of real values with a fixed length."""

    @property
    @abstractmethod
    def length(self) -> int:
        """Number of elements."""

    @abstractmethod
    def __getitem__(self, i: int) -> float:
        """Return element ``i``."""

    @abstractmethod
    def __setitem__(self, i: int, value: float) -> None:
        """Overwrite element ``i``."""

    def __len__(self) -> int:
        return self.length

    def __iter__(self) -> Iterator[float]:
        for i in range(self.length):
            yield self[i]

    def to_array(self) -> np.ndarray:
        """Return the elements as a new float64 NumPy array."""
        return np.fromiter(iter(self), dtype=np.float64, count=self.length)

    def __repr__(self) -> str:  # pragma: no cover - simple utility
        return f"{self.__class__.__name__}({self.to_array().tolist()})"


class MatrixLike(ABC):
    """Two-dimensional real array with fixed ``(rows, cols)`` dimensions."""

    @property
    @abstractmethod
    def dimensions(self) -> tuple[int, int]:
        """``(rows, cols)``."""

    @abstractmethod
    def __getitem__(self, index: tuple[int, int]) -> float:
        """Return element ``(i, j)``."""

    @abstractmethod
    def __setitem__(self, index: tuple[int, int], value: float) -> None:
        """Overwrite element ``(i, j)``."""

    def to_array(self) -> np.ndarray:
        """Return the elements as a new 2-D float64 NumPy array."""
        rows, cols = self.dimensions
        out = np.empty((rows, cols), dtype=np.float64)
        for j in range(cols):
            for i in range(rows):
                out[i, j] = self[i, j]
        return out

    def __repr__(self) -> str:  # pragma: no cover - simple utility
        rows, cols = self.dimensions
        return f"{self.__class__.__name__}({rows}x{cols})"


__all__ = ["VectorLike", "MatrixLike", "check_index"]
