"""Transposition modes accepted by the level-2 kernels."""

from __future__ import annotations

from enum import Enum


class Transposition(Enum):
    """Whether a kernel operates on ``A`` or on its transpose."""

    NO_TRANSPOSE = "N"
    TRANSPOSE = "T"

    @property
    def label(self) -> str:
        return "NoTranspose" if self is Transposition.NO_TRANSPOSE else "Transpose"

    def op_dimensions(self, dimensions: tuple[int, int]) -> tuple[int, int]:
        """Return the ``(rows, cols)`` of ``op(A)`` given the dimensions of ``A``."""
        rows, cols = dimensions
        if self is Transposition.NO_TRANSPOSE:
            return rows, cols
        return cols, rows


NoTranspose = Transposition.NO_TRANSPOSE
Transpose = Transposition.TRANSPOSE

__all__ = ["Transposition", "NoTranspose", "Transpose"]
