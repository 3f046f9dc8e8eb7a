"""Custom exception types for the dense BLAS kernels."""

from __future__ import annotations

from core.transposition import Transposition


class DenseBlasError(Exception):
    """Base class for domain-specific errors."""


class DimensionMismatchError(DenseBlasError):
    """Raised when matrix and vector shapes violate a kernel's contract.

    The check always happens before any output element is written, so the
    caller's data is untouched when this is raised.
    """

    def __init__(
        self,
        operation: str,
        *,
        matrix_shape: tuple[int, int],
        x_length: int,
        y_length: int,
        trans: Transposition | None = None,
        message: str | None = None,
    ) -> None:
        if message is None:
            mode = f"({trans.label})" if trans is not None else ""
            rows, cols = matrix_shape
            message = (
                f"{operation}{mode}: incompatible shapes, A is {rows}x{cols}, "
                f"x has length {x_length}, y has length {y_length}."
            )
        super().__init__(message)
        self.operation = operation
        self.matrix_shape = matrix_shape
        self.x_length = x_length
        self.y_length = y_length
        self.trans = trans


__all__ = ["DenseBlasError", "DimensionMismatchError"]
