"""Diagonal incomplete Cholesky preconditioning."""

from __future__ import annotations

from typing import Iterable

import numpy as np

from .entries import diagonal, strict_upper_by_column
from .preconditioner import Preconditioner


class DIC(Preconditioner):
    """Diagonal incomplete Cholesky preconditioner for a symmetric matrix.

    Only the diagonal and the strictly upper entries of the matrix are used.
    """

    def __init__(self, entries: Iterable[tuple[int, int, float]], size: int) -> None:
        entries = list(entries)
        diag = diagonal(entries, size)
        self.upper = strict_upper_by_column(entries)
        for row, col, value in self.upper:
            diag[col] -= value * value * diag[row]
        self.inverse_diagonal = 1.0 / diag

    def apply(self, residual: np.ndarray) -> np.ndarray:
        inv = self.inverse_diagonal
        result = np.asarray(residual, dtype=float) * inv
        for row, col, value in self.upper:
            result[row] -= value * result[col] * inv[row]
        for row, col, value in reversed(self.upper):
            result[col] -= inv[col] * value * result[row]
        return result