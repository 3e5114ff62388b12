"""The preconditioner interface and triangular substitution routines."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

import numpy as np


class Preconditioner(ABC):
    """Applies an approximate inverse of a matrix to a residual vector."""

    @abstractmethod
    def apply(self, residual: np.ndarray) -> np.ndarray:
        """Return the preconditioned residual as a new vector."""


class IdentityPreconditioner(Preconditioner):
    """Leaves the residual unchanged."""

    def apply(self, residual: np.ndarray) -> np.ndarray:
        return np.array(residual, dtype=float)


def forward_backward_substitution(
    residual: np.ndarray,
    lower: Sequence[tuple[int, int, float]],
    upper: Sequence[tuple[int, int, float]],
) -> np.ndarray:
    """Solve L U x = residual for coordinate-form factors.

    ``lower`` holds the strictly lower part of a unit lower triangular factor,
    sorted by row and column. ``upper`` holds the upper factor including its
    diagonal, sorted by row and column.
    """
    result = np.array(residual, dtype=float)
    for row, col, value in lower:
        result[row] -= value * result[col]
    for row, col, value in reversed(upper):
        if row != col:
            result[row] -= value * result[col]
        else:
            result[row] /= value
    return result


def forward_backward_substitution_csr(
    residual: np.ndarray,
    lower: Sequence[float],
    lower_row_ptr: Sequence[int],
    lower_col: Sequence[int],
    upper: Sequence[float],
    upper_row_ptr: Sequence[int],
    upper_col: Sequence[int],
) -> np.ndarray:
    """Solve L U x = residual for factors stored in compressed row form.

    The lower factor is unit lower triangular with only its strict part stored.
    Each row of the upper factor starts with its diagonal entry.
    """
    result = np.array(residual, dtype=float)

    for row, (start, stop) in enumerate(zip(lower_row_ptr, lower_row_ptr[1:])):
        for value, col in zip(lower[start:stop], lower_col[start:stop]):
            result[row] -= value * result[col]

    bounds = list(zip(upper_row_ptr, upper_row_ptr[1:]))
    for row in reversed(range(len(bounds))):
        start, stop = bounds[row]
        for value, col in zip(reversed(upper[start:stop]), reversed(upper_col[start:stop])):
            if row != col:
                result[row] -= value * result[col]
            else:
                result[row] /= value
    return result