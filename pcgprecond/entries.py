"""Sparse matrix entries in coordinate form and helpers working on them."""

from __future__ import annotations

from typing import Iterable, NamedTuple

import numpy as np


class MatrixEntry(NamedTuple):
    """One stored entry of a sparse matrix."""

    row: int
    col: int
    value: float


class MatrixLevel(NamedTuple):
    """The level of fill attached to one position of a sparse matrix."""

    row: int
    col: int
    lvl: int


def strict_upper_by_column(entries: Iterable[tuple[int, int, float]]) -> list[MatrixEntry]:
    """Return the entries above the diagonal, sorted by column and then by row."""
    upper = [MatrixEntry(row, col, value) for row, col, value in entries if row < col]
    upper.sort(key=lambda entry: (entry.col, entry.row))
    return upper


def diagonal(entries: Iterable[tuple[int, int, float]], size: int) -> np.ndarray:
    """Return the diagonal of a matrix of the given order as a dense vector."""
    result = np.zeros(size)
    for row, col, value in entries:
        if row == col:
            result[row] = value
    return result