"""Incomplete LU factorisation tracking levels of fill in coordinate form."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .entries import MatrixEntry
from .preconditioner import Preconditioner, forward_backward_substitution


def sparse_row_subtraction_with_level(
    x: Sequence[tuple[int, int, float]],
    y: Sequence[tuple[int, int, float]],
    x_lvl: Sequence[int],
    y_lvl: Sequence[int],
    alpha: float,
    alpha_lvl: int,
) -> tuple[list[MatrixEntry], list[int]]:
    """Return the sparse row x - alpha * y together with its levels of fill.

    Both rows must be sorted by column. Positions present in y but not in x are
    inserted with level ``alpha_lvl + level + 1``; positions present in both
    keep the smaller of their level and that value.
    """
    result = [MatrixEntry(*entry) for entry in x]
    levels = list(x_lvl)
    index = 0
    for (y_row, y_col, y_value), y_level in zip(y, y_lvl):
        while index < len(result) and result[index].col < y_col:
            index += 1
        new_level = alpha_lvl + y_level + 1
        if index < len(result) and result[index].col == y_col:
            entry = result[index]
            result[index] = entry._replace(value=entry.value - alpha * y_value)
            levels[index] = min(levels[index], new_level)
        else:
            row = result[min(index, len(result) - 1)].row if result else y_row
            result.insert(index, MatrixEntry(row, y_col, -alpha * y_value))
            levels.insert(index, new_level)
    return result, levels


def filter_entries(
    entries: Sequence[tuple[int, int, float]],
    levels: Sequence[int],
    max_lvl: int,
) -> tuple[list[MatrixEntry], list[int]]:
    """Return the entries, and their levels, whose level does not exceed ``max_lvl``."""
    kept = [(MatrixEntry(*entry), level) for entry, level in zip(entries, levels) if level <= max_lvl]
    return [entry for entry, _ in kept], [level for _, level in kept]


class IlukAlternativeOrder(Preconditioner):
    """Row-wise incomplete factorisation that keeps a level for every entry.

    Entries below the diagonal are divided by the matrix's own diagonal entry
    of their column; entries on or above the diagonal are kept as they are.
    """

    def __init__(self, entries: Iterable[tuple[int, int, float]], size: int, level: int) -> None:
        rows: list[list[MatrixEntry]] = [[] for _ in range(size)]
        diag = [0.0] * size
        for entry in sorted(MatrixEntry(int(r), int(c), float(v)) for r, c, v in entries):
            if not (0 <= entry.row < size and 0 <= entry.col < size):
                raise ValueError(f"entry ({entry.row}, {entry.col}) lies outside a {size}x{size} matrix")
            rows[entry.row].append(entry)
            if entry.row == entry.col:
                diag[entry.row] = entry.value

        factor: list[MatrixEntry] = []
        factor_levels: list[int] = []
        row_ptr = [0]
        if rows:
            factor.extend(rows[0])
            factor_levels.extend([0] * len(rows[0]))
            row_ptr.append(len(factor))

        for i in range(1, size):
            row = list(rows[i])
            row_levels = [0] * len(row)
            position = 0
            while position < len(row):
                entry = row[position]
                if entry.col < i and row_levels[position] <= level:
                    alpha = entry.value / diag[entry.col]
                    row[position] = entry._replace(value=alpha)
                    start = row_ptr[entry.col]
                    row, row_levels = sparse_row_subtraction_with_level(
                        row,
                        factor[start:start],
                        row_levels,
                        factor_levels[start:start],
                        alpha,
                        row_levels[position],
                    )
                position += 1
            row, row_levels = filter_entries(row, row_levels, level)
            factor.extend(row)
            factor_levels.extend(row_levels)
            row_ptr.append(len(factor))

        self.lower = [entry for entry in factor if entry.row > entry.col]
        self.upper = [entry for entry in factor if entry.row <= entry.col]
        self.levels = factor_levels

    def apply(self, residual: np.ndarray) -> np.ndarray:
        return forward_backward_substitution(residual, self.lower, self.upper)