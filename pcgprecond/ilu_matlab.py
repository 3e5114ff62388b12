"""Incomplete LU factorisation with level of fill, in compressed row form."""

from __future__ import annotations

from typing import Iterable, Sequence

import numpy as np

from .preconditioner import Preconditioner, forward_backward_substitution_csr


class IlukMatlabOrder(Preconditioner):
    """ILU(k) preconditioner computed row by row from a matrix in CSR form.

    Each row of the matrix must have its column indices in ascending order,
    and the first row must start with its diagonal entry. The lower factor is
    unit lower triangular with only its strict part stored; each row of the
    upper factor starts with its diagonal entry. Entries that come out exactly
    zero are not stored.
    """

    def __init__(
        self,
        values: Sequence[float],
        col_index: Sequence[int],
        row_ptr: Sequence[int],
        level: int,
    ) -> None:
        values = [float(value) for value in values]
        cols = [int(col) for col in col_index]
        ptr = [int(index) for index in row_ptr]
        size = len(ptr) - 1
        if size < 1:
            raise ValueError("matrix must have at least one row")
        if len(values) != len(cols) or ptr[0] != 0 or ptr[-1] != len(values):
            raise ValueError("inconsistent compressed row arrays")

        pattern = self._symbolic(cols, ptr, size, level + 1)
        self._numeric(values, cols, ptr, pattern)

    @classmethod
    def from_entries(
        cls,
        entries: Iterable[tuple[int, int, float]],
        size: int,
        level: int,
    ) -> IlukMatlabOrder:
        """Build the preconditioner from coordinate-form entries of a square matrix."""
        ordered = sorted((int(row), int(col), float(value)) for row, col, value in entries)
        counts = [0] * size
        for row, col, _ in ordered:
            if not (0 <= row < size and 0 <= col < size):
                raise ValueError(f"entry ({row}, {col}) lies outside a {size}x{size} matrix")
            counts[row] += 1
        row_ptr = [0]
        for count in counts:
            row_ptr.append(row_ptr[-1] + count)
        return cls(
            [value for _, _, value in ordered],
            [col for _, col, _ in ordered],
            row_ptr,
            level,
        )

    @staticmethod
    def _symbolic(
        cols: list[int], ptr: list[int], size: int, fill_limit: int
    ) -> list[list[tuple[int, int]]]:
        """Return, for every row, the permitted positions with their shifted levels."""
        pattern = [[(col, 1) for col in cols[ptr[0]:ptr[1]]]]
        for j in range(1, size):
            row_cols = cols[ptr[j]:ptr[j + 1]]
            levels = {col: 1 for col in row_cols}
            order = list(row_cols)
            position = 0
            while position < len(order) and order[position] < j:
                pivot = order[position]
                added = False
                for col, pivot_level in pattern[pivot]:
                    if col <= pivot:
                        continue
                    weight = levels[pivot] + pivot_level
                    if col in levels:
                        levels[col] = min(weight, levels[col])
                    elif weight <= fill_limit:
                        levels[col] = weight
                        order.append(col)
                        added = True
                if added:
                    order[position + 1:] = sorted(order[position + 1:])
                position += 1
            pattern.append([(col, levels[col]) for col in order])
        return pattern

    def _numeric(
        self,
        values: list[float],
        cols: list[int],
        ptr: list[int],
        pattern: list[list[tuple[int, int]]],
    ) -> None:
        lower: list[float] = []
        lower_col: list[int] = []
        lower_row_ptr = [0, 0]
        upper = values[ptr[0]:ptr[1]]
        upper_col = cols[ptr[0]:ptr[1]]
        upper_row_ptr = [0, ptr[1]]

        for j in range(1, len(pattern)):
            work = dict(zip(cols[ptr[j]:ptr[j + 1]], values[ptr[j]:ptr[j + 1]]))
            permitted = {col for col, _ in pattern[j]}
            for pivot, _ in pattern[j]:
                if pivot >= j:
                    break
                start, stop = upper_row_ptr[pivot], upper_row_ptr[pivot + 1]
                alpha = work.get(pivot, 0.0) / upper[start]
                work[pivot] = alpha
                for col, value in zip(upper_col[start + 1:stop], upper[start + 1:stop]):
                    if col in permitted:
                        work[col] = work.get(col, 0.0) - alpha * value
            for col, _ in pattern[j]:
                value = work.get(col, 0.0)
                if value != 0.0:
                    if col < j:
                        lower.append(value)
                        lower_col.append(col)
                    else:
                        upper.append(value)
                        upper_col.append(col)
            lower_row_ptr.append(len(lower))
            upper_row_ptr.append(len(upper))

        if len(pattern) == 1:
            lower_row_ptr = [0, 0]
        self.lower = lower
        self.lower_col = lower_col
        self.lower_row_ptr = lower_row_ptr
        self.upper = upper
        self.upper_col = upper_col
        self.upper_row_ptr = upper_row_ptr

    def apply(self, residual: np.ndarray) -> np.ndarray:
        return forward_backward_substitution_csr(
            residual,
            self.lower,
            self.lower_row_ptr,
            self.lower_col,
            self.upper,
            self.upper_row_ptr,
            self.upper_col,
        )