import numpy as np
import pytest

from pcgprecond.entries import MatrixEntry
from pcgprecond.ilu_levels import IlukAlternativeOrder, filter_entries, sparse_row_subtraction_with_level

TRIDIAGONAL = [
    (0, 0, 4.0), (0, 1, -1.0),
    (1, 0, -1.0), (1, 1, 4.0), (1, 2, -1.0),
    (2, 1, -1.0), (2, 2, 4.0),
]


def test_sparse_vector_subtraction():
    x = [MatrixEntry(0, 0, 1.0), MatrixEntry(0, 4, 1.0)]
    y = [MatrixEntry(0, 0, 1.0), MatrixEntry(0, 3, 1.0)]
    result, levels = sparse_row_subtraction_with_level(x, y, [0, 0], [1, 1], 0.5, 2)

    assert result[0].value == 0.5
    assert result[0].col == 0
    assert result[1].value == -0.5
    assert result[1].col == 3
    assert result[2].value == 1
    assert result[2].col == 4

    assert levels == [0, 4, 0]
    assert [entry.row for entry in result] == [0, 0, 0]


def test_sparse_vector_subtraction_leaves_input_alone():
    x = [MatrixEntry(0, 0, 1.0)]
    sparse_row_subtraction_with_level(x, [MatrixEntry(0, 2, 1.0)], [0], [0], 1.0, 0)
    assert x == [MatrixEntry(0, 0, 1.0)]


def test_sparse_vector_subtraction_appends_past_end():
    x = [MatrixEntry(2, 0, 1.0)]
    result, levels = sparse_row_subtraction_with_level(x, [MatrixEntry(1, 5, 2.0)], [0], [1], 1.5, 0)
    assert result == [MatrixEntry(2, 0, 1.0), MatrixEntry(2, 5, -3.0)]
    assert levels == [0, 2]


def test_filter_entries():
    x = [MatrixEntry(0, 0, 1.0), MatrixEntry(0, 3, 2.0), MatrixEntry(0, 4, 3.0)]
    result, levels = filter_entries(x, [0, 1, 2], 1)

    assert result[0].value == 1
    assert result[1].value == 2
    assert len(result) == 2
    assert len(levels) == 2
    assert levels[0] == 0
    assert levels[1] == 1


def test_alternative_order_factors():
    precon = IlukAlternativeOrder(TRIDIAGONAL, 3, 0)
    assert precon.lower == [MatrixEntry(1, 0, -0.25), MatrixEntry(2, 1, -0.25)]
    assert precon.upper == [
        MatrixEntry(0, 0, 4.0), MatrixEntry(0, 1, -1.0),
        MatrixEntry(1, 1, 4.0), MatrixEntry(1, 2, -1.0),
        MatrixEntry(2, 2, 4.0),
    ]
    assert precon.levels == [0] * 7


def test_negative_level_drops_all_rows_after_the_first():
    precon = IlukAlternativeOrder(TRIDIAGONAL, 3, -1)
    assert precon.lower == []
    assert precon.upper == [MatrixEntry(0, 0, 4.0), MatrixEntry(0, 1, -1.0)]


def test_apply_on_diagonal_matrix():
    precon = IlukAlternativeOrder([(0, 0, 2.0), (1, 1, 4.0)], 2, 0)
    assert np.allclose(precon.apply(np.array([2.0, 4.0])), [1.0, 1.0])


def test_apply_solves_with_stored_factors():
    precon = IlukAlternativeOrder(TRIDIAGONAL, 3, 0)
    lower = np.eye(3)
    for row, col, value in precon.lower:
        lower[row, col] = value
    upper = np.zeros((3, 3))
    for row, col, value in precon.upper:
        upper[row, col] = value
    residual = np.array([1.0, 2.0, 3.0])
    result = precon.apply(residual)
    assert np.allclose(lower @ (upper @ result), residual)


def test_entry_outside_matrix_raises():
    with pytest.raises(ValueError):
        IlukAlternativeOrder([(0, 0, 1.0), (0, 3, 1.0)], 2, 0)


def test_zero_pivot_raises():
    with pytest.raises(ZeroDivisionError):
        IlukAlternativeOrder([(0, 1, 1.0), (1, 0, 1.0), (1, 1, 1.0)], 2, 0)