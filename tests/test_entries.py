import numpy as np

from pcgprecond.entries import MatrixEntry, MatrixLevel, diagonal, strict_upper_by_column


def _sample():
    return [
        MatrixEntry(0, 0, 1.0),
        MatrixEntry(0, 1, 2.0),
        MatrixEntry(0, 2, 3.0),
        MatrixEntry(1, 0, 4.0),
        MatrixEntry(1, 1, 5.0),
        MatrixEntry(1, 2, 6.0),
        MatrixEntry(2, 1, 7.0),
        MatrixEntry(2, 2, 8.0),
    ]


def test_matrix_entry_unpacks_in_field_order():
    row, col, value = MatrixEntry(2, 1, 7.0)
    assert (row, col, value) == (2, 1, 7.0)


def test_matrix_level_fields():
    level = MatrixLevel(row=1, col=3, lvl=2)
    assert (level.row, level.col, level.lvl) == (1, 3, 2)


def test_strict_upper_keeps_only_entries_above_diagonal():
    upper = strict_upper_by_column(_sample())
    assert all(entry.row < entry.col for entry in upper)
    assert {(e.row, e.col, e.value) for e in upper} == {(0, 1, 2.0), (0, 2, 3.0), (1, 2, 6.0)}


def test_strict_upper_is_sorted_by_column_then_row():
    entries = [(1, 3, 1.0), (0, 3, 2.0), (0, 1, 3.0), (2, 2, 4.0), (1, 2, 5.0)]
    upper = strict_upper_by_column(entries)
    keys = [(e.col, e.row) for e in upper]
    assert keys == sorted(keys)
    assert [(e.row, e.col) for e in upper] == [(0, 1), (1, 2), (0, 3), (1, 3)]


def test_strict_upper_of_empty_input():
    assert strict_upper_by_column([]) == []


def test_diagonal_picks_diagonal_values():
    np.testing.assert_array_equal(diagonal(_sample(), 3), np.array([1.0, 5.0, 8.0]))


def test_diagonal_is_zero_where_nothing_is_stored():
    result = diagonal([(1, 1, 3.5)], 3)
    np.testing.assert_array_equal(result, np.array([0.0, 3.5, 0.0]))