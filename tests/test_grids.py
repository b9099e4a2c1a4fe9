import pytest

from dsakit.grids import add_matrices, format_grid, sum_first

SOURCE_GRID = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
]


def test_sum_first_source_example():
    assert sum_first([1, 2, 3, 4, 5, 6], 5) == 15


def test_sum_first_whole_and_none():
    values = [4, -2, 9, 7]
    assert sum_first(values, len(values)) == sum(values)
    assert sum_first(values, 0) == 0


def test_sum_first_accepts_iterators():
    assert sum_first(iter(range(100)), 10) == sum(range(10))


def test_sum_first_too_many():
    with pytest.raises(IndexError):
        sum_first([1, 2], 3)


def test_sum_first_negative_count():
    with pytest.raises(ValueError):
        sum_first([1, 2], -1)


def test_add_zero_matrix_is_identity():
    zeros = [[0] * 4 for _ in range(3)]
    assert add_matrices(SOURCE_GRID, zeros) == SOURCE_GRID


def test_add_matrices_commutes():
    other = [[row[-1 - j] for j in range(len(row))] for row in SOURCE_GRID]
    assert add_matrices(SOURCE_GRID, other) == add_matrices(other, SOURCE_GRID)


def test_add_matrix_to_its_negation():
    negated = [[-value for value in row] for row in SOURCE_GRID]
    result = add_matrices(SOURCE_GRID, negated)
    assert all(value == 0 for row in result for value in row)


def test_add_matrix_to_itself_doubles():
    result = add_matrices(SOURCE_GRID, SOURCE_GRID)
    for row, doubled in zip(SOURCE_GRID, result):
        assert doubled == [2 * value for value in row]


def test_add_matrices_row_count_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1]], [[1], [2]])


def test_add_matrices_row_length_mismatch():
    with pytest.raises(ValueError):
        add_matrices([[1, 2]], [[1]])


def test_format_grid_round_trip():
    text = format_grid(SOURCE_GRID)
    parsed = [[int(cell) for cell in line.split(" ")] for line in text.split("\n")]
    assert parsed == SOURCE_GRID


def test_format_grid_first_line():
    assert format_grid(SOURCE_GRID).splitlines()[0] == "1 2 3 4"


def test_format_grid_empty():
    assert format_grid([]) == ""