import pytest

from algonotes.grids import CITY, diagonal_order, find_cities, min_cost_connect_points

SOURCE_MATRIX = [
    [1, 2, 3, 4],
    [5, 6, 7, 8],
    [9, 10, 11, 12],
    [13, 14, 15, 16],
    [17, 18, 19, 20],
]

SOURCE_MAP = [
    [1, 1, 1, 1, 1, -1],
    [1, 0, 0, 0, 0, 1],
    [1, 0, -1, 0, 0, 1],
    [1, 0, 1, 1, 1, 1],
    [1, 0, 1, 0, 0, 1],
    [1, 1, 1, 1, 1, -1],
]


def test_diagonal_order_square():
    assert diagonal_order([[1, 2, 3], [4, 5, 6], [7, 8, 9]]) == [1, 2, 4, 7, 5, 3, 6, 8, 9]


def test_diagonal_order_visits_every_cell_once():
    result = diagonal_order(SOURCE_MATRIX)
    assert sorted(result) == sorted(v for row in SOURCE_MATRIX for v in row)


def test_diagonal_order_starts_and_ends_at_corners():
    result = diagonal_order(SOURCE_MATRIX)
    assert result[0] == SOURCE_MATRIX[0][0]
    assert result[1] == SOURCE_MATRIX[0][1]
    assert result[-1] == SOURCE_MATRIX[-1][-1]


def test_diagonal_order_single_row_and_column():
    assert diagonal_order([[1, 2, 3, 4]]) == [1, 2, 3, 4]
    assert diagonal_order([[1], [2], [3]]) == [1, 2, 3]


@pytest.mark.parametrize("matrix", [[], [[]], [[1, 2], [3]]])
def test_diagonal_order_rejects_bad_shapes(matrix):
    with pytest.raises(ValueError):
        diagonal_order(matrix)


def test_min_cost_known_example():
    assert min_cost_connect_points([[0, 0], [2, 2], [3, 10], [5, 2], [7, 0]]) == 20


def test_min_cost_empty_and_single():
    assert min_cost_connect_points([]) == 0
    assert min_cost_connect_points([[4, -7]]) == 0


def test_min_cost_translation_invariant():
    points = [[0, 0], [2, 2], [3, 10], [5, 2], [7, 0]]
    shifted = [[x + 13, y - 6] for x, y in points]
    assert min_cost_connect_points(shifted) == min_cost_connect_points(points)


def test_min_cost_duplicate_point_adds_nothing():
    points = [[1, 1], [4, 9], [-3, 2]]
    assert min_cost_connect_points(points + [[4, 9]]) == min_cost_connect_points(points)


def test_find_cities_on_source_map():
    cities = find_cities(SOURCE_MAP)
    assert cities == sorted(cities)
    assert all(SOURCE_MAP[r][c] == CITY for r, c in cities)
    assert len(cities) == sum(row.count(CITY) for row in SOURCE_MAP)


def test_find_cities_none():
    assert find_cities([[0, 1], [1, 0]]) == []