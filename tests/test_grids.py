import copy

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algopractice.grids import capture_surrounded, flood_fill, num_enclaves, update_matrix


def grids(alphabet):
    return st.integers(min_value=1, max_value=6).flatmap(
        lambda cols: st.lists(
            st.lists(alphabet, min_size=cols, max_size=cols), min_size=1, max_size=6
        )
    )


binary_grids = grids(st.sampled_from([0, 1]))
boards = grids(st.sampled_from(["X", "O"]))


def _neighbour_values(grid, r, c):
    rows, cols = len(grid), len(grid[0])
    for dr, dc in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        if 0 <= r + dr < rows and 0 <= c + dc < cols:
            yield grid[r + dr][c + dc]


def test_update_matrix_example():
    mat = [[0, 0, 0], [0, 1, 0], [1, 1, 1]]
    assert update_matrix(mat) == [[0, 0, 0], [0, 1, 0], [1, 2, 1]]


@given(binary_grids)
def test_update_matrix_local_invariant(mat):
    if not any(0 in row for row in mat):
        mat[0][0] = 0
    distance = update_matrix(mat)
    for r, row in enumerate(mat):
        for c, value in enumerate(row):
            if value == 0:
                assert distance[r][c] == 0
            else:
                assert distance[r][c] == 1 + min(_neighbour_values(distance, r, c))


def test_update_matrix_without_zero_leaves_zeros():
    assert update_matrix([[1, 1], [1, 1]]) == [[0, 0], [0, 0]]


def test_update_matrix_rejects_empty():
    with pytest.raises(ValueError):
        update_matrix([])
    with pytest.raises(ValueError):
        update_matrix([[0, 1], [1]])


def test_flood_fill_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_does_not_mutate():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    before = copy.deepcopy(image)
    flood_fill(image, 0, 0, 9)
    assert image == before


@given(binary_grids, st.data())
def test_flood_fill_same_colour_is_identity(image, data):
    r = data.draw(st.integers(min_value=0, max_value=len(image) - 1))
    c = data.draw(st.integers(min_value=0, max_value=len(image[0]) - 1))
    assert flood_fill(image, r, c, image[r][c]) == image


@given(binary_grids, st.data())
def test_flood_fill_only_changes_start_colour(image, data):
    r = data.draw(st.integers(min_value=0, max_value=len(image) - 1))
    c = data.draw(st.integers(min_value=0, max_value=len(image[0]) - 1))
    painted = flood_fill(image, r, c, 7)
    assert painted[r][c] == 7
    for row, (old_line, new_line) in enumerate(zip(image, painted)):
        for col, (old, new) in enumerate(zip(old_line, new_line)):
            assert new == old or (new == 7 and old == image[r][c])


def test_flood_fill_out_of_range():
    with pytest.raises(IndexError):
        flood_fill([[1]], 1, 0, 2)
    with pytest.raises(IndexError):
        flood_fill([[1]], 0, -1, 2)


def test_num_enclaves_example():
    grid = [[0, 0, 0, 0], [1, 0, 1, 0], [0, 1, 1, 0], [0, 0, 0, 0]]
    assert num_enclaves(grid) == 3


def test_num_enclaves_all_connected_to_edge():
    grid = [[0, 1, 1, 0], [0, 0, 1, 0], [0, 0, 1, 0], [0, 0, 0, 0]]
    assert num_enclaves(grid) == 0


@given(binary_grids)
def test_num_enclaves_bounded_by_land(grid):
    inner = sum(
        cell
        for r, row in enumerate(grid[1:-1], start=1)
        for cell in row[1:-1]
    )
    assert 0 <= num_enclaves(grid) <= inner


def test_num_enclaves_rejects_empty():
    with pytest.raises(ValueError):
        num_enclaves([[]])


def test_capture_single_inner_cell():
    board = [["X", "X", "X"], ["X", "O", "X"], ["X", "X", "X"]]
    assert capture_surrounded(board) == [["X"] * 3 for _ in range(3)]


def test_capture_keeps_region_touching_edge():
    board = [["X", "X", "X"], ["X", "O", "O"], ["X", "X", "X"]]
    assert capture_surrounded(board) == board


@given(boards)
def test_capture_is_idempotent_and_keeps_border(board):
    once = capture_surrounded(board)
    assert capture_surrounded(once) == once
    rows, cols = len(board), len(board[0])
    for r in range(rows):
        for c in range(cols):
            if r in (0, rows - 1) or c in (0, cols - 1):
                assert once[r][c] == board[r][c]
            if board[r][c] == "X":
                assert once[r][c] == "X"


@given(boards)
def test_capture_count_matches_enclaves(board):
    captured = sum(
        old == "O" and new == "X"
        for old_line, new_line in zip(board, capture_surrounded(board))
        for old, new in zip(old_line, new_line)
    )
    land = [[1 if cell == "O" else 0 for cell in line] for line in board]
    assert captured == num_enclaves(land)