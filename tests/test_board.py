"""Tests for the toroidal board and generation stepping."""
import numpy as np
import pytest

from torus_life.utils.board import Board, CellState, get_next_board, next_cell_state, simulate


@pytest.mark.parametrize("x, y, expected", [
    (-1, -1, (63, 19)),
    (64, 20, (0, 0)),
    (0, 0, (0, 0)),
    (63, 19, (63, 19)),
    (-65, -21, (63, 19)),
    (64 * 1000 + 5, -20 * 1000 + 7, (5, 7)),
])
def test_wraparound_resolves_in_bounds(x, y, expected):
    board = Board(64, 20)
    board.set_cell_state(x, y, CellState.ALIVE)
    assert board.alive_cells() == {expected}
    assert board.get_cell_state(*expected) == CellState.ALIVE
    assert board.get_cell_state(x, y) == CellState.ALIVE


def test_new_board_is_dead():
    board = Board(7, 5)
    assert board.population() == 0
    assert board.cells.shape == (5, 7)
    assert all(board.get_cell_state(x, y) == CellState.DEAD
               for x in range(7) for y in range(5))


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-3, 4), (2.5, 4)])
def test_invalid_dimensions_rejected(width, height):
    with pytest.raises(ValueError):
        Board(width, height)


def test_set_cell_state_with_offset():
    board = Board(10, 10)
    board.set_cell_state_with_offset(1, 2, CellState.ALIVE, 9, 9)
    assert board.alive_cells() == {(0, 1)}
    board.set_cell_state_with_offset(1, 2, CellState.DEAD, 9, 9)
    assert board.population() == 0


def test_cells_view_is_read_only():
    board = Board(4, 4)
    with pytest.raises(ValueError):
        board.cells[0, 0] = 1


def test_full_block_has_eight_neighbours():
    board = Board.from_cells(10, 10, [(x, y) for x in range(4, 7) for y in range(4, 7)])
    assert board.count_live_neighbours(5, 5) == 8
    assert board.count_live_neighbours(4, 4) == 3


def test_neighbours_wrap_across_corner():
    board = Board.from_cells(64, 20, [(63, 19), (0, 19), (63, 0)])
    assert board.count_live_neighbours(0, 0) == 3


@pytest.mark.parametrize("state, neighbours, expected", [
    (CellState.ALIVE, 0, CellState.DEAD),
    (CellState.ALIVE, 1, CellState.DEAD),
    (CellState.ALIVE, 2, CellState.ALIVE),
    (CellState.ALIVE, 3, CellState.ALIVE),
    (CellState.ALIVE, 4, CellState.DEAD),
    (CellState.ALIVE, 8, CellState.DEAD),
    (CellState.DEAD, 2, CellState.DEAD),
    (CellState.DEAD, 3, CellState.ALIVE),
    (CellState.DEAD, 4, CellState.DEAD),
])
def test_rule_table(state, neighbours, expected):
    assert next_cell_state(state, neighbours) == expected


def test_get_next_cell_state_on_board():
    # Vertical blinker centred on (2, 2)
    board = Board.from_cells(5, 5, [(2, 1), (2, 2), (2, 3)])
    assert board.get_next_cell_state(2, 2) == CellState.ALIVE
    assert board.get_next_cell_state(2, 1) == CellState.DEAD
    assert board.get_next_cell_state(1, 2) == CellState.ALIVE
    assert board.get_next_cell_state(0, 0) == CellState.DEAD


def test_step_uses_snapshot_not_in_place_update():
    # Horizontal blinker: a row-major in-place scan lets (3, 1) see the
    # already-born (2, 1) and wrongly come alive.
    board = Board.from_cells(5, 5, [(1, 2), (2, 2), (3, 2)])
    next_board = get_next_board(board)
    assert next_board.alive_cells() == {(2, 1), (2, 2), (2, 3)}
    # input untouched
    assert board.alive_cells() == {(1, 2), (2, 2), (3, 2)}


def _in_place_step(board):
    for y in range(board.height):
        for x in range(board.width):
            board.set_cell_state(x, y, board.get_next_cell_state(x, y))
    return board


def test_snapshot_result_differs_from_in_place_result():
    board = Board.from_cells(5, 5, [(1, 2), (2, 2), (3, 2)])
    assert get_next_board(board) != _in_place_step(board.copy())


def test_block_is_stable():
    board = Board.from_cells(8, 8, [(3, 3), (4, 3), (3, 4), (4, 4)])
    for generation in simulate(board, 10):
        assert generation == board


def test_glider_returns_after_four_generations_shifted_diagonally():
    glider = [(0, 0), (0, 2), (1, 1), (1, 2), (2, 1)]
    board = Board.from_cells(64, 20, glider)
    trajectory = simulate(board, 4)
    for generation in trajectory[1:4]:
        assert generation.alive_cells() != board.alive_cells()
    shifted = {((x + 1) % 64, (y + 1) % 20) for x, y in glider}
    assert trajectory[4].alive_cells() == shifted


def test_glider_wraps_around_the_board():
    glider = [(0, 0), (0, 2), (1, 1), (1, 2), (2, 1)]
    board = Board.from_cells(8, 6, glider)
    # 24 generations moves the glider by 6 cells, a full lap vertically
    final = simulate(board, 24)[-1]
    assert final.alive_cells() == {((x + 6) % 8, y) for x, y in glider}


def test_step_keeps_dimensions():
    board = Board(13, 7)
    next_board = get_next_board(board)
    assert (next_board.width, next_board.height) == (13, 7)
    assert next_board is not board


def test_simulate_returns_trajectory_including_start():
    board = Board.from_cells(5, 5, [(1, 2), (2, 2), (3, 2)])
    trajectory = simulate(board, 3)
    assert len(trajectory) == 4
    assert trajectory[0] is board
    assert trajectory[2] == board


def test_from_array_and_copy():
    array = np.array([[0, 1, 0], [0, 0, 2]])
    board = Board.from_array(array)
    assert (board.width, board.height) == (3, 2)
    assert board.alive_cells() == {(1, 0), (2, 1)}
    clone = board.copy()
    clone.set_cell_state(0, 0, CellState.ALIVE)
    assert board.get_cell_state(0, 0) == CellState.DEAD


def test_render_format():
    board = Board.from_cells(4, 2, [(0, 0), (3, 1)])
    assert str(board) == "| #... |\n| ...# |\n"


def test_render_reference_size():
    lines = str(Board(64, 20)).splitlines()
    assert len(lines) == 20
    assert all(line == "| " + "." * 64 + " |" for line in lines)
