"""Metrics for comparing boards and classifying pattern behaviour."""
from typing import Optional, Tuple

import numpy as np

from torus_life.utils.board import Board, get_next_board


def _check_same_shape(a: Board, b: Board) -> None:
    if (a.width, a.height) != (b.width, b.height):
        raise ValueError(
            f"Board sizes differ: {a.width}x{a.height} vs {b.width}x{b.height}")


def cell_accuracy(pred: Board, true: Board) -> float:
    """Return the fraction of cells that agree."""
    _check_same_shape(pred, true)
    return float(np.mean(pred.cells == true.cells))


def hamming_distance(pred: Board, true: Board) -> float:
    """Return normalized Hamming distance (1 - accuracy)."""
    return 1.0 - cell_accuracy(pred, true)


def population_history(trajectory) -> np.ndarray:
    """Return the number of alive cells at each step of a trajectory."""
    return np.array([board.population() for board in trajectory], dtype=int)


def find_translation(reference: Board, board: Board) -> Optional[Tuple[int, int]]:
    """
    Find the wrapped shift that maps reference onto board.

    Args:
        reference: Board holding the original pattern
        board: Board to compare against

    Returns:
        (dx, dy) with 0 <= dx < width and 0 <= dy < height such that every
        cell (x, y) of reference equals cell (x + dx, y + dy) of board,
        or None if no shift matches. The zero shift is tried first.
    """
    _check_same_shape(reference, board)
    if reference.population() != board.population():
        return None

    for dy in range(reference.height):
        for dx in range(reference.width):
            shifted = np.roll(reference.cells, (dy, dx), axis=(0, 1))
            if np.array_equal(shifted, board.cells):
                return dx, dy
    return None


def find_period(board: Board, max_steps: int = 100,
                allow_translation: bool = True) -> Optional[Tuple[int, Tuple[int, int]]]:
    """
    Return (period, (dx, dy)) for the first generation that repeats the
    starting board, possibly shifted, or None within max_steps.
    """
    current = board
    for step in range(1, max_steps + 1):
        current = get_next_board(current)
        if allow_translation:
            shift = find_translation(board, current)
            if shift is not None:
                return step, shift
        elif current == board:
            return step, (0, 0)
    return None


def is_still_life(board: Board) -> bool:
    """Return True if the board is unchanged by one generation."""
    return get_next_board(board) == board


def find_extinction_step(board: Board, max_steps: int = 100) -> int:
    """Return the first generation with no alive cells, or -1."""
    current = board
    for step in range(max_steps + 1):
        if current.population() == 0:
            return step
        current = get_next_board(current)
    return -1
