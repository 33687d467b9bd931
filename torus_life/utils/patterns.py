"""Predefined Game of Life patterns and insertion onto a board."""
from enum import Enum
from typing import Iterable, Optional, Tuple

import numpy as np

from torus_life.config import RANDOM_DENSITY
from torus_life.utils.board import Board, CellState


class Pattern(Enum):
    GLIDER = 'glider'
    RANDOM = 'random'


# (x, y) offsets of the glider's alive cells
GLIDER_CELLS = ((0, 0), (0, 2), (1, 1), (1, 2), (2, 1))


# Still Lifes (period 1)
BLOCK = np.array([
    [1, 1],
    [1, 1]
], dtype=np.uint8)

BEEHIVE = np.array([
    [0, 1, 1, 0],
    [1, 0, 0, 1],
    [0, 1, 1, 0]
], dtype=np.uint8)


# Oscillators (period 2)
BLINKER = np.array([
    [1, 1, 1]
], dtype=np.uint8)

TOAD = np.array([
    [0, 1, 1, 1],
    [1, 1, 1, 0]
], dtype=np.uint8)


# Spaceships (period 4)
GLIDER = np.array([
    [1, 0, 0],
    [0, 1, 1],
    [1, 1, 0]
], dtype=np.uint8)

LWSS = np.array([
    [0, 1, 0, 0, 1],
    [1, 0, 0, 0, 0],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 0]
], dtype=np.uint8)


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS
    }
}


def get_pattern(name: str) -> np.ndarray:
    """Return a copy of the requested pattern array (rows are y) by name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return category[name].copy()

    available = [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]
    raise ValueError(f"Pattern '{name}' not found. Available patterns: {available}")


def pattern_cells(pattern: np.ndarray) -> Tuple[Tuple[int, int], ...]:
    """Convert a pattern array into (x, y) offsets of its alive cells."""
    ys, xs = np.nonzero(pattern)
    return tuple((int(x), int(y)) for x, y in zip(xs, ys))


def insert_cells(board: Board,
                 cells: Iterable[Tuple[int, int]],
                 offset: Tuple[int, int] = (0, 0)) -> None:
    """Set the given (x, y) cells alive, shifted by offset and wrapped."""
    offset_x, offset_y = offset
    for x, y in cells:
        board.set_cell_state_with_offset(x, y, CellState.ALIVE, offset_x, offset_y)


def insert_pattern(board: Board,
                   pattern: Pattern,
                   offset: Tuple[int, int] = (0, 0),
                   rng: Optional[np.random.Generator] = None) -> None:
    """
    Stamp a pattern onto the board in place.

    Args:
        board: Board to modify
        pattern: Pattern.GLIDER or Pattern.RANDOM
        offset: (x, y) position of the pattern origin; ignored for RANDOM
        rng: Random generator for RANDOM, a fresh default_rng() if None

    Cells the pattern does not set alive keep their current state.
    """
    if pattern is Pattern.GLIDER:
        insert_cells(board, GLIDER_CELLS, offset)
    elif pattern is Pattern.RANDOM:
        if rng is None:
            rng = np.random.default_rng()
        draws = rng.random((board.height, board.width)) < RANDOM_DENSITY
        ys, xs = np.nonzero(draws)
        for x, y in zip(xs, ys):
            board.set_cell_state(int(x), int(y), CellState.ALIVE)
    else:
        raise ValueError(f"Unknown pattern: {pattern!r}")
