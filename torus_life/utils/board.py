"""Toroidal Game of Life board and generation stepping."""
from enum import IntEnum
from typing import Iterable, List, Set, Tuple

import numpy as np

from torus_life.config import ALIVE_GLYPH, DEAD_GLYPH


class CellState(IntEnum):
    """State of a single cell."""

    DEAD = 0
    ALIVE = 1


def next_cell_state(state: CellState, live_neighbours: int) -> CellState:
    """Apply Conway's rule to one cell given its live neighbour count."""
    if state == CellState.ALIVE:
        if live_neighbours < 2 or live_neighbours > 3:
            return CellState.DEAD
        return CellState.ALIVE
    if live_neighbours == 3:
        return CellState.ALIVE
    return CellState.DEAD


class Board:
    """Game of Life grid where both axes wrap around (a torus)."""

    def __init__(self, width: int, height: int):
        """Create an all-dead board of the given dimensions."""
        if not isinstance(width, (int, np.integer)) or not isinstance(height, (int, np.integer)):
            raise ValueError(f"Board dimensions must be integers, got {width!r} x {height!r}")
        if width <= 0 or height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {width} x {height}")
        self.width = int(width)
        self.height = int(height)
        self._state = np.zeros((self.height, self.width), dtype=np.uint8)

    @classmethod
    def from_cells(cls, width: int, height: int,
                   cells: Iterable[Tuple[int, int]]) -> 'Board':
        """Build a board with the given (x, y) cells alive."""
        board = cls(width, height)
        for x, y in cells:
            board.set_cell_state(x, y, CellState.ALIVE)
        return board

    @classmethod
    def from_array(cls, array: np.ndarray) -> 'Board':
        """Build a board from an (H x W) array of 0/1 values."""
        array = np.asarray(array)
        height, width = array.shape
        board = cls(width, height)
        board._state[:] = (array != 0)
        return board

    @property
    def cells(self) -> np.ndarray:
        """Read-only (H x W) view of the cell states."""
        view = self._state.view()
        view.flags.writeable = False
        return view

    def _wrap(self, x: int, y: int) -> Tuple[int, int]:
        return x % self.width, y % self.height

    def get_cell_state(self, x: int, y: int) -> CellState:
        wrapped_x, wrapped_y = self._wrap(x, y)
        return CellState(int(self._state[wrapped_y, wrapped_x]))

    def set_cell_state(self, x: int, y: int, state: CellState) -> None:
        wrapped_x, wrapped_y = self._wrap(x, y)
        self._state[wrapped_y, wrapped_x] = state

    def set_cell_state_with_offset(self, x: int, y: int, state: CellState,
                                   offset_x: int, offset_y: int) -> None:
        """Set the cell at (x, y) shifted by the given offset."""
        self.set_cell_state(x + offset_x, y + offset_y, state)

    def count_live_neighbours(self, x: int, y: int) -> int:
        """Count alive cells among the 8 wrapped neighbours of (x, y)."""
        alive_count = 0
        for dy in (-1, 0, 1):
            for dx in (-1, 0, 1):
                if dx == 0 and dy == 0:
                    continue
                if self.get_cell_state(x + dx, y + dy) == CellState.ALIVE:
                    alive_count += 1
        return alive_count

    def get_next_cell_state(self, x: int, y: int) -> CellState:
        return next_cell_state(self.get_cell_state(x, y),
                               self.count_live_neighbours(x, y))

    def alive_cells(self) -> Set[Tuple[int, int]]:
        """Return the set of (x, y) coordinates of alive cells."""
        ys, xs = np.nonzero(self._state)
        return {(int(x), int(y)) for x, y in zip(xs, ys)}

    def population(self) -> int:
        return int(self._state.sum())

    def copy(self) -> 'Board':
        board = Board(self.width, self.height)
        board._state[:] = self._state
        return board

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height) and \
            np.array_equal(self._state, other._state)

    def __repr__(self):
        return f"Board(width={self.width}, height={self.height}, population={self.population()})"

    def __str__(self):
        lines = []
        for row in self._state:
            glyphs = ''.join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row)
            lines.append(f"| {glyphs} |\n")
        return ''.join(lines)


def get_next_board(board: Board) -> Board:
    """Compute the next generation from a snapshot of the given board."""
    next_board = Board(board.width, board.height)
    for y in range(board.height):
        for x in range(board.width):
            next_board.set_cell_state(x, y, board.get_next_cell_state(x, y))
    return next_board


def simulate(board: Board, num_steps: int) -> List[Board]:
    """Evolve a board for several generations and return the full trajectory."""
    trajectory = [board]
    current = board
    for _ in range(num_steps):
        current = get_next_board(current)
        trajectory.append(current)
    return trajectory
