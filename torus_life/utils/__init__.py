"""Board, patterns and visualization for the toroidal Game of Life"""

from .board import CellState, Board, next_cell_state, get_next_board, simulate
from .patterns import (
    Pattern,
    GLIDER_CELLS,
    PATTERN_CATEGORIES,
    get_pattern,
    pattern_cells,
    insert_cells,
    insert_pattern
)

__all__ = [
    'CellState',
    'Board',
    'next_cell_state',
    'get_next_board',
    'simulate',
    'Pattern',
    'GLIDER_CELLS',
    'PATTERN_CATEGORIES',
    'get_pattern',
    'pattern_cells',
    'insert_cells',
    'insert_pattern',
]
