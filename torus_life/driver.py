"""
Console animation loop for the toroidal Game of Life
"""
import sys
import time
from typing import Callable, Optional, TextIO

from torus_life.config import BOARD_HEIGHT, BOARD_WIDTH, FRAME_DELAY, GLIDER_OFFSETS
from torus_life.utils.board import Board, get_next_board
from torus_life.utils.patterns import Pattern, insert_pattern


def seed_board() -> Board:
    """Return the starting board: four gliders along the top edge."""
    board = Board(BOARD_WIDTH, BOARD_HEIGHT)
    for offset in GLIDER_OFFSETS:
        insert_pattern(board, Pattern.GLIDER, offset)
    return board


def banner(iteration: int) -> str:
    return f".__________________________ Iteration {iteration} __________________________."


def run(board: Optional[Board] = None,
        max_iterations: Optional[int] = None,
        should_stop: Optional[Callable[[int, Board], bool]] = None,
        out: Optional[TextIO] = None,
        delay: float = FRAME_DELAY,
        sleep: Callable[[float], None] = time.sleep) -> Board:
    """
    Print generations one after another until told to stop.

    Args:
        board: Starting board, seed_board() if None
        max_iterations: Number of generations to print, None for no limit
        should_stop: Called with (iteration, board) before each frame;
            returning True ends the loop
        out: Stream to write frames to, sys.stdout if None
        delay: Pause between generations in seconds
        sleep: Function used for the pause

    Returns:
        The first board that was not printed
    """
    if board is None:
        board = seed_board()
    if out is None:
        out = sys.stdout

    iteration = 0
    while max_iterations is None or iteration < max_iterations:
        if should_stop is not None and should_stop(iteration, board):
            break
        out.write(banner(iteration) + "\n")
        out.write(str(board) + "\n")
        out.flush()
        board = get_next_board(board)
        sleep(delay)
        iteration += 1

    return board


def main():
    run()


if __name__ == '__main__':
    main()
