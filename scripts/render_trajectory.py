"""
Evolve a starting board and save the trajectory as a GIF and a PNG strip
"""
import sys
from pathlib import Path

import numpy as np
from tqdm import tqdm

sys.path.append(str(Path(__file__).parent.parent))

from torus_life.config import BOARD_HEIGHT, BOARD_WIDTH
from torus_life.driver import seed_board
from torus_life.evaluation.metrics import population_history
from torus_life.utils.board import Board, get_next_board
from torus_life.utils.patterns import PATTERN_CATEGORIES, Pattern, insert_pattern
from torus_life.utils.visualization import (
    create_animation,
    visualize_pattern_grid,
    visualize_trajectory
)


def build_start_board(seed=None):
    """
    Build the starting board.

    Args:
        seed: Random seed; None uses the four-glider board

    Returns:
        Board
    """
    if seed is None:
        return seed_board()

    board = Board(BOARD_WIDTH, BOARD_HEIGHT)
    insert_pattern(board, Pattern.RANDOM, rng=np.random.default_rng(seed))
    return board


def evolve(board, num_steps):
    """Evolve with a progress bar, returning all generations."""
    trajectory = [board]
    for _ in tqdm(range(num_steps), desc="Evolving board"):
        trajectory.append(get_next_board(trajectory[-1]))
    return trajectory


def main():
    import argparse

    parser = argparse.ArgumentParser(description='Render a Game of Life trajectory')
    parser.add_argument('--steps', type=int, default=64,
                        help='Number of generations to evolve')
    parser.add_argument('--output', type=str, default='output',
                        help='Directory for the rendered files')
    parser.add_argument('--fps', type=int, default=20,
                        help='Frames per second of the GIF')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for a random start board (default: four gliders)')
    parser.add_argument('--patterns', action='store_true',
                        help='Also save an overview of the pattern catalog')

    args = parser.parse_args()

    output_dir = Path(args.output)
    output_dir.mkdir(parents=True, exist_ok=True)

    board = build_start_board(args.seed)
    trajectory = evolve(board, args.steps)
    populations = population_history(trajectory)

    print(f"Generations: {len(trajectory) - 1}")
    print(f"Population: start {populations[0]}, end {populations[-1]}, "
          f"min {populations.min()}, max {populations.max()}")

    name = "Random" if args.seed is not None else "Gliders"
    create_animation(trajectory, title=name, save_path=str(output_dir / "trajectory.gif"),
                     fps=args.fps)
    visualize_trajectory(trajectory, title=name, save_path=str(output_dir / "trajectory.png"))

    if args.patterns:
        all_patterns = {name: pattern
                        for category in PATTERN_CATEGORIES.values()
                        for name, pattern in category.items()}
        visualize_pattern_grid(all_patterns, save_path=str(output_dir / "patterns.png"))


if __name__ == "__main__":
    main()
