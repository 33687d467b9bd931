"""
Visualization tools for toroidal Game of Life boards
"""
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter
from typing import List, Optional

from torus_life.utils.board import Board


def _draw_cells(ax, cells: np.ndarray, show_grid: bool, **imshow_kwargs):
    image = ax.imshow(cells, cmap='binary', interpolation='nearest',
                      vmin=0, vmax=1, **imshow_kwargs)

    if show_grid:
        h, w = cells.shape
        ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
        ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
        ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)

    ax.set_xticks([])
    ax.set_yticks([])
    return image


def visualize_board(board: Board,
                    title: str = "Game of Life",
                    save_path: Optional[str] = None,
                    figsize: tuple = (12, 4),
                    show_grid: bool = True) -> None:
    """
    Visualize a single board.

    Args:
        board: Board to draw
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)

    _draw_cells(ax, board.cells, show_grid)
    ax.set_title(title, fontsize=16, pad=10)

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def visualize_trajectory(trajectory: List[Board],
                         title: str = "Board",
                         save_path: Optional[str] = None,
                         figsize: tuple = (16, 4),
                         num_frames_to_show: int = 8,
                         show_grid: bool = True) -> None:
    """
    Visualize evenly spaced generations from a trajectory.

    Args:
        trajectory: List of boards, generation 0 first
        title: Title prefix
        save_path: Path to save figure
        figsize: Figure size
        num_frames_to_show: Number of generations to display
        show_grid: Whether to show grid lines
    """
    num_steps = len(trajectory)
    num_frames_to_show = min(num_frames_to_show, num_steps)
    indices = np.linspace(0, num_steps - 1, num_frames_to_show, dtype=int)

    fig, axes = plt.subplots(1, num_frames_to_show, figsize=figsize)
    axes = np.atleast_1d(axes)

    for ax, idx in zip(axes, indices):
        _draw_cells(ax, trajectory[idx].cells, show_grid)
        ax.set_title(f"t={idx}", fontsize=12)

    fig.suptitle(f"{title} Evolution", fontsize=16)
    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved trajectory to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def create_animation(trajectory: List[Board],
                     title: str = "Board",
                     save_path: Optional[str] = None,
                     fps: int = 20,
                     figsize: tuple = (12, 4),
                     show_grid: bool = True) -> None:
    """
    Create animated GIF from a trajectory.

    Args:
        trajectory: List of boards, generation 0 first
        title: Title prefix
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)

    im = _draw_cells(ax, trajectory[0].cells, show_grid, animated=True)
    title_text = ax.set_title(f"{title} - Iteration 0", fontsize=16)

    def update(frame):
        im.set_array(trajectory[frame].cells)
        title_text.set_text(f"{title} - Iteration {frame}")
        return [im, title_text]

    anim = FuncAnimation(fig, update, frames=len(trajectory),
                         interval=1000 // fps, blit=True, repeat=True)

    if save_path:
        writer = PillowWriter(fps=fps)
        anim.save(save_path, writer=writer)
        print(f"Saved animation to {save_path}")
    else:
        plt.show()

    plt.close(fig)


def visualize_pattern_grid(patterns_dict: dict,
                           save_path: Optional[str] = None,
                           figsize: tuple = (15, 10),
                           show_grid: bool = True) -> None:
    """
    Visualize multiple pattern arrays in a grid.

    Args:
        patterns_dict: Dictionary of {name: pattern_array}
        save_path: Path to save figure
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    num_patterns = len(patterns_dict)
    ncols = min(4, num_patterns)
    nrows = (num_patterns + ncols - 1) // ncols

    fig, axes = plt.subplots(nrows, ncols, figsize=figsize)
    axes = np.atleast_1d(axes).flatten()

    for ax, (name, pattern) in zip(axes, patterns_dict.items()):
        _draw_cells(ax, pattern, show_grid)
        ax.set_title(name, fontsize=12)

    for ax in axes[num_patterns:]:
        ax.axis('off')

    plt.tight_layout()

    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        print(f"Saved pattern grid to {save_path}")
    else:
        plt.show()

    plt.close(fig)
