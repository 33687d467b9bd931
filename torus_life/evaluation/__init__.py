"""Evaluation metrics and analysis tools."""

from .metrics import (
    cell_accuracy,
    hamming_distance,
    population_history,
    find_translation,
    find_period,
    is_still_life,
    find_extinction_step
)

__all__ = [
    'cell_accuracy',
    'hamming_distance',
    'population_history',
    'find_translation',
    'find_period',
    'is_still_life',
    'find_extinction_step'
]
