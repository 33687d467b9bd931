"""Conway's Game of Life on a toroidal board."""
