"""Fixed settings for the console simulation."""

# Board
BOARD_WIDTH = 64
BOARD_HEIGHT = 20

# Animation
FRAME_DELAY = 0.05  # seconds between generations
GLIDER_OFFSETS = [(0, 0), (16, 0), (32, 0), (48, 0)]

# Rendering
ALIVE_GLYPH = '#'
DEAD_GLYPH = '.'

# Random pattern
RANDOM_DENSITY = 1 / 3
