#!/usr/bin/env python3
"""
Configuration for the 2048 game.
Centralizes grid and rule parameters and provides functions for applying overrides.
"""

# ---------------- CONFIGURATION PARAMETERS ----------------
# Grid parameters
GRID_WIDTH = 4                 # Number of columns
GRID_HEIGHT = 4                # Number of rows
MIN_GRID_SIZE = 2              # Compaction needs at least two cells per line

# Rule parameters
WIN_VALUE = 2048               # Tile value that ends the game with a win
FOUR_THRESHOLD = 75            # Roll in [1, 100] at or above this spawns a 4 instead of a 2

# Input parameters
KEY_BINDINGS = {               # Key -> direction name
    'w': 'up',
    's': 'down',
    'a': 'left',
    'd': 'right',
}
QUIT_KEYS = ('q',)
CONFIRM_KEYS = ('\n', '\r')    # Enter leaves the final screen
# ------------------------------------------------------------


class ConfigError(ValueError):
    """Raised for settings the game cannot start with."""


def validate_grid_size(width, height):
    """Raise ConfigError unless both dimensions are integers >= MIN_GRID_SIZE."""
    for name, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ConfigError(f"Grid {name} must be an integer, got {value!r}")
        if value < MIN_GRID_SIZE:
            raise ConfigError(f"Grid {name} must be at least {MIN_GRID_SIZE}, got {value}")


def apply_settings(settings):
    """
    Apply setting overrides to global configuration.
    Takes a dictionary of setting names and values; None values are skipped.
    Returns a list of applied settings.
    """
    if not settings:
        return []

    global GRID_WIDTH, GRID_HEIGHT, WIN_VALUE

    applied = []

    if settings.get('grid_width') is not None:
        GRID_WIDTH = settings['grid_width']
        applied.append('grid_width')
    if settings.get('grid_height') is not None:
        GRID_HEIGHT = settings['grid_height']
        applied.append('grid_height')
    if settings.get('win_value') is not None:
        WIN_VALUE = settings['win_value']
        applied.append('win_value')

    return applied
