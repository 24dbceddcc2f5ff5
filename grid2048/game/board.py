#!/usr/bin/env python3
"""
Game board logic for 2048.
Defines the grid state and all board operations: moves, tile spawning and
win/loss evaluation. Nothing here touches the terminal.
"""

import enum
import logging
import random

from ..utils import config

logger = logging.getLogger(__name__)


class Empty(enum.Enum):
    """Marker for a cell without a tile."""
    EMPTY = 'empty'

    def __repr__(self):
        return 'EMPTY'


EMPTY = Empty.EMPTY


class Direction(enum.IntEnum):
    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class GameState:
    """
    Mutable state of one game session.

    field is a list of `height` rows, each a list of `width` cells. A cell is
    either EMPTY or a positive power of two. empty_count always equals the
    number of EMPTY cells in field.
    """

    def __init__(self, width, height, rng=None):
        self.width = width
        self.height = height
        self.field = [[EMPTY] * width for _ in range(height)]
        self.empty_count = width * height
        self.running = True
        self.rng = rng if rng is not None else random.Random()

    def __repr__(self):
        return (f"GameState(width={self.width}, height={self.height}, "
                f"empty_count={self.empty_count}, running={self.running})")


def new_game(width=None, height=None, rng=None):
    """Create an empty board. Dimensions default to the configured grid size."""
    if width is None:
        width = config.GRID_WIDTH
    if height is None:
        height = config.GRID_HEIGHT
    config.validate_grid_size(width, height)
    return GameState(width, height, rng)


def _random_u32(rng):
    return rng.getrandbits(32)


def spawn_bound(width, height):
    """Maximum number of tiles spawned at once: floor(log2(w * h)) - 2, at least 1."""
    return max(1, (width * height).bit_length() - 1 - 2)


def spawn_tiles(state):
    """
    Place between 1 and spawn_bound() new tiles (2 or 4) on random empty cells.
    Returns the number of tiles placed, 0 when the board is full.
    """
    empty = [(i, j) for i in range(state.height) for j in range(state.width)
             if state.field[i][j] is EMPTY]
    state.rng.shuffle(empty)

    bound = spawn_bound(state.width, state.height)
    count = min(1 + _random_u32(state.rng) % bound, len(empty))

    for i, j in empty[:count]:
        # Roll in [1, 100]: 4 on 75..100 (26%), 2 otherwise
        roll = _random_u32(state.rng) % 100 + 1
        state.field[i][j] = 4 if roll >= config.FOUR_THRESHOLD else 2

    state.empty_count -= count
    logger.debug("Spawned %d tile(s), %d empty cell(s) left", count, state.empty_count)
    return count


def line_positions(state, direction):
    """
    Return the lines affected by a move, one list of (row, col) coordinates
    per line, each ordered from the leading edge toward the trailing edge.
    """
    rows = range(state.height)
    cols = range(state.width)
    if direction == Direction.UP:
        return [[(i, j) for i in rows] for j in cols]
    elif direction == Direction.DOWN:
        return [[(i, j) for i in reversed(rows)] for j in cols]
    elif direction == Direction.LEFT:
        return [[(i, j) for j in cols] for i in rows]
    elif direction == Direction.RIGHT:
        return [[(i, j) for j in reversed(cols)] for i in rows]
    raise ValueError(f"Invalid direction: {direction!r}")


def compact_line(field, positions):
    """
    Slide and merge one line toward positions[0], in place.

    dst is the slot values are pushed into, src the next candidate behind it.
    A merged dst is settled: dst steps past it so it never merges twice in
    one pass. Returns (moved, freed) where freed counts merges.
    """
    moved = False
    freed = 0
    dst = 0

    for src in range(1, len(positions)):
        di, dj = positions[dst]
        si, sj = positions[src]
        src_cell = field[si][sj]
        if src_cell is EMPTY:
            continue

        dst_cell = field[di][dj]
        if dst_cell is EMPTY:
            field[di][dj] = src_cell
            field[si][sj] = EMPTY
            moved = True
        elif dst_cell == src_cell:
            field[di][dj] = dst_cell * 2
            field[si][sj] = EMPTY
            freed += 1
            moved = True
            dst += 1
        else:
            dst += 1
            if dst != src:
                ni, nj = positions[dst]
                field[ni][nj], field[si][sj] = src_cell, field[ni][nj]
                moved = True

    return moved, freed


def move_to(state, direction):
    """
    Apply a move to the board in the specified direction.
    Returns True if any cell changed.
    """
    direction = Direction(direction)
    moved = False
    for positions in line_positions(state, direction):
        line_moved, freed = compact_line(state.field, positions)
        state.empty_count += freed
        moved = moved or line_moved

    logger.debug("Move %s: moved=%s, %d empty cell(s)", direction.name, moved, state.empty_count)
    return moved


def check_lose(state):
    """True only when the grid is full and no two neighbours are equal."""
    if state.empty_count != 0:
        return False

    field = state.field
    for i in range(state.height):
        for j in range(state.width):
            cell = field[i][j]
            if cell is EMPTY:
                return False
            if i > 0 and cell == field[i - 1][j]:  # up
                return False
            if i < state.height - 1 and cell == field[i + 1][j]:  # down
                return False
            if j > 0 and cell == field[i][j - 1]:  # left
                return False
            if j < state.width - 1 and cell == field[i][j + 1]:  # right
                return False
    return True


def check_win(state):
    """True if any tile reached the winning value."""
    return any(cell == config.WIN_VALUE for row in state.field for cell in row)


def snapshot(state):
    """Read-only copy of the grid: a tuple of rows, each a tuple of cells."""
    return tuple(tuple(row) for row in state.field)


def count_empty(state):
    """Count EMPTY cells by scanning the whole grid."""
    return sum(1 for row in state.field for cell in row if cell is EMPTY)


def max_tile(state):
    """Highest tile on the board, 0 for an empty board."""
    return max((cell for row in state.field for cell in row if cell is not EMPTY), default=0)
