from __future__ import annotations

import random

from grid2048.game import board


class ScriptedRandom:
    """Stand-in for random.Random: fixed getrandbits output, shuffle keeps order."""

    def __init__(self, value=0):
        self.value = value

    def getrandbits(self, k):
        return self.value

    def shuffle(self, items):
        pass


def make_state(rows, rng=None):
    """Build a GameState from rows of ints, 0 meaning an empty cell."""
    state = board.new_game(len(rows[0]), len(rows), rng or random.Random(0))
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            state.field[i][j] = board.EMPTY if value == 0 else value
    state.empty_count = board.count_empty(state)
    return state


def as_rows(state):
    """Grid as rows of ints, 0 for empty cells."""
    return [[0 if cell is board.EMPTY else cell for cell in row] for row in state.field]
