#!/usr/bin/env python3
"""
Console interface for 2048.
Provides a curses UI: reads keys, feeds directions to the board and renders
board snapshots.
"""

import curses

from ..utils import config
from ..game import board

CELL_WIDTH = 6                 # Characters per cell, excluding the separator

BANNER = [
    "Welcome to 2048!",
    "Shift the board in any direction to merge equal tiles. 2 + 2 = 4...",
    "Move with W A S D or the arrow keys, Q quits.",
    "Reach the 2048 tile to win. Good luck!",
]

ARROW_KEYS = {
    curses.KEY_UP: board.Direction.UP,
    curses.KEY_DOWN: board.Direction.DOWN,
    curses.KEY_LEFT: board.Direction.LEFT,
    curses.KEY_RIGHT: board.Direction.RIGHT,
}

# Tile value -> color pair number, see init_colors()
TILE_COLORS = {2: 2, 4: 3, 8: 4, 16: 5, 32: 6, 64: 7}


def init_colors():
    """Initialize color pairs for a curses display."""
    curses.init_pair(1, curses.COLOR_WHITE, curses.COLOR_BLACK)   # Default text, frame
    curses.init_pair(2, curses.COLOR_CYAN, curses.COLOR_BLACK)    # Tile 2
    curses.init_pair(3, curses.COLOR_MAGENTA, curses.COLOR_BLACK) # Tile 4
    curses.init_pair(4, curses.COLOR_BLUE, curses.COLOR_BLACK)    # Tile 8
    curses.init_pair(5, curses.COLOR_GREEN, curses.COLOR_BLACK)   # Tile 16
    curses.init_pair(6, curses.COLOR_YELLOW, curses.COLOR_BLACK)  # Tile 32
    curses.init_pair(7, curses.COLOR_RED, curses.COLOR_BLACK)     # Tile 64
    curses.init_pair(8, curses.COLOR_YELLOW, curses.COLOR_BLACK)  # 128 and higher
    curses.init_pair(9, curses.COLOR_BLACK, curses.COLOR_BLACK)   # Empty cell marker


def cell_color(cell):
    """Return the curses attribute used to draw a cell."""
    if cell is board.EMPTY:
        return curses.color_pair(9) | curses.A_BOLD
    if cell >= 128:
        return curses.color_pair(8) | curses.A_BOLD
    return curses.color_pair(TILE_COLORS.get(cell, 1))


def format_cell(cell):
    """Text of a cell, centered in CELL_WIDTH columns."""
    text = "#" if cell is board.EMPTY else str(cell)
    return text.center(CELL_WIDTH)


def frame_line(width):
    return "+" + ("-" * CELL_WIDTH + "+") * width


def translate_key(key):
    """
    Map a getch() key code to a Direction.
    Returns None for keys that are not bound to a move.
    """
    if key in ARROW_KEYS:
        return ARROW_KEYS[key]
    if 0 <= key < 256:
        name = config.KEY_BINDINGS.get(chr(key).lower())
        if name is not None:
            return board.Direction[name.upper()]
    return None


def is_quit_key(key):
    return 0 <= key < 256 and chr(key).lower() in config.QUIT_KEYS


def is_confirm_key(key):
    return key == curses.KEY_ENTER or (0 <= key < 256 and chr(key) in config.CONFIRM_KEYS)


def draw_banner(stdscr):
    """Show the welcome screen and wait for a key."""
    stdscr.clear()
    stdscr.border()
    for row, line in enumerate(BANNER):
        stdscr.addstr(row + 1, 2, line, curses.color_pair(1))
    stdscr.addstr(len(BANNER) + 2, 2, "Press any key to start", curses.color_pair(1))
    stdscr.refresh()
    stdscr.getch()


def draw_board(stdscr, state, extra_text=""):
    """
    Render a board snapshot.
    Displays the framed grid, the max tile and an optional message below it.
    """
    grid = board.snapshot(state)
    stdscr.clear()

    frame = curses.color_pair(1)
    stdscr.addstr(0, 0, f"Max Tile: {board.max_tile(state)}", frame)
    start_y = 2
    stdscr.addstr(start_y, 0, frame_line(state.width), frame)
    for i, row in enumerate(grid):
        y = start_y + i * 2 + 1
        stdscr.addstr(y, 0, "|", frame)
        for j, cell in enumerate(row):
            x = 1 + j * (CELL_WIDTH + 1)
            stdscr.addstr(y, x, format_cell(cell), cell_color(cell))
            stdscr.addstr(y, x + CELL_WIDTH, "|", frame)
        if i < state.height - 1:
            stdscr.addstr(y + 1, 0, frame_line(state.width), frame)
    bottom = start_y + state.height * 2
    stdscr.addstr(bottom, 0, frame_line(state.width), frame)

    if extra_text:
        stdscr.addstr(bottom + 2, 0, extra_text, frame)
    stdscr.refresh()


def wait_for_confirm(stdscr):
    while not is_confirm_key(stdscr.getch()):
        pass


def play(stdscr, state):
    """
    Run the game loop until a win, a loss or a quit.
    Returns "win", "lose" or "quit".
    """
    board.spawn_tiles(state)
    draw_board(stdscr, state)

    outcome = "quit"
    while state.running:
        key = stdscr.getch()
        if is_quit_key(key):
            state.running = False
            break

        direction = translate_key(key)
        if direction is None:
            draw_board(stdscr, state, "Unknown command! Use W A S D to move.")
            continue

        if not board.move_to(state, direction):
            draw_board(stdscr, state)
            continue

        if board.check_win(state):
            draw_board(stdscr, state, "You won, congratulations! Press Enter to exit...")
            wait_for_confirm(stdscr)
            outcome = "win"
            state.running = False
            break

        board.spawn_tiles(state)
        draw_board(stdscr, state)

        if board.check_lose(state):
            draw_board(stdscr, state, "No moves left, try again! Press Enter to exit...")
            wait_for_confirm(stdscr)
            outcome = "lose"
            state.running = False

    stdscr.clear()
    stdscr.refresh()
    return outcome


def _console_main(stdscr, state):
    curses.curs_set(0)  # Hide cursor
    curses.start_color()
    init_colors()
    draw_banner(stdscr)
    return play(stdscr, state)


def run_console_ui(width=None, height=None, rng=None):
    """
    Run the console UI on a new board.
    curses.wrapper restores the terminal on every exit path, Ctrl-C included.
    """
    state = board.new_game(width, height, rng)
    return curses.wrapper(_console_main, state)
