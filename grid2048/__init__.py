"""Terminal 2048 puzzle: grid engine plus a curses front end."""

__version__ = "0.1.0"
