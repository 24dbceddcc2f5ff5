#!/usr/bin/env python3
"""
2048 in the terminal.

Usage:
    python main.py                        # 4x4 board
    python main.py --width 5 --height 5   # Custom board size
    python main.py --help                 # All options
"""

import sys

from grid2048.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
