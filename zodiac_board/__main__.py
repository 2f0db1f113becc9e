#!/usr/bin/env python3
"""
Launcher for the Zodiac cipher board
"""

import sys

from zodiac_board.cli import main

if __name__ == "__main__":
    sys.exit(main())
