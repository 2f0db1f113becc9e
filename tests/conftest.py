"""
Pytest configuration and shared fixtures for the cipher board tests.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from zodiac_board.board import TileBoard
from zodiac_board.config import BoardConfig
from zodiac_board.explorer import CipherExplorer
from zodiac_board.models import CellGeometry, Tile

# 340 symbols, enough for two full 17x9 blocks plus a 34 character residue
CIPHER_340 = "".join(chr(ord("A") + i % 26) for i in range(340))


@pytest.fixture
def config():
    """Default configuration."""
    return BoardConfig()


@pytest.fixture
def board(config):
    """An empty TileBoard."""
    return TileBoard(config)


@pytest.fixture
def explorer(config):
    """An empty CipherExplorer."""
    return CipherExplorer(config)


@pytest.fixture
def geometry():
    """50px cells with a 2px gap and 10px padding, no centering."""
    return CellGeometry(cell_width=50, cell_height=50, gap=2, padding=10)


@pytest.fixture
def tiles():
    """Three tiles: two side by side and one far away."""
    return (
        Tile(id=1, char="A", col=3, row=3),
        Tile(id=2, char="B", col=4, row=3),
        Tile(id=3, char="C", col=10, row=10),
    )


@pytest.fixture
def cipher_text():
    return CIPHER_340
