"""
Configuration settings for the cipher board.
"""

import logging
import os
from typing import Tuple

import toml
from pydantic import BaseModel, ConfigDict, field_validator

logger = logging.getLogger(__name__)

CONFIG_TABLES = ("board", "explorer", "geometry", "colors")


class BoardConfig(BaseModel):
    """Configuration settings for the board and the explorer."""

    # Board settings
    margin: int = 40  # Empty cells around freshly created tiles
    default_columns: int = 17
    board_history_limit: int = 15
    default_font: str = "Arial"

    # Explorer settings
    num_cols: int = 17
    num_rows: int = 9
    column_range: Tuple[int, int] = (13, 20)
    row_range: Tuple[int, int] = (7, 13)
    explorer_history_limit: int = 50

    # Geometry settings (rem unless noted)
    base_cell_width: float = 3.5
    base_cell_height: float = 3.5
    gap_size: float = 0.2
    padding: float = 1.2
    root_font_px: float = 16.0
    scale_gap: bool = False  # Whether zoom also scales the gap
    zoom_min: float = 0.5
    zoom_max: float = 2.0
    zoom_step: float = 0.1

    # Colors
    tile_color: str = "#ffffff"
    shade_color: str = "#d9d9d9"

    model_config = ConfigDict(extra="allow")

    @field_validator("board_history_limit", "explorer_history_limit")
    @classmethod
    def _positive_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("history limit must be at least 1")
        return value

    def clamp_columns(self, value: int) -> int:
        low, high = self.column_range
        return max(low, min(high, value))

    def clamp_rows(self, value: int) -> int:
        low, high = self.row_range
        return max(low, min(high, value))

    @classmethod
    def load_from_toml(cls, path: str = "zodiac_board.toml") -> "BoardConfig":
        """Load configuration from a TOML file."""
        if not os.path.exists(path):
            logger.warning("Config file %s not found. Using defaults.", path)
            return cls()

        try:
            with open(path, "r") as f:
                data = toml.load(f)

            # Flatten the tables for Pydantic
            settings = {}
            for table in CONFIG_TABLES:
                settings.update(data.get(table, {}))
            return cls(**settings)
        except Exception as e:
            logger.error("Error loading config %s: %s", path, e)
            return cls()
