"""
Board save files.
Reads and writes the JSON session format:

    {"version": "1.0", "timestamp": <ms>, "boardFont": "...",
     "tiles": [{"id", "char", "col", "row", "color", "backgroundColor"}, ...]}

Loading is all-or-nothing: either a fully validated BoardFile comes back or
BoardFileError is raised.
"""

import json
import logging
import os
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .models import StyledChar, Tile

logger = logging.getLogger(__name__)

FORMAT_VERSION = "1.0"
DEFAULT_FONT = "Arial"


class BoardError(Exception):
    """Base class for board errors."""


class BoardFileError(BoardError):
    """A board file could not be read, parsed or written."""


class TileRecord(BaseModel):
    id: int
    char: str
    col: int = Field(ge=1)
    row: int = Field(ge=1)
    color: Optional[str] = None
    background_color: Optional[str] = Field(default=None, alias="backgroundColor")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("char")
    @classmethod
    def _single_char(cls, value: str) -> str:
        if len(value) != 1:
            raise ValueError("tile char must be exactly one character")
        return value

    def to_tile(self) -> Tile:
        return Tile(
            id=self.id,
            char=self.char,
            col=self.col,
            row=self.row,
            color=self.color,
            background_color=self.background_color,
        )

    @classmethod
    def from_tile(cls, tile: Tile) -> "TileRecord":
        return cls(
            id=tile.id,
            char=tile.char,
            col=tile.col,
            row=tile.row,
            color=tile.color,
            background_color=tile.background_color,
        )


class BoardDocument(BaseModel):
    version: str = FORMAT_VERSION
    timestamp: int = 0
    board_font: str = Field(default=DEFAULT_FONT, alias="boardFont")
    tiles: List[TileRecord]

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    @field_validator("version", mode="before")
    @classmethod
    def _version_text(cls, value: Any) -> Any:
        # Some writers store the version as a number
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value

    @field_validator("board_font", mode="before")
    @classmethod
    def _font_fallback(cls, value: Any) -> Any:
        return value or DEFAULT_FONT


@dataclass(frozen=True)
class BoardFile:
    tiles: Tuple[Tile, ...]
    font: str
    version: str = FORMAT_VERSION
    timestamp: int = 0


def parse_board(data: Any) -> BoardFile:
    """Validates an already decoded JSON document."""
    if not isinstance(data, dict) or not isinstance(data.get("tiles"), list):
        raise BoardFileError("Invalid file format: missing tiles array")

    try:
        doc = BoardDocument.model_validate(data)
    except ValidationError as e:
        raise BoardFileError(f"Invalid tile data: {e}") from e

    tiles = tuple(record.to_tile() for record in doc.tiles)
    ids = [t.id for t in tiles]
    if len(set(ids)) != len(ids):
        raise BoardFileError("Invalid file format: duplicate tile ids")
    cells = [t.cell for t in tiles]
    if len(set(cells)) != len(cells):
        raise BoardFileError("Invalid file format: two tiles share a cell")

    return BoardFile(
        tiles=tiles, font=doc.board_font, version=doc.version, timestamp=doc.timestamp
    )


def load_board(path: str) -> BoardFile:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Error loading board file %s: %s", path, e)
        raise BoardFileError(f"Error loading file {path}: {e}") from e

    try:
        return parse_board(data)
    except BoardFileError as e:
        logger.warning("Rejected board file %s: %s", path, e)
        raise


def dump_board(
    tiles: Sequence[Tile], font: str, timestamp: Optional[int] = None
) -> Dict[str, Any]:
    if timestamp is None:
        timestamp = int(time.time() * 1000)
    return {
        "version": FORMAT_VERSION,
        "timestamp": timestamp,
        "boardFont": font,
        "tiles": [
            TileRecord.from_tile(t).model_dump(by_alias=True) for t in tiles
        ],
    }


def save_board(path: str, tiles: Sequence[Tile], font: str) -> str:
    """Writes the board; returns the path actually used (with a .json suffix)."""
    if not path.lower().endswith(".json"):
        path += ".json"
    try:
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(dump_board(tiles, font), f, indent=2, ensure_ascii=False)
    except OSError as e:
        logger.warning("Error saving board file %s: %s", path, e)
        raise BoardFileError(f"Error saving file {path}: {e}") from e
    return path


def styled_chars_from_tiles(tiles: Sequence[Tile]) -> Tuple[StyledChar, ...]:
    """Text order follows tile ids, which start out as text indices."""
    return tuple(
        StyledChar(t.char, t.color, t.background_color)
        for t in sorted(tiles, key=lambda t: t.id)
    )
