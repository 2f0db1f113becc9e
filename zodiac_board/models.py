"""
Core models and data structures for the cipher board.
"""

from dataclasses import dataclass, field, replace
from typing import Optional, List, Tuple
from enum import Enum


@dataclass(frozen=True)
class Tile:
    id: int
    char: str
    col: int
    row: int
    color: Optional[str] = None
    background_color: Optional[str] = None

    @property
    def cell(self) -> Tuple[int, int]:
        return (self.col, self.row)

    def moved_to(self, col: int, row: int) -> "Tile":
        return replace(self, col=col, row=row)


@dataclass(frozen=True)
class StyledChar:
    char: str
    color: Optional[str] = None
    background_color: Optional[str] = None

    @property
    def is_styled(self) -> bool:
        return self.color is not None or self.background_color is not None


class ExploreMode(Enum):
    UNTRANSPOSE = "untranspose"
    TRANSPOSE = "transpose"


class SpacesMode(Enum):
    KEEP = "keep"
    REMOVE = "remove"


class ColorKind(Enum):
    TEXT = "text"
    BG = "bg"


@dataclass(frozen=True)
class GridCell:
    id: int
    row: int
    col: int
    char: str
    base_color: str
    style_color: Optional[str] = None
    style_bg: Optional[str] = None
    original_index: Optional[int] = None

    @property
    def fill_color(self) -> str:
        return self.style_bg or self.base_color


@dataclass(frozen=True)
class CellGeometry:
    """Pixel metrics of the rendered grid, supplied by the rendering side."""

    cell_width: float
    cell_height: float
    gap: float
    padding: float
    centering_offset: float = 0.0

    def cell_rect(self, col: int, row: int) -> Tuple[float, float, float, float]:
        """Returns (left, top, right, bottom) of a 1-based grid cell."""
        left = self.padding + self.centering_offset + (col - 1) * (self.cell_width + self.gap)
        top = self.padding + (row - 1) * (self.cell_height + self.gap)
        return left, top, left + self.cell_width, top + self.cell_height


@dataclass(frozen=True)
class SelectionBox:
    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_points(cls, x0: float, y0: float, x1: float, y1: float) -> "SelectionBox":
        return cls(min(x0, x1), min(y0, y1), abs(x1 - x0), abs(y1 - y0))

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass(frozen=True)
class DragOffset:
    id: int
    offset_col: int
    offset_row: int


@dataclass
class DropPreview:
    is_valid: bool
    cells: List[Tuple[int, int]] = field(default_factory=list)


@dataclass(frozen=True)
class BlockLayout:
    """Where one block of the explorer layout sits on the visual grid."""

    index: int
    first_text_index: int
    length: int
    top_row: int
    left_col: int
    width: int
    height: int
    cyclic: bool = False
