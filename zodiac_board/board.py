"""
Tile board state and editing operations.
Owns the tile history, the selection and the drag state for board mode.
"""

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Set, Tuple

from . import tools
from .config import BoardConfig
from .file_io import BoardFile, load_board, save_board
from .history_manager import HistoryManager
from .models import (
    CellGeometry,
    ColorKind,
    DragOffset,
    DropPreview,
    SelectionBox,
    SpacesMode,
    Tile,
)
from .text_diff import clean_text

logger = logging.getLogger(__name__)


class TileBoard:
    def __init__(self, config: Optional[BoardConfig] = None):
        self.config = config or BoardConfig()
        self.history: HistoryManager[Tuple[Tile, ...]] = HistoryManager(
            (), self.config.board_history_limit
        )
        self.columns = self.config.default_columns
        self.font = self.config.default_font
        self.selection: Set[int] = set()
        self.copy_mode = False
        self._next_id = 0
        self._drag: List[DragOffset] = []
        self.preview: Optional[DropPreview] = None

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        return self.history.state

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def tile(self, tile_id: int) -> Optional[Tile]:
        for tile in self.tiles:
            if tile.id == tile_id:
                return tile
        return None

    def _peek_id(self) -> int:
        return max([self._next_id] + [t.id + 1 for t in self.tiles])

    def _mint_ids(self, count: int) -> int:
        """Reserves count ids and returns the first; ids are never handed out twice."""
        first = self._peek_id()
        self._next_id = first + count
        return first

    def _replace_all(self, tiles: Tuple[Tile, ...]):
        self.history.reset(tiles)
        self._next_id = max([t.id + 1 for t in tiles], default=0)
        self.selection = set()
        self.copy_mode = False
        self.cancel_drag()

    # --- Creation and persistence ---

    def create_from_text(
        self,
        text: str,
        columns: Optional[int] = None,
        spaces_mode: SpacesMode = SpacesMode.KEEP,
    ) -> Tuple[Tile, ...]:
        """Lays the text out row by row inside the margin; spaces leave gaps."""
        if columns is not None:
            if columns < 1:
                return self.tiles
            self.columns = columns
        margin = self.config.margin
        clean = clean_text(text, spaces_mode)

        tiles = tuple(
            Tile(
                id=idx,
                char=c,
                col=idx % self.columns + 1 + margin,
                row=idx // self.columns + 1 + margin,
            )
            for idx, c in enumerate(clean)
            if c != " "
        )
        self._replace_all(tiles)
        return tiles

    def load(self, path: str) -> BoardFile:
        """Replaces the board with a saved file; state is untouched if loading fails."""
        board_file = load_board(path)
        self._replace_all(board_file.tiles)
        self.font = board_file.font
        logger.info("Loaded %d tiles from %s", len(board_file.tiles), path)
        return board_file

    def save(self, path: str) -> str:
        return save_board(path, self.tiles, self.font)

    def grid_extent(self) -> Tuple[int, int]:
        """(total_columns, total_rows) of the scrollable board."""
        margin = self.config.margin
        tiles = self.tiles
        max_col = max((t.col for t in tiles), default=0)
        max_row = max((t.row for t in tiles), default=0)
        min_cols = self.columns + 2 * margin
        min_rows = -(-len(tiles) // self.columns) + 2 * margin
        return max(min_cols, max_col + margin), max(min_rows, max_row + margin)

    def bounding_box(self) -> Optional[Tuple[int, int, int, int]]:
        return tools.bounding_box(self.tiles)

    # --- Selection ---

    def click(self, tile_id: Optional[int], additive: bool = False):
        if tile_id is None:
            self.selection = set()
        elif additive:
            self.selection ^= {tile_id}
        else:
            self.selection = {tile_id}

    def select_rect(self, box: SelectionBox, geometry: CellGeometry, additive: bool = False) -> Set[int]:
        hits = tools.marquee_select(self.tiles, box, geometry)
        self.selection = self.selection | hits if additive else hits
        return hits

    def select_char(self, char: str) -> bool:
        """Toggles every tile showing char; returns True if they are now selected."""
        ids = {t.id for t in self.tiles if t.char == char}
        if not ids:
            return False
        if ids <= self.selection:
            self.selection -= ids
            return False
        self.selection |= ids
        return True

    def clear_selection(self):
        self.selection = set()
        self.copy_mode = False

    # --- Editing ---

    def delete_selected(self) -> bool:
        if not self.selection:
            return False
        selected = self.selection
        if not any(t.id in selected for t in self.tiles):
            self.selection = set()
            return False
        changed = self.history.push(
            lambda tiles: tuple(t for t in tiles if t.id not in selected)
        )
        self.selection = set()
        self.copy_mode = False
        return changed

    def apply_color(self, color: str, kind: ColorKind) -> bool:
        if not self.selection:
            return False
        attr = "color" if kind == ColorKind.TEXT else "background_color"
        selected = self.selection

        def recolor(tiles):
            return tuple(
                replace(t, **{attr: color}) if t.id in selected else t
                for t in tiles
            )

        return self.history.push(recolor)

    def enter_copy_mode(self) -> bool:
        if not self.selection:
            return False
        self.copy_mode = True
        return True

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()

    # --- Dragging ---

    def begin_drag(self, pivot_id: int) -> List[DragOffset]:
        self._drag = tools.drag_offsets(self.tiles, pivot_id, self.selection)
        self.preview = None
        return self._drag

    def preview_drop(self, col: int, row: int) -> DropPreview:
        """Called on every pointer move while dragging."""
        self.preview = tools.preview_drop(
            self.tiles, self._drag, col, row, copy=self.copy_mode
        )
        return self.preview

    def drop(self, col: int, row: int) -> bool:
        offsets = self._drag
        self.cancel_drag()
        if not offsets:
            return False

        if self.copy_mode:
            result = tools.copy_tiles(self.tiles, offsets, col, row, self._peek_id())
            if result is None:
                return False
            tiles, new_ids = result
            self._mint_ids(len(new_ids))
            self.history.push(tiles)
            self.selection = set(new_ids)
            return True

        tiles = tools.move_tiles(self.tiles, offsets, col, row)
        if tiles is None:
            return False
        self.history.push(tiles)
        self.selection = set()
        return True

    def cancel_drag(self):
        self._drag = []
        self.preview = None

    def place_new_tile(self, char: str, col: int, row: int) -> Optional[Tile]:
        """Drops a tile from the palette; ignored when the cell is taken."""
        tiles = tools.place_tile(self.tiles, self._peek_id(), char, col, row)
        if tiles is None:
            return None
        self._mint_ids(1)
        self.history.push(tiles)
        return tiles[-1]

    def selected_tiles(self) -> Iterable[Tile]:
        return [t for t in self.tiles if t.id in self.selection]
