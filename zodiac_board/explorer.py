"""
Cipher explorer state.
Holds the styled text, the transposition settings and the selection of text
indices, and projects them onto grid cells.
"""

import logging
from dataclasses import replace
from typing import Iterable, Optional, Set, Tuple

from . import tools
from .config import BoardConfig
from .history_manager import HistoryManager
from .models import CellGeometry, ColorKind, ExploreMode, SelectionBox, StyledChar
from .projector import GridCellProjector, ProjectedGrid
from .text_diff import clean_text, diff_styled

logger = logging.getLogger(__name__)


class CipherExplorer:
    def __init__(self, config: Optional[BoardConfig] = None):
        self.config = config or BoardConfig()
        self.history: HistoryManager[Tuple[StyledChar, ...]] = HistoryManager(
            (), self.config.explorer_history_limit
        )
        self.num_cols = self.config.num_cols
        self.num_rows = self.config.num_rows
        self.mode: Optional[ExploreMode] = None
        self.selection: Set[int] = set()
        self.projector = GridCellProjector(
            self.config.tile_color, self.config.shade_color
        )
        self._cache_key = None
        self._cache_chars = None
        self._cache: Optional[ProjectedGrid] = None

    @property
    def chars(self) -> Tuple[StyledChar, ...]:
        return self.history.state

    @property
    def text(self) -> str:
        return "".join(sc.char for sc in self.chars)

    @property
    def can_undo(self) -> bool:
        return self.history.can_undo

    @property
    def can_redo(self) -> bool:
        return self.history.can_redo

    def set_text(self, raw: str) -> bool:
        """Applies a free-form edit, keeping styles on the untouched prefix and suffix."""
        new_text = clean_text(raw)
        if new_text == self.text:
            return False
        changed = self.history.push(lambda chars: diff_styled(chars, new_text))
        self.selection = {i for i in self.selection if i < len(new_text)}
        return changed

    def load_chars(self, chars: Iterable[StyledChar]):
        """Starts a fresh history, e.g. after loading a file."""
        self.history.reset(tuple(chars))
        self.selection = set()

    def set_dimensions(self, num_cols: int, num_rows: int):
        self.num_cols = self.config.clamp_columns(num_cols)
        self.num_rows = self.config.clamp_rows(num_rows)

    def set_mode(self, mode: Optional[ExploreMode]):
        self.mode = mode

    def cells(self) -> ProjectedGrid:
        """Projected grid, recomputed only when text, dimensions or mode change."""
        key = (self.num_cols, self.num_rows, self.mode)
        if key != self._cache_key or self._cache_chars is not self.chars:
            self._cache = self.projector.project(
                self.chars, self.num_cols, self.num_rows, self.mode
            )
            self._cache_key = key
            self._cache_chars = self.chars
        return self._cache

    # --- Selection ---

    def click(self, index: Optional[int], additive: bool = False):
        if index is None:
            self.selection = set()
        elif additive:
            self.selection ^= {index}
        else:
            self.selection = {index}

    def select_rect(
        self, box: SelectionBox, geometry: CellGeometry, additive: bool = False
    ) -> Set[int]:
        hits = tools.marquee_select(self.cells().cells, box, geometry)
        self.selection = self.selection | hits if additive else hits
        return hits

    def select_char(self, char: str) -> bool:
        indices = {i for i, sc in enumerate(self.chars) if sc.char == char}
        if not indices:
            return False
        if indices <= self.selection:
            self.selection -= indices
            return False
        self.selection |= indices
        return True

    # --- Styling ---

    def apply_color(self, color: Optional[str], kind: ColorKind) -> bool:
        if not self.selection:
            return False
        attr = "color" if kind == ColorKind.TEXT else "background_color"
        selected = self.selection

        def restyle(chars):
            return tuple(
                replace(sc, **{attr: color}) if i in selected else sc
                for i, sc in enumerate(chars)
            )

        return self.history.push(restyle)

    def undo(self) -> bool:
        return self.history.undo()

    def redo(self) -> bool:
        return self.history.redo()
