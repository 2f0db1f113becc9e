"""
Terminal rendering of the explorer grid and the tile board using rich.
"""

from typing import Dict, Optional, Sequence, Tuple

from rich.console import Console
from rich.panel import Panel
from rich.style import Style
from rich.text import Text

from .models import Tile
from .palette import rgb_hex
from .projector import ProjectedGrid
from .tools import bounding_box

EMPTY_CELL = "  "


def cell_style(color: Optional[str], background: Optional[str], selected: bool = False) -> Style:
    if selected:
        return Style(color="black", bgcolor="yellow", bold=True)
    return Style(color=rgb_hex(color) or "black", bgcolor=rgb_hex(background))


class Renderer:
    """Renders grids to the terminal, two columns per cell."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def grid_text(self, grid: ProjectedGrid, selection: Sequence[int] = ()) -> Text:
        selected = set(selection)
        by_pos = grid.by_position()
        text = Text()
        for row in range(1, grid.total_rows + 1):
            for col in range(1, grid.total_cols + 1):
                cell = by_pos.get((row, col))
                if cell is None:
                    text.append(EMPTY_CELL)
                    continue
                style = cell_style(
                    cell.style_color,
                    cell.fill_color,
                    cell.original_index is not None and cell.original_index in selected,
                )
                text.append(f"{cell.char or ' '} ", style=style)
            text.append("\n")
        return text

    def board_text(self, tiles: Sequence[Tile], selection: Sequence[int] = ()) -> Text:
        """Draws only the bounding box of the tiles, not the whole margin."""
        box = bounding_box(tiles)
        text = Text()
        if box is None:
            return text
        min_col, min_row, max_col, max_row = box
        selected = set(selection)
        by_cell: Dict[Tuple[int, int], Tile] = {t.cell: t for t in tiles}
        for row in range(min_row, max_row + 1):
            for col in range(min_col, max_col + 1):
                tile = by_cell.get((col, row))
                if tile is None:
                    text.append(EMPTY_CELL)
                    continue
                style = cell_style(
                    tile.color, tile.background_color or "#ffffff", tile.id in selected
                )
                text.append(f"{tile.char} ", style=style)
            text.append("\n")
        return text

    def _show(self, body: Text, title: str):
        # Plain Text titles so file names are never parsed as markup
        self.console.print(Panel(body, title=Text(title) if title else None, expand=False))

    def show_grid(self, grid: ProjectedGrid, title: str = "", selection: Sequence[int] = ()):
        self._show(self.grid_text(grid, selection), title)

    def show_board(self, tiles: Sequence[Tile], title: str = "", selection: Sequence[int] = ()):
        self._show(self.board_text(tiles, selection), title)
