"""
Builds renderable GridCell descriptors for the cipher explorer.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from .models import BlockLayout, ExploreMode, GridCell, StyledChar
from .transposition import CYCLIC_BLOCKS, TranspositionMapper

DEFAULT_TILE_COLOR = "#ffffff"
DEFAULT_SHADE_COLOR = "#d9d9d9"


@dataclass
class ProjectedGrid:
    cells: List[GridCell] = field(default_factory=list)
    total_cols: int = 0
    total_rows: int = 0

    def cell_for_text(self, text_index: int) -> Optional[GridCell]:
        for cell in self.cells:
            if cell.original_index == text_index:
                return cell
        return None

    def by_position(self) -> Dict[tuple, GridCell]:
        return {(cell.row, cell.col): cell for cell in self.cells}


def in_shade_zone(rel_row: int, rel_col: int, column_height: int) -> bool:
    """Column 1 of a block, plus a triangle growing two rows per column at its foot."""
    if rel_col == 1:
        return True
    return rel_row > column_height - 2 * (rel_col - 1)


class GridCellProjector:
    def __init__(
        self,
        tile_color: str = DEFAULT_TILE_COLOR,
        shade_color: str = DEFAULT_SHADE_COLOR,
    ):
        self.tile_color = tile_color
        self.shade_color = shade_color

    def base_color(self, mapper: TranspositionMapper, block: BlockLayout, row: int, col: int) -> str:
        if mapper.mode != ExploreMode.UNTRANSPOSE or block.index >= CYCLIC_BLOCKS:
            return self.tile_color
        # Measured against the full num_cols column even when the block is partial
        rel_col = col - block.left_col + 1
        rel_row = row - block.top_row + 1
        if in_shade_zone(rel_row, rel_col, mapper.block_height):
            return self.shade_color
        return self.tile_color

    def project(
        self,
        chars: Sequence[StyledChar],
        num_cols: int,
        num_rows: int,
        mode: Optional[ExploreMode],
    ) -> ProjectedGrid:
        mapper = TranspositionMapper(num_cols, num_rows, len(chars), mode)
        if not mapper.is_active:
            return ProjectedGrid()

        cells = []
        for grid_index in range(mapper.grid_size):
            block = mapper.block_for_grid(grid_index)
            row, col = mapper.visual_position(grid_index)
            text_index = mapper.grid_to_text(grid_index)
            styled = chars[text_index] if text_index is not None else None
            cells.append(
                GridCell(
                    id=grid_index,
                    row=row,
                    col=col,
                    char=styled.char if styled else "",
                    base_color=self.base_color(mapper, block, row, col),
                    style_color=styled.color if styled else None,
                    style_bg=styled.background_color if styled else None,
                    original_index=text_index,
                )
            )
        return ProjectedGrid(cells, mapper.total_cols, mapper.total_rows)
