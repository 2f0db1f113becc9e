"""
Placement, drag and selection tools for the tile board.
Pure functions over tile tuples; the board applies their results.
"""

import logging
from typing import Dict, Iterable, List, Optional, Sequence, Set, Tuple, Union

from .models import CellGeometry, DragOffset, DropPreview, GridCell, SelectionBox, Tile

logger = logging.getLogger(__name__)

Cell = Tuple[int, int]


def occupancy(tiles: Iterable[Tile]) -> Dict[Cell, int]:
    """(col, row) -> tile id."""
    return {tile.cell: tile.id for tile in tiles}


def is_on_grid(col: int, row: int) -> bool:
    return col >= 1 and row >= 1


def drag_offsets(
    tiles: Sequence[Tile], pivot_id: int, selection: Iterable[int]
) -> List[DragOffset]:
    """
    Offsets of every tile that moves with the pivot.
    Selected tiles follow the pivot only when the pivot itself is selected.
    """
    by_id = {tile.id: tile for tile in tiles}
    pivot = by_id.get(pivot_id)
    if pivot is None:
        return []

    selected = set(selection)
    moving_ids = [pivot_id]
    if pivot_id in selected:
        moving_ids += [t.id for t in tiles if t.id in selected and t.id != pivot_id]

    return [
        DragOffset(
            id=tid,
            offset_col=by_id[tid].col - pivot.col,
            offset_row=by_id[tid].row - pivot.row,
        )
        for tid in moving_ids
    ]


def preview_drop(
    tiles: Sequence[Tile],
    offsets: Sequence[DragOffset],
    target_col: int,
    target_row: int,
    copy: bool = False,
) -> DropPreview:
    """
    Cells the moving tiles would land on and whether they are all free.
    A move vacates the originals; a copy leaves them in place.
    """
    cells = [(target_col + o.offset_col, target_row + o.offset_row) for o in offsets]
    if not cells:
        return DropPreview(False, [])

    moving = set() if copy else {o.id for o in offsets}
    occupied = occupancy(t for t in tiles if t.id not in moving)
    for col, row in cells:
        if not is_on_grid(col, row) or (col, row) in occupied:
            return DropPreview(False, cells)
    return DropPreview(True, cells)


def move_tiles(
    tiles: Sequence[Tile],
    offsets: Sequence[DragOffset],
    target_col: int,
    target_row: int,
) -> Optional[Tuple[Tile, ...]]:
    """New tile tuple with the moving tiles relocated, or None if the drop is invalid."""
    preview = preview_drop(tiles, offsets, target_col, target_row)
    if not preview.is_valid:
        logger.debug("Rejected move to (%d, %d)", target_col, target_row)
        return None

    targets = {o.id: cell for o, cell in zip(offsets, preview.cells)}
    return tuple(
        tile.moved_to(*targets[tile.id]) if tile.id in targets else tile
        for tile in tiles
    )


def copy_tiles(
    tiles: Sequence[Tile],
    offsets: Sequence[DragOffset],
    target_col: int,
    target_row: int,
    next_id: int,
) -> Optional[Tuple[Tuple[Tile, ...], List[int]]]:
    """
    Appends duplicates of the moving tiles at the drop cells.
    Returns (tiles, new_ids), or None if the drop is invalid.
    """
    preview = preview_drop(tiles, offsets, target_col, target_row, copy=True)
    if not preview.is_valid:
        logger.debug("Rejected copy to (%d, %d)", target_col, target_row)
        return None

    by_id = {tile.id: tile for tile in tiles}
    copies = []
    for i, (offset, (col, row)) in enumerate(zip(offsets, preview.cells)):
        source = by_id[offset.id]
        copies.append(
            Tile(
                id=next_id + i,
                char=source.char,
                col=col,
                row=row,
                color=source.color,
                background_color=source.background_color,
            )
        )
    return tuple(tiles) + tuple(copies), [t.id for t in copies]


def place_tile(
    tiles: Sequence[Tile], tile_id: int, char: str, col: int, row: int
) -> Optional[Tuple[Tile, ...]]:
    """Adds a new tile on a free cell; None when the cell is off-grid or taken."""
    if not is_on_grid(col, row) or (col, row) in occupancy(tiles):
        return None
    return tuple(tiles) + (Tile(id=tile_id, char=char, col=col, row=row),)


def intersects(box: SelectionBox, rect: Tuple[float, float, float, float]) -> bool:
    """Open-interval overlap; shared edges do not count."""
    left, top, right, bottom = rect
    return left < box.right and right > box.x and top < box.bottom and bottom > box.y


def marquee_select(
    items: Iterable[Union[Tile, GridCell]],
    box: SelectionBox,
    geometry: CellGeometry,
) -> Set[int]:
    """
    Keys of the items whose cell overlaps the box: tile ids for tiles,
    text indices for explorer cells (cells without a character are skipped).
    """
    hits = set()
    for item in items:
        if isinstance(item, GridCell):
            key = item.original_index
            if key is None:
                continue
        else:
            key = item.id
        if intersects(box, geometry.cell_rect(item.col, item.row)):
            hits.add(key)
    return hits


def bounding_box(tiles: Sequence[Tile]) -> Optional[Tuple[int, int, int, int]]:
    """(min_col, min_row, max_col, max_row) of the tiles, or None if empty."""
    if not tiles:
        return None
    cols = [t.col for t in tiles]
    rows = [t.row for t in tiles]
    return min(cols), min(rows), max(cols), max(rows)
