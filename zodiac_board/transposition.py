"""
Transposition layouts for the cipher explorer.

Maps a linear text index to a grid index and to a visual (row, col) on the
board, for the two explorer modes:

    untranspose  identity mapping, each block drawn num_rows wide and
                 num_cols tall.
    transpose    blocks 0 and 1 follow the diagonal walk (row + 1, col + 2,
                 wrapping back into range); the residue after them is laid
                 out linearly.

Blocks are separated by one spacer row (transpose) or column (untranspose).
Uses numpy index arrays for the forward and inverse maps.
"""

from functools import cached_property
from typing import List, Optional, Tuple

import numpy as np

from .models import BlockLayout, ExploreMode

CYCLIC_BLOCKS = 2
UNMAPPED = -1


def walk_positions(num_cols: int, num_rows: int, count: int) -> List[Tuple[int, int]]:
    """(row, col) pairs visited by the diagonal walk, starting from (1, 1)."""
    positions = []
    row, col = 1, 1
    for _ in range(count):
        positions.append((row, col))
        row += 1
        if row > num_rows:
            row -= num_rows
        col += 2
        if col > num_cols:
            col -= num_cols
    return positions


def cyclic_offsets(num_cols: int, num_rows: int) -> np.ndarray:
    """Linear offset inside a block for every step of the walk."""
    capacity = num_cols * num_rows
    walk = walk_positions(num_cols, num_rows, capacity)
    return np.array(
        [(row - 1) * num_cols + (col - 1) for row, col in walk], dtype=np.int64
    )


def is_full_cycle(num_cols: int, num_rows: int) -> bool:
    """True when the walk visits every slot of a block exactly once."""
    if num_cols < 2 or num_rows < 1:
        return False
    offsets = cyclic_offsets(num_cols, num_rows)
    return len(np.unique(offsets)) == len(offsets)


class TranspositionMapper:
    def __init__(
        self,
        num_cols: int,
        num_rows: int,
        length: int,
        mode: Optional[ExploreMode],
    ):
        self.num_cols = num_cols
        self.num_rows = num_rows
        self.length = length
        self.mode = mode

    @property
    def capacity(self) -> int:
        return self.num_cols * self.num_rows

    @property
    def is_active(self) -> bool:
        """False for no mode, empty text or unusable dimensions."""
        if self.mode is None or self.length <= 0:
            return False
        if self.num_cols < 1 or self.num_rows < 1:
            return False
        # The walk's single subtraction only lands back in range for >= 2 columns
        if self.mode == ExploreMode.TRANSPOSE and self.num_cols < 2:
            return False
        return True

    @property
    def block_width(self) -> int:
        if self.mode == ExploreMode.UNTRANSPOSE:
            return self.num_rows
        return self.num_cols

    @property
    def block_height(self) -> int:
        if self.mode == ExploreMode.UNTRANSPOSE:
            return self.num_cols
        return self.num_rows

    @property
    def cyclic_block_count(self) -> int:
        if not self.is_active or self.mode != ExploreMode.TRANSPOSE:
            return 0
        blocks = -(-self.length // self.capacity)
        return min(CYCLIC_BLOCKS, blocks)

    @property
    def grid_size(self) -> int:
        """Number of grid slots, including unfilled slots of a partial cyclic block."""
        if not self.is_active:
            return 0
        return max(self.length, self.cyclic_block_count * self.capacity)

    @cached_property
    def forward(self) -> np.ndarray:
        """Grid index for every text index."""
        if not self.is_active:
            return np.zeros(0, dtype=np.int64)

        grid = np.arange(self.length, dtype=np.int64)
        if self.mode == ExploreMode.TRANSPOSE:
            offsets = cyclic_offsets(self.num_cols, self.num_rows)
            for block in range(self.cyclic_block_count):
                start = block * self.capacity
                stop = min(start + self.capacity, self.length)
                grid[start:stop] = start + offsets[: stop - start]
        return grid

    @cached_property
    def inverse(self) -> np.ndarray:
        """Text index for every grid slot, UNMAPPED where no character lands."""
        inverse = np.full(self.grid_size, UNMAPPED, dtype=np.int64)
        # Fancy assignment keeps the last text index when the walk revisits a slot
        inverse[self.forward] = np.arange(self.length, dtype=np.int64)
        return inverse

    def text_to_grid(self, text_index: int) -> Optional[int]:
        if not 0 <= text_index < len(self.forward):
            return None
        return int(self.forward[text_index])

    def grid_to_text(self, grid_index: int) -> Optional[int]:
        if not 0 <= grid_index < len(self.inverse):
            return None
        text_index = int(self.inverse[grid_index])
        return None if text_index == UNMAPPED else text_index

    @cached_property
    def blocks(self) -> List[BlockLayout]:
        if not self.is_active:
            return []

        capacity = self.capacity
        layouts = []
        spans = []
        for block in range(CYCLIC_BLOCKS):
            start = block * capacity
            if start >= self.length:
                break
            spans.append((start, min(capacity, self.length - start)))
        if self.length > CYCLIC_BLOCKS * capacity:
            start = CYCLIC_BLOCKS * capacity
            spans.append((start, self.length - start))

        for index, (start, length) in enumerate(spans):
            is_residue = index >= CYCLIC_BLOCKS
            cyclic = self.mode == ExploreMode.TRANSPOSE and not is_residue
            if cyclic:
                height = self.block_height
            else:
                height = -(-length // self.block_width)

            if self.mode == ExploreMode.TRANSPOSE:
                top_row = 1 + index * (self.block_height + 1)
                left_col = 1
            else:
                top_row = 1
                left_col = 1 + index * (self.block_width + 1)

            layouts.append(
                BlockLayout(
                    index=index,
                    first_text_index=start,
                    length=length,
                    top_row=top_row,
                    left_col=left_col,
                    width=self.block_width,
                    height=height,
                    cyclic=cyclic,
                )
            )
        return layouts

    def block_for_grid(self, grid_index: int) -> Optional[BlockLayout]:
        if not 0 <= grid_index < self.grid_size:
            return None
        index = min(grid_index // self.capacity, CYCLIC_BLOCKS)
        blocks = self.blocks
        return blocks[index] if index < len(blocks) else None

    def visual_position(self, grid_index: int) -> Optional[Tuple[int, int]]:
        """1-based (row, col) on the board for a grid slot."""
        block = self.block_for_grid(grid_index)
        if block is None:
            return None
        local = grid_index - block.first_text_index
        return (
            block.top_row + local // block.width,
            block.left_col + local % block.width,
        )

    @property
    def total_cols(self) -> int:
        blocks = self.blocks
        if not blocks:
            return 0
        return max(b.left_col + b.width - 1 for b in blocks)

    @property
    def total_rows(self) -> int:
        blocks = self.blocks
        if not blocks:
            return 0
        return max(b.top_row + b.height - 1 for b in blocks)
