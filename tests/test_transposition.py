"""
Tests for the transposition mapper.
"""

import numpy as np
import pytest

from zodiac_board.models import ExploreMode
from zodiac_board.transposition import (
    TranspositionMapper,
    is_full_cycle,
    walk_positions,
)


class TestWalk:
    def test_first_steps_three_by_three(self):
        """Test the walk by hand: row + 1, col + 2, wrapping by subtraction."""
        assert walk_positions(3, 3, 4) == [(1, 1), (2, 3), (3, 2), (1, 1)]

    def test_wrap_uses_subtraction(self):
        # 17 columns: col 17 + 2 = 19 -> 2, not 0
        walk = walk_positions(17, 9, 10)
        assert walk[8] == (9, 17)
        assert walk[9] == (1, 2)

    @pytest.mark.parametrize("cols,rows", [(17, 9), (13, 7), (19, 8), (15, 7)])
    def test_full_cycle_dimensions(self, cols, rows):
        assert is_full_cycle(cols, rows)

    @pytest.mark.parametrize("cols,rows", [(3, 3), (18, 9), (14, 7)])
    def test_degenerate_dimensions(self, cols, rows):
        assert not is_full_cycle(cols, rows)


class TestUntranspose:
    @pytest.mark.parametrize("cols,rows,length", [(17, 9, 340), (13, 7, 5), (20, 13, 600)])
    def test_identity(self, cols, rows, length):
        mapper = TranspositionMapper(cols, rows, length, ExploreMode.UNTRANSPOSE)
        assert np.array_equal(mapper.forward, np.arange(length))
        for i in (0, length // 2, length - 1):
            assert mapper.text_to_grid(i) == i
            assert mapper.grid_to_text(i) == i

    def test_block_axes_swapped(self):
        mapper = TranspositionMapper(17, 9, 340, ExploreMode.UNTRANSPOSE)
        assert mapper.block_width == 9
        assert mapper.block_height == 17

    def test_blocks_side_by_side(self):
        """Test blocks sit left to right with a one column spacer."""
        mapper = TranspositionMapper(17, 9, 340, ExploreMode.UNTRANSPOSE)
        blocks = mapper.blocks

        assert [b.left_col for b in blocks] == [1, 11, 21]
        assert [b.length for b in blocks] == [153, 153, 34]
        assert blocks[2].height == 4
        assert mapper.visual_position(9) == (2, 1)
        assert mapper.visual_position(153) == (1, 11)
        assert mapper.total_cols == 29
        assert mapper.total_rows == 17

    def test_partial_block_stops_at_text_end(self):
        mapper = TranspositionMapper(17, 9, 10, ExploreMode.UNTRANSPOSE)
        assert mapper.grid_size == 10
        assert mapper.blocks[0].height == 2
        assert mapper.grid_to_text(10) is None


class TestTranspose:
    def test_blocks_bijective(self):
        """Test the two cyclic blocks cover every grid slot exactly once."""
        cols, rows = 17, 9
        capacity = cols * rows
        mapper = TranspositionMapper(cols, rows, 2 * capacity, ExploreMode.TRANSPOSE)

        grid = mapper.forward
        assert len(set(grid.tolist())) == len(grid)
        assert set(grid.tolist()) == set(range(2 * capacity))

    def test_second_block_offset(self):
        mapper = TranspositionMapper(17, 9, 340, ExploreMode.TRANSPOSE)
        assert mapper.text_to_grid(153) == 153
        # second step of the walk is (2, 3): offset 1 * 17 + 2
        assert mapper.text_to_grid(154) == 153 + 19

    def test_residue_is_linear(self, cipher_text):
        mapper = TranspositionMapper(17, 9, len(cipher_text), ExploreMode.TRANSPOSE)
        for i in range(306, 340):
            assert mapper.text_to_grid(i) == i
            assert mapper.grid_to_text(i) == i

    def test_inverse_matches_forward(self):
        mapper = TranspositionMapper(13, 7, 200, ExploreMode.TRANSPOSE)
        for i in range(200):
            assert mapper.grid_to_text(mapper.text_to_grid(i)) == i

    def test_hand_checked_three_by_three(self):
        """Test ABCDEFGHI on 3x3: the walk returns to (1, 1) after three steps."""
        mapper = TranspositionMapper(3, 3, 9, ExploreMode.TRANSPOSE)
        assert mapper.forward.tolist() == [0, 5, 7, 0, 5, 7, 0, 5, 7]
        # The last character to land on a revisited slot keeps it
        assert mapper.grid_to_text(0) == 6
        assert mapper.grid_to_text(5) == 7
        assert mapper.grid_to_text(7) == 8
        assert mapper.grid_to_text(1) is None

    def test_blocks_stacked_with_spacer(self):
        mapper = TranspositionMapper(17, 9, 340, ExploreMode.TRANSPOSE)
        blocks = mapper.blocks

        assert [b.top_row for b in blocks] == [1, 11, 21]
        assert [b.cyclic for b in blocks] == [True, True, False]
        assert mapper.visual_position(0) == (1, 1)
        assert mapper.visual_position(153) == (11, 1)
        assert mapper.visual_position(306) == (21, 1)
        assert mapper.visual_position(339) == (22, 17)
        assert mapper.total_rows == 22
        assert mapper.total_cols == 17

    def test_partial_cyclic_block_keeps_full_grid(self):
        mapper = TranspositionMapper(17, 9, 10, ExploreMode.TRANSPOSE)
        assert mapper.grid_size == 153
        assert len(mapper.blocks) == 1
        assert (mapper.inverse >= 0).sum() == 10

    def test_single_column_rejected(self):
        mapper = TranspositionMapper(1, 9, 20, ExploreMode.TRANSPOSE)
        assert not mapper.is_active
        assert mapper.blocks == []


class TestInactive:
    def test_no_mode(self):
        mapper = TranspositionMapper(17, 9, 340, None)
        assert not mapper.is_active
        assert mapper.grid_size == 0
        assert mapper.blocks == []
        assert mapper.text_to_grid(0) is None

    def test_empty_text(self):
        mapper = TranspositionMapper(17, 9, 0, ExploreMode.TRANSPOSE)
        assert mapper.grid_size == 0
        assert mapper.total_cols == 0

    @pytest.mark.parametrize("cols,rows", [(0, 9), (17, 0), (-1, 3)])
    def test_invalid_dimensions(self, cols, rows):
        mapper = TranspositionMapper(cols, rows, 50, ExploreMode.UNTRANSPOSE)
        assert not mapper.is_active
        assert mapper.blocks == []
