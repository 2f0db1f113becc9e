"""
Tests for the rich renderer and the command line front end.
"""

import json

import pytest
from rich.console import Console

from zodiac_board import cli
from zodiac_board.config import BoardConfig
from zodiac_board.models import ExploreMode, Tile
from zodiac_board.projector import GridCellProjector
from zodiac_board.renderer import Renderer
from zodiac_board.text_diff import styled_from_text


@pytest.fixture
def renderer():
    return Renderer(Console(record=True, width=120, color_system=None))


class TestRenderer:
    def test_grid_rows(self, renderer):
        grid = GridCellProjector().project(
            styled_from_text("ABCDEFGHI"), 13, 7, ExploreMode.UNTRANSPOSE
        )
        lines = renderer.grid_text(grid).plain.splitlines()
        assert lines[0].startswith("A B C D E F G")
        assert lines[1].startswith("H I")

    def test_board_cropped_to_tiles(self, renderer):
        tiles = [Tile(0, "A", 40, 40), Tile(1, "B", 42, 41)]
        lines = renderer.board_text(tiles).plain.splitlines()
        assert lines == ["A     ", "    B "]

    def test_empty_board(self, renderer):
        assert renderer.board_text([]).plain == ""

    def test_show_grid_prints_title(self, renderer):
        grid = GridCellProjector().project(
            styled_from_text("XYZ"), 13, 7, ExploreMode.UNTRANSPOSE
        )
        renderer.show_grid(grid, title="layout")
        assert "layout" in renderer.console.export_text()


class TestCommands:
    def run(self, argv, renderer):
        args = cli.build_parser().parse_args(argv)
        return args.func(args, BoardConfig(), renderer)

    def test_create_then_show(self, tmp_path, renderer):
        source = tmp_path / "cipher.txt"
        source.write_text("HER>pl^VPk\n")
        out = tmp_path / "session"

        assert self.run(
            ["create", str(source), "-o", str(out), "--columns", "5", "--font", "Z340"],
            renderer,
        ) == 0
        with open(str(out) + ".json", encoding="utf-8") as f:
            data = json.load(f)
        assert data["boardFont"] == "Z340"
        assert len(data["tiles"]) == 10

        assert self.run(["show", str(out) + ".json"], renderer) == 0
        assert "H E R > p" in renderer.console.export_text()

    def test_explore_text(self, tmp_path, renderer, cipher_text):
        source = tmp_path / "cipher.txt"
        source.write_text(cipher_text)

        assert self.run(["explore", str(source), "--mode", "transpose"], renderer) == 0
        assert "transpose 17x9 (340 chars)" in renderer.console.export_text()

    def test_main_reports_bad_file(self, tmp_path, caplog):
        bad = tmp_path / "bad.json"
        bad.write_text("[]")
        config = tmp_path / "absent.toml"
        assert cli.main(["-c", str(config), "show", str(bad)]) == 1
        assert "missing tiles" in caplog.text
