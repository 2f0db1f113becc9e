"""
Tests for loading the board configuration.
"""

from zodiac_board.config import BoardConfig


class TestLoadFromToml:
    def test_missing_file_gives_defaults(self, tmp_path):
        config = BoardConfig.load_from_toml(str(tmp_path / "absent.toml"))
        assert config == BoardConfig()

    def test_tables_are_flattened(self, tmp_path):
        path = tmp_path / "zodiac_board.toml"
        path.write_text(
            "[board]\n"
            "margin = 5\n"
            "board_history_limit = 3\n"
            "[explorer]\n"
            "num_cols = 13\n"
            "num_rows = 7\n"
            "[geometry]\n"
            "scale_gap = true\n"
            "[colors]\n"
            'shade_color = "#cccccc"\n'
        )
        config = BoardConfig.load_from_toml(str(path))

        assert config.margin == 5
        assert config.board_history_limit == 3
        assert (config.num_cols, config.num_rows) == (13, 7)
        assert config.scale_gap
        assert config.shade_color == "#cccccc"
        assert config.default_font == "Arial"

    def test_unknown_tables_ignored(self, tmp_path):
        path = tmp_path / "zodiac_board.toml"
        path.write_text("[other]\nmargin = 1\n")
        assert BoardConfig.load_from_toml(str(path)).margin == 40

    def test_broken_toml_gives_defaults(self, tmp_path):
        path = tmp_path / "zodiac_board.toml"
        path.write_text("[board\nmargin = ")
        assert BoardConfig.load_from_toml(str(path)) == BoardConfig()

    def test_invalid_history_limit_gives_defaults(self, tmp_path):
        path = tmp_path / "zodiac_board.toml"
        path.write_text("[board]\nboard_history_limit = 0\n")
        assert BoardConfig.load_from_toml(str(path)).board_history_limit == 15


class TestClamping:
    def test_columns(self, config):
        assert config.clamp_columns(5) == 13
        assert config.clamp_columns(17) == 17
        assert config.clamp_columns(99) == 20

    def test_rows(self, config):
        assert config.clamp_rows(1) == 7
        assert config.clamp_rows(14) == 13
