"""
Command line front end for the cipher board.
"""

import argparse
import logging
import sys
from typing import List, Optional

from .board import TileBoard
from .config import BoardConfig
from .explorer import CipherExplorer
from .file_io import BoardError, load_board, styled_chars_from_tiles
from .models import ExploreMode, SpacesMode
from .renderer import Renderer

logger = logging.getLogger(__name__)


def read_text(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def cmd_explore(args, config: BoardConfig, renderer: Renderer) -> int:
    explorer = CipherExplorer(config)
    if args.file.lower().endswith(".json"):
        explorer.load_chars(styled_chars_from_tiles(load_board(args.file).tiles))
    else:
        explorer.set_text(read_text(args.file))
    explorer.set_dimensions(args.cols or config.num_cols, args.rows or config.num_rows)
    explorer.set_mode(ExploreMode(args.mode))

    grid = explorer.cells()
    title = f"{args.mode} {explorer.num_cols}x{explorer.num_rows} ({len(explorer.chars)} chars)"
    renderer.show_grid(grid, title=title)
    return 0


def cmd_create(args, config: BoardConfig, renderer: Renderer) -> int:
    board = TileBoard(config)
    spaces = SpacesMode.REMOVE if args.remove_spaces else SpacesMode.KEEP
    board.create_from_text(read_text(args.file), args.columns, spaces)
    if args.font:
        board.font = args.font
    path = board.save(args.output)
    renderer.show_board(board.tiles, title=path)
    return 0


def cmd_show(args, config: BoardConfig, renderer: Renderer) -> int:
    board = TileBoard(config)
    board.load(args.file)
    renderer.show_board(board.tiles, title=f"{args.file} [{board.font}]")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="zodiac_board")
    p.add_argument("-c", "--config", default="zodiac_board.toml")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    explore = sub.add_parser("explore", help="Show a transposition layout")
    explore.add_argument("file", help="Text file, board JSON, or - for stdin")
    explore.add_argument("--cols", type=int)
    explore.add_argument("--rows", type=int)
    explore.add_argument(
        "--mode", choices=[m.value for m in ExploreMode], default="transpose"
    )
    explore.set_defaults(func=cmd_explore)

    create = sub.add_parser("create", help="Lay text out as board tiles and save")
    create.add_argument("file")
    create.add_argument("-o", "--output", default="zodiac_session.json")
    create.add_argument("--columns", type=int)
    create.add_argument("--font")
    create.add_argument("--remove-spaces", action="store_true")
    create.set_defaults(func=cmd_create)

    show = sub.add_parser("show", help="Print a saved board")
    show.add_argument("file")
    show.set_defaults(func=cmd_show)
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = BoardConfig.load_from_toml(args.config)
    renderer = Renderer()
    try:
        return args.func(args, config, renderer)
    except (BoardError, OSError) as e:
        logger.error("%s", e)
        return 1
