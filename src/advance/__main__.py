"""Main entry point for Advance."""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from .config import Config, get_config
from .engine import Engine
from .exceptions import BoardFormatError
from .types import Side
from .utils import setup_logger

logger = logging.getLogger("advance")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="advance",
        description="Play one Advance move: read a board, move for a colour, write the board.",
    )
    parser.add_argument(
        "colour",
        help="'white' or 'black'; or 'name' alone to print the agent name",
    )
    parser.add_argument("in_file", nargs="?", help="Board file to read")
    parser.add_argument("out_file", nargs="?", help="Board file to write")
    parser.add_argument("--depth", type=int, default=None,
                        help="Lookahead depth (default: from config)")
    parser.add_argument("--config", type=Path, default=None,
                        help="Settings YAML file (default: user config dir)")
    parser.add_argument("--log-file", default=None, help="Also log to this file")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="Log more (-v info, -vv debug)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    config = Config.load(args.config) if args.config else get_config()

    if args.verbose >= 2:
        level = logging.DEBUG
    elif args.verbose == 1:
        level = logging.INFO
    else:
        level = config.logging.level
    setup_logger("advance", args.log_file or config.logging.log_file or None, level)

    if args.colour.lower() == "name" and args.in_file is None:
        print(config.agent.name)
        return 0

    if args.in_file is None or args.out_file is None:
        parser.error("expected <colour> <inFile> <outFile>")
    try:
        side = Side.from_name(args.colour)
    except ValueError as e:
        parser.error(str(e))
    if args.depth is not None and args.depth < 0:
        parser.error("--depth must be non-negative")

    engine = Engine(config, depth=args.depth)
    try:
        engine.play_file_turn(side, args.in_file, args.out_file)
    except BoardFormatError as e:
        logger.error("Malformed board in %s: %s", args.in_file, e)
        return 1
    except OSError as e:
        logger.error("Could not play turn: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
