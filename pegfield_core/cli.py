from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import configure_logging, load_settings
from .engine import BoardEngine, MoveResult
from .errors import ConfigurationError
from .keys import parse_coord_key
from .layouts import layout_names, preset, read_layout_file
from .moves import Direction

LOG = logging.getLogger("pegfield.cli")

HELP = (
    "commands: select r c | left | right | up | down | move r c | "
    "reset | show | help | quit"
)


def _parse_rc(args: List[str]):
    if len(args) == 1:
        return parse_coord_key(args[0])
    if len(args) != 2:
        raise ValueError("expected a row and a column")
    return int(args[0]), int(args[1])


def _report(engine: BoardEngine, result: MoveResult) -> None:
    if not result.applied:
        print(f"Move rejected: {result.reason.value.replace('_', ' ')}")
        return
    print(f"Jumped {result.origin} over {result.midpoint} to {result.destination}")
    if result.just_won:
        print("You won!")
    elif not engine.has_moves():
        print(f"No moves left, {engine.peg_count()} pegs remain. Type 'reset' to play again.")


def run_session(engine: BoardEngine) -> None:
    print(engine.board.pretty(engine.selection))
    print(HELP)
    while True:
        try:
            text = input("> ").strip()
        except EOFError:
            print()
            return
        if not text:
            continue
        cmd, *rest = text.split()
        cmd = cmd.lower()
        try:
            if cmd in ("q", "quit", "exit"):
                return
            elif cmd in ("h", "help", "?"):
                print(HELP)
                continue
            elif cmd in ("s", "select"):
                engine.select_or_deselect(_parse_rc(rest))
            elif cmd in ("m", "move"):
                _report(engine, engine.attempt_move(_parse_rc(rest)))
            elif cmd == "reset":
                engine.reset()
            elif cmd == "show":
                pass
            else:
                _report(engine, engine.attempt_move_direction(Direction.parse(cmd)))
        except (ValueError, ConfigurationError) as e:
            print(f"Could not parse: {e}. Try again.")
            continue
        print(engine.board.pretty(engine.selection))


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = argparse.ArgumentParser(description="Peg solitaire in the terminal")
    parser.add_argument("--layout", default=settings.default_layout, help="Preset layout: " + ", ".join(layout_names()))
    parser.add_argument("--layout-file", default=None, help="Text layout file ('o' peg, '.' empty, ' ' void)")
    parser.add_argument("--log-level", default=settings.log_level, help="Logging level")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    try:
        if args.layout_file:
            layout, voids = read_layout_file(args.layout_file)
        else:
            layout, voids = preset(args.layout)
        engine = BoardEngine(layout, voids)
    except (ConfigurationError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    LOG.debug("starting session on %dx%d board", engine.size, engine.size)
    run_session(engine)
    return 0


if __name__ == "__main__":
    sys.exit(main())
