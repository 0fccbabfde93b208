from __future__ import annotations

import argparse
import logging
import sys

from .game_basics import EMPTY, O, X, Board, deserialize_board, is_terminal, render_board
from .generator import collect_unique_terminal_boards, iter_boards
from .symmetry import symmetry_info

BOARD_HELP = "Board string, 9 cells of X/O with _ or . for empty, e.g. X_O_X___O"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="ttt-terminals",
        description="Enumerate tic-tac-toe terminal boards up to symmetry",
    )
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument(
        "--info",
        action="store_true",
        help="Print interpreter and platform info and exit",
    )

    p_enum = sub.add_parser(
        "enumerate",
        help="Print every unique terminal board (default when no command is given)",
    )
    p_enum.add_argument("--count-only", action="store_true", help="Only print the count line")

    p_sym = sub.add_parser("symmetry", help="Show the 8 symmetric representations of a board")
    p_sym.add_argument("--board", required=True, help=BOARD_HELP)

    p_gen = sub.add_parser("generate", help="Count the boards reachable from a board")
    p_gen.add_argument("--board", default="_" * 9, help=BOARD_HELP + " (default: empty)")
    p_gen.add_argument("--to-play", choices=[X, O], default=X, help="Mark that moves first")

    return p


def parse_board(raw: str) -> Board:
    cells = raw.upper().replace("_", EMPTY).replace(".", EMPTY)
    return deserialize_board(cells)


def _print_info() -> None:
    import platform

    print(f"python={sys.version.split()[0]} platform={platform.platform()}")


def _print_version() -> None:
    from importlib.metadata import PackageNotFoundError, version

    try:
        print(version("ttt-terminals"))
    except PackageNotFoundError:
        print("unknown")


def cmd_enumerate(count_only: bool = False) -> int:
    registry = collect_unique_terminal_boards()
    print(f"{len(registry)} unique terminal boards found")
    if count_only:
        return 0
    for board in registry:
        print(render_board(board))
        print()
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if ns.verbose else logging.INFO,
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        _print_version()
        return 0
    if ns.info:
        _print_info()
        return 0

    if ns.cmd is None:
        return cmd_enumerate()

    if ns.cmd == "enumerate":
        return cmd_enumerate(count_only=ns.count_only)

    if ns.cmd == "symmetry":
        try:
            b = parse_board(ns.board)
        except ValueError as e:
            logging.error("Invalid board string: %s", e)
            return 2
        info = symmetry_info(b)
        logging.info(
            "representations=%s canonical_form=%r orbit_size=%d terminal=%s",
            list(info['representations']),
            info['canonical_form'],
            info['orbit_size'],
            is_terminal(b),
        )
        return 0

    if ns.cmd == "generate":
        try:
            b = parse_board(ns.board)
        except ValueError as e:
            logging.error("Invalid board string: %s", e)
            return 2
        total = 0
        terminal = 0
        for child in iter_boards(b, ns.to_play):
            total += 1
            if is_terminal(child):
                terminal += 1
        logging.info("boards=%d terminal=%d", total, terminal)
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
