"""
Exhaustive game-tree generation and terminal-board collection.
Notes:
- Boards come out in pre-order: each child is followed by all of its
  descendants before its next sibling.
- Nothing is generated past a terminal board, so every complete game ends
  on exactly one terminal entry in the output.
- Depth is bounded by the 9 cells, so plain recursion is enough.
"""
import logging
from typing import Iterator, List, Optional

from .game_basics import (
    EMPTY,
    N,
    X,
    Board,
    check_board,
    empty_board,
    is_terminal,
    other_mark,
    place_mark,
)
from .symmetry import TerminalRegistry


def _children(board: Board, to_play: str) -> Iterator[Board]:
    for r in range(N):
        for c in range(N):
            if board[r][c] == EMPTY:
                yield place_mark(board, r, c, to_play)


def _walk(board: Board, to_play: str) -> Iterator[Board]:
    to_play_next = other_mark(to_play)
    for child in _children(board, to_play):
        yield child
        if not is_terminal(child):
            yield from _walk(child, to_play_next)


def iter_boards(board: Board, to_play: str) -> Iterator[Board]:
    """Lazily yield every board reachable from ``board`` with ``to_play`` to move.

    ``board`` itself is not yielded. A terminal starting board yields nothing.
    """
    check_board(board)
    other_mark(to_play)
    if is_terminal(board):
        return iter(())
    return _walk(board, to_play)


def generate(board: Board, to_play: str) -> List[Board]:
    return list(iter_boards(board, to_play))


def collect_unique_terminal_boards(start: Optional[Board] = None, to_play: str = X) -> TerminalRegistry:
    """Generate the full game tree and keep one terminal board per symmetry class."""
    if start is None:
        start = empty_board()
    registry = TerminalRegistry()
    n_boards = 0
    n_terminal = 0
    for b in iter_boards(start, to_play):
        n_boards += 1
        if not is_terminal(b):
            continue
        n_terminal += 1
        if registry.add_if_new(b):
            logging.debug("New terminal class #%d: %r", len(registry), b)
    logging.info(
        "Generated %d boards, %d terminal, %d unique up to symmetry",
        n_boards, n_terminal, len(registry),
    )
    return registry
