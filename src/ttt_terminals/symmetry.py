"""
Symmetry and canonicalization for Tic-Tac-Toe.
Notes:
- There are 8 symmetries (the dihedral group of the square). Rotating 0-3
  times, each with and without a transpose, reaches all of them.
- A board's representation is its 9 cells in row-major order.
- The registry stores each board under its own representation but checks all
  8 when deciding whether a board is new, so the first board found from each
  class is the one kept.
"""
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, List, Mapping

from .game_basics import N, Board, serialize_board


def rotate(board: Board) -> Board:
    """Rotate 90 degrees: b'[x][y] = b[N-1-y][x]."""
    return tuple(tuple(board[N - 1 - y][x] for y in range(N)) for x in range(N))


def transpose(board: Board) -> Board:
    """Reflect across the main diagonal: b'[y][x] = b[x][y]."""
    return tuple(tuple(board[x][y] for x in range(N)) for y in range(N))


def representation(board: Board) -> str:
    return serialize_board(board)


def all_representations(board: Board) -> List[str]:
    keys: List[str] = []
    b = board
    for _ in range(4):
        keys.append(representation(b))
        keys.append(representation(transpose(b)))
        b = rotate(b)
    return keys


def symmetry_class(board: Board) -> FrozenSet[str]:
    return frozenset(all_representations(board))


@lru_cache(maxsize=None)
def symmetry_info(board: Board) -> Mapping:
    """Read-only summary of a board's orbit; results are shared through the cache."""
    keys = all_representations(board)
    unique = set(keys)
    return MappingProxyType({
        'representations': tuple(keys),
        'canonical_form': min(keys),
        'orbit_size': len(unique),
        'is_symmetric': len(unique) < 8,
    })


class TerminalRegistry:
    """One representative board per symmetry class, keyed by representation."""

    def __init__(self) -> None:
        self._boards: Dict[str, Board] = {}

    def contains_equivalent(self, board: Board) -> bool:
        return any(key in self._boards for key in all_representations(board))

    def insert(self, board: Board) -> None:
        self._boards[representation(board)] = board

    def add_if_new(self, board: Board) -> bool:
        if self.contains_equivalent(board):
            return False
        self.insert(board)
        return True

    def keys(self):
        return self._boards.keys()

    def items(self):
        return self._boards.items()

    def __len__(self) -> int:
        return len(self._boards)

    def __iter__(self) -> Iterator[Board]:
        return iter(self._boards.values())

    def __contains__(self, key: object) -> bool:
        return key in self._boards
