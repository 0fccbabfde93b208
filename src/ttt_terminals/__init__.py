"""ttt_terminals package.

Game-tree generation, symmetry canonicalization, and a simple CLI for the
unique terminal boards of tic-tac-toe.

Convenience imports are exposed for common workflows.
"""

from .game_basics import empty_board, is_terminal
from .generator import collect_unique_terminal_boards, generate
from .symmetry import TerminalRegistry, all_representations

__all__ = [
    "collect_unique_terminal_boards",
    "generate",
    "is_terminal",
    "empty_board",
    "all_representations",
    "TerminalRegistry",
]
