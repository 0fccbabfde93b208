import pytest

from ttt_terminals.game_basics import X, empty_board
from ttt_terminals.generator import collect_unique_terminal_boards, generate


@pytest.fixture(scope="session")
def full_tree():
    return generate(empty_board(), X)


@pytest.fixture(scope="session")
def registry():
    return collect_unique_terminal_boards()
