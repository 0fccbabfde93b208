import pytest

from ttt_terminals.game_basics import board_from_rows, empty_board
from ttt_terminals.symmetry import (
    TerminalRegistry,
    all_representations,
    representation,
    rotate,
    symmetry_class,
    symmetry_info,
    transpose,
)


def test_rotate_columns_become_reversed_rows():
    # XXX    _OX
    # OOO => _OX
    # ___    _OX
    b = board_from_rows(["XXX", "OOO", "   "])
    assert rotate(b) == board_from_rows([" OX", " OX", " OX"])


def test_transpose_reflects_main_diagonal():
    # X_O    XO_
    # OX_ => _X_
    # __X    O_X
    b = board_from_rows(["X O", "OX ", "  X"])
    assert transpose(b) == board_from_rows(["XO ", " X ", "O X"])


def test_rotate_four_times_is_identity():
    b = board_from_rows(["XO ", " X ", "O  "])
    r = b
    for _ in range(4):
        r = rotate(r)
    assert r == b


def test_all_x_board_has_eight_identical_representations():
    b = board_from_rows(["XXX", "XXX", "XXX"])
    keys = all_representations(b)
    assert keys == ["XXXXXXXXX"] * 8
    assert symmetry_class(b) == frozenset({"XXXXXXXXX"})


def test_all_representations_order_and_size():
    b = board_from_rows(["XO ", "   ", "   "])
    keys = all_representations(b)
    assert len(keys) == 8
    assert keys[0] == representation(b)
    assert keys[1] == representation(transpose(b))
    assert keys[2] == representation(rotate(b))
    assert keys[3] == representation(transpose(rotate(b)))
    # no symmetry at all: every image is distinct
    assert len(set(keys)) == 8


def test_symmetry_info_orbit_sizes():
    assert symmetry_info(empty_board())['orbit_size'] == 1
    corner = board_from_rows(["X  ", "   ", "   "])
    info = symmetry_info(corner)
    assert info['orbit_size'] == 4
    assert info['is_symmetric'] is True
    assert info['canonical_form'] == min(all_representations(corner))
    assert symmetry_info(board_from_rows(["XO ", "   ", "   "]))['is_symmetric'] is False


def test_registry_checks_all_orientations_but_stores_own_key():
    b = board_from_rows(["XO ", "   ", "   "])
    reg = TerminalRegistry()
    assert not reg.contains_equivalent(b)
    reg.insert(b)
    assert len(reg) == 1
    assert representation(b) in reg
    for img in (rotate(b), transpose(b), rotate(rotate(transpose(b)))):
        assert reg.contains_equivalent(img)
        assert representation(img) not in reg


def test_registry_keeps_first_discovered_member():
    b = board_from_rows(["XO ", "   ", "   "])
    reg = TerminalRegistry()
    assert reg.add_if_new(rotate(b)) is True
    assert reg.add_if_new(b) is False
    assert list(reg) == [rotate(b)]
    assert list(reg.keys()) == [representation(rotate(b))]
    assert dict(reg.items()) == {representation(rotate(b)): rotate(b)}


def test_registry_accepts_inequivalent_boards():
    reg = TerminalRegistry()
    assert reg.add_if_new(board_from_rows(["X  ", "   ", "   "]))
    assert reg.add_if_new(board_from_rows([" X ", "   ", "   "]))
    assert reg.add_if_new(board_from_rows(["   ", " X ", "   "]))
    assert not reg.add_if_new(board_from_rows(["   ", "   ", "  X"]))
    assert len(reg) == 3


def test_symmetry_info_result_cannot_corrupt_cache():
    b = board_from_rows(["X  ", "   ", "   "])
    info = symmetry_info(b)
    with pytest.raises(TypeError):
        info['orbit_size'] = 99  # type: ignore[index]
    assert symmetry_info(b)['orbit_size'] == 4
    assert symmetry_info(b) is info
