"""
Game basics: board representation, serialization, terminal checks, rendering.
Notes:
- A board is a tuple of 3 rows, each a tuple of 3 marks. Tuples keep boards
  immutable, so a parent and its children may share untouched rows.
- Marks are single characters: ' ' (empty), 'X' and 'O'. X always starts.
- Line order below is the order the terminal check walks: rows, columns,
  main diagonal, anti-diagonal.
"""
from typing import List, Sequence, Tuple

EMPTY = ' '
X = 'X'
O = 'O'
MARKS = (EMPTY, X, O)

N = 3

Board = Tuple[Tuple[str, ...], ...]

WIN_LINES = [
    ('row0', ((0, 0), (0, 1), (0, 2))),
    ('row1', ((1, 0), (1, 1), (1, 2))),
    ('row2', ((2, 0), (2, 1), (2, 2))),
    ('col0', ((0, 0), (1, 0), (2, 0))),
    ('col1', ((0, 1), (1, 1), (2, 1))),
    ('col2', ((0, 2), (1, 2), (2, 2))),
    ('diag', ((0, 0), (1, 1), (2, 2))),
    ('anti', ((0, 2), (1, 1), (2, 0))),
]
LINE_NAMES = [name for name, _ in WIN_LINES]


def empty_board() -> Board:
    return ((EMPTY,) * N,) * N


def board_from_rows(rows: Sequence[Sequence[str]]) -> Board:
    board = tuple(tuple(row) for row in rows)
    check_board(board)
    return board


def check_board(board: Board) -> None:
    """Raise ValueError unless ``board`` is 3 rows of 3 valid marks."""
    if len(board) != N:
        raise ValueError(f"Board must have {N} rows, got {len(board)}")
    for row in board:
        if len(row) != N:
            raise ValueError(f"Board rows must have {N} cells, got {len(row)}")
        for cell in row:
            if cell not in MARKS:
                raise ValueError(f"Unknown mark: {cell!r}")


def other_mark(mark: str) -> str:
    if mark == X:
        return O
    if mark == O:
        return X
    raise ValueError(f"Not a player mark: {mark!r}")


def place_mark(board: Board, row: int, col: int, mark: str) -> Board:
    """Return a new board with ``mark`` at (row, col); the cell must be empty."""
    if not (0 <= row < N and 0 <= col < N):
        raise ValueError(f"Cell out of range: ({row}, {col})")
    if board[row][col] != EMPTY:
        raise ValueError(f"Cell ({row}, {col}) is already taken by {board[row][col]!r}")
    new_row = board[row][:col] + (mark,) + board[row][col + 1:]
    return board[:row] + (new_row,) + board[row + 1:]


def serialize_board(board: Board) -> str:
    return ''.join(cell for row in board for cell in row)


def deserialize_board(board_str: str) -> Board:
    if len(board_str) != N * N:
        raise ValueError(f"Board string must have {N * N} cells, got {len(board_str)}")
    return board_from_rows([board_str[i:i + N] for i in range(0, N * N, N)])


def mark_counts(board: Board) -> Tuple[int, int, int]:
    cells = serialize_board(board)
    return cells.count(X), cells.count(O), cells.count(EMPTY)


def _line_complete(board: Board, cells) -> bool:
    (r0, c0), (r1, c1), (r2, c2) = cells
    v = board[r0][c0]
    return v != EMPTY and v == board[r1][c1] and v == board[r2][c2]


def is_terminal(board: Board) -> bool:
    for _, cells in WIN_LINES:
        if _line_complete(board, cells):
            return True
    for row in board:
        if EMPTY in row:
            return False
    return True


def winning_lines(board: Board) -> List[str]:
    return [name for name, cells in WIN_LINES if _line_complete(board, cells)]


def get_winner(board: Board) -> str:
    for _, cells in WIN_LINES:
        if _line_complete(board, cells):
            r, c = cells[0]
            return board[r][c]
    return EMPTY


def is_draw(board: Board) -> bool:
    return all(EMPTY not in row for row in board) and get_winner(board) == EMPTY


def outcome(board: Board) -> str:
    w = get_winner(board)
    if w == X:
        return 'x'
    if w == O:
        return 'o'
    if is_draw(board):
        return 'draw'
    return ''


def render_board(board: Board) -> str:
    return '\n'.join('|' + '|'.join(row) + '|' for row in board)
