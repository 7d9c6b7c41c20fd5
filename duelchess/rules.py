"""Move legality per piece and attack detection."""

from __future__ import annotations

from typing import Callable, Optional

from .board import BOARD_SIZE, Board, Square
from .pieces import Piece


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _takeable(piece: Optional[Piece], white: bool) -> bool:
    """True if a mover of the given side may land on a square holding *piece*."""
    if piece is None:
        return True
    return piece.is_black if white else piece.is_white


def _path_clear(board: Board, from_square: Square, to_square: Square) -> bool:
    (fc, fr), (tc, tr) = from_square, to_square
    col_step, row_step = _sign(tc - fc), _sign(tr - fr)
    column, row = fc + col_step, fr + row_step
    while (column, row) != (tc, tr):
        if board[column, row] is not None:
            return False
        column += col_step
        row += row_step
    return True


def is_valid_pawn(board: Board, from_square: Square, to_square: Square, white: bool) -> bool:
    (fc, fr), (tc, tr) = from_square, to_square
    target = board[to_square]
    if (fc, fr) == (tc, tr):
        return False
    forward = -1 if white else 1
    start_column = 6 if white else 1
    advance = (tc - fc) * forward
    if advance <= 0 or advance > 2:
        return False
    if advance == 1 and tr == fr and target is None:
        return True
    if (
        advance == 2
        and fc == start_column
        and tr == fr
        and target is None
        and board[fc + forward, fr] is None
    ):
        return True
    if advance == 1 and abs(tr - fr) == 1 and target is not None:
        return target.is_black if white else target.is_white
    return False


def is_valid_rook(board: Board, from_square: Square, to_square: Square, white: bool) -> bool:
    (fc, fr), (tc, tr) = from_square, to_square
    target = board[to_square]
    if fc != tc and fr != tr:
        return False
    if not _path_clear(board, from_square, to_square):
        return False
    return _takeable(target, white)


def is_valid_knight(board: Board, from_square: Square, to_square: Square, white: bool) -> bool:
    (fc, fr), (tc, tr) = from_square, to_square
    target = board[to_square]
    shape = {abs(tc - fc), abs(tr - fr)}
    if shape != {1, 2}:
        return False
    return _takeable(target, white)


def is_valid_bishop(board: Board, from_square: Square, to_square: Square, white: bool) -> bool:
    (fc, fr), (tc, tr) = from_square, to_square
    target = board[to_square]
    if tr == fr or tc == fc:
        return False
    if abs(tc - fc) != abs(tr - fr):
        return False
    if not _path_clear(board, from_square, to_square):
        return False
    return _takeable(target, white)


def is_valid_king(board: Board, from_square: Square, to_square: Square, white: bool) -> bool:
    (fc, fr), (tc, tr) = from_square, to_square
    target = board[to_square]
    if (fc, fr) == (tc, tr):
        return False
    if abs(tc - fc) > 1 or abs(tr - fr) > 1:
        return False
    return _takeable(target, white)


def is_valid_queen(board: Board, from_square: Square, to_square: Square, white: bool) -> bool:
    return is_valid_bishop(board, from_square, to_square, white) or is_valid_rook(
        board, from_square, to_square, white
    )


_Validator = Callable[[Board, Square, Square, bool], bool]

_VALIDATORS: dict[str, _Validator] = {
    "PAWN": is_valid_pawn,
    "ROOK": is_valid_rook,
    "KNIGHT": is_valid_knight,
    "BISHOP": is_valid_bishop,
    "QUEEN": is_valid_queen,
    "KING": is_valid_king,
}


def is_valid_move(board: Board, from_square: Square, to_square: Square) -> bool:
    """True if the piece on *from_square* may move to *to_square*; False for an empty square."""
    piece = board[from_square]
    if piece is None:
        return False
    kind = piece.name.split("_", 1)[1]
    return _VALIDATORS[kind](board, from_square, to_square, piece.is_white)


def valid_moves(board: Board, from_square: Square) -> list[Square]:
    """Every square the piece on *from_square* may move to, column by column."""
    return [
        (column, row)
        for column in range(BOARD_SIZE)
        for row in range(BOARD_SIZE)
        if is_valid_move(board, from_square, (column, row))
    ]


def in_check(board: Board, king_square: Square, white: bool) -> bool:
    """True if any piece of the opposing side can move onto *king_square*."""
    return any(
        is_valid_move(board, square, king_square)
        for square, piece in board.pieces()
        if (piece.is_black if white else piece.is_white)
    )