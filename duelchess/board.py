"""The 8x8 board, addressed by (column, row) squares."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Optional, Tuple

from .pieces import Color, Piece

BOARD_SIZE = 8

Square = Tuple[int, int]

_BACK_RANK = ("ROOK", "KNIGHT", "BISHOP", "QUEEN", "KING", "BISHOP", "KNIGHT", "ROOK")


def _check_square(square: Square) -> Square:
    column, row = square
    if not (0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE):
        raise IndexError(f"square {square!r} is off the board")
    return column, row


class Board:
    """Piece placement; column 0 is black's back rank, column 7 white's."""

    __slots__ = ("_tiles",)

    def __init__(self) -> None:
        self._tiles: list[list[Optional[Piece]]] = [
            [None] * BOARD_SIZE for _ in range(BOARD_SIZE)
        ]

    @classmethod
    def initial(cls) -> Board:
        """Return a board set up for the start of a game."""
        board = cls()
        for row, kind in enumerate(_BACK_RANK):
            board[0, row] = Piece[f"BLACK_{kind}"]
            board[1, row] = Piece.BLACK_PAWN
            board[6, row] = Piece.WHITE_PAWN
            board[7, row] = Piece[f"WHITE_{kind}"]
        return board

    def __getitem__(self, square: Square) -> Optional[Piece]:
        column, row = _check_square(square)
        return self._tiles[column][row]

    def __setitem__(self, square: Square, piece: Optional[Piece]) -> None:
        column, row = _check_square(square)
        self._tiles[column][row] = None if piece is None else Piece(piece)

    def move(self, from_square: Square, to_square: Square) -> Optional[Piece]:
        """Move a piece, promoting pawns that reach the far rank to queens.

        Returns the piece that stood on the destination, if any.
        """
        piece = self[from_square]
        captured = None if tuple(from_square) == tuple(to_square) else self[to_square]
        if piece is Piece.BLACK_PAWN and to_square[0] == BOARD_SIZE - 1:
            piece = Piece.BLACK_QUEEN
        elif piece is Piece.WHITE_PAWN and to_square[0] == 0:
            piece = Piece.WHITE_QUEEN
        self[from_square] = None
        self[to_square] = piece
        return captured

    def pieces(self) -> Iterator[tuple[Square, Piece]]:
        """Yield (square, piece) for every occupied square, column by column."""
        for column, tiles in enumerate(self._tiles):
            for row, piece in enumerate(tiles):
                if piece is not None:
                    yield (column, row), piece

    def copy(self) -> Board:
        clone = Board()
        clone._tiles = [list(tiles) for tiles in self._tiles]
        return clone

    def king_square(self, color: Color) -> Square:
        """Return where the king of *color* stands."""
        king = Piece.WHITE_KING if color is Color.WHITE else Piece.BLACK_KING
        for square, piece in self.pieces():
            if piece is king:
                return square
        raise LookupError(f"no {color.value} king on the board")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._tiles == other._tiles

    def __repr__(self) -> str:
        placed = ", ".join(f"{sq}: {p.name}" for sq, p in self.pieces())
        return f"Board({{{placed}}})"