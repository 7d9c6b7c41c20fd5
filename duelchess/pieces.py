"""Piece identities, colours and the image files that depict them."""

from __future__ import annotations

from enum import Enum, IntEnum

WHITE_TILE_PATH = "assets/board/white_tile.xpm"
BLACK_TILE_PATH = "assets/board/black_tile.xpm"
BACKGROUND_PATH = "assets/board/background.xpm"
RED_BACKGROUND_PATH = "assets/board/red_background.xpm"

_PIECES_DIR = "assets/pieces"
_WHITE_COUNT = 6


class Color(Enum):
    """The two sides of the game."""

    WHITE = "white"
    BLACK = "black"


class Piece(IntEnum):
    """A chess piece; values 0-5 are white, 6-11 are black."""

    WHITE_ROOK = 0
    WHITE_KNIGHT = 1
    WHITE_BISHOP = 2
    WHITE_QUEEN = 3
    WHITE_KING = 4
    WHITE_PAWN = 5
    BLACK_ROOK = 6
    BLACK_KNIGHT = 7
    BLACK_BISHOP = 8
    BLACK_QUEEN = 9
    BLACK_KING = 10
    BLACK_PAWN = 11

    @property
    def color(self) -> Color:
        """The side this piece belongs to."""
        return Color.WHITE if self.is_white else Color.BLACK

    @property
    def is_white(self) -> bool:
        return self.value < _WHITE_COUNT

    @property
    def is_black(self) -> bool:
        return self.value >= _WHITE_COUNT


def piece_image_path(piece: Piece, light_square: bool) -> str:
    """Return the image file for *piece*, using the variant drawn on light squares if asked."""
    suffix = "_white" if light_square else ""
    return f"{_PIECES_DIR}/{Piece(piece).name.lower()}{suffix}.xpm"