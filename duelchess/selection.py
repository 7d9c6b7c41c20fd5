"""Click-driven piece selection, move making and turn keeping."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .board import BOARD_SIZE, Board, Square
from .pieces import Color
from .rules import is_valid_move, valid_moves

BOARD_ORIGIN = 64
TILE_SIZE = 64


class Side(Enum):
    """Who sits at this board: both players, or one end of a two-process game."""

    LOCAL = "local"
    SERVER = "server"
    CLIENT = "client"


class Highlight(IntEnum):
    """Border colours drawn around squares."""

    SELECTED = 0x18A15C
    RESELECTED = 0xC7E312
    TARGET = 0xC1C418


class InvalidRemoteMove(ValueError):
    """The opponent sent a move that the rules do not allow."""


@dataclass(frozen=True)
class ClickOutcome:
    """What a click changed: whether to redraw, what to outline, and any move made."""

    redraw: bool = False
    highlights: tuple[tuple[Square, Highlight], ...] = ()
    move: Optional[tuple[Square, Square]] = None


def _on_board(square: Square) -> bool:
    return len(square) == 2 and all(0 <= value < BOARD_SIZE for value in square)


def mouse_to_square(x: int, y: int, flipped: bool = False) -> Optional[Square]:
    """Map window coordinates to a (column, row) square, or None outside the board."""
    far_edge = BOARD_ORIGIN + BOARD_SIZE * TILE_SIZE
    if not (BOARD_ORIGIN <= x <= far_edge and BOARD_ORIGIN <= y <= far_edge):
        return None
    column = (y - BOARD_ORIGIN) // TILE_SIZE
    row = (x - BOARD_ORIGIN) // TILE_SIZE
    if column >= BOARD_SIZE or row >= BOARD_SIZE:
        return None
    if flipped:
        column, row = BOARD_SIZE - 1 - column, BOARD_SIZE - 1 - row
    return column, row


class Selector:
    """Turns clicks on squares into selections and moves for one side of the board."""

    def __init__(self, board: Board, side: Side = Side.LOCAL) -> None:
        self.board = board
        self.side = Side(side)
        self.turn = Color.WHITE
        self.selected: Optional[Square] = None

    @property
    def my_turn(self) -> bool:
        """True if clicks at this board may act now."""
        if self.side is Side.LOCAL:
            return True
        own = Color.WHITE if self.side is Side.SERVER else Color.BLACK
        return self.turn is own

    def _pass_turn(self) -> None:
        self.turn = Color.BLACK if self.turn is Color.WHITE else Color.WHITE

    def _select(self, square: Square, colour: Highlight, redraw: bool) -> ClickOutcome:
        self.selected = square
        targets = tuple((target, Highlight.TARGET) for target in valid_moves(self.board, square))
        return ClickOutcome(redraw=redraw, highlights=((square, colour),) + targets)

    def click(self, square: Square) -> ClickOutcome:
        """Handle a click on *square* and report what changed."""
        square = tuple(square)
        if not self.my_turn:
            return ClickOutcome()

        if self.selected is None:
            piece = self.board[square]
            if piece is not None and piece.color is self.turn:
                return self._select(square, Highlight.SELECTED, redraw=False)
            return ClickOutcome()

        if square == self.selected:
            self.selected = None
            return ClickOutcome(redraw=True)

        target = self.board[square]
        current = self.board[self.selected]
        if target is not None and current is not None:
            if target.is_black and current.is_black:
                return self._select(square, Highlight.SELECTED, redraw=True)
            if target.is_white and current.is_white:
                return self._select(square, Highlight.RESELECTED, redraw=True)

        origin = self.selected
        self.selected = None
        if is_valid_move(self.board, origin, square):
            self.board.move(origin, square)
            self._pass_turn()
            return ClickOutcome(redraw=True, move=(origin, square))
        return ClickOutcome(redraw=True)

    def apply_remote_move(self, from_square: Square, to_square: Square) -> None:
        """Play a move received from the opponent, raising InvalidRemoteMove if it is illegal."""
        from_square, to_square = tuple(from_square), tuple(to_square)
        if not (_on_board(from_square) and _on_board(to_square)) or not is_valid_move(
            self.board, from_square, to_square
        ):
            raise InvalidRemoteMove(f"invalid move received: {from_square} -> {to_square}")
        self.board.move(from_square, to_square)
        self._pass_turn()