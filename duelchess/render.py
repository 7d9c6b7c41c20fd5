"""Drawing the board, the pieces and square highlights onto a pygame surface."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Union

import pygame

from .board import BOARD_SIZE, Board, Square
from .pieces import (
    BACKGROUND_PATH,
    BLACK_TILE_PATH,
    RED_BACKGROUND_PATH,
    WHITE_TILE_PATH,
    Piece,
    piece_image_path,
)

WINDOW_SIZE = 640
BOARD_ORIGIN = 64
TILE_SIZE = 64
BORDER_WIDTH = 4
PIECE_INSET = 11

ColorLike = Union[int, pygame.Color, tuple]


def _on_board(square: Square) -> bool:
    column, row = square
    return 0 <= column < BOARD_SIZE and 0 <= row < BOARD_SIZE


def _is_light(square: Square) -> bool:
    column, row = square
    return (column + row) % 2 == 0


def tile_origin(square: Square, flipped: bool = False) -> tuple[int, int]:
    """Window (x, y) of the top-left pixel of *square*'s tile.

    A flipped view shows the board from black's side, turned half a circle.
    """
    if not _on_board(square):
        raise IndexError(f"square {square!r} is off the board")
    column, row = square
    if flipped:
        column, row = BOARD_SIZE - 1 - column, BOARD_SIZE - 1 - row
    return row * TILE_SIZE + BOARD_ORIGIN, column * TILE_SIZE + BOARD_ORIGIN


def border_pixels(square: Square, flipped: bool = False) -> list[tuple[int, int]]:
    """Window pixels of the highlight border around *square*; empty for squares off the board."""
    if not _on_board(square):
        return []
    x0, y0 = tile_origin(square, flipped)
    far = TILE_SIZE - BORDER_WIDTH
    return [
        (x0 + dx, y0 + dy)
        for dy in range(TILE_SIZE)
        for dx in range(TILE_SIZE)
        if dx < BORDER_WIDTH or dx >= far or dy < BORDER_WIDTH or dy >= far
    ]


def _to_color(color: ColorLike) -> pygame.Color:
    if isinstance(color, int):
        return pygame.Color((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF)
    return pygame.Color(color)


@dataclass
class Images:
    """Every picture the board view draws."""

    black_tile: pygame.Surface
    white_tile: pygame.Surface
    background: pygame.Surface
    red_background: pygame.Surface
    pieces: dict[Piece, pygame.Surface] = field(default_factory=dict)
    light_pieces: dict[Piece, pygame.Surface] = field(default_factory=dict)

    def piece(self, piece: Piece, light_square: bool) -> pygame.Surface:
        """The picture of *piece* as drawn on a light or a dark square."""
        return (self.light_pieces if light_square else self.pieces)[Piece(piece)]


def _load(assets_dir: str, relative: str) -> pygame.Surface:
    path = os.path.join(assets_dir, relative)
    if not os.path.isfile(path):
        raise FileNotFoundError(f"image not found: {path}")
    return pygame.image.load(path)


def load_images(assets_dir: str = ".") -> Images:
    """Load all board and piece images from the directory that holds ``assets/``."""
    return Images(
        black_tile=_load(assets_dir, BLACK_TILE_PATH),
        white_tile=_load(assets_dir, WHITE_TILE_PATH),
        background=_load(assets_dir, BACKGROUND_PATH),
        red_background=_load(assets_dir, RED_BACKGROUND_PATH),
        pieces={piece: _load(assets_dir, piece_image_path(piece, False)) for piece in Piece},
        light_pieces={piece: _load(assets_dir, piece_image_path(piece, True)) for piece in Piece},
    )


class BoardView:
    """Paints a board onto a surface, optionally from black's side."""

    def __init__(self, surface: pygame.Surface, images: Images, flipped: bool = False) -> None:
        self.surface = surface
        self.images = images
        self.flipped = flipped

    def draw_board(self, my_turn: bool = True) -> None:
        """Paint the background, red while waiting for the opponent, then the tiles."""
        background = self.images.background if my_turn else self.images.red_background
        self.surface.blit(background, (0, 0))
        for column in range(BOARD_SIZE):
            for row in range(BOARD_SIZE):
                tile = self.images.white_tile if _is_light((column, row)) else self.images.black_tile
                self.surface.blit(tile, tile_origin((column, row), self.flipped))

    def draw_pieces(self, board: Board) -> None:
        """Paint every piece on its tile."""
        for square, piece in board.pieces():
            x, y = tile_origin(square, self.flipped)
            image = self.images.piece(piece, _is_light(square))
            self.surface.blit(image, (x + PIECE_INSET, y + PIECE_INSET))

    def highlight(self, square: Square, color: ColorLike) -> None:
        """Outline *square* with a border of *color*; squares off the board are ignored."""
        if not _on_board(square):
            return
        x, y = tile_origin(square, self.flipped)
        colour = _to_color(color)
        far = TILE_SIZE - BORDER_WIDTH
        for strip in (
            (x, y, TILE_SIZE, BORDER_WIDTH),
            (x, y + far, TILE_SIZE, BORDER_WIDTH),
            (x, y, BORDER_WIDTH, TILE_SIZE),
            (x + far, y, BORDER_WIDTH, TILE_SIZE),
        ):
            self.surface.fill(colour, pygame.Rect(strip))

    def redraw(self, board: Board, my_turn: bool = True) -> None:
        """Paint the board afresh, clearing any highlights."""
        self.draw_board(my_turn)
        self.draw_pieces(board)