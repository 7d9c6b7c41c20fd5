import pygame
import pytest

from duelchess.board import Board
from duelchess.pieces import Piece
from duelchess.render import (
    BORDER_WIDTH,
    PIECE_INSET,
    TILE_SIZE,
    WINDOW_SIZE,
    BoardView,
    Images,
    border_pixels,
    load_images,
    tile_origin,
)

BACKGROUND = pygame.Color(10, 20, 30)
RED = pygame.Color(200, 0, 0)
WHITE_TILE = pygame.Color(240, 240, 240)
BLACK_TILE = pygame.Color(40, 40, 40)


def _solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def _piece_color(piece, light):
    return pygame.Color(piece.value * 20, 100 if light else 50, 7)


@pytest.fixture
def images():
    return Images(
        black_tile=_solid((64, 64), BLACK_TILE),
        white_tile=_solid((64, 64), WHITE_TILE),
        background=_solid((WINDOW_SIZE, WINDOW_SIZE), BACKGROUND),
        red_background=_solid((WINDOW_SIZE, WINDOW_SIZE), RED),
        pieces={p: _solid((42, 42), _piece_color(p, False)) for p in Piece},
        light_pieces={p: _solid((42, 42), _piece_color(p, True)) for p in Piece},
    )


@pytest.fixture
def surface():
    return pygame.Surface((WINDOW_SIZE, WINDOW_SIZE))


def test_tile_origin_corners():
    assert tile_origin((0, 0)) == (64, 64)
    assert tile_origin((7, 7), False) == (512, 512)


def test_tile_origin_row_is_x_and_column_is_y():
    assert tile_origin((2, 5)) == (5 * 64 + 64, 2 * 64 + 64)


@pytest.mark.parametrize("square", [(0, 0), (3, 6), (7, 1)])
def test_flipped_origin_mirrors_board(square):
    column, row = square
    assert tile_origin(square, True) == tile_origin((7 - column, 7 - row), False)


@pytest.mark.parametrize("square", [(8, 0), (0, 8), (-1, 3)])
def test_tile_origin_off_board(square):
    with pytest.raises(IndexError):
        tile_origin(square)


def test_border_pixels_lie_on_the_tile_edge():
    x0, y0 = tile_origin((4, 2))
    pixels = border_pixels((4, 2))
    assert len(pixels) == len(set(pixels))
    for x, y in pixels:
        dx, dy = x - x0, y - y0
        assert 0 <= dx < TILE_SIZE and 0 <= dy < TILE_SIZE
        inner = BORDER_WIDTH <= dx < TILE_SIZE - BORDER_WIDTH and BORDER_WIDTH <= dy < TILE_SIZE - BORDER_WIDTH
        assert not inner
    assert (x0, y0) in pixels
    assert (x0 + TILE_SIZE - 1, y0 + TILE_SIZE - 1) in pixels


def test_border_pixels_off_board_is_empty():
    assert border_pixels((9, 9)) == []


def test_draw_board_background_depends_on_turn(surface, images):
    view = BoardView(surface, images)
    view.draw_board(True)
    assert surface.get_at((0, 0)) == BACKGROUND
    view.draw_board(False)
    assert surface.get_at((0, 0)) == RED


def test_draw_board_tiles_alternate(surface, images):
    view = BoardView(surface, images)
    view.draw_board()
    assert surface.get_at(tile_origin((0, 0))) == WHITE_TILE
    assert surface.get_at(tile_origin((0, 1))) == BLACK_TILE
    assert surface.get_at(tile_origin((1, 1))) == WHITE_TILE


def test_draw_pieces_uses_square_shade(surface, images):
    view = BoardView(surface, images)
    view.redraw(Board.initial())
    x, y = tile_origin((0, 0))
    assert surface.get_at((x + PIECE_INSET, y + PIECE_INSET)) == _piece_color(Piece.BLACK_ROOK, True)
    x, y = tile_origin((0, 1))
    assert surface.get_at((x + PIECE_INSET, y + PIECE_INSET)) == _piece_color(Piece.BLACK_KNIGHT, False)
    x, y = tile_origin((3, 3))
    assert surface.get_at((x + PIECE_INSET, y + PIECE_INSET)) == WHITE_TILE


def test_flipped_view_shows_white_at_top(surface, images):
    view = BoardView(surface, images, flipped=True)
    view.redraw(Board.initial())
    x, y = tile_origin((7, 7), True)
    assert (x, y) == tile_origin((0, 0), False)
    assert surface.get_at((x + PIECE_INSET, y + PIECE_INSET)) == _piece_color(Piece.WHITE_ROOK, True)


def test_highlight_paints_border_only(surface, images):
    view = BoardView(surface, images)
    view.draw_board()
    view.highlight((2, 3), 0x18A15C)
    expected = pygame.Color(0x18, 0xA1, 0x5C)
    for pixel in border_pixels((2, 3)):
        assert surface.get_at(pixel) == expected
    x, y = tile_origin((2, 3))
    assert surface.get_at((x + TILE_SIZE // 2, y + TILE_SIZE // 2)) == BLACK_TILE


def test_highlight_flipped_matches_border_pixels(surface, images):
    view = BoardView(surface, images, flipped=True)
    view.draw_board()
    view.highlight((1, 6), (1, 2, 3))
    for pixel in border_pixels((1, 6), True):
        assert surface.get_at(pixel) == pygame.Color(1, 2, 3)


def test_highlight_off_board_changes_nothing(surface, images):
    view = BoardView(surface, images)
    view.draw_board()
    before = surface.get_buffer().raw
    view.highlight((8, 8), 0xC1C418)
    assert surface.get_buffer().raw == before


def test_redraw_clears_highlight(surface, images):
    view = BoardView(surface, images)
    board = Board.initial()
    view.redraw(board)
    clean = surface.get_buffer().raw
    view.highlight((4, 4), 0xC7E312)
    assert surface.get_buffer().raw != clean
    view.redraw(board)
    assert surface.get_buffer().raw == clean


def test_images_piece_lookup(images):
    assert images.piece(Piece.WHITE_KING, True) is images.light_pieces[Piece.WHITE_KING]
    assert images.piece(Piece.WHITE_KING, False) is images.pieces[Piece.WHITE_KING]


def test_load_images_missing_files(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_images(str(tmp_path))