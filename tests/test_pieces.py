import pytest

from duelchess.pieces import (
    BACKGROUND_PATH,
    BLACK_TILE_PATH,
    RED_BACKGROUND_PATH,
    WHITE_TILE_PATH,
    Color,
    Piece,
    piece_image_path,
)


@pytest.mark.parametrize(
    "code, expected",
    [
        (0, "WHITE_ROOK"),
        (5, "WHITE_PAWN"),
        (6, "BLACK_ROOK"),
        (11, "BLACK_PAWN"),
    ],
)
def test_piece_values_match_board_codes(code, expected):
    piece = Piece(code)
    assert piece.name == expected
    assert int(piece) == code


@pytest.mark.parametrize("code", range(12))
def test_each_piece_has_exactly_one_colour(code):
    piece = Piece(code)
    assert piece.is_white != piece.is_black
    assert (piece.color is Color.WHITE) == piece.is_white
    assert (piece.color is Color.BLACK) == piece.is_black


def test_kings_belong_to_their_sides():
    assert Piece(4).color is Color.WHITE
    assert Piece(10).color is Color.BLACK


def test_colours_split_evenly():
    pieces = [Piece(code) for code in range(12)]
    whites = [p for p in pieces if p.is_white]
    blacks = [p for p in pieces if p.is_black]
    assert len(whites) == len(blacks) == 6
    assert max(whites) < min(blacks)


@pytest.mark.parametrize("code", [-1, 12])
def test_unknown_codes_are_rejected(code):
    with pytest.raises(ValueError):
        Piece(code)


def test_image_paths_for_dark_squares():
    assert piece_image_path(Piece.WHITE_ROOK, False) == "assets/pieces/white_rook.xpm"
    assert piece_image_path(Piece.BLACK_QUEEN, False) == "assets/pieces/black_queen.xpm"


def test_image_paths_for_light_squares():
    assert piece_image_path(Piece.WHITE_KNIGHT, True) == "assets/pieces/white_knight_white.xpm"
    assert piece_image_path(Piece.BLACK_PAWN, True) == "assets/pieces/black_pawn_white.xpm"


def test_image_paths_accept_plain_ints():
    assert piece_image_path(4, False) == piece_image_path(Piece.WHITE_KING, False)


def test_all_image_paths_are_distinct():
    paths = {piece_image_path(p, light) for p in Piece for light in (False, True)}
    assert len(paths) == 2 * len(Piece)


def test_board_asset_paths_are_apart_from_piece_images():
    board_paths = {WHITE_TILE_PATH, BLACK_TILE_PATH, BACKGROUND_PATH, RED_BACKGROUND_PATH}
    piece_paths = {piece_image_path(p, light) for p in Piece for light in (False, True)}
    assert board_paths == {
        "assets/board/white_tile.xpm",
        "assets/board/black_tile.xpm",
        "assets/board/background.xpm",
        "assets/board/red_background.xpm",
    }
    assert board_paths.isdisjoint(piece_paths)
    assert all(path.startswith("assets/pieces/") for path in piece_paths)