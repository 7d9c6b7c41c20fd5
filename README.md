# duelchess

A small chess board for two players, drawn with pygame. It runs either as
a single window where both sides take turns at the same mouse, or as two
windows in two processes on the same machine: one process waits as the
server, the other joins it as the client with the server's process id,
and each move made in one window is sent to the other over
`SIGUSR1`/`SIGUSR2`, one bit per signal, least significant bit first.

## Installing

```
pip install duelchess
```

The single-window game runs wherever pygame does. The two-process game
needs `signal.sigwaitinfo`, which Python offers on Linux and some other
Unix systems but not on macOS or Windows; without it the command reports
an error and exits with status 1.

## Playing

Start a game in a single window:

```
duelchess
```

(`duelchess local` does the same.) For a game between two processes,
start the server first; it prints its process id as `PID: [<pid>]`:

```
duelchess server
```

Then, in another terminal, start the client with that id:

```
duelchess client <pid>
```

Images are read from the current directory unless another one is given
with `--assets`, which comes before the mode:

```
duelchess --assets /path/to/game server
```

`duelchess --help` lists the options.

The server plays white and sees the board from white's side; the client
plays black and sees it turned round. The background turns red while it
is the other player's move, and clicks are ignored until it is yours.

Click one of your pieces to select it: its square gets a green border and
every square it may move to gets a yellow one. Click one of those squares
to move there, click the selected piece again to drop the selection, or
click another piece of the same colour to select that one instead. Any
other click drops the selection. Closing the window ends the game; the
command prints `Closing Application!` and exits with status 1.

## Rules

Moves follow the usual piece movements with these simplifications:

- pawns move one square forward, two from their starting rank, and take
  diagonally; a pawn reaching the last rank always becomes a queen;
- there is no castling and no en passant;
- a move that leaves your own king attacked is not refused.

A move received from the other process that is not valid on the local
board ends the game with `invalid move received!` and exit status 1.

## What it does not do

The game does not detect check, checkmate or stalemate while playing and
never declares a winner; it goes on until a window is closed. The two
processes must run on the same machine, as signals do not cross it, and
there is no saving or loading of games.

## Images

The board and piece images are read from an assets directory laid out as:

```
assets/board/white_tile.xpm
assets/board/black_tile.xpm
assets/board/background.xpm
assets/board/red_background.xpm
assets/pieces/<colour>_<piece>.xpm
assets/pieces/<colour>_<piece>_white.xpm
```

where `<colour>` is `white` or `black` and `<piece>` is one of `rook`,
`knight`, `bishop`, `queen`, `king` and `pawn`. The `_white` variants are
drawn on light squares. A missing file is reported and the command exits
with status 1. The window is 640 by 640 pixels with 64-pixel tiles.

## Using it as a library

The rules work without a window:

```python
from duelchess.board import Board
from duelchess.pieces import Color
from duelchess.rules import in_check, is_valid_move, valid_moves

board = Board.initial()
print(is_valid_move(board, (6, 4), (4, 4)))   # True
print(sorted(valid_moves(board, (7, 1))))     # [(5, 0), (5, 2)]
print(in_check(board, board.king_square(Color.WHITE), white=True))  # False
```

Squares are `(column, row)` pairs with column 0 at black's back rank and
column 7 at white's.

The modules are:

- `duelchess.pieces`: `Piece` and `Color`, and `piece_image_path`;
- `duelchess.board`: `Board`, with `initial`, `move` (which promotes
  pawns and returns any captured piece), `pieces`, `copy` and
  `king_square`;
- `duelchess.rules`: `is_valid_move`, `valid_moves`, `in_check` and a
  check for each kind of piece;
- `duelchess.selection`: `Selector`, which turns clicks into selections
  and moves and keeps the turn, and `mouse_to_square`;
- `duelchess.protocol`: `encode_byte`, `encode_move`, `MoveDecoder` and
  `SignalLink`, the bit-per-signal move exchange;
- `duelchess.render`: `load_images`, `BoardView`, `tile_origin` and
  `border_pixels`;
- `duelchess.app`: `main` and the `run_local`, `run_server` and
  `run_client` loops behind the command.