# smart-chessboard

This package models a chess board. It can do the following:

- load a position from the piece-placement field of a FEN string
- check moves written in `E2E4` notation against each piece's basic movement pattern
- pass every accepted move to a callback, which can feed a queue that writes moves to a TCP server
- work out a move by comparing a grid of sensed square occupancy with the board

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Command line

```
smart-chessboard [MOVES ...] [--fen FEN] [--host HOST] [--port PORT] [--offline]
```

With no moves given, the command plays `E2E4`, `E7E5` and `G1F3` from the standard starting position. It prints the board once at the start and again after each move. A rejected move prints its error message.

Accepted moves are sent to a move server. By default the server is at `127.0.0.1:3333`; `--host` and `--port` change this. Use `--offline` to play without connecting. If the server cannot be reached, the command logs an error and exits with status 1. Otherwise it exits with status 0.

```
smart-chessboard --offline E2E4 G1F3
```

## Library use

```python
from smart_chessboard.board import ChessBoard
from smart_chessboard.errors import MoveError

sent: list[str] = []
board = ChessBoard.from_fen("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR", sent.append)
board.print_board()

try:
    board.move("E2E4")
except MoveError as err:
    print(err, err.error_type)

print(sent)  # moves the board accepted
```

The `sender` argument is any callable that takes the move string, or `None` if no callback is needed.

To forward moves over TCP, give `queue.put_nowait` of an `asyncio.Queue` as the sender. Then run `smart_chessboard.connector.run_server(queue, ip, port)`. This coroutine opens a `Client` connection and writes each move it takes from the queue. It stops when it takes `None` from the queue.

### Modules

- `smart_chessboard.board`: `ChessBoard` with the methods `from_fen`, `move`, `is_move_valid`, `piece_at`, `render` and `print_board`. The module also holds `Piece`, `Square`, `PieceType`, `Color` and `coords_from_letter`.
- `smart_chessboard.errors`: `MoveError` and `ErrorType`.
- `smart_chessboard.connector`: `Client`, a blocking TCP connection that can be used as a context manager, and the `run_server` coroutine.
- `smart_chessboard.parser`: `PieceMap`. It pairs an 8×8 occupancy grid with a `ChessBoard`.
  - `get_diff()` lists the squares where the grid and the board disagree.
  - `parse()` returns the move as four digits: the piece's row and column, then the destination row and column.
- `smart_chessboard.logger`: `Logger`, which writes `[INFO]` lines in blue and `[ERROR]` lines in red, using ANSI escape codes.

### Invalid moves

`move` raises `MoveError` with `ErrorType.INVALID_MOVE_STRUCTURE` in these cases:

- the string is shorter than four characters
- a square is not a letter `A`–`H` followed by a digit `1`–`8`

It raises `MoveError` with `ErrorType.INVALID_MOVE` when the piece's movement pattern does not allow the move.

## What it does not do

Moves are checked only against each piece's movement pattern. The package does not check any of the following:

- whose turn it is
- blocked paths
- check or checkmate
- special moves

A move from an empty square is silently ignored, and so is a move onto an occupied square. Captures are therefore never made.

A piece's colour is taken from the colour of the square it starts on, not from the case of its FEN letter.

The package includes no move server. It only connects to one as a client.