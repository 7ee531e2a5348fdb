"""Command that plays a few moves on a board and forwards them to the server."""

from __future__ import annotations

import argparse
import asyncio
from collections.abc import Sequence

from .board import ChessBoard
from .connector import DEFAULT_HOST, DEFAULT_PORT, run_server
from .errors import MoveError
from .logger import Logger

START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
DEFAULT_MOVES = ("E2E4", "E7E5", "G1F3")


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play moves and send them to the move server.")
    parser.add_argument("moves", nargs="*", default=list(DEFAULT_MOVES), help="moves such as E2E4")
    parser.add_argument("--fen", default=START_FEN, help="piece placement to start from")
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--offline", action="store_true", help="do not connect to the server")
    return parser.parse_args(argv)


async def _play(args: argparse.Namespace) -> int:
    queue: asyncio.Queue[str | None] = asyncio.Queue()
    server = None if args.offline else asyncio.create_task(run_server(queue, args.host, args.port))
    board = ChessBoard.from_fen(args.fen, queue.put_nowait if server is not None else None)

    board.print_board()
    for mv in args.moves:
        try:
            board.move(mv)
            print()
        except MoveError as exc:
            print(exc)
        board.print_board()

    if server is None:
        return 0
    queue.put_nowait(None)
    try:
        await server
    except OSError as exc:
        Logger().error(f"could not deliver moves: {exc}")
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the exit status."""
    return asyncio.run(_play(_parse_args(argv)))


if __name__ == "__main__":
    raise SystemExit(main())