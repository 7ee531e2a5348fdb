"""TCP delivery of accepted moves to a listening server."""

from __future__ import annotations

import asyncio
import socket

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3333


class Client:
    """A TCP connection to the move server, opened on construction."""

    def __init__(self, ip: str, port: int) -> None:
        self.ip = ip
        self.port = port
        self._sock = socket.create_connection((ip, port))
        print("connected to the server successfully")

    def send(self, data: bytes) -> int:
        """Send all of ``data`` and return the number of bytes written."""
        self._sock.sendall(data)
        return len(data)

    def close(self) -> None:
        """Close the connection."""
        self._sock.close()

    def __enter__(self) -> Client:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


async def run_server(
    receiver: asyncio.Queue[str | None],
    ip: str = DEFAULT_HOST,
    port: int = DEFAULT_PORT,
) -> None:
    """Forward every move taken from ``receiver`` to the server.

    The loop ends when ``None`` is taken from the queue, after which the
    connection is closed. Connection failures propagate as ``OSError``.
    """
    with Client(ip, port) as connection:
        while (chess_move := await receiver.get()) is not None:
            connection.send(chess_move.encode())
            print("message sent successfully")