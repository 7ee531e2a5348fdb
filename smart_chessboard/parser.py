"""Derive a move from a sensed occupancy map compared with the board."""

from __future__ import annotations

from collections.abc import Sequence

from .board import BOARD_SIZE, ChessBoard
from .logger import Logger


class PieceMap:
    """Occupancy reported by the board sensors, paired with the game state."""

    def __init__(self, occupancy: Sequence[Sequence[bool]], chessboard: ChessBoard) -> None:
        rows = [tuple(bool(cell) for cell in row) for row in occupancy]
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError("occupancy map must be 8 rows of 8 cells")
        self.occupancy = rows
        self.chessboard = chessboard

    def get_diff(self) -> list[tuple[int, int]]:
        """Squares whose sensed occupancy disagrees with the board, row by row."""
        return [
            (x, y)
            for x, row in enumerate(self.occupancy)
            for y, occupied in enumerate(row)
            if occupied != (self.chessboard.piece_at(x, y) is not None)
        ]

    def parse(self) -> str:
        """Move as four digits: piece rank and file, then destination rank and file."""
        diff = self.get_diff()
        if len(diff) < 2:
            Logger().error("error occurred while parsing the move")
            raise ValueError("occupancy map does not describe a move")

        first, second = diff[0], diff[1]
        piece = self.chessboard.piece_at(*first) or self.chessboard.piece_at(*second)
        if piece is None:
            Logger().error("error occurred while parsing the move")
            raise ValueError("no piece found on the changed squares")

        rank, file = piece.x, piece.y
        target = second if first == (rank, file) else first
        return f"{rank}{file}{target[0]}{target[1]}"