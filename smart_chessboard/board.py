"""Chess board model: pieces, squares, FEN loading and move handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from .errors import ErrorType, MoveError
from .logger import Logger

BOARD_SIZE = 8
_FILE_LETTERS = "ABCDEFGH"
_RANK_DIGITS = "12345678"


class Color(Enum):
    """Colour of a square or piece."""

    WHITE = "White"
    BLACK = "Black"

    @classmethod
    def at(cls, x: int, y: int) -> Color:
        """Colour of the square at (x, y)."""
        return cls.WHITE if (x + y) % 2 == 0 else cls.BLACK

    @classmethod
    def from_symbol(cls, sym: str) -> Color:
        """Upper-case symbols are white, anything else black."""
        return cls.WHITE if sym.isupper() else cls.BLACK


class PieceType(Enum):
    """Kind of chess piece, valued by its upper-case symbol."""

    PAWN = "P"
    ROOK = "R"
    BISHOP = "B"
    KNIGHT = "N"
    KING = "K"
    QUEEN = "Q"

    @classmethod
    def from_symbol(cls, sym: str) -> PieceType | None:
        """Piece type for a FEN symbol of either case, or None if unknown."""
        if len(sym) != 1:
            return None
        try:
            return cls(sym.upper())
        except ValueError:
            return None


@dataclass(frozen=True)
class Piece:
    """A piece together with the coordinates it was created at."""

    color: Color
    kind: PieceType
    x: int
    y: int

    @classmethod
    def from_symbol(cls, sym: str, x: int, y: int) -> Piece:
        """Build a piece from a FEN symbol; its colour is that of its square."""
        kind = PieceType.from_symbol(sym)
        if kind is None:
            raise ValueError(f"unknown piece symbol {sym!r}")
        return cls(Color.at(x, y), kind, x, y)

    def color_name(self) -> str:
        """Colour as a word: 'White' or 'Black'."""
        return self.color.value


@dataclass
class Square:
    """One square of the board, possibly holding a piece."""

    square_color: Color
    x: int
    y: int
    piece: Piece | None = None

    def symbol(self) -> str:
        """Letter of the piece on the square, or 'x' when empty."""
        return self.piece.kind.value if self.piece is not None else "x"


def coords_from_letter(letter: str) -> int | None:
    """Column index for a file letter 'A'..'H', or None."""
    if len(letter) != 1 or letter not in _FILE_LETTERS:
        return None
    return _FILE_LETTERS.index(letter)


def _parse_square(letter: str, digit: str) -> tuple[int, int]:
    column = coords_from_letter(letter)
    if column is None or len(digit) != 1 or digit not in _RANK_DIGITS:
        raise MoveError(ErrorType.INVALID_MOVE_STRUCTURE)
    return BOARD_SIZE - int(digit), column


class ChessBoard:
    """An 8x8 board that validates moves and reports accepted ones to a sender."""

    def __init__(self, sender: Callable[[str], object] | None = None) -> None:
        self.squares = [
            [Square(Color.at(x, y), x, y) for y in range(BOARD_SIZE)]
            for x in range(BOARD_SIZE)
        ]
        self.sender = sender
        self.logger = Logger()

    @classmethod
    def from_fen(cls, fen: str, sender: Callable[[str], object] | None = None) -> ChessBoard:
        """Build a board from the piece-placement part of a FEN string."""
        board = cls(sender)
        rank, file = BOARD_SIZE - 1, 0
        for ch in fen:
            if ch == "/":
                rank -= 1
                file = 0
            elif ch.isdigit():
                file += int(ch)
            else:
                if not (0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE):
                    raise ValueError(f"FEN places a piece outside the board: {fen!r}")
                board.squares[rank][file].piece = Piece.from_symbol(ch, rank, file)
                file += 1
        return board

    def piece_at(self, rank: int, file: int) -> Piece | None:
        """Piece on squares[rank][file], or None."""
        if not (0 <= rank < BOARD_SIZE and 0 <= file < BOARD_SIZE):
            raise IndexError(f"square ({rank}, {file}) is off the board")
        return self.squares[rank][file].piece

    def render(self) -> str:
        """Text picture of the board, one line per row followed by a blank line."""
        lines = [
            "".join(square.symbol() for square in row) + row[0].symbol()
            for row in self.squares
        ]
        return "".join(line + "\n" for line in lines) + "\n"

    def print_board(self) -> None:
        """Print the board to stdout."""
        print(self.render(), end="")

    def move(self, mv: str) -> None:
        """Make a move written as e.g. 'E2E4' if it is allowed.

        Raises MoveError when the notation is malformed or the piece cannot
        move that way. A move from an empty square or onto an occupied one
        leaves the board unchanged.
        """
        if len(mv) < 4:
            raise MoveError(ErrorType.INVALID_MOVE_STRUCTURE)

        x_from, y_from = _parse_square(mv[0], mv[1])
        x_to, y_to = _parse_square(mv[2], mv[3])

        self.logger.info(f"moving from {x_from}, {x_to} to {y_from}, {y_to}")

        piece = self.piece_at(x_from, y_from)
        if piece is None or self.piece_at(x_to, y_to) is not None:
            return

        if not self.is_move_valid(piece.kind, (y_from, x_from), (y_to, x_to), piece.color):
            raise MoveError(ErrorType.INVALID_MOVE)

        self.logger.info("this move is valid")
        if self.sender is not None:
            self.sender(mv)
        self.squares[x_to][y_to].piece = piece
        self.squares[x_from][y_from].piece = None

    def is_move_valid(
        self,
        piece: PieceType,
        start: tuple[int, int],
        end: tuple[int, int],
        color: Color,
    ) -> bool:
        """Whether the piece's movement pattern allows going from start to end."""
        fx, fy = start
        tx, ty = end
        dx = tx - fx
        dy = ty - fy

        match piece:
            case PieceType.PAWN:
                direction = -1 if color is Color.WHITE else 1
                start_row = 6 if color is Color.WHITE else 1
                if dx == 0 and dy == direction:
                    return True
                if dx == 0 and fy == start_row and dy == 2 * direction:
                    return True
                return abs(dx) == 1 and dy == direction
            case PieceType.KNIGHT:
                return (abs(dx), abs(dy)) in ((2, 1), (1, 2))
            case PieceType.BISHOP:
                return abs(dx) == abs(dy)
            case PieceType.ROOK:
                return dx == 0 or dy == 0
            case PieceType.QUEEN:
                return dx == 0 or dy == 0 or abs(dx) == abs(dy)
            case PieceType.KING:
                return max(abs(dx), abs(dy)) == 1
        return False