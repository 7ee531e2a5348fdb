"""Errors raised when a move cannot be made."""

from __future__ import annotations

from enum import Enum


class ErrorType(Enum):
    """Why a move was rejected."""

    INVALID_MOVE = "Invalid Move"
    INVALID_MOVE_STRUCTURE = "Invalid Move structure"


class MoveError(Exception):
    """Raised when a move is malformed or not allowed."""

    def __init__(self, error_type: ErrorType) -> None:
        super().__init__(error_type.value)
        self.error_type = error_type

    def __str__(self) -> str:
        return self.error_type.value