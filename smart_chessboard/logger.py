"""Coloured console logging for board events."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO

_BLUE = "\x1b[34m"
_RED = "\x1b[31m"
_RESET = "\x1b[0m"


def _paint(text: str, colour: str) -> str:
    return f"{colour}{text}{_RESET}"


@dataclass
class Logger:
    """Writes tagged, coloured messages to a text stream (stdout by default)."""

    stream: TextIO | None = None

    def _write(self, tag: str, message: object, colour: str) -> None:
        out = self.stream if self.stream is not None else sys.stdout
        print(f"{_paint(tag, colour)} -> {_paint(str(message), colour)}", file=out)

    def info(self, message: object) -> None:
        """Write an informational message in blue."""
        self._write("[INFO]", message, _BLUE)

    def error(self, message: object) -> None:
        """Write an error message in red."""
        self._write("[ERROR]", message, _RED)