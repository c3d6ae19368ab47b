from __future__ import annotations

from dataclasses import dataclass


Offset = int
LineNum = int
ColNum = int

INVALID_OFFSET: Offset = -1
INVALID_LENGTH = -1


@dataclass(frozen=True, slots=True)
class Position:
    """A (line, column) location inside a source buffer.

    Both fields are 0-based; ``str()`` renders them 1-based for messages,
    so the invalid sentinel prints as ``0:0``.
    """

    line: LineNum
    column: ColNum

    @property
    def valid(self) -> bool:
        return self.line >= 0 and self.column >= 0

    def __str__(self) -> str:
        return f"{self.line + 1}:{self.column + 1}"


INVALID_POSITION = Position(-1, -1)


@dataclass(frozen=True, slots=True)
class Span:
    """Half-open span [start, end) in a single file."""

    file: str
    start: Position
    end: Position

    def format(self) -> str:
        if self.file == "":
            return ""

        return f"{self.file}:{self.start}"
