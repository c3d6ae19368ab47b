from __future__ import annotations

import logging
from bisect import bisect_left
from pathlib import Path
from typing import Protocol

from .errors import EndOfInput, SourceDecodeError
from .spans import (
    INVALID_LENGTH,
    INVALID_OFFSET,
    INVALID_POSITION,
    LineNum,
    Offset,
    Position,
    Span,
)


log = logging.getLogger(__name__)


class SourceFile(Protocol):
    """What a tokenizer needs from a source: a pushback character stream
    plus offset <-> position conversion."""

    @property
    def name(self) -> str: ...

    def read(self) -> str: ...

    def peek(self) -> str: ...

    def unread(self) -> None: ...

    def current_offset(self) -> Offset: ...

    def offset_to_position(self, offset: Offset) -> Position: ...

    def position_to_offset(self, position: Position) -> Offset: ...


class SourceBuffer:
    """An in-memory source text with a cursor and a newline index.

    Offsets and columns count code points. The cursor is the only mutable
    state and is not synchronized; confine a buffer to one reader.
    """

    __slots__ = ("_name", "_text", "_cursor", "_newlines")

    def __init__(self, name: str, text: str) -> None:
        self._name = name
        self._text = text
        self._cursor: Offset = 0
        self._newlines: tuple[Offset, ...] = tuple(
            i for i, ch in enumerate(text) if ch == "\n"
        )

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"SourceBuffer({self._name!r}, len={len(self._text)}, cursor={self._cursor})"

    @property
    def name(self) -> str:
        return self._name

    @property
    def text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._newlines) + 1

    # -- cursor protocol --------------------------------------------------

    def read(self) -> str:
        ch = self.peek()
        self._cursor += 1
        return ch

    def peek(self) -> str:
        if self._cursor == len(self._text):
            raise EndOfInput(file=self._name, offset=self._cursor)
        return self._text[self._cursor]

    def unread(self) -> None:
        # Steps back one character whether or not it was read.
        if self._cursor == 0:
            raise EndOfInput(file=self._name, offset=0, backward=True)
        self._cursor -= 1

    def current_offset(self) -> Offset:
        return self._cursor

    # -- conversion ---------------------------------------------------------

    def offset_to_position(self, offset: Offset) -> Position:
        if offset < 0 or offset > len(self._text):
            return INVALID_POSITION
        # First line whose terminating newline is at or after offset.
        line = bisect_left(self._newlines, offset)
        return Position(line, offset - self.line_start(line))

    def position_to_offset(self, position: Position) -> Offset:
        start = self.line_start(position.line)
        if start == INVALID_OFFSET:
            return INVALID_OFFSET
        if position.column < 0 or position.column > self.line_length(position.line):
            return INVALID_OFFSET
        return start + position.column

    def line_start(self, line: LineNum) -> Offset:
        """Offset of the first character of ``line``, or ``INVALID_OFFSET``."""
        if line == 0:
            return 0
        if line < 0 or line > len(self._newlines):
            return INVALID_OFFSET
        return self._newlines[line - 1] + 1

    def line_length(self, line: LineNum) -> int:
        """Length of ``line`` excluding its newline, or ``INVALID_LENGTH``."""
        start = self.line_start(line)
        if start == INVALID_OFFSET:
            return INVALID_LENGTH
        next_start = self.line_start(line + 1)
        if next_start == INVALID_OFFSET:
            return len(self._text) - start
        return next_start - start - 1

    def all_line_starts(self) -> list[Offset]:
        return [self.line_start(i) for i in range(self.line_count)]

    def all_line_lengths(self) -> list[int]:
        return [self.line_length(i) for i in range(self.line_count)]

    def line_text(self, line: LineNum) -> str:
        length = self.line_length(line)
        if length == INVALID_LENGTH:
            raise IndexError(f"line {line} out of range for {self._name!r}")
        start = self.line_start(line)
        return self._text[start : start + length]

    def span(self, start: Offset, end: Offset) -> Span:
        if start > end:
            raise ValueError(f"span start {start} is after end {end}")
        return Span(
            file=self._name,
            start=self.offset_to_position(start),
            end=self.offset_to_position(end),
        )


def create(name: str, text: str | bytes | bytearray, *, encoding: str = "utf-8") -> SourceBuffer:
    """Build a buffer from already-decoded text or from encoded bytes.

    Bytes are decoded strictly; failure raises ``SourceDecodeError``.
    """
    if isinstance(text, (bytes, bytearray)):
        try:
            text = bytes(text).decode(encoding)
        except UnicodeDecodeError as e:
            raise SourceDecodeError(file=name, reason=str(e)) from e
        except LookupError as e:
            raise SourceDecodeError(file=name, reason=f"unknown encoding {encoding!r}") from e
    return SourceBuffer(name, text)


def load_source(path: str | Path, *, encoding: str = "utf-8") -> SourceBuffer:
    p = Path(path).expanduser().resolve()
    buf = create(str(p), p.read_bytes(), encoding=encoding)
    log.debug("loaded %s: %d characters, %d lines", p, len(buf), buf.line_count)
    return buf
