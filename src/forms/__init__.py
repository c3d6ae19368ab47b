from __future__ import annotations

from .errors import EndOfInput, SourceDecodeError
from .source import SourceBuffer, SourceFile, create, load_source
from .spans import INVALID_LENGTH, INVALID_OFFSET, INVALID_POSITION, Position, Span

__all__ = [
    "EndOfInput",
    "INVALID_LENGTH",
    "INVALID_OFFSET",
    "INVALID_POSITION",
    "Position",
    "SourceBuffer",
    "SourceDecodeError",
    "SourceFile",
    "Span",
    "create",
    "load_source",
]
