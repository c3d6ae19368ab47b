from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class EndOfInput(EOFError):
    """No character is available in the requested direction."""

    file: str
    offset: int
    backward: bool = False

    def __str__(self) -> str:
        where = "start" if self.backward else "end"
        return f"{self.file}: reached {where} of input at offset {self.offset}"


@dataclass(slots=True)
class SourceDecodeError(ValueError):
    file: str
    reason: str

    def __str__(self) -> str:
        return f"{self.file}: cannot decode source: {self.reason}"
