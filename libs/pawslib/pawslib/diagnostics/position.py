"""Source position tracking for Paws diagnostics."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A point in Paws source text."""

    line: int = 1  # 1-indexed
    column: int = 1  # 1-indexed
    offset: int = 0  # 0-indexed, in characters

    def advanced(self, ch: str) -> Position:
        """Return the position immediately after consuming *ch*."""
        if ch == "\n":
            return Position(self.line + 1, 1, self.offset + 1)
        return Position(self.line, self.column + 1, self.offset + 1)

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"
