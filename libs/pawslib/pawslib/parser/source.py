"""Character source with line/column tracking for the Paws lexer."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from itertools import chain

from pawslib.diagnostics.position import Position


class PositionTracker:
    """Pull characters one at a time while keeping the current ``Position``.

    *source* is either a string or any iterable of text chunks (an open text
    file yields lines, for instance).  Chunks are only read when the lexer
    asks for the next character, so a streaming source is consumed lazily.
    End-of-input is reported as ``None``, never as an exception.
    """

    def __init__(self, source: str | Iterable[str]) -> None:
        if isinstance(source, str):
            self._chars: Iterator[str] = iter(source)
        else:
            self._chars = chain.from_iterable(source)
        self._lookahead: str | None = None
        self._exhausted = False
        self._position = Position()

    @property
    def position(self) -> Position:
        """Position of the next character to be consumed."""
        return self._position

    def peek(self) -> str | None:
        """Return the next character without consuming it, or None at EOF."""
        if self._lookahead is None and not self._exhausted:
            self._lookahead = next(self._chars, None)
            if self._lookahead is None:
                self._exhausted = True
        return self._lookahead

    def advance(self) -> str | None:
        """Consume and return the next character, or None at EOF."""
        ch = self.peek()
        if ch is not None:
            self._lookahead = None
            self._position = self._position.advanced(ch)
        return ch

    def at_end(self) -> bool:
        return self.peek() is None
