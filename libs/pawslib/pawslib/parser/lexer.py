"""Lexer (tokenizer) for Paws source code."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from pawslib.parser.errors import ParseError
from pawslib.parser.source import PositionTracker
from pawslib.parser.tokens import (
    DELIMITERS,
    QUOTES,
    STRAY_QUOTES,
    SYMBOL_BREAKS,
    Token,
    TokenKind,
)

logger = logging.getLogger(__name__)


class Lexer:
    """Tokenize Paws source into a stream of tokens.

    The lexer skips whitespace between tokens, captures bare and quoted
    symbols, and emits one token per structural character.  Iterating a
    ``Lexer`` pulls tokens lazily and stops after the single EOF token.
    Unterminated quoted symbols and stray closing quotes raise
    ``ParseError`` immediately.
    """

    def __init__(self, source: str | Iterable[str]) -> None:
        self._chars = PositionTracker(source)
        self._done = False

    # ------------------------------------------------------------------
    # Scanning helpers
    # ------------------------------------------------------------------

    def _skip_whitespace(self) -> None:
        while not self._chars.at_end() and self._chars.peek().isspace():
            self._chars.advance()

    def _scan_quoted(self, closer: str) -> str:
        """Scan a quoted symbol.  Opening quote not yet consumed.

        Everything up to the matching closer is captured verbatim: newlines,
        indentation and backslashes included.
        """
        start = self._chars.position
        self._chars.advance()  # consume opening quote
        chars: list[str] = []
        while True:
            ch = self._chars.advance()
            if ch is None:
                raise ParseError.unterminated(closer, start)
            if ch == closer:
                return "".join(chars)
            chars.append(ch)

    def _scan_bare(self) -> str:
        """Scan a maximal run of non-whitespace, non-delimiter characters."""
        chars: list[str] = []
        while True:
            ch = self._chars.peek()
            if ch is None or ch.isspace() or ch in SYMBOL_BREAKS:
                return "".join(chars)
            chars.append(ch)
            self._chars.advance()

    # ------------------------------------------------------------------
    # Main entry points
    # ------------------------------------------------------------------

    def next_token(self) -> Token:
        """Return the next token.  After EOF, keeps returning EOF."""
        self._skip_whitespace()
        pos = self._chars.position

        if self._chars.at_end():
            self._done = True
            return Token(TokenKind.EOF, "", pos)

        ch = self._chars.peek()
        if ch in DELIMITERS:
            self._chars.advance()
            return Token(DELIMITERS[ch], ch, pos)

        if ch in QUOTES:
            return Token(TokenKind.SYMBOL, self._scan_quoted(QUOTES[ch]), pos)

        if ch in STRAY_QUOTES:
            logger.debug("stray closing quote %r at %s", ch, pos)
            raise ParseError.unexpected(ch, pos)

        return Token(TokenKind.SYMBOL, self._scan_bare(), pos)

    def __iter__(self) -> Iterator[Token]:
        while not self._done:
            yield self.next_token()

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source. Returns list ending with an EOF token."""
        return list(self)
