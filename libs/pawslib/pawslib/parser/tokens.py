"""Token definitions for the Paws lexer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from pawslib.diagnostics.position import Position


class TokenKind(Enum):
    """All token types recognized by the Paws lexer."""

    SYMBOL = auto()  # bare or quoted symbol text

    # Delimiters
    LPAREN = auto()  # (
    RPAREN = auto()  # )
    LBRACE = auto()  # {
    RBRACE = auto()  # }

    # Special
    EOF = auto()


# Structural characters -> TokenKind.
DELIMITERS: dict[str, TokenKind] = {
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
}

# Opening group token -> the closing character that ends it.
CLOSER_FOR: dict[TokenKind, str] = {
    TokenKind.LPAREN: ")",
    TokenKind.LBRACE: "}",
}

# Opening quote -> closing quote of the same style.
QUOTES: dict[str, str] = {
    '"': '"',
    "“": "”",
}

# Closing quotes that can never open a span.
STRAY_QUOTES: frozenset[str] = frozenset(set(QUOTES.values()) - set(QUOTES))

# Characters that end a bare symbol (in addition to whitespace).
SYMBOL_BREAKS: frozenset[str] = frozenset(DELIMITERS) | frozenset(QUOTES) | STRAY_QUOTES


@dataclass(frozen=True)
class Token:
    """A single token produced by the Paws lexer."""

    kind: TokenKind
    lexeme: str
    position: Position
