"""Parse error types for the Paws parser."""

from __future__ import annotations

from enum import Enum

from pawslib.diagnostics.position import Position


class ErrorKind(Enum):
    """The two ways a parse can fail."""

    UNTERMINATED_GROUP = "unterminated group"
    UNEXPECTED_TERMINATOR = "unexpected terminator"


class ParseError(Exception):
    """Raised on the first malformed construct; parsing never continues past it.

    ``delimiter`` is the closer that was expected (``UNTERMINATED_GROUP``) or
    the closer that was found (``UNEXPECTED_TERMINATOR``).
    """

    def __init__(self, kind: ErrorKind, delimiter: str, position: Position) -> None:
        self.kind = kind
        self.delimiter = delimiter
        self.position = position
        super().__init__(f"{position}: {self.message}")

    @classmethod
    def unterminated(cls, delimiter: str, position: Position) -> ParseError:
        return cls(ErrorKind.UNTERMINATED_GROUP, delimiter, position)

    @classmethod
    def unexpected(cls, delimiter: str, position: Position) -> ParseError:
        return cls(ErrorKind.UNEXPECTED_TERMINATOR, delimiter, position)

    @property
    def message(self) -> str:
        if self.kind is ErrorKind.UNTERMINATED_GROUP:
            return f"expected '{self.delimiter}' before end-of-input"
        return f"unexpected terminator '{self.delimiter}'"
