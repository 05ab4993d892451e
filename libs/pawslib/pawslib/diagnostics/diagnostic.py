"""Diagnostic message representation for Paws."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from pawslib.diagnostics.position import Position

if TYPE_CHECKING:
    from pawslib.parser.errors import ParseError


@dataclass(frozen=True)
class Diagnostic:
    """A single diagnostic message bound to a source and position."""

    source_name: str
    position: Position
    message: str

    @classmethod
    def from_error(cls, source_name: str, error: ParseError) -> Diagnostic:
        return cls(source_name, error.position, error.message)

    def __str__(self) -> str:
        return f"{self.source_name}:{self.position.line}:{self.position.column}: {self.message}"


def format_error(source_name: str, error: ParseError) -> str:
    """Format *error* as ``<source_name>:<line>:<column>: <message>``.

    Performs no I/O; writing the result anywhere is up to the caller.
    """
    return str(Diagnostic.from_error(source_name, error))
