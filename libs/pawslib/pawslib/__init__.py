"""Front end for the Paws language: source text in, AST or diagnostic out."""

from pawslib.diagnostics import Diagnostic, Position, format_error
from pawslib.parser import (
    ErrorKind,
    Execution,
    Expression,
    Node,
    ParseError,
    Program,
    Symbol,
    parse,
    render_debug,
)

__version__ = "0.1.0"

__all__ = [
    "parse",
    "render_debug",
    "format_error",
    "Program",
    "Node",
    "Symbol",
    "Expression",
    "Execution",
    "ParseError",
    "ErrorKind",
    "Diagnostic",
    "Position",
]
