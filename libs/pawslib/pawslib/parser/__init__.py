"""Paws parser subpackage (Layer 1 -- depends on diagnostics)."""

from pawslib.parser.ast_nodes import (
    Execution,
    Expression,
    Node,
    Program,
    Symbol,
    count_nodes,
    walk,
)
from pawslib.parser.errors import ErrorKind, ParseError
from pawslib.parser.lexer import Lexer
from pawslib.parser.parser import Parser, parse
from pawslib.parser.render import render_debug
from pawslib.parser.source import PositionTracker
from pawslib.parser.tokens import Token, TokenKind

__all__ = [
    "PositionTracker",
    "TokenKind",
    "Token",
    "Lexer",
    "Node",
    "Symbol",
    "Expression",
    "Execution",
    "Program",
    "walk",
    "count_nodes",
    "Parser",
    "parse",
    "render_debug",
    "ErrorKind",
    "ParseError",
]
