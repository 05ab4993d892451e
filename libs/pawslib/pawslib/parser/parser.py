"""Recursive-descent parser for Paws source code.

Grammar over the token stream::

    program := node* EOF
    node    := SYMBOL
             | '(' node* ')'     -> Expression
             | '{' node* '}'     -> Execution

Descent into groups uses an explicit stack of open frames instead of native
recursion, so nesting depth is limited only by memory.  The first malformed
construct raises ``ParseError``; nothing is recovered and no partial tree is
returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from pawslib.parser.ast_nodes import Execution, Expression, Node, Program, Symbol
from pawslib.parser.errors import ParseError
from pawslib.parser.lexer import Lexer
from pawslib.parser.tokens import CLOSER_FOR, Token, TokenKind

logger = logging.getLogger(__name__)


@dataclass
class _Frame:
    """A group that has been opened but not yet closed."""

    opener: Token
    children: list[Node] = field(default_factory=list)

    @property
    def closer(self) -> str:
        return CLOSER_FOR[self.opener.kind]

    def finish(self) -> Node:
        group = Expression if self.opener.kind == TokenKind.LPAREN else Execution
        return group(tuple(self.children), self.opener.position)


class Parser:
    """Recursive-descent parser for Paws programs."""

    def __init__(self, tokens: Iterable[Token], source_name: str = "<string>") -> None:
        self._tokens = iter(tokens)
        self._source_name = source_name

    def parse_program(self) -> Program:
        """Parse a complete Paws program.

        Raises:
            ParseError: on an unbalanced closer or when input ends inside a group.
        """
        top: list[Node] = []
        stack: list[_Frame] = []

        for tok in self._tokens:
            children = stack[-1].children if stack else top

            if tok.kind == TokenKind.SYMBOL:
                children.append(Symbol(tok.lexeme, tok.position))

            elif tok.kind in (TokenKind.LPAREN, TokenKind.LBRACE):
                stack.append(_Frame(tok))

            elif tok.kind in (TokenKind.RPAREN, TokenKind.RBRACE):
                if not stack or stack[-1].closer != tok.lexeme:
                    raise ParseError.unexpected(tok.lexeme, tok.position)
                node = stack.pop().finish()
                (stack[-1].children if stack else top).append(node)

            elif tok.kind == TokenKind.EOF:
                if stack:
                    raise ParseError.unterminated(stack[-1].closer, tok.position)
                break
        else:
            # Token stream ended without EOF; the last token seen stands in for it.
            if stack:
                raise ParseError.unterminated(stack[-1].closer, tok.position)

        return Program(tuple(top), self._source_name)


# ------------------------------------------------------------------
# Convenience function
# ------------------------------------------------------------------


def parse(source_name: str, source_text: str | Iterable[str]) -> Program:
    """Parse Paws source code.

    *source_text* is a string or any iterable of text chunks, such as an open
    text file.  *source_name* is recorded on the returned ``Program`` and is
    what callers pass to ``format_error`` on failure.

    Raises:
        ParseError: for the first malformed construct in the input.
    """
    logger.debug("parsing %s", source_name)
    try:
        program = Parser(Lexer(source_text), source_name).parse_program()
    except ParseError as err:
        logger.debug("%s: %s", source_name, err)
        raise
    logger.debug("parsed %d top-level node(s) from %s", len(program.nodes), source_name)
    return program
