"""AST node types for the Paws parser.

The tree has exactly three node kinds: ``Symbol`` leaves and the two group
kinds, ``Expression`` (from ``( ... )``) and ``Execution`` (from
``{ ... }``).  A parsed file is a ``Program`` holding the top-level nodes.

Every node records the ``Position`` where it begins.  Positions are excluded
from equality so trees compare by shape and text alone.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from pawslib.diagnostics.position import Position

__all__ = [
    "Node",
    "Symbol",
    "Expression",
    "Execution",
    "Program",
    "walk",
    "count_nodes",
]


class Node(ABC):
    """Base type for AST nodes. All concrete subclasses are frozen dataclasses."""


@dataclass(frozen=True)
class Symbol(Node):
    """Atomic symbol, bare or quoted.  ``text`` is the raw captured span."""

    text: str
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Expression(Node):
    """Parenthesized group: ``(a b c)``."""

    children: tuple[Node, ...] = ()
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Execution(Node):
    """Braced group: ``{a b c}``."""

    children: tuple[Node, ...] = ()
    position: Position | None = field(default=None, compare=False)


@dataclass(frozen=True)
class Program:
    """Root of a parsed source: the top-level node sequence."""

    nodes: tuple[Node, ...] = ()
    source_name: str = field(default="<string>", compare=False)


def walk(nodes: Iterable[Node]) -> Iterator[Node]:
    """Yield every node in *nodes* and their descendants, depth-first, in order.

    Uses an explicit stack so arbitrarily deep trees do not hit the
    interpreter recursion limit.
    """
    stack: list[Iterator[Node]] = [iter(nodes)]
    while stack:
        node = next(stack[-1], None)
        if node is None:
            stack.pop()
            continue
        yield node
        if isinstance(node, (Expression, Execution)):
            stack.append(iter(node.children))


def count_nodes(nodes: Iterable[Node]) -> int:
    """Return the number of symbols plus groups in *nodes*, recursively."""
    return sum(1 for _ in walk(nodes))
