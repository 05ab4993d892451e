"""Debug rendering of Paws ASTs.

The output is meant for diagnostics and tests and is not guaranteed to be
re-parseable::

    [Symbol("a"), Expression([Symbol("b")]), Execution([])]
"""

from __future__ import annotations

from collections.abc import Sequence

from pawslib.parser.ast_nodes import Execution, Expression, Node, Program, Symbol

_ESCAPES = str.maketrans({
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
})


def _quote(text: str) -> str:
    return '"' + text.translate(_ESCAPES) + '"'


def _push_group(stack: list[Node | str], opener: str, children: Sequence[Node], closer: str) -> None:
    """Schedule ``opener child, child, ... closer`` on the work stack."""
    stack.append(closer)
    for i in range(len(children) - 1, -1, -1):
        stack.append(children[i])
        if i:
            stack.append(", ")
    stack.append(opener)


def render_debug(node: Node | Program) -> str:
    """Render *node* (or a whole ``Program``) as nested constructor calls."""
    stack: list[Node | str] = []
    if isinstance(node, Program):
        _push_group(stack, "[", node.nodes, "]")
    elif isinstance(node, Node):
        stack.append(node)
    else:
        raise TypeError(f"not a Paws AST node: {node!r}")

    out: list[str] = []
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            out.append(item)
        elif isinstance(item, Symbol):
            out.append(f"Symbol({_quote(item.text)})")
        elif isinstance(item, Expression):
            _push_group(stack, "Expression([", item.children, "])")
        elif isinstance(item, Execution):
            _push_group(stack, "Execution([", item.children, "])")
        else:
            raise TypeError(f"not a Paws AST node: {item!r}")
    return "".join(out)
