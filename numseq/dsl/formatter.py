"""Render a numseq AST back to canonical shorthand text."""

from __future__ import annotations

from numseq.dsl.ast_nodes import Loop, Node, Sequence, Value


def format_node(node: Node) -> str:
    """Return canonical shorthand for ``node``.

    A root Sequence is written bare; nested sequences are groups and get
    parentheses. Elements are separated by ``", "`` and loops are written
    ``<element>x<count>`` with no spaces.
    """
    if isinstance(node, Sequence):
        return ", ".join(_format_element(child) for child in node.children)
    return _format_element(node)


def _format_element(node: Node) -> str:
    if isinstance(node, Value):
        return node.text
    if isinstance(node, Sequence):
        return f"({format_node(node)})"
    if isinstance(node, Loop):
        return f"{_format_element(node.repeated)}x{node.count.text}"
    raise TypeError(f"Unknown AST node: {type(node).__name__}")
