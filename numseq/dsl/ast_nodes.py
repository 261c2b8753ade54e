"""AST node definitions for the numseq shorthand.

These dataclasses form the abstract syntax tree produced by the parser:

    Sequence
      -> Value            a literal number, text kept verbatim
      -> Loop             repeated element plus a count
          -> Value | Sequence
          -> Value        (count)
      -> Sequence         a parenthesized group

Each node owns its children; trees are never shared or mutated once built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Value:
    """A numeric literal. Conversion to float happens at evaluation time."""

    text: str
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "value", "text": self.text}


@dataclass(frozen=True)
class Sequence:
    """An ordered list of elements; also used for parenthesized groups."""

    children: tuple[Node, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {"type": "sequence", "children": [c.to_dict() for c in self.children]}


@dataclass(frozen=True)
class Loop:
    """A `<element> x <count>` repetition."""

    repeated: Value | Sequence
    count: Value

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "loop",
            "repeated": self.repeated.to_dict(),
            "count": self.count.to_dict(),
        }


# Union of all node types
Node = Sequence | Loop | Value


def count_nodes(node: Node) -> int:
    """Return the number of nodes in the tree rooted at ``node``."""
    if isinstance(node, Sequence):
        return 1 + sum(count_nodes(child) for child in node.children)
    if isinstance(node, Loop):
        return 1 + count_nodes(node.repeated) + count_nodes(node.count)
    return 1
