"""
Expression tree nodes produced by the boolexpr parser.

The tree is made of Literal, Not, And and Or nodes. Nodes are frozen
dataclasses: they cannot be modified once built and compare by structure,
so two parses of equivalent text yield equal trees.
"""

from dataclasses import dataclass
from enum import Enum


class NodeKind(Enum):
    LITERAL = "Literal"
    NOT = "Not"
    AND = "And"
    OR = "Or"


class Node:
    """Base class for expression tree nodes."""
    kind: NodeKind


@dataclass(frozen=True, repr=False)
class Literal(Node):
    """
    Leaf node holding the raw source text of a license name or boolean constant.
    Its value is resolved only at evaluation time.
    """
    raw_text: str

    kind = NodeKind.LITERAL
    left = None
    right = None

    def __repr__(self):
        return f"Literal({self.raw_text})"


@dataclass(frozen=True, repr=False)
class Not(Node):
    """Negation of its single `left` operand."""
    left: Node

    kind = NodeKind.NOT
    right = None
    raw_text = ""

    def __repr__(self):
        return f"Not({self.left})"


@dataclass(frozen=True, repr=False)
class And(Node):
    """
    And node representing a logical AND operation between two nodes.
    """
    left: Node
    right: Node

    kind = NodeKind.AND
    raw_text = ""

    def __repr__(self):
        return f"And({self.left}, {self.right})"


@dataclass(frozen=True, repr=False)
class Or(Node):
    """
    Or node representing a logical OR operation between two nodes.
    """
    left: Node
    right: Node

    kind = NodeKind.OR
    raw_text = ""

    def __repr__(self):
        return f"Or({self.left}, {self.right})"
