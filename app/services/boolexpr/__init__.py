"""
Package `app.services.boolexpr`

Parser and evaluator for boolean license expressions such as
"MIT || (Apache-2.0 && !GPL-3.0)".

Public API:
- parse(expression: str) -> Node
- evaluate(node: Node, context: Mapping[str, bool]) -> bool
- solve(expression: str, context: Mapping[str, bool]) -> bool

Modules:
- nodes: immutable tree nodes (Literal, Not, And, Or)
- parser: top-level splitting and tree construction
- evaluator: evaluation of a tree against a decision context
- errors: ParseError, EvaluationError, UnknownVariableError
"""

from .errors import BoolExprError, EvaluationError, ParseError, UnknownVariableError
from .evaluator import evaluate, parse_bool_literal, solve
from .nodes import And, Literal, Node, NodeKind, Not, Or
from .parser import parse

__all__ = [
    "parse",
    "evaluate",
    "solve",
    "parse_bool_literal",
    "Node",
    "NodeKind",
    "Literal",
    "Not",
    "And",
    "Or",
    "BoolExprError",
    "ParseError",
    "EvaluationError",
    "UnknownVariableError",
]
