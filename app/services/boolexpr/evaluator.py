"""
This module evaluates expression trees built by `parser.parse` against a
context mapping license names to allow (True) / deny (False) decisions.

Evaluation rules:
- Literal: boolean spellings ("true", "T", "1", ...) resolve to themselves;
  any other text is looked up in the context, and raises
  UnknownVariableError when missing.
- Not: negation of the operand.
- And / Or: both operands are ALWAYS evaluated, so an unknown license on
  either side is reported even when the other side decides the result.
"""

from typing import Mapping, Optional

from .errors import BoolExprError, EvaluationError, UnknownVariableError
from .nodes import And, Literal, Node, Not, Or
from .parser import parse

# Accepted spellings of boolean constants, matched case-sensitively
TRUE_LITERALS = frozenset({"1", "t", "T", "true", "TRUE", "True"})
FALSE_LITERALS = frozenset({"0", "f", "F", "false", "FALSE", "False"})


def parse_bool_literal(text: str) -> Optional[bool]:
    """Returns the boolean spelled by `text`, or None if it is not a boolean constant."""
    if text in TRUE_LITERALS:
        return True
    if text in FALSE_LITERALS:
        return False
    return None


def evaluate(node: Node, context: Mapping[str, bool]) -> bool:
    """
    Computes the value of the tree rooted at `node`.

    The tree and the context are never modified, so the same tree can be
    evaluated repeatedly against different contexts.

    Raises:
        UnknownVariableError: a literal is neither a boolean nor a context key.
        EvaluationError: the tree contains a node this evaluator does not know.
    """
    try:
        return _eval_node(node, context)
    except RecursionError:
        raise EvaluationError("expression tree is nested too deeply") from None


def solve(expression: str, context: Mapping[str, bool]) -> bool:
    """Parses and evaluates `expression` in one step."""
    return evaluate(parse(expression), context)


def _eval_node(node: Node, context: Mapping[str, bool]) -> bool:
    if isinstance(node, Literal):
        return _eval_literal(node, context)

    if isinstance(node, Not):
        try:
            return not _eval_node(node.left, context)
        except BoolExprError as e:
            raise e.add_context("failed solving NOT sub-expression")

    if isinstance(node, (And, Or)):
        try:
            left = _eval_node(node.left, context)
        except BoolExprError as e:
            raise e.add_context("failed solving left expression")
        try:
            right = _eval_node(node.right, context)
        except BoolExprError as e:
            raise e.add_context("failed solving right expression")

        if isinstance(node, And):
            return left and right
        return left or right

    raise EvaluationError(f"unrecognized node: {node!r}")


def _eval_literal(node: Literal, context: Mapping[str, bool]) -> bool:
    value = parse_bool_literal(node.raw_text)
    if value is not None:
        return value

    if node.raw_text in context:
        return bool(context[node.raw_text])

    raise UnknownVariableError(node.raw_text)
