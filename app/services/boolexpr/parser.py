"""
This module implements the parser for the boolean license expression language.
It splits the expression on top-level spaces and builds a tree of Literal,
Not, And and Or nodes.

Supported syntax:
- Binary operators: `&&`, `||`, separated from their operands by a space.
- Negation: a `!` prefix.
- Grouping: parentheses `()`.

Operators have no precedence: the splitter keeps at most three top-level
parts `[left, operator, rest]`, so chains group to the right
(`a && b || c` is `a && (b || c)`). Use parentheses to group differently.
"""

from typing import List, Tuple

from .errors import BoolExprError, ParseError
from .nodes import And, Literal, Node, Not, Or

_OPERATORS = {
    "&&": And,
    "||": Or,
}


def parse(expression: str) -> Node:
    """
    Builds the expression tree for `expression`.

    Raises:
        ParseError: if the expression uses an unknown operator or cannot be
            split into a unary or binary form.
    """
    try:
        return _build_tree(expression)
    except BoolExprError as e:
        raise e.add_context(f"failed to build decision tree for expression '{expression}'")
    except RecursionError:
        raise ParseError(f"expression '{expression[:50]}...' is nested too deeply") from None


def split_expression(expression: str) -> Tuple[List[str], int]:
    """
    Splits the expression on spaces found outside parentheses.

    Collecting stops at the third part: everything after the second top-level
    space is returned verbatim as the right operand. One layer of wrapping
    parentheses is removed from every part.

    Returns the parts and the parenthesis depth reached by the scan
    (non-zero means the scanned text had unbalanced parentheses).

    Examples:
        "a && b"        -> ["a", "&&", "b"]
        "(a && b) && c" -> ["a && b", "&&", "c"]
        "a && b && c"   -> ["a", "&&", "b && c"]
    """
    parts: List[str] = []
    buf: List[str] = []
    depth = 0
    for i, ch in enumerate(expression):
        if ch == " " and depth == 0:
            if buf:
                parts.append(_remove_wrapping_parentheses("".join(buf)))
                buf = []
                if len(parts) == 2:
                    parts.append(_remove_wrapping_parentheses(expression[i + 1:]))
                    return parts, depth
            continue
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
        buf.append(ch)

    if buf:
        parts.append(_remove_wrapping_parentheses("".join(buf)))
    return parts, depth


def _remove_wrapping_parentheses(expression: str) -> str:
    if expression.startswith("(") and expression.endswith(")"):
        return expression[1:-1]
    return expression


def _build_tree(expression: str) -> Node:
    parts, depth = split_expression(expression)

    if not parts:
        return Literal("")

    if len(parts) == 1:
        token = parts[0]
        if depth != 0 and " " in token:
            raise ParseError(f"unbalanced parentheses in '{expression}'")
        if token != expression.strip(" "):
            # wrapping parentheses were removed, the inner text may be compound
            return _build_tree(token)
        return _build_unary(token)

    if len(parts) == 2 or not parts[2].strip(" "):
        raise ParseError(f"missing operand in '{expression}'")

    return _build_binary(parts)


def _build_unary(expression: str) -> Node:
    if expression.startswith("!"):
        try:
            operand = _build_tree(expression[1:])
        except BoolExprError as e:
            raise e.add_context("failed to build NOT operand")
        return Not(operand)
    return Literal(expression)


def _build_binary(parts: List[str]) -> Node:
    """`parts` is expected to hold three elements: left, operator, right."""
    left_expression, operator, right_expression = parts

    try:
        left = _build_tree(left_expression)
    except BoolExprError as e:
        raise e.add_context("failed to build left subtree")

    try:
        right = _build_tree(right_expression)
    except BoolExprError as e:
        raise e.add_context("failed to build right subtree")

    node_class = _OPERATORS.get(operator)
    if node_class is None:
        raise ParseError(f"invalid operator '{operator}'")
    return node_class(left, right)
