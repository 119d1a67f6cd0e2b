"""
Exceptions raised while parsing and evaluating boolean license expressions.

Errors keep their class while bubbling up through the tree: each level adds a
short context string (which subtree failed) and re-raises the same instance,
so callers can branch on the exception type and its attributes instead of
parsing messages.
"""

from typing import List


class BoolExprError(Exception):
    """Base class for all boolean-expression errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: List[str] = []

    def add_context(self, context: str) -> "BoolExprError":
        """Prepends a positional hint (e.g. 'failed solving left expression')."""
        self.context.insert(0, context)
        return self

    def __str__(self):
        return ": ".join(self.context + [self.message])


class ParseError(BoolExprError):
    """The expression cannot be split into a valid unary/binary form."""


class EvaluationError(BoolExprError):
    """Internal failure while evaluating a tree (malformed node, etc.)."""


class UnknownVariableError(EvaluationError):
    """
    A literal is neither a boolean spelling nor a key of the evaluation context.

    This is an expected outcome: the license checker turns it into an
    "unknown license" decision instead of a hard failure.
    """

    def __init__(self, name: str):
        super().__init__(f"unknown variable: {name}")
        self.name = name
