"""
Module `spdx_utils`: translation of SPDX license expressions.

Main functions:
- normalize_symbol(sym: str) -> str
    Normalizes a license key by applying common transformations (e.g. '+' -> '-or-later')
    and mapping frequent aliases to canonical forms used in the decision list.

- to_boolexpr(expr: str) -> str
    Uses the `license_expression` library to parse an SPDX expression and
    rewrites it in the boolexpr syntax understood by `app.services.boolexpr`
    ('AND' -> '&&', 'OR' -> '||').
"""

import re

from license_expression import LicenseSymbol, LicenseWithExceptionSymbol, Licensing

licensing = Licensing()

# Common aliases/synonyms -> canonical form used in the decision list
_SYNONYMS = {
    "GPL-3.0+": "GPL-3.0-or-later",
    "GPL-2.0+": "GPL-2.0-or-later",
    "LGPL-3.0+": "LGPL-3.0-or-later",
    "LGPL-2.1+": "LGPL-2.1-or-later",
}

# Joins a license and its exception into a single boolexpr literal
WITH_SEPARATOR = "-WITH-"

_WHITESPACE = re.compile(r"\s+")


def normalize_symbol(sym: str) -> str:
    """
    Normalizes a single license key.

    Transformations performed:
      - whitespace trimming
      - inner whitespace runs joined with "-" (boolexpr names cannot contain spaces)
      - conversion of '+' to '-or-later'
      - mapping of common aliases via _SYNONYMS
    """
    if not sym:
        return sym
    s = _SYNONYMS.get(sym.strip(), sym.strip())
    s = _WHITESPACE.sub("-", s)
    if s.endswith("+") and "-or-later" not in s:
        s = s[:-1] + "-or-later"
    return s


def to_boolexpr(expr: str) -> str:
    """
    Translates an SPDX expression into boolexpr syntax.

    Every compound operand is wrapped in parentheses, so the result does not
    depend on the right-to-left grouping of the boolexpr parser.
    'X WITH Y' becomes the single literal 'X-WITH-Y' because boolexpr
    literals cannot contain spaces.

    Raises:
        ValueError: if the expression is not valid SPDX.
    """
    if not expr or not expr.strip():
        return ""
    try:
        tree = licensing.parse(expr, strict=False)
    except Exception as e:
        # license_expression raises several parse error types
        raise ValueError(f"invalid SPDX expression '{expr}': {e}") from e
    if tree is None:
        return ""
    return _render(tree)


def _render(node) -> str:
    if isinstance(node, LicenseWithExceptionSymbol):
        license_key = normalize_symbol(node.license_symbol.key)
        return f"{license_key}{WITH_SEPARATOR}{normalize_symbol(node.exception_symbol.key)}"
    if isinstance(node, LicenseSymbol):
        return normalize_symbol(node.key)

    if isinstance(node, licensing.AND):
        operator = " && "
    elif isinstance(node, licensing.OR):
        operator = " || "
    else:
        raise ValueError(f"unsupported SPDX node: {node!r}")

    rendered = []
    for arg in node.args:
        text = _render(arg)
        if isinstance(arg, (licensing.AND, licensing.OR)):
            text = f"({text})"
        rendered.append(text)
    return operator.join(rendered)
