"""
Package `app.services.spdx`

Helpers to feed SPDX license expressions ("MIT OR Apache-2.0") to the
boolexpr engine, which speaks "MIT || Apache-2.0".

Public API:
- to_boolexpr(expr: str) -> str
- normalize_symbol(sym: str) -> str
"""

from .spdx_utils import normalize_symbol, to_boolexpr

__all__ = ["to_boolexpr", "normalize_symbol"]
