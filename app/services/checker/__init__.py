"""
Package `app.services.checker`

Checks dependency licenses against a list of allow/deny decisions.

Public API:
- LicenseChecker
- Report
- LicenseCheckError, LicenseExpressionError, UnknownLicenseError
"""

from .license_checker import (
    POLICY_DISALLOW,
    POLICY_REPORT,
    SYNTAX_BOOLEXPR,
    SYNTAX_SPDX,
    LicenseChecker,
    LicenseCheckError,
    LicenseExpressionError,
    UnknownLicenseError,
)
from .report import Report

__all__ = [
    "LicenseChecker",
    "Report",
    "LicenseCheckError",
    "LicenseExpressionError",
    "UnknownLicenseError",
    "POLICY_REPORT",
    "POLICY_DISALLOW",
    "SYNTAX_BOOLEXPR",
    "SYNTAX_SPDX",
]
