"""
This module provides the LicenseChecker, the engine that decides whether the
licenses of a project's dependencies are allowed.

Main Responsibility:
- Holds the user's decisions as a context {license: allowed}.
- Parses each license expression with `app.services.boolexpr` (translating SPDX
  syntax first when requested) and evaluates it against the decisions.
- Buckets every dependency into a Report (allowed / disallowed / unknown).

What happens with licenses missing from the decisions is explicit
configuration: an optional `on_unknown_license` callback can supply a decision,
otherwise `unknown_license_policy` applies ("report" or "disallow").
"""

import logging
from typing import Callable, Dict, Iterable, Mapping, Optional

from app.services.boolexpr import ParseError, UnknownVariableError, evaluate, parse
from app.services.spdx import to_boolexpr
from .report import Report

logger = logging.getLogger(__name__)

POLICY_REPORT = "report"
POLICY_DISALLOW = "disallow"
UNKNOWN_LICENSE_POLICIES = (POLICY_REPORT, POLICY_DISALLOW)

SYNTAX_BOOLEXPR = "boolexpr"
SYNTAX_SPDX = "spdx"
SYNTAXES = (SYNTAX_BOOLEXPR, SYNTAX_SPDX)

# Called with (license name, dependency); returns a decision or None to defer
UnknownLicenseHandler = Callable[[str, str], Optional[bool]]


class LicenseCheckError(Exception):
    """Base class for license checker errors."""


class LicenseExpressionError(LicenseCheckError):
    """The license string could not be parsed."""

    def __init__(self, license: str, cause: Exception):
        super().__init__(f"failed to parse license '{license}': {cause}")
        self.license = license


class UnknownLicenseError(LicenseCheckError):
    """
    The license expression references a name with no decision yet.

    Attributes:
        license: the full license expression being checked.
        variable: the name that is missing from the decisions.
    """

    def __init__(self, license: str, variable: str):
        super().__init__(f"unknown license '{variable}' in '{license}'")
        self.license = license
        self.variable = variable


class LicenseChecker:

    def __init__(
        self,
        decisions: Optional[Mapping[str, bool]] = None,
        unknown_license_policy: str = POLICY_REPORT,
        on_unknown_license: Optional[UnknownLicenseHandler] = None,
        syntax: str = SYNTAX_BOOLEXPR,
    ):
        if unknown_license_policy not in UNKNOWN_LICENSE_POLICIES:
            raise ValueError(
                f"invalid unknown license policy '{unknown_license_policy}', "
                f"expected one of {UNKNOWN_LICENSE_POLICIES}"
            )
        if syntax not in SYNTAXES:
            raise ValueError(f"invalid syntax '{syntax}', expected one of {SYNTAXES}")

        self._context: Dict[str, bool] = dict(decisions or {})
        self.unknown_license_policy = unknown_license_policy
        self.on_unknown_license = on_unknown_license
        self.syntax = syntax

    @classmethod
    def from_lists(
        cls,
        allowed_licenses: Iterable[str],
        disallowed_licenses: Iterable[str],
        **kwargs,
    ) -> "LicenseChecker":
        """Builds a checker from allow/deny lists; a license in both lists is disallowed."""
        context: Dict[str, bool] = {}
        for license in allowed_licenses:
            context[license] = True
        for license in disallowed_licenses:
            context[license] = False
        return cls(context, **kwargs)

    @property
    def decisions(self) -> Dict[str, bool]:
        return dict(self._context)

    def update(self, license: str, is_allowed: bool) -> None:
        """Records the decision for a license."""
        self._context[license] = is_allowed

    def is_license_allowed(self, license: str) -> bool:
        """
        Evaluates a license expression against the current decisions.

        Raises:
            LicenseExpressionError: the expression is not valid.
            UnknownLicenseError: a license in the expression has no decision.
        """
        try:
            expression = to_boolexpr(license) if self.syntax == SYNTAX_SPDX else license
            tree = parse(expression)
        except (ParseError, ValueError) as e:
            raise LicenseExpressionError(license, e) from e

        try:
            return evaluate(tree, self._context)
        except UnknownVariableError as e:
            raise UnknownLicenseError(license, e.name) from e

    def validate_current_licenses(self, current_licenses: Mapping[str, str]) -> Report:
        """
        Checks every dependency's license and returns the resulting Report.

        Args:
            current_licenses: mapping {dependency: license expression}.
        """
        report = Report()
        for dependency, license in current_licenses.items():
            logger.debug("Checking license %s of dependency %s", license, dependency)
            allowed = self._decide(license, dependency)
            if allowed is None:
                report.record_unknown_license(license, dependency)
            else:
                report.record_decision(license, dependency, allowed)
        return report

    def _decide(self, license: str, dependency: str) -> Optional[bool]:
        while True:
            try:
                return self.is_license_allowed(license)
            except UnknownLicenseError as e:
                decision = None
                if self.on_unknown_license is not None:
                    decision = self.on_unknown_license(e.variable, dependency)
                if decision is None:
                    return self._apply_policy(e, dependency)
                self.update(e.variable, bool(decision))

    def _apply_policy(self, error: UnknownLicenseError, dependency: str) -> Optional[bool]:
        logger.warning(
            "Unknown license %s from %s (policy: %s)",
            error.variable,
            dependency,
            self.unknown_license_policy,
        )
        if self.unknown_license_policy == POLICY_DISALLOW:
            return False
        return None
