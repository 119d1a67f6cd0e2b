"""
This module defines the Report produced by a license check: for each license,
the list of dependencies using it, split into allowed, disallowed and unknown.
"""

from typing import Dict, List


class Report:

    def __init__(self):
        self.allowed: Dict[str, List[str]] = {}
        self.disallowed: Dict[str, List[str]] = {}
        self.unknown: Dict[str, List[str]] = {}

    def record_decision(self, license: str, dependency: str, allowed: bool) -> None:
        if allowed:
            self.record_allowed(license, dependency)
        else:
            self.record_disallowed(license, dependency)

    def record_allowed(self, license: str, dependency: str) -> None:
        """Records that `dependency` uses an allowed license."""
        self.allowed.setdefault(license, []).append(dependency)

    def record_disallowed(self, license: str, dependency: str) -> None:
        """Records that `dependency` uses a disallowed license."""
        self.disallowed.setdefault(license, []).append(dependency)

    def record_unknown_license(self, license: str, dependency: str) -> None:
        """Records a license that could not be decided with the current decisions."""
        self.unknown.setdefault(license, []).append(dependency)

    def has_disallowed_licenses(self) -> bool:
        return len(self.disallowed) > 0

    def has_unknown_licenses(self) -> bool:
        return len(self.unknown) > 0

    def to_dict(self) -> dict:
        return {
            "allowed": {k: list(v) for k, v in self.allowed.items()},
            "disallowed": {k: list(v) for k, v in self.disallowed.items()},
            "unknown": {k: list(v) for k, v in self.unknown.items()},
        }

    def __repr__(self):
        return (
            f"Report(allowed={len(self.allowed)}, disallowed={len(self.disallowed)}, "
            f"unknown={len(self.unknown)})"
        )
