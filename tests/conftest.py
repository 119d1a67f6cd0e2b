"""
Shared fixtures for the license checker test suite.
"""

import pytest
from app.services.checker import LicenseChecker


@pytest.fixture
def decisions():
    """A small decision list: permissive licenses allowed, copyleft denied."""
    return {
        "MIT": True,
        "Apache-2.0": True,
        "BSD-3-Clause": True,
        "GPL-3.0": False,
        "AGPL-3.0": False,
    }


@pytest.fixture
def make_checker(decisions):
    """Factory building a LicenseChecker over the `decisions` fixture."""
    def _make(**kwargs):
        return LicenseChecker(decisions, **kwargs)
    return _make
