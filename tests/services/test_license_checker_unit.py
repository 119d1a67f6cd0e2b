"""
test: services/checker/license_checker.py, services/checker/report.py

Unit tests for the LicenseChecker.
Verifies the evaluation of license expressions against the decision list,
the handling of licenses without a decision (callback and policy), the SPDX
input syntax and the Report buckets.
"""

import pytest
from unittest.mock import MagicMock
from app.services.checker import (
    LicenseChecker,
    LicenseExpressionError,
    Report,
    UnknownLicenseError,
)

# ==================================================================================
#                                 TEST: CONSTRUCTION
# ==================================================================================

def test_from_lists_builds_decisions():
    checker = LicenseChecker.from_lists(["MIT", "ISC"], ["GPL-3.0"])
    assert checker.decisions == {"MIT": True, "ISC": True, "GPL-3.0": False}


def test_from_lists_disallowed_wins():
    checker = LicenseChecker.from_lists(["MIT"], ["MIT"])
    assert checker.decisions == {"MIT": False}


def test_decisions_is_a_copy(make_checker):
    checker = make_checker()
    checker.decisions["MIT"] = False
    assert checker.decisions["MIT"] is True


def test_constructor_does_not_alias_input(decisions):
    checker = LicenseChecker(decisions)
    checker.update("ISC", True)
    assert "ISC" not in decisions


@pytest.mark.parametrize("kwargs", [
    {"unknown_license_policy": "prompt"},
    {"syntax": "cargo"},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ValueError):
        LicenseChecker({}, **kwargs)


# ==================================================================================
#                                 TEST: IS_LICENSE_ALLOWED
# ==================================================================================

@pytest.mark.parametrize("license,expected", [
    ("MIT", True),
    ("GPL-3.0", False),
    ("MIT || GPL-3.0", True),
    ("MIT && GPL-3.0", False),
    ("(GPL-3.0 || AGPL-3.0) && MIT", False),
    ("Apache-2.0 && !GPL-3.0", True),
])
def test_is_license_allowed(make_checker, license, expected):
    assert make_checker().is_license_allowed(license) is expected


def test_unknown_license(make_checker):
    with pytest.raises(UnknownLicenseError) as exc:
        make_checker().is_license_allowed("MIT && WTFPL")
    assert exc.value.license == "MIT && WTFPL"
    assert exc.value.variable == "WTFPL"


def test_invalid_expression(make_checker):
    with pytest.raises(LicenseExpressionError) as exc:
        make_checker().is_license_allowed("MIT AND GPL-3.0")
    assert exc.value.license == "MIT AND GPL-3.0"
    assert "invalid operator" in str(exc.value)


def test_update_changes_decision(make_checker):
    checker = make_checker()
    checker.update("WTFPL", True)
    assert checker.is_license_allowed("WTFPL") is True
    checker.update("WTFPL", False)
    assert checker.is_license_allowed("WTFPL") is False


def test_spdx_syntax(make_checker):
    checker = make_checker(syntax="spdx")
    assert checker.is_license_allowed("MIT OR GPL-3.0") is True
    assert checker.is_license_allowed("(MIT OR Apache-2.0) AND GPL-3.0") is False


def test_spdx_syntax_multi_word_license(decisions):
    """
    Multi-word SPDX names are looked up in their dashed form, so a single
    such dependency does not abort the whole check.
    """
    decisions["Apache-License-2.0"] = True
    checker = LicenseChecker(decisions, syntax="spdx")

    assert checker.is_license_allowed("Apache License 2.0 OR GPL-3.0") is True

    report = checker.validate_current_licenses({
        "boto3": "Apache License 2.0",
        "mystery": "Some Other License",
    })
    assert report.allowed == {"Apache License 2.0": ["boto3"]}
    assert report.unknown == {"Some Other License": ["mystery"]}


def test_spdx_syntax_invalid_expression(make_checker):
    with pytest.raises(LicenseExpressionError):
        make_checker(syntax="spdx").is_license_allowed("MIT AND AND GPL-3.0")


# ==================================================================================
#                                 TEST: VALIDATE_CURRENT_LICENSES
# ==================================================================================

def test_validate_current_licenses_buckets(make_checker):
    report = make_checker().validate_current_licenses({
        "requests": "Apache-2.0",
        "flask": "BSD-3-Clause",
        "click": "BSD-3-Clause",
        "gnu-thing": "GPL-3.0",
        "mystery": "Zlib",
    })

    assert report.allowed == {"Apache-2.0": ["requests"], "BSD-3-Clause": ["flask", "click"]}
    assert report.disallowed == {"GPL-3.0": ["gnu-thing"]}
    assert report.unknown == {"Zlib": ["mystery"]}
    assert report.has_disallowed_licenses()
    assert report.has_unknown_licenses()


def test_unknown_license_with_disallow_policy(make_checker):
    report = make_checker(unknown_license_policy="disallow").validate_current_licenses({"mystery": "Zlib"})
    assert report.disallowed == {"Zlib": ["mystery"]}
    assert not report.has_unknown_licenses()


def test_unknown_license_callback_decides(make_checker):
    callback = MagicMock(return_value=True)
    checker = make_checker(on_unknown_license=callback)

    report = checker.validate_current_licenses({"mystery": "Zlib", "other": "Zlib"})

    callback.assert_called_once_with("Zlib", "mystery")
    assert report.allowed == {"Zlib": ["mystery", "other"]}
    assert checker.decisions["Zlib"] is True


def test_unknown_license_callback_asked_for_each_missing_name(make_checker):
    callback = MagicMock(side_effect=[False, True])
    checker = make_checker(on_unknown_license=callback)

    report = checker.validate_current_licenses({"dual": "Zlib || ISC"})

    assert [c.args for c in callback.call_args_list] == [("Zlib", "dual"), ("ISC", "dual")]
    assert report.allowed == {"Zlib || ISC": ["dual"]}


def test_unknown_license_callback_can_defer(make_checker):
    callback = MagicMock(return_value=None)
    report = make_checker(on_unknown_license=callback).validate_current_licenses({"mystery": "Zlib"})
    assert report.unknown == {"Zlib": ["mystery"]}


def test_invalid_expression_aborts_validation(make_checker):
    with pytest.raises(LicenseExpressionError):
        make_checker().validate_current_licenses({"a": "MIT", "b": "MIT | GPL-3.0"})


def test_all_allowed_report(make_checker):
    report = make_checker().validate_current_licenses({"a": "MIT", "b": "Apache-2.0 || GPL-3.0"})
    assert not report.has_disallowed_licenses()
    assert not report.has_unknown_licenses()


# ==================================================================================
#                                 TEST: REPORT
# ==================================================================================

def test_report_record_decision():
    report = Report()
    report.record_decision("MIT", "a", True)
    report.record_decision("GPL-3.0", "b", False)
    report.record_unknown_license("Zlib", "c")

    assert report.to_dict() == {
        "allowed": {"MIT": ["a"]},
        "disallowed": {"GPL-3.0": ["b"]},
        "unknown": {"Zlib": ["c"]},
    }


def test_empty_report():
    report = Report()
    assert not report.has_disallowed_licenses()
    assert not report.has_unknown_licenses()
    assert report.to_dict() == {"allowed": {}, "disallowed": {}, "unknown": {}}
