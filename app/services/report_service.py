"""
This module generates a human-readable text report summarizing a license check:
which licenses are allowed, disallowed or still undecided, and the dependencies
using each of them.
"""

import os

from app.services.checker import Report

REPORT_FILE_NAME = "LICENSE_REPORT.txt"


def generate_report(report: Report, output_dir: str) -> str:
    """
    Writes the text report of a license check.

    Args:
        report (Report): The result of `LicenseChecker.validate_current_licenses`.
        output_dir (str): Directory where the report is written (created if missing).

    Returns:
        str: The path to the generated report file.
    """
    os.makedirs(output_dir, exist_ok=True)
    report_path = os.path.join(output_dir, REPORT_FILE_NAME)

    sections = [
        ("✅ Allowed", report.allowed),
        ("❌ Disallowed", report.disallowed),
        ("❓ Unknown", report.unknown),
    ]

    with open(report_path, "w", encoding="utf-8") as f:
        f.write("📄 License Check Report\n")
        f.write("-----------------------\n")
        passed = not report.has_disallowed_licenses() and not report.has_unknown_licenses()
        f.write(f"Result: {'PASSED' if passed else 'FAILED'}\n\n")

        for title, licenses in sections:
            f.write(f"{title} ({len(licenses)})\n")
            for license in sorted(licenses):
                dependencies = ", ".join(sorted(licenses[license]))
                f.write(f"- {license} → {dependencies}\n")
            f.write("\n")

        if report.has_unknown_licenses():
            f.write("Unknown licenses need a decision before the check can pass.\n")

    return report_path
