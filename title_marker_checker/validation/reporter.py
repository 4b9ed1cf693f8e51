"""
Report formatting for validation sessions.

Renders a ValidationReport as a human readable summary grouped by source.
"""

from collections import Counter
from typing import List

from .models import ValidationReport, ValidationResult, IssueLevel


def _format_result(result: ValidationResult) -> List[str]:
    status_icon = "✓" if result.success else "✗"
    lines = [f"{status_icon} {result.source or '<record>'}"]
    for issue in result.issues:
        lines.append(f"  [{issue.level.value.upper()}] {issue.message}")
    return lines


def format_report(report: ValidationReport) -> str:
    """
    Format a validation report for console output.

    Args:
        report: Report produced by ValidationCoordinator.end_session

    Returns:
        Multi-line string with one section per record and a summary
    """
    report_lines = []

    report_lines.append("=" * 60)
    report_lines.append("TITLE MARKER REPORT")
    report_lines.append("=" * 60)

    if report.total_records == 0:
        report_lines.append("No records were validated.")
        report_lines.append("=" * 60)
        return "\n".join(report_lines)

    for result in report.results:
        report_lines.extend(_format_result(result))

    report_lines.append("-" * 60)
    status = "FAILED" if report.has_problems() else "PASSED"
    report_lines.append(f"Overall Status: {status}")
    report_lines.append(
        f"Records without problems: {report.total_records - report.records_with_problems}"
        f"/{report.total_records} ({report.success_rate:.1f}%)"
    )

    level_counts = Counter(issue.level for issue in report.all_issues())
    for level in [IssueLevel.ERROR, IssueLevel.PROBLEM, IssueLevel.WARNING, IssueLevel.MINOR]:
        count = level_counts.get(level, 0)
        if count > 0:
            report_lines.append(f"{level.value.upper()}: {count} issues")

    report_lines.append("=" * 60)
    return "\n".join(report_lines)
