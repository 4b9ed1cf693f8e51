"""
Title marker validator.

Reports title fields that contain a version marker such as "(TV Size)" or
"(Cut Ver.)" in anything other than its canonical spelling, casing and punctuation.
"""

import logging
from typing import Iterable, List, Optional

from .base import BaseValidator
from .config import ValidationConfig, default_validation_config
from .markers import TITLE_MARKERS, TitleMarkerSpec
from .models import ValidationResult, IssueLevel, IssueType
from .templates import TITLE_MARKER_PROBLEM
from ..models import TitleRecord, Violation, UNICODE_FIELD


def find_violations(
    record: TitleRecord,
    markers: Iterable[TitleMarkerSpec] = TITLE_MARKERS,
    check_unicode_title: bool = True,
) -> List[Violation]:
    """
    Find incorrectly formatted title markers in a record.

    Violations are ordered by marker, then romanized before unicode field. A
    missing unicode title is skipped.

    Args:
        record: The title fields to validate
        markers: Marker kinds to check, in reporting order
        check_unicode_title: Whether to include the unicode title

    Returns:
        List of violations, empty if every marker present is canonical

    Examples:
        >>> find_violations(TitleRecord(title="Song (tv size)"))
        [Violation(field_label='Romanized', actual_text='Song (tv size)', expected_marker='(TV Size)')]

        >>> find_violations(TitleRecord(title="Song (Sped Up & Cut Ver.)"))
        []
    """
    violations = []

    for marker in markers:
        for field_label, text in record.title_fields():
            if field_label == UNICODE_FIELD and not check_unicode_title:
                continue
            if marker.is_incorrectly_formatted(text):
                violations.append(Violation(field_label, text, marker.canonical_text))

    return violations


def validate(record: TitleRecord) -> List[Violation]:
    """Check a record against every title marker."""
    return find_violations(record)


class TitleMarkerValidator(BaseValidator):
    """Validates title marker formatting in the romanized and unicode titles."""

    def __init__(self, config: ValidationConfig = None):
        super().__init__(config or default_validation_config)
        self.logger = logging.getLogger(__name__)

    def get_enabled_markers(self) -> List[TitleMarkerSpec]:
        """Markers enabled in the configuration, in declaration order."""
        return [marker for marker in TITLE_MARKERS if self.config.is_marker_enabled(marker.name)]

    def get_validation_methods(self) -> List[str]:
        return [marker.name for marker in self.get_enabled_markers()]

    def validate(self, record: TitleRecord) -> List[Violation]:
        """Find incorrectly formatted title markers using the configured markers."""
        return find_violations(
            record,
            markers=self.get_enabled_markers(),
            check_unicode_title=self.config.check_unicode_title,
        )

    def check(self, record: TitleRecord, source: Optional[str] = None) -> ValidationResult:
        """
        Validate a record and wrap each violation in a validation issue.

        Args:
            record: The title fields to validate
            source: Name of the file or folder the record came from

        Returns:
            ValidationResult: Successful when no marker is incorrectly formatted
        """
        source = source if source is not None else record.source

        if not self.is_enabled():
            return self.create_bypassed_result(source)

        issues = []
        for violation in self.validate(record):
            message = TITLE_MARKER_PROBLEM.format(
                violation.field_label, violation.actual_text, violation.expected_marker
            )
            issues.append(
                self.create_validation_issue(
                    issue_type=IssueType.TITLE_MARKER_FORMAT,
                    level=TITLE_MARKER_PROBLEM.level,
                    message=message,
                    violation=violation,
                    context={"source": source},
                )
            )

        if issues:
            self.logger.debug(f"Found {len(issues)} title marker issues in {source or 'record'}")

        return ValidationResult(
            source=source,
            success=not any(issue.level == IssueLevel.PROBLEM for issue in issues),
            issues=issues,
            validation_methods_used=self.get_validation_methods(),
        )
