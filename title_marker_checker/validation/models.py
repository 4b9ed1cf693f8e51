"""
Core data models for the validation system.

Defines validation results, issues, reports and the enums describing them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Dict, Optional, Any
from ..models import Violation


class IssueLevel(Enum):
    """Issue levels, from purely informational to problems that must be fixed."""

    INFO = "info"
    CHECK = "check"
    MINOR = "minor"
    WARNING = "warning"
    PROBLEM = "problem"
    ERROR = "error"


class IssueType(Enum):
    """Types of validation issues that can be detected."""

    TITLE_MARKER_FORMAT = "title_marker_format"
    VALIDATOR_FAILURE = "validator_failure"


@dataclass
class ValidationIssue:
    """Represents a specific validation issue found in a metadata record."""

    issue_type: IssueType
    level: IssueLevel
    message: str
    violation: Optional[Violation] = None
    context: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Result of validating a single metadata record."""

    source: str
    success: bool
    issues: List[ValidationIssue]
    validation_methods_used: List[str]
    timestamp: datetime = field(default_factory=datetime.now)
    context: Dict[str, Any] = field(default_factory=dict)

    def get_issues_by_level(self, level: IssueLevel) -> List[ValidationIssue]:
        """Get all issues of a specific level."""
        return [issue for issue in self.issues if issue.level == level]


@dataclass
class ValidationReport:
    """Validation report for every record checked during a session."""

    total_records: int
    records_with_problems: int
    results: List[ValidationResult]
    generation_timestamp: datetime = field(default_factory=datetime.now)

    @property
    def success_rate(self) -> float:
        """Percentage of records without problems."""
        if self.total_records == 0:
            return 0.0
        return ((self.total_records - self.records_with_problems) / self.total_records) * 100.0

    def all_issues(self) -> List[ValidationIssue]:
        """All issues across records, in validation order."""
        return [issue for result in self.results for issue in result.issues]

    def has_problems(self) -> bool:
        """Check if any record failed validation."""
        return self.records_with_problems > 0
