"""
Validation system for the Title Marker Checker.

This module provides the title marker definitions, the validator that checks
titles against them, and the coordinator and reporting used to run checks
over beatmap files.
"""

from .models import (
    ValidationResult,
    ValidationIssue,
    ValidationReport,
    IssueType,
    IssueLevel,
)

from .markers import TitleMarkerSpec, TITLE_MARKERS, MARKER_NAMES, get_marker
from .templates import CheckMetadata, IssueTemplate, TITLE_MARKER_METADATA, TITLE_MARKER_PROBLEM
from .config import ValidationConfig, default_validation_config
from .base import BaseValidator
from .title_marker_validator import TitleMarkerValidator, find_violations, validate
from .coordinator import ValidationCoordinator
from .reporter import format_report

__all__ = [
    "ValidationResult",
    "ValidationIssue",
    "ValidationReport",
    "IssueType",
    "IssueLevel",
    "TitleMarkerSpec",
    "TITLE_MARKERS",
    "MARKER_NAMES",
    "get_marker",
    "CheckMetadata",
    "IssueTemplate",
    "TITLE_MARKER_METADATA",
    "TITLE_MARKER_PROBLEM",
    "ValidationConfig",
    "default_validation_config",
    "BaseValidator",
    "TitleMarkerValidator",
    "find_violations",
    "validate",
    "ValidationCoordinator",
    "format_report",
]
