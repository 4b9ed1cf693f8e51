"""
Validation coordinator that runs validators over metadata records.

Loads beatmap metadata, executes every registered validator, and handles
loading and validator failures with appropriate error reporting.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .base import BaseValidator
from .config import ValidationConfig, default_validation_config
from .models import (
    ValidationResult,
    ValidationIssue,
    ValidationReport,
    IssueLevel,
    IssueType,
)
from .title_marker_validator import TitleMarkerValidator
from ..errors import ErrorHandler, TitleMarkerError
from ..models import TitleRecord
from ..processors.osu_metadata_parser import load_record


class ValidationCoordinator:
    """
    Orchestrates validation across metadata records.

    The coordinator is responsible for:
    - Registering validators
    - Loading records from beatmap files and beatmapset folders
    - Reporting load failures through the error handler
    - Collecting results into a session report
    """

    def __init__(self, config: ValidationConfig = None, error_handler: ErrorHandler = None,
                 validators: Optional[List[BaseValidator]] = None):
        """Initialize the validation coordinator."""
        self.config = config or default_validation_config
        self.error_handler = error_handler or ErrorHandler()
        self.logger = logging.getLogger(__name__)

        if validators is None:
            validators = [TitleMarkerValidator(self.config)]
        self._validators: List[BaseValidator] = list(validators)

        # Validation session data
        self._session_results: List[ValidationResult] = []
        self._session_start_time: Optional[datetime] = None

    def register_validator(self, validator: BaseValidator) -> None:
        """Add a validator to run on every record."""
        self._validators.append(validator)
        self.logger.debug(f"Registered validator: {type(validator).__name__}")

    def validate_record(self, record: TitleRecord, source: str = None) -> ValidationResult:
        """
        Run every registered validator on a record.

        Args:
            record: The title fields to validate
            source: Name of the file or folder the record came from

        Returns:
            ValidationResult: Aggregated result of all validators
        """
        source = source if source is not None else record.source
        issues: List[ValidationIssue] = []
        methods: List[str] = []

        for validator in self._validators:
            try:
                result = validator.check(record, source)
                issues.extend(result.issues)
                methods.extend(result.validation_methods_used)

            except Exception as e:
                self.logger.error(f"Validator {type(validator).__name__} failed on {source}: {e}")
                issues.append(ValidationIssue(
                    issue_type=IssueType.VALIDATOR_FAILURE,
                    level=IssueLevel.ERROR,
                    message=f"Validation function failed: {str(e)}",
                    context={"source": source, "validator": type(validator).__name__},
                ))

        aggregated_result = ValidationResult(
            source=source,
            success=not any(
                issue.level in (IssueLevel.PROBLEM, IssueLevel.ERROR) for issue in issues
            ),
            issues=issues,
            validation_methods_used=methods,
            context={"validator_count": len(self._validators)},
        )

        self._session_results.append(aggregated_result)

        self.logger.info(
            f"Validated {source or 'record'}: {len(issues)} issues, success={aggregated_result.success}"
        )
        return aggregated_result

    def validate_path(self, path: Union[str, Path]) -> Optional[ValidationResult]:
        """
        Load and validate a beatmap file or beatmapset folder.

        Returns:
            The validation result, or None if the path could not be loaded
        """
        try:
            record = load_record(path)
        except (TitleMarkerError, ValueError, OSError) as e:
            self.error_handler.add_error(
                self.error_handler.handle_metadata_parsing_error(e, {"path": str(path)})
            )
            return None

        return self.validate_record(record, str(path))

    def validate_paths(self, paths: Iterable[Union[str, Path]]) -> List[ValidationResult]:
        """Validate several paths, skipping the ones that fail to load."""
        results = []
        for path in paths:
            result = self.validate_path(path)
            if result is not None:
                results.append(result)
        return results

    def start_session(self) -> None:
        """Start a new validation session."""
        self._session_start_time = datetime.now()
        self._session_results.clear()
        self.logger.info("Started new validation session")

    def end_session(self) -> ValidationReport:
        """
        End the current validation session and generate a report.

        Returns:
            ValidationReport: Report of every record validated in the session
        """
        if not self._session_start_time:
            self.logger.warning("No active validation session to end")

        results = list(self._session_results)
        records_with_problems = sum(1 for result in results if not result.success)

        report = ValidationReport(
            total_records=len(results),
            records_with_problems=records_with_problems,
            results=results,
        )

        self.logger.info(
            f"Validation session completed: {report.total_records - records_with_problems}/"
            f"{report.total_records} records without problems ({report.success_rate:.1f}%)"
        )

        # Reset session
        self._session_start_time = None
        self._session_results.clear()

        return report
