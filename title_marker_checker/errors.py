"""
Error handling system for the Title Marker Checker.

This module provides centralized error definitions, error detection,
and actionable error messages for loading and validating metadata.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional, Dict, Any
from dataclasses import dataclass

from .config import Config


class ErrorSeverity(Enum):
    """Error severity levels."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(Enum):
    """Categories of errors that can occur during processing."""
    INPUT_VALIDATION = "input_validation"
    METADATA_PARSING = "metadata_parsing"
    FILE_SYSTEM = "file_system"
    VALIDATION = "validation"


@dataclass
class ProcessingError:
    """Represents a processing error with context and guidance."""
    category: ErrorCategory
    severity: ErrorSeverity
    message: str
    details: str
    suggested_actions: List[str]
    error_code: str
    context: Dict[str, Any] = None

    def __post_init__(self):
        if self.context is None:
            self.context = {}


class TitleMarkerError(Exception):
    """Base exception for Title Marker Checker errors."""

    def __init__(self, processing_error: ProcessingError):
        self.processing_error = processing_error
        super().__init__(processing_error.message)


class InputValidationError(TitleMarkerError):
    """Raised when an input path is unusable."""
    pass


class MetadataParsingError(TitleMarkerError):
    """Raised when a beatmap file cannot be read or lacks title metadata."""
    pass


def metadata_parsing_error(message: str, details: str, error_code: str,
                           source: str = "") -> MetadataParsingError:
    """Build a MetadataParsingError with standard guidance."""
    return MetadataParsingError(ProcessingError(
        category=ErrorCategory.METADATA_PARSING,
        severity=ErrorSeverity.ERROR,
        message=message,
        details=details,
        suggested_actions=[
            "Check that the file is a beatmap (.osu) file",
            "Ensure the file contains a [Metadata] section with a Title entry",
        ],
        error_code=error_code,
        context={"source": source},
    ))


class ErrorHandler:
    """
    Centralized error handling and reporting system.

    Collects errors and warnings raised while loading and validating
    metadata, and provides actionable guidance for each of them.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.errors: List[ProcessingError] = []
        self.warnings: List[ProcessingError] = []

    def add_error(self, error: ProcessingError) -> None:
        """Add an error to the collection."""
        if error.severity in [ErrorSeverity.ERROR, ErrorSeverity.CRITICAL]:
            self.errors.append(error)
        elif error.severity == ErrorSeverity.WARNING:
            self.warnings.append(error)

        # Log the error
        log_level = {
            ErrorSeverity.INFO: logging.INFO,
            ErrorSeverity.WARNING: logging.WARNING,
            ErrorSeverity.ERROR: logging.ERROR,
            ErrorSeverity.CRITICAL: logging.CRITICAL
        }[error.severity]

        self.logger.log(log_level, f"[{error.error_code}] {error.message}")
        if error.details:
            self.logger.log(log_level, f"Details: {error.details}")

    def has_errors(self) -> bool:
        """Check if any errors have been recorded."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if any warnings have been recorded."""
        return len(self.warnings) > 0

    def get_error_summary(self) -> Dict[str, Any]:
        """Get a summary of all errors and warnings."""
        return {
            'error_count': len(self.errors),
            'warning_count': len(self.warnings),
            'errors': [self._format_error_for_summary(e) for e in self.errors],
            'warnings': [self._format_error_for_summary(e) for e in self.warnings]
        }

    def _format_error_for_summary(self, error: ProcessingError) -> Dict[str, Any]:
        """Format error for summary display."""
        return {
            'code': error.error_code,
            'category': error.category.value,
            'severity': error.severity.value,
            'message': error.message,
            'suggested_actions': error.suggested_actions
        }

    def clear_errors(self) -> None:
        """Clear all recorded errors and warnings."""
        self.errors.clear()
        self.warnings.clear()

    def validate_metadata_path(self, file_path: str) -> Optional[ProcessingError]:
        """Validate a beatmap file or beatmapset folder path."""
        if not file_path:
            return ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Beatmap path is required",
                details="No beatmap file or beatmapset folder was provided",
                suggested_actions=[
                    "Provide a path to a .osu file or a beatmapset folder"
                ],
                error_code="INPUT_001"
            )

        path = Path(file_path)

        if not path.exists():
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Beatmap path not found",
                details=f"The specified path does not exist: {file_path}",
                suggested_actions=[
                    "Check that the path is correct",
                    "Ensure the file has not been moved or deleted",
                    "Use an absolute path if relative path is not working"
                ],
                error_code="INPUT_002"
            )

        if path.is_file() and path.suffix.lower() not in Config.SUPPORTED_EXTENSIONS:
            return ProcessingError(
                category=ErrorCategory.INPUT_VALIDATION,
                severity=ErrorSeverity.ERROR,
                message="Unsupported file type",
                details=f"File type '{path.suffix}' is not a beatmap file",
                suggested_actions=[
                    f"Use a file with one of these extensions: {', '.join(Config.SUPPORTED_EXTENSIONS)}",
                    "Point to the beatmapset folder to check its first difficulty"
                ],
                error_code="INPUT_003"
            )

        return None

    def handle_metadata_parsing_error(self, error: Exception,
                                      context: Dict[str, Any] = None) -> ProcessingError:
        """Handle errors raised while loading beatmap metadata."""
        if isinstance(error, TitleMarkerError):
            processing_error = error.processing_error
            if context:
                processing_error.context.update(context)
            return processing_error

        if isinstance(error, UnicodeDecodeError):
            return ProcessingError(
                category=ErrorCategory.METADATA_PARSING,
                severity=ErrorSeverity.ERROR,
                message="Beatmap file is not valid UTF-8",
                details=f"Could not decode beatmap file: {error}",
                suggested_actions=[
                    "Re-save the beatmap file with UTF-8 encoding",
                    "Check that the file is not corrupted"
                ],
                error_code="META_004",
                context=context
            )

        if isinstance(error, OSError):
            return ProcessingError(
                category=ErrorCategory.FILE_SYSTEM,
                severity=ErrorSeverity.ERROR,
                message="Beatmap file could not be read",
                details=f"File system error: {error}",
                suggested_actions=[
                    "Check file permissions",
                    "Ensure the file is not locked by another program"
                ],
                error_code="FILE_001",
                context=context
            )

        return ProcessingError(
            category=ErrorCategory.METADATA_PARSING,
            severity=ErrorSeverity.ERROR,
            message="Beatmap metadata could not be loaded",
            details=f"Unexpected error: {error}",
            suggested_actions=[
                "Check that the file is a valid beatmap file",
                "Use --verbose for more detailed error information"
            ],
            error_code="META_005",
            context=context
        )


# Global error handler instance
error_handler = ErrorHandler()
