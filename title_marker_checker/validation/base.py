"""
Base classes and interfaces for the validation system.

Provides the abstract base class shared by all validators, ensuring consistent
behavior and integration with the validation coordinator.
"""

from abc import ABC, abstractmethod
from typing import Any, List, Dict
from .models import ValidationResult, ValidationIssue, IssueLevel, IssueType
from .config import ValidationConfig
from ..models import TitleRecord, Violation


class BaseValidator(ABC):
    """
    Abstract base class for all validation components.

    Defines the interface that all validators must implement to ensure
    consistent behavior and integration with the validation coordinator.
    """

    def __init__(self, config: ValidationConfig):
        """Initialize the validator with configuration."""
        self.config = config

    @abstractmethod
    def check(self, record: TitleRecord, source: str = None) -> ValidationResult:
        """
        Perform validation on a metadata record.

        Args:
            record: The title fields to validate
            source: Name of the file or folder the record came from

        Returns:
            ValidationResult: Result of the validation operation
        """
        pass

    @abstractmethod
    def get_validation_methods(self) -> List[str]:
        """
        Get list of validation methods used by this validator.

        Returns:
            List[str]: Names of validation methods implemented
        """
        pass

    def create_validation_issue(
        self,
        issue_type: IssueType,
        level: IssueLevel,
        message: str,
        violation: Violation = None,
        context: Dict[str, Any] = None,
    ) -> ValidationIssue:
        """Helper method to create validation issues with consistent formatting."""
        return ValidationIssue(
            issue_type=issue_type,
            level=level,
            message=message,
            violation=violation,
            context=context or {},
        )

    def create_bypassed_result(self, source: str) -> ValidationResult:
        """Create a result for bypassed validation."""
        return ValidationResult(
            source=source,
            success=True,
            issues=[],
            validation_methods_used=["bypass"],
            context={"bypassed": True},
        )

    def is_enabled(self) -> bool:
        """Check if this validator is enabled in the current configuration."""
        return self.config.enabled
