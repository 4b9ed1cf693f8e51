"""
Configuration system for the validation framework.

Provides per-marker toggles, unicode title handling and validation bypass
functionality.
"""

from dataclasses import dataclass
from typing import Dict, Any

from .markers import MARKER_NAMES


@dataclass
class ValidationConfig:
    """Configuration for the validation system."""

    # Core settings
    enabled: bool = True
    fail_on_problems: bool = True

    # Field settings
    check_unicode_title: bool = True

    # Marker configuration
    enabled_markers: Dict[str, bool] = None

    def __post_init__(self):
        """Initialize default values."""
        if self.enabled_markers is None:
            self.enabled_markers = self._get_default_markers()

    def _get_default_markers(self) -> Dict[str, bool]:
        """Get default marker configuration, all markers enabled."""
        return {name: True for name in MARKER_NAMES}

    def is_marker_enabled(self, marker_name: str) -> bool:
        """Check if a specific marker is enabled."""
        return self.enabled_markers.get(marker_name, True)

    def disable_marker(self, marker_name: str) -> None:
        """Skip a marker during validation."""
        self._require_known_marker(marker_name)
        self.enabled_markers[marker_name] = False

    def enable_marker(self, marker_name: str) -> None:
        """Include a marker during validation."""
        self._require_known_marker(marker_name)
        self.enabled_markers[marker_name] = True

    def _require_known_marker(self, marker_name: str) -> None:
        if marker_name not in MARKER_NAMES:
            raise ValueError(f"Unknown title marker: {marker_name}")

    def disable_validation(self) -> None:
        """Disable all validation."""
        self.enabled = False

    def enable_validation(self) -> None:
        """Enable validation with current settings."""
        self.enabled = True

    def get_config_summary(self) -> Dict[str, Any]:
        """Get a summary of current configuration."""
        return {
            "enabled": self.enabled,
            "fail_on_problems": self.fail_on_problems,
            "check_unicode_title": self.check_unicode_title,
            "enabled_markers": dict(self.enabled_markers),
        }


# Default validation configuration instance
default_validation_config = ValidationConfig()
