"""
Title Marker Checker.

Detects title version markers such as "(TV Size)" or "(Sped Up Ver.)" written in a
non-standard format in the romanized and unicode title fields of beatmap metadata.
"""

from .models import TitleRecord, Violation
from .validation.title_marker_validator import TitleMarkerValidator, validate

__version__ = "0.1.0"

__all__ = [
    "TitleRecord",
    "Violation",
    "TitleMarkerValidator",
    "validate",
]
