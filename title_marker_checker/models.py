"""
Core data models for the Title Marker Checker.
"""

from dataclasses import dataclass
from typing import Optional


ROMANIZED_FIELD = "Romanized"
UNICODE_FIELD = "Unicode"


@dataclass(frozen=True)
class TitleRecord:
    """Title fields of a single beatmap metadata record."""
    title: str
    title_unicode: Optional[str] = None  # Not present in file format v9 and older
    source: str = ""

    def title_fields(self):
        """Yield (field label, text) for every present title field, romanized first."""
        yield ROMANIZED_FIELD, self.title
        if self.title_unicode is not None:
            yield UNICODE_FIELD, self.title_unicode


@dataclass(frozen=True)
class Violation:
    """A title field containing a marker in a non-canonical format."""
    field_label: str
    actual_text: str
    expected_marker: str
