"""
Tests for core data models.
"""

import pytest
from dataclasses import FrozenInstanceError

from title_marker_checker.models import TitleRecord, Violation


class TestTitleRecord:
    """Test cases for TitleRecord data model."""

    def test_title_record_creation(self):
        """Test basic TitleRecord creation."""
        record = TitleRecord(title="Song", title_unicode="曲名", source="song.osu")
        assert record.title == "Song"
        assert record.title_unicode == "曲名"
        assert record.source == "song.osu"

    def test_unicode_title_defaults_to_absent(self):
        """Test TitleRecord without a unicode title."""
        record = TitleRecord(title="Song")
        assert record.title_unicode is None
        assert list(record.title_fields()) == [("Romanized", "Song")]

    def test_title_fields_order(self):
        """Test romanized title comes before unicode title."""
        record = TitleRecord(title="Song", title_unicode="")
        assert list(record.title_fields()) == [("Romanized", "Song"), ("Unicode", "")]

    def test_title_record_is_frozen(self):
        record = TitleRecord(title="Song")
        with pytest.raises(FrozenInstanceError):
            record.title_unicode = "曲名"


class TestViolation:
    """Test cases for Violation data model."""

    def test_violation_equality_by_value(self):
        """Test violations compare by their field values."""
        first = Violation("Romanized", "Song (tv size)", "(TV Size)")
        second = Violation(field_label="Romanized", actual_text="Song (tv size)",
                           expected_marker="(TV Size)")
        assert first == second
        assert hash(first) == hash(second)
