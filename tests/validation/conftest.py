"""
Pytest configuration and fixtures for validation tests.

Provides common fixtures and configuration for testing the validation system
with both unit tests and property-based tests.
"""

import pytest

from title_marker_checker.models import TitleRecord
from title_marker_checker.validation.config import ValidationConfig


@pytest.fixture
def validation_config():
    """Provide a standard validation configuration for testing."""
    return ValidationConfig()


@pytest.fixture
def romanized_only_config():
    """Provide a configuration that skips the unicode title."""
    return ValidationConfig(check_unicode_title=False)


@pytest.fixture
def sample_records():
    """Provide records covering correct, incorrect and legacy metadata."""
    return [
        TitleRecord(title="Song (TV Size)", title_unicode="曲名 (TV Size)", source="correct.osu"),
        TitleRecord(title="Song -TV version-", title_unicode="曲名 -TV version-", source="tv.osu"),
        TitleRecord(title="Song (game size)", title_unicode=None, source="legacy.osu"),
        TitleRecord(title="Song (Sped Up & Cut Ver.)", title_unicode="Song (Sped Up & Cut Ver.)",
                    source="compound.osu"),
    ]


@pytest.fixture
def osu_file_text():
    """Provide the contents of a minimal beatmap file."""
    def build(title="Song", title_unicode="曲名", version=14):
        lines = [f"osu file format v{version}", "", "[General]", "AudioFilename: audio.mp3", "",
                 "[Metadata]", f"Title:{title}"]
        if title_unicode is not None:
            lines.append(f"TitleUnicode:{title_unicode}")
        lines.extend(["Artist:Artist", "Creator:Mapper", "Version:Hard", "", "[Difficulty]",
                      "HPDrainRate:5"])
        return "\n".join(lines) + "\n"
    return build
