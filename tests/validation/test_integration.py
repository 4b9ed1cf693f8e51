"""
Integration tests for validating beatmap files end to end.

Writes beatmap files to a temporary directory and runs them through the
coordinator, parser and reporter together.
"""

from title_marker_checker.errors import ErrorHandler
from title_marker_checker.models import Violation
from title_marker_checker.validation.coordinator import ValidationCoordinator
from title_marker_checker.validation.reporter import format_report


class TestFileValidation:
    """Validate beatmap files and beatmapset folders."""

    def test_validate_single_file(self, tmp_path, osu_file_text, validation_config):
        beatmap = tmp_path / "song.osu"
        beatmap.write_text(osu_file_text(title="Song (Short Size)", title_unicode="曲 (Short Ver.)"),
                           encoding="utf-8")
        coordinator = ValidationCoordinator(validation_config, ErrorHandler())

        result = coordinator.validate_path(beatmap)

        assert result.source == str(beatmap)
        assert [issue.violation for issue in result.issues] == [
            Violation("Romanized", "Song (Short Size)", "(Short Ver.)")
        ]

    def test_validate_legacy_file_without_unicode_title(self, tmp_path, osu_file_text, validation_config):
        beatmap = tmp_path / "legacy.osu"
        beatmap.write_text(osu_file_text(title="Song (cut ver)", title_unicode=None, version=9),
                           encoding="utf-8")

        result = ValidationCoordinator(validation_config, ErrorHandler()).validate_path(beatmap)

        assert [issue.violation.field_label for issue in result.issues] == ["Romanized"]

    def test_validate_beatmapset_folder(self, tmp_path, osu_file_text, validation_config):
        beatmapset = tmp_path / "set"
        beatmapset.mkdir()
        (beatmapset / "a [Easy].osu").write_text(osu_file_text(title="Song (TV Size)"), encoding="utf-8")
        (beatmapset / "b [Hard].osu").write_text(osu_file_text(title="Song (tv size)"), encoding="utf-8")
        (beatmapset / "audio.mp3").write_bytes(b"")

        result = ValidationCoordinator(validation_config, ErrorHandler()).validate_path(beatmapset)

        assert result.success
        assert result.issues == []

    def test_unloadable_paths_are_reported_and_skipped(self, tmp_path, osu_file_text, validation_config):
        good = tmp_path / "good.osu"
        good.write_text(osu_file_text(title="Song (Game Ver.)"), encoding="utf-8")
        broken = tmp_path / "broken.osu"
        broken.write_text("[Metadata]\nTitle:Song\n", encoding="utf-8")
        handler = ErrorHandler()
        coordinator = ValidationCoordinator(validation_config, handler)

        coordinator.start_session()
        results = coordinator.validate_paths([good, broken, tmp_path / "missing.osu"])
        report = coordinator.end_session()

        assert [result.source for result in results] == [str(good)]
        assert report.total_records == 1
        assert [error.error_code for error in handler.errors] == ["META_001", "INPUT_002"]
        assert "PASSED" in format_report(report)

    def test_empty_folder_is_reported(self, tmp_path, validation_config):
        handler = ErrorHandler()

        result = ValidationCoordinator(validation_config, handler).validate_path(tmp_path)

        assert result is None
        assert handler.errors[0].error_code == "META_003"
