"""
Tests for the command line interface.
"""

import pytest

from title_marker_checker.main import main, build_parser


@pytest.fixture
def write_beatmap(tmp_path):
    def write(name, title, title_unicode=None):
        lines = ["osu file format v14", "[Metadata]", f"Title:{title}"]
        if title_unicode is not None:
            lines.append(f"TitleUnicode:{title_unicode}")
        path = tmp_path / name
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path
    return write


class TestCli:
    """Test exit codes and output of the CLI."""

    def test_clean_beatmap_exits_zero(self, write_beatmap, capsys):
        path = write_beatmap("song.osu", "Song (TV Size)", "曲名 (TV Size)")

        assert main([str(path)]) == 0
        assert "Overall Status: PASSED" in capsys.readouterr().out

    def test_problems_exit_one(self, write_beatmap, capsys):
        path = write_beatmap("song.osu", "Song (sped up ver)")

        assert main([str(path)]) == 1
        out = capsys.readouterr().out
        assert 'Romanized title field; "Song (sped up ver)" incorrect format of "(Sped Up Ver.)".' in out

    def test_no_unicode_flag(self, write_beatmap):
        path = write_beatmap("song.osu", "Song (TV Size)", "曲名 (tv size)")

        assert main([str(path)]) == 1
        assert main([str(path), "--no-unicode"]) == 0

    def test_disable_marker_flag(self, write_beatmap):
        path = write_beatmap("song.osu", "Song (cut size)")

        assert main([str(path), "--disable-marker", "cut_ver"]) == 0

    def test_unloadable_input_exits_two(self, tmp_path, capsys):
        assert main([str(tmp_path / "missing.osu")]) == 2
        assert "INPUT_002" in capsys.readouterr().out

    def test_list_markers(self, capsys):
        assert main(["--list-markers"]) == 0
        out = capsys.readouterr().out
        assert "(Sped Up Ver.)" in out
        assert "tv_size" in out

    def test_paths_required(self):
        with pytest.raises(SystemExit):
            main([])

    def test_unknown_marker_rejected(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["song.osu", "--disable-marker", "extended_ver"])
