"""Unit tests for command-line argument parsing."""

import pytest

from addsubs.cli import get_args


class TestDefaults:
    def test_documented_defaults(self):
        args = get_args([])

        assert args.dir == "."
        assert args.videoformat == "mkv"
        assert args.subformat == "srt"
        assert args.lang == "jpn"
        assert args.sync is False
        assert args.processes is None
        assert args.report is None
        assert args.log_level == "INFO"
        assert args.debug_mode is False


class TestOptions:
    def test_short_options(self):
        args = get_args(["-d", "/media/show", "-v", "mp4", "-s", "ass", "-l", "eng"])

        assert args.dir == "/media/show"
        assert args.videoformat == "mp4"
        assert args.subformat == "ass"
        assert args.lang == "eng"

    def test_long_options(self):
        args = get_args(["--dir", "x", "--videoformat", "webm", "--subformat", "vtt", "--lang", "spa", "--sync"])

        assert (args.dir, args.videoformat, args.subformat, args.lang, args.sync) == ("x", "webm", "vtt", "spa", True)

    def test_unknown_language_is_left_to_the_pipeline(self):
        assert get_args(["-l", "fra"]).lang == "fra"

    def test_processes(self):
        assert get_args(["--processes", "2"]).processes == 2

    @pytest.mark.parametrize("value", ["0", "-1"])
    def test_processes_must_be_positive(self, value):
        with pytest.raises(SystemExit):
            get_args(["--processes", value])

    def test_invalid_log_level(self):
        with pytest.raises(SystemExit):
            get_args(["--log-level", "LOUD"])
