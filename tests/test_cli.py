"""Tests for the txtchapters command line."""

import json
import logging

import pytest

from txtchapters.cli import build_parser, main
from txtchapters.logger import (
    PACKAGE_LOGGER,
    get_logger,
    level_for,
    set_level,
    setup_logging,
)


@pytest.fixture
def run(temp_dir):
    """Run the CLI with an isolated config directory."""

    def _run(*args):
        return main([*args, "--config-dir", str(temp_dir / "config")])

    return _run


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args(["book.txt"])

        assert args.sourcefile == "book.txt"
        assert args.detect is None
        assert args.show is None
        assert not args.json
        assert not args.tui

    def test_rejects_unknown_method(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["book.txt", "--detect", "magic"])


class TestMain:
    def test_lists_chapters(self, run, sample_text_file, capsys):
        assert run(str(sample_text_file)) == 0

        out = capsys.readouterr().out.splitlines()
        assert len(out) == 4
        assert out[1] == "   2  第一章 开端  (5 chars)"

    def test_json(self, run, sample_text_file, capsys):
        assert run(str(sample_text_file), "--json") == 0

        data = json.loads(capsys.readouterr().out)
        assert data[0] == {"title": "序言", "content": "作者的话", "char_count": 4}
        assert [c["title"] for c in data][1:] == ["第一章 开端", "第二章 发展", "第三章 结局"]

    def test_show(self, run, sample_text_file, capsys):
        assert run(str(sample_text_file), "--show", "4") == 0

        assert capsys.readouterr().out == "第三章 结局\n\n秋天走了。\n"

    def test_show_out_of_range(self, run, sample_text_file, capsys):
        assert run(str(sample_text_file), "--show", "9") == 1

        assert "does not exist" in capsys.readouterr().err

    def test_detect_override(self, run, sample_text_file, capsys):
        assert run(str(sample_text_file), "--detect", "end-marker", "-q") == 0

        out = capsys.readouterr().out.splitlines()
        assert len(out) == 1
        assert "未命名章节" in out[0]

    def test_missing_file(self, run, temp_dir, capsys):
        assert run(str(temp_dir / "nope.txt")) == 1

        err = capsys.readouterr().err
        assert "not found" in err
        assert "Suggestion:" in err

    def test_config_file_method(self, temp_dir, sample_text_file, capsys):
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(
            json.dumps({"detection_method": "end-marker"}), encoding="utf-8"
        )

        assert main([str(sample_text_file), "--config-dir", str(config_dir)]) == 0

        assert len(capsys.readouterr().out.splitlines()) == 1

    def test_wrongly_typed_config_value(self, temp_dir, sample_text_file, capsys):
        config_dir = temp_dir / "config"
        config_dir.mkdir()
        (config_dir / "config.json").write_text(
            json.dumps({"title_max_length": None}), encoding="utf-8"
        )

        assert main([str(sample_text_file), "--config-dir", str(config_dir)]) == 1

        assert "title_max_length" in capsys.readouterr().err

    def test_os_error_is_reported(self, run, sample_text_file, monkeypatch, capsys):
        def unreadable(*args, **kwargs):
            raise PermissionError(13, "Permission denied", str(sample_text_file))

        monkeypatch.setattr("txtchapters.cli.load_chapters", unreadable)

        assert run(str(sample_text_file)) == 1

        err = capsys.readouterr().err
        assert err.startswith("Error: Permission denied")
        assert "Traceback" not in err


class TestLogging:
    @pytest.mark.parametrize(
        "verbose, quiet, expected",
        [
            (False, False, logging.INFO),
            (True, False, logging.DEBUG),
            (False, True, logging.WARNING),
            (True, True, logging.DEBUG),
        ],
    )
    def test_level_for(self, verbose, quiet, expected):
        assert level_for(verbose, quiet) == expected

    def test_setup_logging_replaces_handlers(self):
        setup_logging()
        package_logger = setup_logging(level=logging.WARNING)

        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.WARNING

    def test_get_logger_namespace(self):
        assert get_logger("tools").name == "txtchapters.tools"
        assert get_logger("txtchapters.segmenter").name == "txtchapters.segmenter"

    def test_log_file(self, run, sample_text_file, temp_dir, capsys):
        log_file = temp_dir / "run.log"

        assert run(str(sample_text_file), "--log-file", str(log_file)) == 0

        logged = log_file.read_text(encoding="utf-8")
        assert "Loaded novel.txt: 4 chapters" in logged
        assert "INFO" in logged

    def test_set_level_after_setup(self, capsys):
        setup_logging(level=logging.INFO)
        set_level(logging.ERROR)

        get_logger("tools").warning("hidden")
        get_logger("tools").error("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "ERROR: shown" in err
        assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR
