"""Tests for reading text files and error formatting."""

import pytest

from txtchapters.errors import (
    ConfigurationError,
    InvalidFileFormatError,
    SourceNotFoundError,
    TextDecodingError,
    TxtChaptersError,
    format_error_for_user,
)
from txtchapters.segmenter import DetectionMethod, Segmenter
from txtchapters.text_loader import decode_text, is_text_file, load_chapters, read_text_file


class TestReadTextFile:
    """Tests for read_text_file."""

    def test_utf8(self, sample_text_file, chinese_novel_text):
        assert read_text_file(sample_text_file) == chinese_novel_text

    def test_utf8_bom_is_removed(self, temp_dir):
        path = temp_dir / "bom.txt"
        path.write_bytes("\ufeffChapter 1\nhello".encode("utf-8"))

        assert read_text_file(path) == "Chapter 1\nhello"

    def test_gb18030_fallback(self, temp_dir, chinese_novel_text):
        path = temp_dir / "gbk.txt"
        path.write_bytes(chinese_novel_text.encode("gb18030"))

        assert read_text_file(path) == chinese_novel_text

    def test_uppercase_extension(self, temp_dir):
        path = temp_dir / "BOOK.TXT"
        path.write_text("hello", encoding="utf-8")

        assert read_text_file(path) == "hello"

    def test_missing_file(self, temp_dir):
        with pytest.raises(SourceNotFoundError) as exc_info:
            read_text_file(temp_dir / "missing.txt")

        assert "missing.txt" in exc_info.value.file_path

    def test_directory_is_not_a_file(self, temp_dir):
        with pytest.raises(SourceNotFoundError):
            read_text_file(temp_dir)

    def test_wrong_extension(self, temp_dir):
        path = temp_dir / "notes.md"
        path.write_text("# Notes", encoding="utf-8")

        with pytest.raises(InvalidFileFormatError) as exc_info:
            read_text_file(path)

        assert ".md" in str(exc_info.value)
        assert exc_info.value.expected_formats == [".txt"]

    def test_undecodable(self, temp_dir):
        path = temp_dir / "binary.txt"
        path.write_bytes("第一章".encode("utf-8"))

        with pytest.raises(TextDecodingError) as exc_info:
            read_text_file(path, encodings=["ascii"])

        assert exc_info.value.encodings == ["ascii"]


class TestDecodeText:
    """Tests for decode_text."""

    def test_unknown_encoding_is_skipped(self):
        assert decode_text(b"hello", ["no-such-codec", "utf-8"]) == "hello"

    def test_first_working_encoding_wins(self):
        raw = "é".encode("latin-1")
        assert decode_text(raw, ["utf-8", "latin-1"]) == "é"

    def test_all_fail(self):
        with pytest.raises(TextDecodingError):
            decode_text(b"\xff\xfe\xfa", ["ascii"])


class TestLoadChapters:
    """Tests for load_chapters."""

    def test_load_chapters(self, sample_text_file):
        chapters = load_chapters(sample_text_file)

        assert [c.title for c in chapters] == ["序言", "第一章 开端", "第二章 发展", "第三章 结局"]

    def test_custom_segmenter(self, sample_text_file):
        chapters = load_chapters(
            sample_text_file, segmenter=Segmenter(method=DetectionMethod.END_MARKER)
        )

        assert len(chapters) == 1
        assert chapters[0].title == "未命名章节"

    def test_is_text_file(self):
        assert is_text_file("book.txt")
        assert not is_text_file("book.epub")


class TestErrorFormatting:
    """Tests for the error hierarchy and user-facing formatting."""

    def test_message_parts(self):
        error = TxtChaptersError("Broken", suggestion="Fix it", context="Somewhere")

        assert str(error) == "Error: Broken\nContext: Somewhere\nSuggestion: Fix it"

    def test_message_only(self):
        assert str(TxtChaptersError("Broken")) == "Error: Broken"

    def test_subclasses(self):
        for error in [
            SourceNotFoundError("a.txt"),
            InvalidFileFormatError("a.pdf", [".txt"]),
            TextDecodingError("a.txt", ["utf-8"]),
            ConfigurationError("bad"),
        ]:
            assert isinstance(error, TxtChaptersError)
            assert error.suggestion

    def test_configuration_error_parameter(self):
        error = ConfigurationError("bad value", parameter="max_undo")
        assert "'max_undo'" in error.suggestion

    def test_format_package_error(self):
        error = SourceNotFoundError("a.txt")
        assert format_error_for_user(error) == str(error)

    def test_format_builtin_errors(self):
        assert format_error_for_user(FileNotFoundError("x")).startswith("Error: File not found")
        assert format_error_for_user(PermissionError("x")).startswith("Error: Permission denied")

    def test_format_generic(self):
        assert format_error_for_user(ValueError("boom")) == "Error (ValueError): boom"
