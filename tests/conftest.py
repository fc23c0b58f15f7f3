"""Pytest configuration and shared fixtures for txtchapters tests."""

import logging
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest

from txtchapters.config import AppConfig, reset_config
from txtchapters.logger import PACKAGE_LOGGER


# Mark test categories
def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


@pytest.fixture(autouse=True)
def _isolate_global_state(monkeypatch, tmp_path) -> Generator[None, None, None]:
    """Keep config lookups away from the real home directory and drop log handlers."""
    monkeypatch.setenv("TXTCHAPTERS_HOME", str(tmp_path / "home"))
    reset_config()
    yield
    reset_config()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in package_logger.handlers:
        handler.close()
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to the temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="txtchapters_test_"))
    yield temp_path
    # Cleanup
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def app_config(temp_dir: Path) -> AppConfig:
    """Default configuration rooted in a temporary directory."""
    return AppConfig(base_dir=temp_dir)


@pytest.fixture
def chinese_novel_text() -> str:
    """A short novel with 第N章 headings and a preface."""
    return (
        "作者的话\n"
        "\n"
        "第一章 开端\n"
        "春天来了。\n"
        "\n"
        "第二章 发展\n"
        "夏天到了。\n"
        "\n"
        "第三章 结局\n"
        "秋天走了。\n"
    )


@pytest.fixture
def end_marker_text() -> str:
    """Chapters terminated by the ---CHAPTER END--- sentinel."""
    return (
        "Chapter One\n"
        "It was a dark and stormy night.\n"
        "---CHAPTER END---\n"
        "Chapter Two\n"
        "The storm passed.\n"
        "---CHAPTER END---\n"
    )


@pytest.fixture
def sample_text_file(temp_dir: Path, chinese_novel_text: str) -> Path:
    """Write the Chinese sample novel to a UTF-8 .txt file.

    Returns:
        Path to the created text file
    """
    path = temp_dir / "novel.txt"
    path.write_text(chinese_novel_text, encoding="utf-8")
    return path
