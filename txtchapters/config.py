"""Centralized application configuration for txtchapters.

This module provides:
- AppConfig: Centralized configuration management
- Platform-specific default directories
- Builders for the segmenter and split title policy
- Configuration priority: CLI > Environment > Config file > Default
"""

import json
import logging
import os
import platform
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .edit_session import LEGACY_TITLE_POLICY, TitlePolicy
from .errors import ConfigurationError
from .markers import ChapterLabels
from .segmenter import DetectionMethod, Segmenter

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
DEFAULT_ENCODINGS = ["utf-8-sig", "gb18030"]


def parse_detection_method(value: str) -> DetectionMethod:
    """Convert a method name such as "end-marker" to a DetectionMethod."""
    try:
        return DetectionMethod(value)
    except ValueError:
        choices = ", ".join(m.value for m in DetectionMethod)
        raise ConfigurationError(
            f"Unknown detection method '{value}' (choose from {choices})",
            parameter="detection_method",
        ) from None


@dataclass
class AppConfig:
    """Centralized application configuration."""

    base_dir: Path

    # Reading text files
    encodings: list[str] = field(default_factory=lambda: list(DEFAULT_ENCODINGS))

    # Segmentation
    detection_method: str = DetectionMethod.AUTO.value
    title_from_first_line: bool = True
    roman_headings: bool = False
    full_text_label: str = ChapterLabels.full_text
    preface_label: str = ChapterLabels.preface
    unnamed_label: str = ChapterLabels.unnamed

    # Editing
    title_max_length: int = TitlePolicy.max_length
    title_word_boundary: bool = TitlePolicy.word_boundary
    max_undo: int = 100

    def __post_init__(self):
        self.validate()

    def _check_type(self, name: str, expected: type) -> None:
        value = getattr(self, name)
        # bool is an int subclass; counts must not be true/false
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigurationError(
                f"{name} must be {expected.__name__}, got {value!r}", parameter=name
            )

    def validate(self) -> None:
        """Raise ConfigurationError for values the editor cannot work with."""
        for name in ("detection_method", "full_text_label", "preface_label", "unnamed_label"):
            self._check_type(name, str)
        for name in ("title_from_first_line", "roman_headings", "title_word_boundary"):
            self._check_type(name, bool)
        for name in ("title_max_length", "max_undo"):
            self._check_type(name, int)
        if not isinstance(self.encodings, list) or not all(
            isinstance(e, str) for e in self.encodings
        ):
            raise ConfigurationError(
                f"encodings must be a list of encoding names, got {self.encodings!r}",
                parameter="encodings",
            )

        parse_detection_method(self.detection_method)
        if not self.encodings:
            raise ConfigurationError("At least one encoding is required", parameter="encodings")
        if self.title_max_length < 1:
            raise ConfigurationError(
                f"title_max_length must be positive, got {self.title_max_length}",
                parameter="title_max_length",
            )
        if self.max_undo < 1:
            raise ConfigurationError(
                f"max_undo must be positive, got {self.max_undo}", parameter="max_undo"
            )

    @classmethod
    def get_platform_default_base(cls) -> Path:
        """Get platform-specific default base directory."""
        system = platform.system()

        if system == "Windows":
            base = os.environ.get("APPDATA", os.path.expanduser("~"))
            return Path(base) / "txtchapters"
        elif system == "Darwin":  # macOS
            return Path.home() / "Library" / "Application Support" / "txtchapters"
        else:  # Linux and others
            return Path.home() / ".txtchapters"

    @classmethod
    def load(cls, base_dir: str | Path | None = None) -> "AppConfig":
        """Load configuration with priority resolution.

        Priority (highest to lowest):
        1. Explicit argument (base_dir parameter)
        2. Environment variable (TXTCHAPTERS_HOME)
        3. Platform default
        """
        if base_dir:
            base = Path(base_dir)
        elif env_home := os.environ.get("TXTCHAPTERS_HOME"):
            base = Path(env_home)
        else:
            base = cls.get_platform_default_base()

        config_file = base / CONFIG_FILE_NAME
        file_config: dict[str, Any] = {}
        if config_file.exists():
            try:
                with open(config_file, encoding="utf-8") as f:
                    file_config = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Ignoring unreadable config file %s: %s", config_file, e)

        if not isinstance(file_config, dict):
            raise ConfigurationError(
                f"{config_file} must hold a JSON object, got {type(file_config).__name__}",
                parameter=CONFIG_FILE_NAME,
            )

        defaults = cls(base_dir=base)
        return cls(
            base_dir=base,
            encodings=file_config.get("encodings", defaults.encodings),
            detection_method=file_config.get("detection_method", defaults.detection_method),
            title_from_first_line=file_config.get(
                "title_from_first_line", defaults.title_from_first_line
            ),
            roman_headings=file_config.get("roman_headings", defaults.roman_headings),
            full_text_label=file_config.get("full_text_label", defaults.full_text_label),
            preface_label=file_config.get("preface_label", defaults.preface_label),
            unnamed_label=file_config.get("unnamed_label", defaults.unnamed_label),
            title_max_length=file_config.get("title_max_length", defaults.title_max_length),
            title_word_boundary=file_config.get(
                "title_word_boundary", defaults.title_word_boundary
            ),
            max_undo=file_config.get("max_undo", defaults.max_undo),
        )

    def save(self) -> None:
        """Save configuration to disk."""
        self.base_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.base_dir / CONFIG_FILE_NAME
        config_dict = {
            "encodings": self.encodings,
            "detection_method": self.detection_method,
            "title_from_first_line": self.title_from_first_line,
            "roman_headings": self.roman_headings,
            "full_text_label": self.full_text_label,
            "preface_label": self.preface_label,
            "unnamed_label": self.unnamed_label,
            "title_max_length": self.title_max_length,
            "title_word_boundary": self.title_word_boundary,
            "max_undo": self.max_undo,
        }
        with open(config_file, "w", encoding="utf-8") as f:
            json.dump(config_dict, f, indent=2, ensure_ascii=False)

    @property
    def labels(self) -> ChapterLabels:
        return ChapterLabels(
            full_text=self.full_text_label,
            preface=self.preface_label,
            unnamed=self.unnamed_label,
        )

    def build_segmenter(self, method: str | None = None) -> Segmenter:
        """Create a Segmenter, optionally overriding the configured method."""
        return Segmenter(
            method=parse_detection_method(method or self.detection_method),
            labels=self.labels,
            title_from_first_line=self.title_from_first_line,
            roman_headings=self.roman_headings,
        )

    def title_policy(self, legacy: bool = False) -> TitlePolicy:
        """Title policy for split chapters; legacy uses the 30 character hard cut."""
        if legacy:
            return LEGACY_TITLE_POLICY
        return TitlePolicy(
            max_length=self.title_max_length, word_boundary=self.title_word_boundary
        )


# Singleton for global access
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def init_config(base_dir: str | Path | None = None) -> AppConfig:
    """Initialize configuration with optional custom base directory."""
    global _config
    _config = AppConfig.load(base_dir)
    return _config


def reset_config() -> None:
    """Reset the global configuration (mainly for testing)."""
    global _config
    _config = None
