from .cli import main

# Configuration
from .config import (
    AppConfig,
    get_config,
    init_config,
    reset_config,
)

# Interactive editing
from .edit_session import (
    LEGACY_TITLE_POLICY,
    EditSession,
    TitlePolicy,
    combine,
    insert_split_marker,
    split_chapter,
)

# Custom errors
from .errors import (
    ConfigurationError,
    InvalidFileFormatError,
    ManuscriptError,
    SourceNotFoundError,
    TextDecodingError,
    TxtChaptersError,
    format_error_for_user,
)

# Logging utilities
from .logger import (
    get_logger,
    level_for,
    set_level,
    setup_logging,
)

# Marker grammar
from .markers import (
    CHAPTER_END_MARKER,
    DASH_SEPARATOR,
    SPLIT_MARKER,
    ChapterLabels,
)
from .models import Chapter

# Segmentation
from .segmenter import (
    DetectionMethod,
    Segmenter,
    segment,
)

# Reading files
from .text_loader import (
    load_chapters,
    read_text_file,
)


def tui_main(path: str | None = None, **kwargs) -> None:
    """Launch the TUI (imports textual lazily)."""
    from .tui import main as _tui_main

    _tui_main(path, **kwargs)


__all__ = [
    # Main entry points
    'main',
    'tui_main',
    # Model
    'Chapter',
    # Segmentation
    'Segmenter',
    'DetectionMethod',
    'segment',
    'ChapterLabels',
    'SPLIT_MARKER',
    'CHAPTER_END_MARKER',
    'DASH_SEPARATOR',
    # Editing
    'EditSession',
    'TitlePolicy',
    'LEGACY_TITLE_POLICY',
    'insert_split_marker',
    'split_chapter',
    'combine',
    # Reading files
    'read_text_file',
    'load_chapters',
    # Configuration
    'AppConfig',
    'get_config',
    'init_config',
    'reset_config',
    # Logging
    'get_logger',
    'setup_logging',
    'set_level',
    'level_for',
    # Custom errors
    'TxtChaptersError',
    'ManuscriptError',
    'SourceNotFoundError',
    'InvalidFileFormatError',
    'TextDecodingError',
    'ConfigurationError',
    'format_error_for_user',
]
