"""TXT Chapter Reader TUI - Terminal User Interface.

This package contains the TUI components organized into submodules:
- panels/: Panel widgets (ChapterListPanel, ContentPanel)
- app.py: Main ChapterReaderApp class
"""

from .app import ChapterReaderApp, main
from .panels import ChapterListItem, ChapterListPanel, ContentPanel, location_to_offset

__all__ = [
    # Main app
    "ChapterReaderApp",
    "main",
    # Panels
    "ChapterListPanel",
    "ContentPanel",
    # Items
    "ChapterListItem",
    # Other
    "location_to_offset",
]
