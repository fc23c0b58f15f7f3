"""Panel widgets for the txtchapters TUI."""

from .chapter_list import ChapterListItem, ChapterListPanel
from .content_panel import ContentPanel, location_to_offset

__all__ = [
    "ChapterListItem",
    "ChapterListPanel",
    "ContentPanel",
    "location_to_offset",
]
