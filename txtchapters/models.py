"""Chapter value type shared by the segmenter and the edit session."""

from dataclasses import dataclass, replace
from typing import Any


@dataclass(frozen=True)
class Chapter:
    """A titled, contiguous span of document text.

    Chapters are immutable; edits build new values instead of changing
    existing ones.
    """

    title: str
    content: str = ""

    @property
    def char_count(self) -> int:
        return len(self.content)

    def with_content(self, content: str) -> "Chapter":
        """Return a copy of this chapter with different content."""
        return replace(self, content=content)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "title": self.title,
            "content": self.content,
            "char_count": self.char_count,
        }


ChapterList = list[Chapter]
