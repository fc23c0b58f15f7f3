"""Interactive chapter editing with snapshot undo.

An EditSession wraps the chapter list produced by the segmenter and exposes
the structural edits a reader can make after segmentation:

- insert a split marker at a staged cursor offset
- execute the split on the selected chapter
- combine a chapter with the one after it
- delete a chapter
- undo the last structural edit

Every structural edit saves a snapshot of the chapter list first. Failed
preconditions are not errors: the session reports them through its notify
callback and leaves its state untouched.
"""

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from .markers import SPLIT_MARKER, SPLIT_MARKER_BLOCK
from .models import Chapter
from .segmenter import Segmenter

logger = logging.getLogger(__name__)

NotifyCallback = Callable[[str, str], None]


@dataclass(frozen=True)
class TitlePolicy:
    """How a new chapter title is derived from the first line after a split.

    Attributes:
        max_length: Longest title kept as is
        word_boundary: Backtrack to the last space instead of cutting a word
        min_break_ratio: A space earlier than this share of max_length is ignored
        ellipsis: Appended to shortened titles
    """

    max_length: int = 50
    word_boundary: bool = True
    min_break_ratio: float = 0.7
    ellipsis: str = "..."

    def shorten(self, line: str) -> str:
        if len(line) <= self.max_length:
            return line

        cut = line[: self.max_length]
        if self.word_boundary:
            space = cut.rfind(" ")
            if space >= self.max_length * self.min_break_ratio:
                cut = cut[:space]
        return cut + self.ellipsis


LEGACY_TITLE_POLICY = TitlePolicy(max_length=30, word_boundary=False)


def insert_split_marker(content: str, offset: int) -> str:
    """Insert the split marker block into content at offset."""
    return content[:offset] + SPLIT_MARKER_BLOCK + content[offset:]


def split_chapter(chapter: Chapter, policy: TitlePolicy | None = None) -> list[Chapter]:
    """Split a chapter on every split marker in its content.

    The first part keeps the original title. Each later part takes its first
    line as title; when that line is too long the shortened title is used and
    the full text stays in the content.
    """
    policy = policy or TitlePolicy()
    parts = chapter.content.split(SPLIT_MARKER)
    chapters = [Chapter(chapter.title, parts[0].strip())]

    for part in parts[1:]:
        trimmed = part.strip()
        if not trimmed:
            continue

        first_line, _, rest = trimmed.partition("\n")
        first_line = first_line.strip()
        title = policy.shorten(first_line)

        if title != first_line:
            content = trimmed
        else:
            content = rest.strip() or first_line
        chapters.append(Chapter(title, content))

    return chapters


def combine(first: Chapter, second: Chapter) -> Chapter:
    """Merge two chapters, keeping the absorbed title inline in the content."""
    return Chapter(
        first.title,
        first.content + "\n\n" + second.title + "\n\n" + second.content,
    )


def _log_notify(message: str, severity: str) -> None:
    if severity == "information":
        logger.info(message)
    elif severity == "error":
        logger.error(message)
    else:
        logger.warning(message)


class EditSession:
    """Chapter list plus selection, staged cursor and undo history.

    Example:
        >>> session = EditSession([Chapter("Chapter 1", "abcdef")])
        >>> session.stage_cursor(3)  # offset from the Host UI
        >>> session.insert_split_marker()  # content: "abc\n\n==== split chapter ====\n\ndef"
        >>> session.execute_split()  # [Chapter 1: "abc", def: "def"]
    """

    MAX_UNDO_STACK = 100  # Oldest snapshots are dropped beyond this

    def __init__(
        self,
        chapters: Iterable[Chapter] = (),
        title_policy: TitlePolicy | None = None,
        max_undo: int | None = None,
        notify: NotifyCallback | None = None,
    ):
        self._chapters: tuple[Chapter, ...] = tuple(chapters)
        self._selected_index = 0
        self._pending_cursor_offset: int | None = None
        self._editing_index: int | None = None
        self._history: list[tuple[Chapter, ...]] = []
        self.title_policy = title_policy or TitlePolicy()
        self.max_undo = max_undo if max_undo is not None else self.MAX_UNDO_STACK
        self.notify: NotifyCallback = notify or _log_notify

    @classmethod
    def from_text(
        cls, text: str, segmenter: Segmenter | None = None, **kwargs
    ) -> "EditSession":
        """Segment text and start a session over the result."""
        segmenter = segmenter or Segmenter()
        return cls(segmenter.segment(text), **kwargs)

    # ── State ────────────────────────────────────────────────────────────

    @property
    def chapters(self) -> list[Chapter]:
        return list(self._chapters)

    @property
    def is_empty(self) -> bool:
        return not self._chapters

    @property
    def selected_index(self) -> int:
        """Selected index, clamped to the current chapter list."""
        if not self._chapters:
            return 0
        return max(0, min(self._selected_index, len(self._chapters) - 1))

    @property
    def current_chapter(self) -> Chapter | None:
        if not self._chapters:
            return None
        return self._chapters[self.selected_index]

    @property
    def pending_cursor_offset(self) -> int | None:
        return self._pending_cursor_offset

    @property
    def editing_index(self) -> int | None:
        return self._editing_index

    @property
    def history(self) -> tuple[tuple[Chapter, ...], ...]:
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    def _save_undo_state(self) -> None:
        """Push a snapshot of the current chapters onto the history."""
        self._history.append(self._chapters)

        while len(self._history) > self.max_undo:
            self._history.pop(0)

    # ── Selection ────────────────────────────────────────────────────────

    def select_chapter(self, index: int) -> list[Chapter]:
        if not self._chapters:
            return self.chapters

        self._selected_index = max(0, min(index, len(self._chapters) - 1))
        self._editing_index = None
        self._pending_cursor_offset = None
        return self.chapters

    def stage_cursor(self, offset: int) -> list[Chapter]:
        """Remember where in the selected chapter a split marker should go."""
        if not self._chapters:
            return self.chapters

        self._pending_cursor_offset = offset
        return self.chapters

    # ── Structural edits ─────────────────────────────────────────────────

    def insert_split_marker(self) -> list[Chapter]:
        chapter = self.current_chapter
        if chapter is None:
            return self.chapters

        if self._pending_cursor_offset is None:
            self.notify("Click in the chapter text to choose a split point first", "warning")
            return self.chapters

        self._save_undo_state()

        index = self.selected_index
        updated = chapter.with_content(
            insert_split_marker(chapter.content, self._pending_cursor_offset)
        )
        self._chapters = self._chapters[:index] + (updated,) + self._chapters[index + 1 :]
        self._editing_index = index
        self._pending_cursor_offset = None
        return self.chapters

    def execute_split(self) -> list[Chapter]:
        chapter = self.current_chapter
        if chapter is None:
            return self.chapters

        if SPLIT_MARKER not in chapter.content:
            self.notify("Insert a split marker before splitting", "warning")
            return self.chapters

        self._save_undo_state()

        index = self.selected_index
        parts = tuple(split_chapter(chapter, self.title_policy))
        self._chapters = self._chapters[:index] + parts + self._chapters[index + 1 :]
        self._editing_index = None
        self._pending_cursor_offset = None

        self.notify(f"Split '{chapter.title}' into {len(parts)} chapters", "information")
        return self.chapters

    def combine_chapters(self, index: int) -> list[Chapter]:
        """Merge the chapter at index with the one after it."""
        if not 0 <= index < len(self._chapters) - 1:
            self.notify("No chapter below to merge with", "warning")
            return self.chapters

        self._save_undo_state()

        first, second = self._chapters[index], self._chapters[index + 1]
        merged = combine(first, second)
        self._chapters = self._chapters[:index] + (merged,) + self._chapters[index + 2 :]

        removed = index + 1
        self._selected_index = self._remap_after_merge(self._selected_index, removed)
        if self._editing_index is not None:
            self._editing_index = self._remap_after_merge(self._editing_index, removed)
        self._pending_cursor_offset = None

        self.notify(f"Merged: {merged.title}", "information")
        return self.chapters

    def delete_chapter(self, index: int) -> list[Chapter]:
        if not 0 <= index < len(self._chapters):
            self.notify("Highlight a chapter first", "warning")
            return self.chapters

        self._save_undo_state()

        chapter = self._chapters[index]
        self._chapters = self._chapters[:index] + self._chapters[index + 1 :]

        if self._selected_index == index:
            self._selected_index = max(0, index - 1)
        elif self._selected_index > index:
            self._selected_index -= 1

        if self._editing_index == index:
            self._editing_index = None
        elif self._editing_index is not None and self._editing_index > index:
            self._editing_index -= 1
        self._pending_cursor_offset = None

        self.notify(f"Deleted: {chapter.title}", "information")
        return self.chapters

    def undo(self) -> list[Chapter]:
        """Restore the chapter list saved before the last structural edit."""
        if not self._history:
            return self.chapters

        self._chapters = self._history.pop()
        self._pending_cursor_offset = None
        self._editing_index = None

        self.notify("Undo successful", "information")
        return self.chapters

    @staticmethod
    def _remap_after_merge(position: int, removed: int) -> int:
        if position == removed:
            return removed - 1
        if position > removed:
            return position - 1
        return position
