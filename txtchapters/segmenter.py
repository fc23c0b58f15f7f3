"""
Chapter segmentation for plain-text manuscripts.

This module turns a whole document into an ordered list of chapters by:
1. Splitting on "---" lines when the book uses roman-numeral chapter headings
2. Splitting on "---CHAPTER END---" sentinels
3. Scanning line by line with the first heading grammar found in the text
4. Falling back to a single whole-document chapter

Strategies are tried in that order and the first one that applies wins.
"""

import logging
from enum import Enum

from .markers import (
    CHAPTER_END_MARKER,
    DASH_SEPARATOR_LINE,
    END_MARKER_HEADING,
    ROMAN_CHAPTER_HEADING,
    ROMAN_CHAPTER_TRIGGER,
    ChapterLabels,
    HeadingPattern,
    find_heading_pattern,
    heading_patterns,
    is_roman_numeral,
)
from .models import Chapter

logger = logging.getLogger(__name__)


class DetectionMethod(Enum):
    """Segmentation strategy preference."""

    AUTO = "auto"  # Try every strategy in priority order (default)
    DASH = "dash"  # "---" separated blocks with roman-numeral headings
    END_MARKER = "end-marker"  # "---CHAPTER END---" separated blocks
    HEADINGS = "headings"  # Line-by-line heading cascade


def _split_first_line(block: str) -> tuple[str, str]:
    """Split a trimmed block into its stripped first line and trimmed remainder."""
    first_line, _, rest = block.partition("\n")
    return first_line.strip(), rest.strip()


class SegmentationStrategy:
    """Base class for one entry of the strategy table."""

    method: DetectionMethod

    def __init__(self, labels: ChapterLabels):
        self.labels = labels

    def applies(self, text: str) -> bool:
        raise NotImplementedError

    def split(self, text: str) -> list[Chapter]:
        raise NotImplementedError


class DashSeparatedStrategy(SegmentationStrategy):
    """Blocks separated by a "---" line, headed by "Chapter <roman>"."""

    method = DetectionMethod.DASH

    def applies(self, text: str) -> bool:
        return DASH_SEPARATOR_LINE in text and ROMAN_CHAPTER_TRIGGER.search(text) is not None

    def split(self, text: str) -> list[Chapter]:
        chapters: list[Chapter] = []

        for block in text.split(DASH_SEPARATOR_LINE):
            trimmed = block.strip()
            if not trimmed:
                continue

            first_line, rest = _split_first_line(trimmed)
            match = ROMAN_CHAPTER_HEADING.search(first_line)
            if match and is_roman_numeral(match.group(1)):
                chapters.append(Chapter(first_line, rest))
            elif chapters:
                # Prose after a separator without its own heading
                previous = chapters[-1]
                chapters[-1] = previous.with_content(previous.content + "\n" + trimmed)
            else:
                chapters.append(Chapter(self.labels.unnamed, trimmed))

        logger.debug("Found %d chapters with dash separators", len(chapters))
        return chapters


class EndMarkerStrategy(SegmentationStrategy):
    """Blocks terminated by the "---CHAPTER END---" sentinel."""

    method = DetectionMethod.END_MARKER

    def applies(self, text: str) -> bool:
        return CHAPTER_END_MARKER in text

    def split(self, text: str) -> list[Chapter]:
        chapters: list[Chapter] = []

        for block in text.split(CHAPTER_END_MARKER):
            trimmed = block.strip()
            if not trimmed:
                continue

            first_line, rest = _split_first_line(trimmed)
            if END_MARKER_HEADING.search(first_line):
                chapters.append(Chapter(first_line, rest))
            else:
                chapters.append(Chapter(self.labels.unnamed, trimmed))

        logger.debug("Found %d chapters with end markers", len(chapters))
        return chapters


class HeadingCascadeStrategy(SegmentationStrategy):
    """Line scan using the first heading grammar that matches the text."""

    method = DetectionMethod.HEADINGS

    def __init__(self, labels: ChapterLabels, patterns: list[HeadingPattern] | None = None):
        super().__init__(labels)
        self.patterns = patterns if patterns is not None else heading_patterns()

    def applies(self, text: str) -> bool:
        return True

    def split(self, text: str) -> list[Chapter]:
        pattern = find_heading_pattern(text, self.patterns)
        if pattern is None:
            logger.debug("No chapter pattern matched")
            return []

        logger.debug("Matched pattern: %s", pattern.name)
        return self._scan_lines(text, pattern)

    def _scan_lines(self, text: str, pattern: HeadingPattern) -> list[Chapter]:
        chapters: list[Chapter] = []
        title: str | None = None
        lines: list[str] = []

        for line in text.split("\n"):
            if pattern.matches_line(line):
                chapters.extend(self._flush(title, lines))
                title = line.strip()
                lines = []
            else:
                lines.append(line)

        if title is None:
            # The grammar matched somewhere but never as a whole line
            return []

        chapters.extend(self._flush(title, lines))
        return chapters

    def _flush(self, title: str | None, lines: list[str]) -> list[Chapter]:
        content = "\n".join(lines).strip()
        if title is None:
            # Text before the first heading
            return [Chapter(self.labels.preface, content)] if content else []
        return [Chapter(title, content)]


def normalize_newlines(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


class Segmenter:
    """
    Splits a plain-text document into chapters.

    The strategy table is evaluated in order; AUTO uses the first strategy
    that applies, any other method forces that single strategy. Whatever
    happens, at least one chapter comes back.
    """

    def __init__(
        self,
        method: DetectionMethod = DetectionMethod.AUTO,
        labels: ChapterLabels | None = None,
        title_from_first_line: bool = True,
        roman_headings: bool = False,
    ):
        self.method = method
        self.labels = labels or ChapterLabels()
        self.title_from_first_line = title_from_first_line
        # Priority order
        self.strategies: list[SegmentationStrategy] = [
            DashSeparatedStrategy(self.labels),
            EndMarkerStrategy(self.labels),
            HeadingCascadeStrategy(self.labels, heading_patterns(roman=roman_headings)),
        ]

    def segment(self, text: str) -> list[Chapter]:
        """
        Segment text into chapters.

        Returns:
            Non-empty list of chapters in reading order
        """
        text = normalize_newlines(text)
        logger.debug("Processing text: %s...", text[:200])

        strategy = self._pick_strategy(text)
        chapters = strategy.split(text) if strategy else []

        if not chapters:
            logger.info("No chapters detected, using the whole document")
            return [self._whole_document(text)]

        logger.info("Detected %d chapters (%s)", len(chapters), strategy.method.value)
        return chapters

    def _pick_strategy(self, text: str) -> SegmentationStrategy | None:
        for strategy in self.strategies:
            if self.method == DetectionMethod.AUTO:
                if strategy.applies(text):
                    return strategy
            elif strategy.method == self.method:
                return strategy
        return None

    def _whole_document(self, text: str) -> Chapter:
        """Collapse the document into a single chapter."""
        first_line, _, rest = text.partition("\n")
        first_line = first_line.strip()

        if self.title_from_first_line and first_line:
            return Chapter(first_line, rest.strip())
        return Chapter(self.labels.full_text, text.strip())


def segment(
    text: str,
    method: DetectionMethod = DetectionMethod.AUTO,
    labels: ChapterLabels | None = None,
    title_from_first_line: bool = True,
    roman_headings: bool = False,
) -> list[Chapter]:
    """
    Convenience function to segment text into chapters.

    Args:
        text: Whole document text
        method: Strategy preference
        labels: Placeholder titles
        title_from_first_line: Use the first line as the title when no
            chapters are detected
        roman_headings: Also recognize "Chapter IV" lines in the heading cascade

    Returns:
        Non-empty list of chapters
    """
    segmenter = Segmenter(
        method=method,
        labels=labels,
        title_from_first_line=title_from_first_line,
        roman_headings=roman_headings,
    )
    return segmenter.segment(text)
