"""Marker grammar for plain-text chapter detection.

This module holds the vocabulary shared by the segmenter and the edit
session:

1. Separator tokens (dash block separator, end-of-chapter sentinel,
   manual split marker)
2. Heading patterns tried by the regex cascade, in priority order
3. Roman numeral validation for "Chapter IV" style headings
4. Placeholder labels for chapters without a heading
"""

import re
from dataclasses import dataclass

# Manual split marker inserted by the edit session
SPLIT_MARKER = "==== split chapter ===="
SPLIT_MARKER_BLOCK = f"\n\n{SPLIT_MARKER}\n\n"

# Sentinel some exported manuscripts put after each chapter
CHAPTER_END_MARKER = "---CHAPTER END---"

# A line consisting of exactly three hyphens
DASH_SEPARATOR = "---"
DASH_SEPARATOR_LINE = f"\n{DASH_SEPARATOR}\n"

ENGLISH_NUMBERS = [
    "zero", "one", "two", "three", "four", "five",
    "six", "seven", "eight", "nine", "ten",
    "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty",
]

_ENGLISH_NUMBER_ALTERNATION = "|".join(ENGLISH_NUMBERS)

# Roman numerals I to XXXIX
ROMAN_NUMERAL_PATTERN = re.compile(r"^X{0,3}(IX|IV|V?I{0,3})$")

# Trigger for the dash strategy (case-sensitive)
ROMAN_CHAPTER_TRIGGER = re.compile(r"Chapter\s+[IVXLC]+\b")
ROMAN_CHAPTER_HEADING = re.compile(r"Chapter\s+([IVXLC]+)\b", re.IGNORECASE)

END_MARKER_HEADING = re.compile(
    rf"Chapter\s+({_ENGLISH_NUMBER_ALTERNATION}|\d+)[^\n]*", re.IGNORECASE
)


def is_roman_numeral(value: str) -> bool:
    """Check that value is a well-formed roman numeral between I and XXXIX."""
    return bool(value) and ROMAN_NUMERAL_PATTERN.match(value) is not None


@dataclass(frozen=True)
class HeadingPattern:
    """A named heading grammar used by the regex cascade."""

    name: str
    regex: re.Pattern

    def found_in(self, text: str) -> bool:
        """Check whether the grammar matches anywhere in text."""
        return self.regex.search(text) is not None

    def matches_line(self, line: str) -> bool:
        """Check whether a single line (stripped first) is a heading."""
        return self.regex.search(line.strip()) is not None


HEADING_PATTERNS = [
    # 第1章, 第01章, 第100章
    HeadingPattern("chinese-digit", re.compile(r"第[0-9]{1,4}章[^\n]*")),
    # 第一章, 第十一章, 第一百章
    HeadingPattern("chinese-numeral", re.compile(r"第[一二三四五六七八九十百千万]+章[^\n]*")),
    # Chapter 1, Chapter 01
    HeadingPattern("chapter-digit", re.compile(r"Chapter\s*[0-9]{1,4}[^\n]*", re.IGNORECASE)),
    # Chapter One, Chapter Twenty
    HeadingPattern(
        "chapter-word",
        re.compile(rf"Chapter\s+({_ENGLISH_NUMBER_ALTERNATION})[^\n]*", re.IGNORECASE),
    ),
    # 1. / 1: / 1：
    HeadingPattern("numbered-line", re.compile(r"^\s*[0-9]+[.:：]", re.MULTILINE)),
]


# Chapter I, Chapter XIV (opt-in, see heading_patterns)
ROMAN_HEADING_PATTERN = HeadingPattern(
    "chapter-roman", re.compile(r"Chapter\s+[IVXLC]+\b[^\n]*", re.IGNORECASE)
)


def heading_patterns(roman: bool = False) -> list[HeadingPattern]:
    """The cascade grammars in priority order.

    With roman=True the "Chapter IV" grammar is tried after the English
    number words and before numbered lines.
    """
    patterns = list(HEADING_PATTERNS)
    if roman:
        patterns.insert(len(patterns) - 1, ROMAN_HEADING_PATTERN)
    return patterns


def find_heading_pattern(
    text: str, patterns: list[HeadingPattern] | None = None
) -> HeadingPattern | None:
    """Return the first heading grammar in priority order that matches text."""
    for pattern in patterns if patterns is not None else HEADING_PATTERNS:
        if pattern.found_in(text):
            return pattern
    return None


@dataclass(frozen=True)
class ChapterLabels:
    """Placeholder titles for chapters that have no heading of their own."""

    full_text: str = "全文"
    preface: str = "序言"
    unnamed: str = "未命名章节"
