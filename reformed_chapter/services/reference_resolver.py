"""Resolve free-text secondary-scripture citations against a book and chapter."""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from reformed_chapter.services.book_catalog import CHAPTER_COUNTS, normalize_book_key, resolve_book

LOGGER = logging.getLogger(__name__)

SEGMENT_DELIMITERS = re.compile(r"[,;]")

SEGMENT_PATTERN = re.compile(
    r"^(?P<book>(?:[1-3][\s\-]*)?[A-Za-z]+(?:[\s.\-]+[A-Za-z]+)*)\.?\s*(?P<locator>\d[\d:\s\-a-c]*)?$",
    re.IGNORECASE,
)

LOCATOR_SEPARATORS = re.compile(r"([:\-])")

# C | C:V | C-C | C:V-V | C:V-C:V  (verse numbers may carry an a/b/c suffix)
LOCATOR_PATTERN = re.compile(
    r"^(?P<chapter>\d+)(?::(?P<verse>\d+)[a-c]?)?"
    r"(?:-(?P<end>\d+)[a-c]?(?::(?P<end_verse>\d+)[a-c]?)?)?$",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class Citation:
    """One parsed segment of a secondary-scripture string."""

    book: str
    chapter_start: int
    chapter_end: int
    verse_start: Optional[int] = None
    verse_end: Optional[int] = None

    def covers(self, chapter: int) -> bool:
        return self.chapter_start <= chapter <= self.chapter_end


class ReferenceResolver:
    """Parses citation strings and decides whether they reference a chapter.

    Every method is total: malformed input degrades to "no citation" and
    nothing here raises.
    """

    @staticmethod
    def _parse_locator(book: str, locator: str) -> Optional[Citation]:
        dashed = locator.replace("\u2013", "-").replace("\u2014", "-")
        # whitespace around ":" and "-" is insignificant
        cleaned = "".join(part.strip() for part in LOCATOR_SEPARATORS.split(dashed))
        match = LOCATOR_PATTERN.match(cleaned)
        if not match:
            return None

        chapter_start = int(match.group("chapter"))
        if chapter_start < 1:
            return None

        verse_start = int(match.group("verse")) if match.group("verse") else None
        chapter_end = chapter_start
        verse_end: Optional[int] = None

        end_value = match.group("end")
        if end_value is not None:
            if match.group("end_verse") is not None:
                chapter_end = int(end_value)
                verse_end = int(match.group("end_verse"))
            elif verse_start is not None:
                verse_end = int(end_value)
            else:
                chapter_end = int(end_value)

        if chapter_end < chapter_start:
            # Inverted range collapses to the start chapter.
            chapter_end = chapter_start
            verse_end = None
        elif chapter_end == chapter_start and verse_start is not None and verse_end is not None and verse_end < verse_start:
            verse_end = None

        return Citation(book, chapter_start, chapter_end, verse_start, verse_end)

    @classmethod
    def parse_segment(cls, segment: str) -> Optional[Citation]:
        """Parse a single ``Book [locator]`` segment, or return None."""
        text = segment.strip() if segment else ""
        if not text:
            return None

        normalized = text.replace("\u2013", "-").replace("\u2014", "-")
        match = SEGMENT_PATTERN.match(normalized)
        if not match:
            LOGGER.debug("Skipping unparseable citation segment '%s'", text)
            return None

        book = resolve_book(match.group("book"))
        if book is None:
            LOGGER.debug("Skipping citation segment with unknown book '%s'", text)
            return None

        locator = match.group("locator")
        if not locator:
            return Citation(book, 1, CHAPTER_COUNTS[book])

        return cls._parse_locator(book, locator)

    @classmethod
    def parse(cls, citation: Optional[str]) -> List[Citation]:
        """Parse every comma/semicolon delimited segment, in written order."""
        if not isinstance(citation, str) or not citation.strip():
            return []

        citations = []
        for segment in SEGMENT_DELIMITERS.split(citation):
            parsed = cls.parse_segment(segment)
            if parsed is not None:
                citations.append(parsed)
        return citations

    @classmethod
    def matches(cls, citation: Optional[str], target_book: str, target_chapter: int) -> bool:
        """Return True if any segment of ``citation`` covers the book and chapter."""
        if not isinstance(citation, str) or not citation.strip():
            return False
        if isinstance(target_chapter, bool) or not isinstance(target_chapter, int) or target_chapter < 1:
            return False

        target = resolve_book(target_book)
        target_key = normalize_book_key(target if target else target_book)
        if not target_key:
            return False

        for segment in SEGMENT_DELIMITERS.split(citation):
            parsed = cls.parse_segment(segment)
            if parsed is None:
                continue
            if normalize_book_key(parsed.book) == target_key and parsed.covers(target_chapter):
                return True
        return False


def get_reference_resolver() -> ReferenceResolver:
    return ReferenceResolver()
