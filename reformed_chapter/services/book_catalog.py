"""Canonical Bible book catalogue with chapter counts and URL slugs."""
from __future__ import annotations

import re
from typing import Dict, List, Optional

BIBLE_BOOKS = [
    ("Genesis", 50),
    ("Exodus", 40),
    ("Leviticus", 27),
    ("Numbers", 36),
    ("Deuteronomy", 34),
    ("Joshua", 24),
    ("Judges", 21),
    ("Ruth", 4),
    ("1 Samuel", 31),
    ("2 Samuel", 24),
    ("1 Kings", 22),
    ("2 Kings", 25),
    ("1 Chronicles", 29),
    ("2 Chronicles", 36),
    ("Ezra", 10),
    ("Nehemiah", 13),
    ("Esther", 10),
    ("Job", 42),
    ("Psalms", 150),
    ("Proverbs", 31),
    ("Ecclesiastes", 12),
    ("Song of Solomon", 8),
    ("Isaiah", 66),
    ("Jeremiah", 52),
    ("Lamentations", 5),
    ("Ezekiel", 48),
    ("Daniel", 12),
    ("Hosea", 14),
    ("Joel", 3),
    ("Amos", 9),
    ("Obadiah", 1),
    ("Jonah", 4),
    ("Micah", 7),
    ("Nahum", 3),
    ("Habakkuk", 3),
    ("Zephaniah", 3),
    ("Haggai", 2),
    ("Zechariah", 14),
    ("Malachi", 4),
    ("Matthew", 28),
    ("Mark", 16),
    ("Luke", 24),
    ("John", 21),
    ("Acts", 28),
    ("Romans", 16),
    ("1 Corinthians", 16),
    ("2 Corinthians", 13),
    ("Galatians", 6),
    ("Ephesians", 6),
    ("Philippians", 4),
    ("Colossians", 4),
    ("1 Thessalonians", 5),
    ("2 Thessalonians", 3),
    ("1 Timothy", 6),
    ("2 Timothy", 4),
    ("Titus", 3),
    ("Philemon", 1),
    ("Hebrews", 13),
    ("James", 5),
    ("1 Peter", 5),
    ("2 Peter", 3),
    ("1 John", 5),
    ("2 John", 1),
    ("3 John", 1),
    ("Jude", 1),
    ("Revelation", 22),
]

CANONICAL_BOOK_LOOKUP = {name.lower(): name for name, _ in BIBLE_BOOKS}
CHAPTER_COUNTS = {name: chapters for name, chapters in BIBLE_BOOKS}
BOOK_SORT_INDEX = {name: idx for idx, (name, _) in enumerate(BIBLE_BOOKS)}

BOOK_ALIASES = {
    "psalm": "Psalms",
    "song of songs": "Song of Solomon",
    "songs of solomon": "Song of Solomon",
    "canticles": "Song of Solomon",
    "revelations": "Revelation",
    "apocalypse": "Revelation",
}

ROMAN_PREFIXES = {"i": "1", "ii": "2", "iii": "3"}


def normalize_book_key(book: Optional[str]) -> str:
    """Lower-case, trim and collapse whitespace; hyphens count as spaces.

    ``"1-corinthians"``, ``" 1  Corinthians"`` and ``"I Corinthians"`` all
    normalize to ``"1 corinthians"``.
    """
    if not isinstance(book, str) or not book:
        return ""
    key = re.sub(r"[\s\-_]+", " ", book.replace(".", " ")).strip().lower()
    head, _, tail = key.partition(" ")
    if tail and head in ROMAN_PREFIXES:
        key = f"{ROMAN_PREFIXES[head]} {tail}"
    # "1corinthians" -> "1 corinthians"
    return re.sub(r"^([1-3])(?=[a-z])", r"\1 ", key)


def resolve_book(book: Optional[str]) -> Optional[str]:
    """Return the canonical display name for a book name, slug or alias."""
    key = normalize_book_key(book)
    if not key:
        return None
    if key in BOOK_ALIASES:
        return BOOK_ALIASES[key]
    return CANONICAL_BOOK_LOOKUP.get(key)


def book_to_slug(book: str) -> str:
    """``"Song of Solomon"`` -> ``"song-of-solomon"``."""
    return normalize_book_key(book).replace(" ", "-")


def slug_to_book(slug: str) -> Optional[str]:
    return resolve_book(slug)


def chapter_count(book: str) -> Optional[int]:
    canonical = resolve_book(book)
    if canonical is None:
        return None
    return CHAPTER_COUNTS[canonical]


def list_books() -> List[Dict[str, object]]:
    return [
        {"name": name, "slug": book_to_slug(name), "chapters": chapters}
        for name, chapters in BIBLE_BOOKS
    ]
