"""Service layer for looking up study resources by book and chapter."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Iterable, List, Optional

import psycopg2
from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from reformed_chapter.models.schemas import Resource
from reformed_chapter.repositories import ResourceRepository
from reformed_chapter.services import book_catalog
from reformed_chapter.services.cache_service import CacheService
from reformed_chapter.services.reference_resolver import ReferenceResolver
from reformed_chapter.utils.exceptions import DatabaseError, ValidationError

LOGGER = logging.getLogger(__name__)

RESOURCE_GROUPS = ("sermons", "commentaries", "devotionals", "books", "videos")

TYPE_TO_GROUP = {
    "sermon": "sermons",
    "commentary": "commentaries",
    "commentarie": "commentaries",
    "devotional": "devotionals",
    "book": "books",
    "video": "videos",
}

PRICE_OPTIONS = ("free", "paid")

SORT_OPTIONS = ("", "alphabetical", "newest", "scripture")
SORT_ALIASES = {"date": "newest"}


@dataclass(frozen=True)
class ResourceFilters:
    """Filter selections for a chapter page; empty authors/price mean "any"."""

    types: FrozenSet[str] = field(default_factory=lambda: frozenset(RESOURCE_GROUPS))
    authors: FrozenSet[str] = field(default_factory=frozenset)
    price: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def from_query(
        cls,
        types: Optional[Iterable[str]] = None,
        authors: Optional[Iterable[str]] = None,
        price: Optional[Iterable[str]] = None,
    ) -> "ResourceFilters":
        selected_types = frozenset(t.strip().lower() for t in types or [] if t and t.strip())
        unknown = selected_types - set(RESOURCE_GROUPS)
        if unknown:
            raise ValidationError(f"Unknown resource type(s): {', '.join(sorted(unknown))}")

        selected_price = frozenset(p.strip().lower() for p in price or [] if p and p.strip())
        if selected_price - set(PRICE_OPTIONS):
            raise ValidationError("price must be 'free' or 'paid'")

        return cls(
            types=selected_types or frozenset(RESOURCE_GROUPS),
            authors=frozenset(a.strip() for a in authors or [] if a and a.strip()),
            price=selected_price,
        )


def resource_group(resource_type: Optional[str]) -> Optional[str]:
    """Map a free-form type ("Sermon", "commentaries ") to its group key."""
    if not resource_type:
        return None
    normalized = resource_type.strip().lower()
    if normalized.endswith("s"):
        normalized = normalized[:-1]
    return TYPE_TO_GROUP.get(normalized)


def price_class(price: Optional[str]) -> str:
    if not price or not price.strip() or price.strip().lower() == "free":
        return "free"
    return "paid"


def covers_chapter(resource: Resource, book: str, chapter: int) -> bool:
    """Primary match: same book and chapter within the resource's range."""
    if book_catalog.resolve_book(resource.book) != book:
        return False
    if resource.chapter is None:
        return True
    start = resource.chapter
    end = resource.chapter_end if resource.chapter_end and resource.chapter_end >= start else start
    return start <= chapter <= end


class ResourceService:
    """Coordinates resource lookups for chapter pages."""

    def __init__(self, resolver: Optional[ReferenceResolver] = None):
        self.resolver = resolver or ReferenceResolver()

    def _load_resources(self) -> List[Resource]:
        rows = CacheService.get_resources()
        if rows is None:
            try:
                rows = ResourceRepository.list_resources()
            except psycopg2.Error as exc:
                LOGGER.error("Database error retrieving resources: %s", exc)
                raise DatabaseError("Failed to retrieve resources from database") from exc
            CacheService.set_resources(rows)

        resources = []
        for row in rows:
            try:
                resources.append(Resource.model_validate(row))
            except PydanticValidationError as exc:
                LOGGER.warning("Skipping malformed resource row %s: %s", row.get("id"), exc)
        return resources

    @staticmethod
    def _resolve_book_or_404(book: str) -> str:
        canonical = book_catalog.resolve_book(book)
        if canonical is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Book not found")
        return canonical

    @staticmethod
    def _apply_filters(items: List[Resource], filters: ResourceFilters) -> List[Resource]:
        filtered = []
        for item in items:
            if resource_group(item.type) not in filters.types:
                continue
            if filters.authors and (item.author or "").strip() not in filters.authors:
                continue
            if filters.price and price_class(item.price) not in filters.price:
                continue
            filtered.append(item)
        return filtered

    @staticmethod
    def _sort(items: List[Resource], sort_by: str) -> List[Resource]:
        if sort_by == "alphabetical":
            return sorted(items, key=lambda r: r.title.casefold())
        if sort_by == "newest":
            return sorted(items, key=lambda r: r.published_year or 0, reverse=True)
        if sort_by == "scripture":
            return sorted(
                items,
                key=lambda r: (
                    book_catalog.BOOK_SORT_INDEX.get(book_catalog.resolve_book(r.book), len(book_catalog.BIBLE_BOOKS)),
                    r.chapter or 0,
                    r.verse_start or 0,
                ),
            )
        return list(items)

    @staticmethod
    def _group(items: List[Resource]) -> Dict[str, List[Resource]]:
        grouped: Dict[str, List[Resource]] = {key: [] for key in RESOURCE_GROUPS}
        for item in items:
            key = resource_group(item.type)
            if key is not None:
                grouped[key].append(item)
        return grouped

    def split_resources(self, resources: List[Resource], book: str, chapter: int):
        """Return (primary, secondary) resources for a book and chapter."""
        primary = [r for r in resources if covers_chapter(r, book, chapter)]
        primary_ids = {id(r) for r in primary}
        secondary = [
            r
            for r in resources
            if r.secondary_scripture
            and id(r) not in primary_ids
            and self.resolver.matches(r.secondary_scripture, book, chapter)
        ]
        return primary, secondary

    def get_chapter_resources(
        self,
        book: str,
        chapter: int,
        filters: Optional[ResourceFilters] = None,
        sort_by: str = "",
    ) -> Dict[str, object]:
        canonical = self._resolve_book_or_404(book)
        total_chapters = book_catalog.CHAPTER_COUNTS[canonical]
        if chapter < 1 or chapter > total_chapters:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Chapter not found")

        sort_key = SORT_ALIASES.get(sort_by or "", sort_by or "")
        if sort_key not in SORT_OPTIONS:
            raise ValidationError(f"sort must be one of: {', '.join(o for o in SORT_OPTIONS if o)}")
        filters = filters or ResourceFilters()

        primary, secondary = self.split_resources(self._load_resources(), canonical, chapter)
        LOGGER.info(
            "Resolved %s primary and %s secondary resources for %s %s",
            len(primary),
            len(secondary),
            canonical,
            chapter,
        )

        primary = self._sort(self._apply_filters(primary, filters), sort_key)
        secondary = self._sort(self._apply_filters(secondary, filters), sort_key)

        return {
            "book": canonical,
            "slug": book_catalog.book_to_slug(canonical),
            "chapter": chapter,
            "total_chapters": total_chapters,
            "previous_chapter": chapter - 1 if chapter > 1 else None,
            "next_chapter": chapter + 1 if chapter < total_chapters else None,
            "resource_count": len(primary) + len(secondary),
            "primary": self._group(primary),
            "secondary": self._group(secondary),
        }

    def list_authors(self) -> List[str]:
        authors = {r.author.strip() for r in self._load_resources() if r.author and r.author.strip()}
        return sorted(authors, key=str.casefold)

    def list_books(self) -> List[Dict[str, object]]:
        return book_catalog.list_books()

    def get_book(self, slug: str) -> Dict[str, object]:
        canonical = self._resolve_book_or_404(slug)
        return {
            "name": canonical,
            "slug": book_catalog.book_to_slug(canonical),
            "chapters": book_catalog.CHAPTER_COUNTS[canonical],
        }


def get_resource_service() -> ResourceService:
    return ResourceService()
