"""API routes for books and chapter resources."""
from fastapi import APIRouter, Depends, Path, Query
from typing import List

from reformed_chapter.models.schemas import AuthorsResponse, BookInfo, ChapterResourcesResponse
from reformed_chapter.services.resource_service import (
    ResourceFilters,
    ResourceService,
    get_resource_service,
)

router = APIRouter(prefix="/api", tags=["resources"])


@router.get("/books", response_model=List[BookInfo])
async def list_books(
    service: ResourceService = Depends(get_resource_service),
):
    return service.list_books()


@router.get("/books/{slug}", response_model=BookInfo)
async def get_book(
    slug: str,
    service: ResourceService = Depends(get_resource_service),
):
    return service.get_book(slug)


@router.get("/resources/{book}/{chapter}", response_model=ChapterResourcesResponse)
async def get_chapter_resources(
    book: str = Path(..., description="Book slug, e.g. '1-corinthians'"),
    chapter: int = Path(..., ge=1),
    types: List[str] | None = Query(default=None, description="Resource groups to include; omit for all"),
    authors: List[str] | None = Query(default=None, description="Authors to include; omit for all"),
    price: List[str] | None = Query(default=None, description="'free' and/or 'paid'; omit for both"),
    sort: str = Query(default="", description="'', 'alphabetical', 'newest' or 'scripture'"),
    service: ResourceService = Depends(get_resource_service),
):
    """Primary and secondary resources for a chapter, grouped by type."""
    filters = ResourceFilters.from_query(types=types, authors=authors, price=price)
    return service.get_chapter_resources(book, chapter, filters=filters, sort_by=sort)


@router.get("/authors", response_model=AuthorsResponse)
async def list_authors(
    service: ResourceService = Depends(get_resource_service),
):
    return {"authors": service.list_authors()}
