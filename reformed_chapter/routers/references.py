"""API routes for secondary-scripture citation parsing."""
from dataclasses import asdict

from fastapi import APIRouter, Depends, Query

from reformed_chapter.models.schemas import CitationParseResponse, ReferenceMatchResponse
from reformed_chapter.services.reference_resolver import ReferenceResolver, get_reference_resolver

MAX_CITATION_LENGTH = 500

router = APIRouter(prefix="/api/references", tags=["references"])


@router.get("/parse", response_model=CitationParseResponse)
async def parse_citation(
    citation: str = Query(..., max_length=MAX_CITATION_LENGTH, description="Citation text, e.g. 'Matthew 5; Luke 6:20-26'"),
    resolver: ReferenceResolver = Depends(get_reference_resolver),
):
    return {
        "citation": citation,
        "references": [asdict(item) for item in resolver.parse(citation)],
    }


@router.get("/match", response_model=ReferenceMatchResponse)
async def match_citation(
    citation: str = Query(..., max_length=MAX_CITATION_LENGTH, description="Citation text"),
    book: str = Query(..., min_length=1, description="Book name or slug, e.g. '1-corinthians'"),
    chapter: int = Query(..., ge=1),
    resolver: ReferenceResolver = Depends(get_reference_resolver),
):
    return {
        "citation": citation,
        "book": book,
        "chapter": chapter,
        "matches": resolver.matches(citation, book, chapter),
    }
