"""Sitemap route."""
from fastapi import APIRouter
from fastapi.responses import Response

from reformed_chapter.services.sitemap_service import build_sitemap

router = APIRouter(tags=["sitemap"])


@router.get("/sitemap.xml", include_in_schema=False)
async def get_sitemap():
    return Response(content=build_sitemap(), media_type="application/xml")
