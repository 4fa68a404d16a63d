"""Sitemap generation for the home page and every chapter page."""
from typing import List, Optional
from xml.sax.saxutils import escape

from reformed_chapter.config import get_settings
from reformed_chapter.services.book_catalog import BIBLE_BOOKS, book_to_slug

SITEMAP_NAMESPACE = "http://www.sitemaps.org/schemas/sitemap/0.9"


def _url_entry(loc: str, changefreq: str, priority: str) -> str:
    return (
        "  <url>\n"
        f"    <loc>{escape(loc)}</loc>\n"
        f"    <changefreq>{changefreq}</changefreq>\n"
        f"    <priority>{priority}</priority>\n"
        "  </url>"
    )


def chapter_urls(hostname: str) -> List[str]:
    base = hostname.rstrip("/")
    return [
        f"{base}/{book_to_slug(name)}/{chapter}"
        for name, chapters in BIBLE_BOOKS
        for chapter in range(1, chapters + 1)
    ]


def build_sitemap(hostname: Optional[str] = None) -> str:
    """Render sitemap XML: the home page plus one entry per book/chapter."""
    hostname = (hostname or get_settings().site_url).rstrip("/")
    entries = [_url_entry(f"{hostname}/", "daily", "1.0")]
    entries.extend(_url_entry(url, "weekly", "0.7") for url in chapter_urls(hostname))
    body = "\n".join(entries)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NAMESPACE}">\n'
        f"{body}\n"
        "</urlset>\n"
    )
