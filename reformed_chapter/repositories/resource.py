"""Read-only access to the study resources table."""
from typing import Any, List

from reformed_chapter.database import get_db_connection


class ResourceRepository:
    """Read-only access to study resources (sermons, commentaries, devotionals, books, videos)."""

    @staticmethod
    def list_resources() -> List[dict[str, Any]]:
        with get_db_connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    SELECT id, book, chapter, chapter_end, verse_start, verse_end,
                           secondary_scripture, type, title, author, url, price,
                           published_year, description, image
                    FROM resources
                    ORDER BY id
                    """
                )
                rows = cur.fetchall()
        return [dict(row) for row in rows]
