"""Load study resources from a JSON file into the resources table."""
from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from reformed_chapter.database import get_db_connection
from reformed_chapter.models.schemas import Resource
from reformed_chapter.services.book_catalog import resolve_book
from reformed_chapter.services.cache_service import CacheService, close_redis, initialize_redis

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
logger = logging.getLogger("resource-import")

COLUMNS = (
    "type",
    "title",
    "author",
    "url",
    "price",
    "published_year",
    "description",
    "image",
    "book",
    "chapter",
    "chapter_end",
    "verse_start",
    "verse_end",
    "secondary_scripture",
)


def _load_json(path: Path) -> Sequence[dict[str, Any]]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def prepare_rows(data: Sequence[dict[str, Any]]) -> list[Resource]:
    """Validate rows and canonicalize book names; invalid rows are skipped."""
    prepared = []
    for index, entry in enumerate(data, start=1):
        try:
            resource = Resource.model_validate(entry)
        except ValidationError as exc:
            logger.warning("Row %s skipped: %s", index, exc)
            continue

        book = resolve_book(resource.book)
        if book is None:
            logger.warning("Row %s skipped: unknown book %r", index, resource.book)
            continue
        if not resource.type or not resource.title:
            logger.warning("Row %s skipped: type and title are required", index)
            continue

        prepared.append(resource.model_copy(update={"book": book}))
    return prepared


def import_resources(resources: Sequence[Resource], replace: bool = False) -> None:
    logger.info("Importing %s resources", len(resources))
    placeholders = ", ".join(["%s"] * len(COLUMNS))
    with get_db_connection() as conn:
        with conn.cursor() as cur:
            if replace:
                cur.execute("TRUNCATE resources RESTART IDENTITY;")
            for resource in resources:
                cur.execute(
                    f"INSERT INTO resources ({', '.join(COLUMNS)}) VALUES ({placeholders})",
                    tuple(getattr(resource, column) for column in COLUMNS),
                )
        conn.commit()


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("path", type=Path, help="JSON file containing a list of resource objects")
    parser.add_argument("--replace", action="store_true", help="Truncate the table before importing")
    args = parser.parse_args(argv)

    if not args.path.exists():
        logger.error("File not found: %s", args.path)
        return 1

    resources = prepare_rows(_load_json(args.path))
    import_resources(resources, replace=args.replace)

    initialize_redis()
    cleared = CacheService.invalidate_resources()
    close_redis()
    logger.info("Import complete (%s cached snapshot keys cleared)", cleared)
    return 0


if __name__ == "__main__":
    sys.exit(main())
