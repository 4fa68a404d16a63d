"""Write sitemap.xml for the home page and every book/chapter page."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from reformed_chapter.services.sitemap_service import build_sitemap

logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
logger = logging.getLogger("sitemap")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--output", type=Path, default=Path("public") / "sitemap.xml")
    parser.add_argument("--hostname", default=None, help="Defaults to SITE_URL")
    args = parser.parse_args(argv)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    args.output.write_text(build_sitemap(args.hostname), encoding="utf-8")
    logger.info("Sitemap written to %s", args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
