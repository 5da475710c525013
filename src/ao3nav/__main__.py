"""Entry point for the ao3nav command."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from ao3nav import __version__
from ao3nav.config import get_config
from ao3nav.services.chapter_service import ChapterService


def main(argv: list[str] | None = None) -> int:
    """Print the chapter list of a work."""
    parser = argparse.ArgumentParser(prog="ao3nav", description="List the chapters of a work.")
    parser.add_argument("work_id", help="numeric work id")
    parser.add_argument("--log-level", default=None, help="logging level (default from config)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=(args.log_level or get_config().log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    outcome = asyncio.run(ChapterService().fetch_chapters(args.work_id))
    if not outcome.ok:
        print(f"error: {outcome.failure.value}: {outcome.message}", file=sys.stderr)
        return 1

    for chapter in outcome.chapters:
        print(f"{chapter.id or '-'}\t{chapter.date or '-'}\t{chapter.name or ''}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
