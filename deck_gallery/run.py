"""Command line entry points."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import uvicorn

from deck_gallery.config.settings import get_settings
from deck_gallery.utils.deck_splitter import split_deck
from deck_gallery.utils.logging_config import setup_logging
from deck_gallery.utils.viewport_fitter import fit_to_viewport

logger = logging.getLogger(__name__)


def main() -> None:
    """Start the uvicorn server."""
    settings = get_settings()
    setup_logging(settings.logging.level, settings.logging.format)

    logger.info(
        "Starting server",
        extra={"host": settings.api.host, "port": settings.api.port},
    )
    uvicorn.run(
        "deck_gallery.api.main:app",
        host=settings.api.host,
        port=settings.api.port,
        log_config=None,
    )


def split_command(argv: list[str] | None = None) -> int:
    """Split an HTML deck into one file per slide.

    Usage: deck-gallery-split deck.html -o out/ [--fit]
    """
    parser = argparse.ArgumentParser(description="Split an HTML deck into standalone slide files")
    parser.add_argument("source", type=Path, help="HTML deck to split")
    parser.add_argument("-o", "--output-dir", type=Path, default=Path("slides"))
    parser.add_argument("--fit", action="store_true", help="Inject the fit-to-width script")
    args = parser.parse_args(argv)

    setup_logging("INFO", "text")

    if not args.source.exists():
        logger.error(f"Source file not found: {args.source}")
        return 1

    slides = split_deck(args.source.read_text(encoding="utf-8", errors="replace"))
    args.output_dir.mkdir(parents=True, exist_ok=True)
    for idx, slide_html in enumerate(slides, start=1):
        if args.fit:
            slide_html = fit_to_viewport(slide_html)
        (args.output_dir / f"slide_{idx:03d}.html").write_text(slide_html, encoding="utf-8")

    logger.info(f"Wrote {len(slides)} slide(s) to {args.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(split_command())
