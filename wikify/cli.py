"""Command-line entry point for the poster harvester."""

from __future__ import annotations

import argparse
import logging
import os
import time
from pathlib import Path
from typing import Sequence

from .config import (
    DEFAULT_INPUT_PATH,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_PAUSE_SECONDS,
    DEFAULT_TIMEOUT,
    DEFAULT_WIKI_BASE,
    HarvestConfig,
    resolve_user_agent,
)
from .crawler import run_batch
from .records import read_records

logger = logging.getLogger("wikify")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Download infobox poster images and their license details from Wikipedia.",
    )
    parser.add_argument(
        "--input",
        default=DEFAULT_INPUT_PATH,
        type=Path,
        help="CSV file with movie_id and link columns",
    )
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT_DIR,
        type=Path,
        help="Directory where images, metadata and skip markers are written",
    )
    parser.add_argument(
        "--pause",
        type=float,
        default=DEFAULT_PAUSE_SECONDS,
        help="Base pause in seconds between items; each pause is 50-100%% of this",
    )
    parser.add_argument(
        "--user-agent",
        default=None,
        help="User-Agent sent with every request (defaults to $WIKIFY_USER_AGENT)",
    )
    parser.add_argument(
        "--wiki-base",
        default=DEFAULT_WIKI_BASE,
        help="Base URL prefixed to site-relative image page links",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=DEFAULT_TIMEOUT,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def _configure_logging(verbose: bool) -> None:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.DEBUG if verbose else getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )
    if not verbose:
        for noisy in ("urllib3", "requests"):
            logging.getLogger(noisy).setLevel(logging.WARNING)


def build_config(args: argparse.Namespace) -> HarvestConfig:
    return HarvestConfig(
        output_root=Path(args.output).resolve(),
        user_agent=resolve_user_agent(args.user_agent),
        wiki_base=args.wiki_base,
        pause_seconds=args.pause,
        timeout=args.timeout,
    )


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    _configure_logging(args.verbose)
    config = build_config(args)

    records = read_records(args.input)
    logger.info("Started...")
    overall_start = time.perf_counter()
    summary = run_batch(records, config)
    total_elapsed = time.perf_counter() - overall_start
    logger.info(
        "Finished in %.2fs (%d records: %d saved, %d skipped, %d issues, %d errors)",
        total_elapsed,
        summary.total,
        summary.saved,
        summary.skipped,
        summary.issues,
        summary.errors,
    )
    logger.info("Done!")


if __name__ == "__main__":
    main()
