"""Per-item navigation and the sequential batch loop."""

from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, Iterable, Optional

import requests

from .config import HarvestConfig
from .content import extract_metadata, find_full_image_href, find_image_page_href
from .documents import build_session, fetch_document
from .errors import ItemProcessingError
from .images import download_asset, resolve_asset_url
from .ledger import ResumeLedger
from .models import InputRecord, ItemOutcome, ItemResult

logger = logging.getLogger("wikify")


@dataclass
class BatchSummary:
    """Counts of how each record in a batch ended up."""

    total: int = 0
    skipped: int = 0
    saved: int = 0
    issues: int = 0
    errors: int = 0


def image_page_url(config: HarvestConfig, href: str) -> str:
    """Prefix a site-relative href with the wiki base URL."""
    return config.wiki_base.rstrip("/") + href


def _harvest(
    record: InputRecord,
    session: requests.Session,
    config: HarvestConfig,
    ledger: ResumeLedger,
) -> ItemOutcome:
    subject = fetch_document(session, record.link, config.timeout)
    href = find_image_page_href(subject)
    if not href:
        logger.debug("No infobox image on %s", record.link)
        return ItemOutcome.NO_IMAGE

    description = fetch_document(session, image_page_url(config, href), config.timeout)
    full_href = find_full_image_href(description)
    if not full_href:
        logger.debug("No full image link for item %s", record.id)
        return ItemOutcome.NO_IMAGE

    asset_url = resolve_asset_url(full_href)
    download_asset(session, asset_url, record.id, config.output_root, config.timeout)

    metadata = extract_metadata(description)
    path = ledger.save_metadata(record.id, metadata)
    logger.debug("Saved metadata to %s", path)
    return ItemOutcome.SAVED


def process_item(
    record: InputRecord,
    session: requests.Session,
    config: HarvestConfig,
    ledger: ResumeLedger,
) -> ItemResult:
    """Follow subject page -> image page for one record and persist the result.

    A missing image link on either page is a normal outcome, not a failure.
    """
    try:
        outcome = _harvest(record, session, config, ledger)
    except Exception as exc:  # pylint: disable=broad-except
        return ItemResult(ItemOutcome.FAILED, ItemProcessingError(record.id, exc))
    return ItemResult(outcome)


def run_batch(
    records: Iterable[InputRecord],
    config: HarvestConfig,
    session: Optional[requests.Session] = None,
    rng: Optional[random.Random] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> BatchSummary:
    """Process records strictly in order, pausing between every attempted item.

    A session created here is closed when the batch ends; a passed-in one is left open.
    """
    if session is None:
        with build_session(config.user_agent) as owned:
            return run_batch(records, config, session=owned, rng=rng, sleep=sleep)

    rng = rng or random.Random()
    ledger = ResumeLedger(config.output_root)
    config.output_root.mkdir(parents=True, exist_ok=True)
    summary = BatchSummary()

    for record in records:
        summary.total += 1
        if ledger.is_done(record.id):
            logger.info("Skipped - %s: %s", record.id, record.link)
            summary.skipped += 1
            continue

        logger.info("Processing - %s: %s", record.id, record.link)
        result = process_item(record, session, config, ledger)
        sleep(config.delay_for(rng))

        if result.outcome is ItemOutcome.FAILED:
            logger.error("Error - %s: %s (%s)", record.id, record.link, result.error)
            ledger.mark_error(record.id, result.error)
            summary.errors += 1
        elif not ledger.is_complete(record.id):
            logger.warning("Issue - %s: %s", record.id, record.link)
            ledger.mark_missing(record.id, record.link)
            summary.issues += 1
        else:
            summary.saved += 1
    return summary
