"""Selector rules and field extraction for image description pages."""

from __future__ import annotations

from typing import List, Optional, Sequence

from bs4 import BeautifulSoup, Tag

from .documents import ancestor_depth, node_text
from .models import ExtractedMetadata

IMAGE_ANCHOR_SELECTOR = ".infobox-image a"
FULL_IMAGE_SELECTOR = ".fullImageLink a"

# Known file-description template shapes. Matches are pooled, see deepest_match.
AUTHOR_SELECTORS = (
    "#fileinfotpl_aut + td",
    ".fileinfotpl_src + td a",
    "#fileinfotpl_src + td p a:not(.autonumber)",
    "#fileinfotpl_src + td p",
    "div.fileinfotpl_src a.text",
)
LICENSE_SELECTOR = ".licensetpl_short"
LICENSE_CONTEXT_SELECTORS = (
    ".licensetpl a[href='/wiki/Poster']",
    ".licensetpl a[href='/wiki/Film_poster']",
    ".licensetpl a[href='/wiki/DVD']",
    ".licensetpl a[href='/wiki/Screenshot']",
    "a[title='w:public domain']",
    "a[title='en:public domain']",
)
USER_SELECTOR = ".wikitable.filehistory tr:nth-child(2) .mw-userlink"


def _combined(selectors: Sequence[str]) -> str:
    return ", ".join(selectors)


def deepest_match(document: BeautifulSoup, selectors: Sequence[str]) -> Optional[Tag]:
    """Pool every match of the selectors and keep the most deeply nested one.

    Ties go to the node that appears first in the document.
    """
    matches: List[Tag] = document.select(_combined(selectors))
    if not matches:
        return None
    return max(matches, key=ancestor_depth)


def first_match(document: BeautifulSoup, selectors: Sequence[str]) -> Optional[Tag]:
    """Return the first node, in document order, matching any of the selectors."""
    return document.select_one(_combined(selectors))


def extract_metadata(document: BeautifulSoup) -> ExtractedMetadata:
    """Read author, uploader and license fields from a file description page."""
    return ExtractedMetadata(
        author=node_text(deepest_match(document, AUTHOR_SELECTORS)),
        user=node_text(first_match(document, (USER_SELECTOR,))),
        license=node_text(first_match(document, (LICENSE_SELECTOR,))),
        license_context=node_text(first_match(document, LICENSE_CONTEXT_SELECTORS)),
    )


def find_image_page_href(document: BeautifulSoup) -> Optional[str]:
    """Return the site-relative href of the infobox image, if any."""
    anchor = document.select_one(IMAGE_ANCHOR_SELECTOR)
    if anchor is None:
        return None
    return anchor.get("href")


def find_full_image_href(document: BeautifulSoup) -> Optional[str]:
    """Return the href of the full-resolution image link, if any."""
    anchor = document.select_one(FULL_IMAGE_SELECTOR)
    if anchor is None:
        return None
    return anchor.get("href")
