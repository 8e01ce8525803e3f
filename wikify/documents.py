"""Document retrieval and selector helpers."""

from __future__ import annotations

import logging
from typing import Optional

import requests
from bs4 import BeautifulSoup, Tag

from .errors import FetchError

logger = logging.getLogger("wikify")


def build_session(user_agent: str) -> requests.Session:
    """Create a session that identifies itself on every request."""
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    return session


def fetch_document(
    session: requests.Session,
    url: str,
    timeout: float,
) -> BeautifulSoup:
    """Fetch a URL and parse the response body as HTML."""
    logger.debug("Loading %s", url)
    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FetchError(url, str(exc)) from exc

    content_type = resp.headers.get("Content-Type", "")
    if content_type and "html" not in content_type.lower():
        raise FetchError(url, f"unexpected Content-Type {content_type!r}")
    return BeautifulSoup(resp.text, "html.parser")


def ancestor_depth(node: Tag) -> int:
    """Count the ancestors of a node, document root included."""
    return sum(1 for _ in node.parents)


def node_text(node: Optional[Tag]) -> Optional[str]:
    """Return the trimmed text content of a node, or None when absent."""
    if node is None:
        return None
    return node.get_text().strip()
