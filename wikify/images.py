"""Poster image downloading utilities."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath
from typing import Optional
from urllib.parse import urlparse

import requests
from filetype import guess

from .errors import AssetIOError

logger = logging.getLogger("wikify")


def resolve_asset_url(href: str) -> str:
    """Upgrade protocol-relative hrefs (``//host/path``) to https."""
    if href.startswith("//"):
        return "https:" + href
    return href


def url_extension(url: str) -> str:
    """Return the file extension of the URL path, or an empty string."""
    return PurePosixPath(urlparse(url).path).suffix


def looks_like_image(data: bytes) -> bool:
    kind = guess(data)
    return bool(kind and kind.mime.startswith("image/"))


def download_asset(
    session: requests.Session,
    url: str,
    item_id: int,
    output_dir: Path,
    timeout: float,
) -> Optional[Path]:
    """Download an asset to ``{item_id}{ext}`` under output_dir.

    URLs without an extension are not treated as image resources and are
    skipped without touching the network.
    """
    extension = url_extension(url)
    if not extension:
        logger.debug("Skipping %s: no file extension", url)
        return None

    try:
        resp = session.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise AssetIOError(f"Failed to fetch image {url}: {exc}") from exc

    data = resp.content
    if not looks_like_image(data):
        logger.warning(
            "Image %s does not look like an image (Content-Type=%s)",
            url,
            resp.headers.get("Content-Type", ""),
        )

    destination = output_dir / f"{item_id}{extension}"
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        destination.write_bytes(data)
    except OSError as exc:
        raise AssetIOError(f"Failed to write image {destination}: {exc}") from exc
    logger.debug("Saved image to %s", destination)
    return destination
