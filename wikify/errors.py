"""Exception types raised while harvesting items."""

from __future__ import annotations


class WikifyError(Exception):
    """Base class for harvester failures."""


class FetchError(WikifyError):
    """A document could not be retrieved or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class AssetIOError(WikifyError):
    """An asset could not be downloaded or written to disk."""


class ItemProcessingError(WikifyError):
    """Wraps a fetch or asset failure with the id of the item being processed."""

    def __init__(self, item_id: int, cause: Exception) -> None:
        super().__init__(str(cause))
        self.item_id = item_id
        self.cause = cause
