"""On-disk resume markers that make repeated runs idempotent."""

from __future__ import annotations

import json
from pathlib import Path

from .models import ExtractedMetadata

MISSING_IMAGE_MESSAGE = "Seems like there was a missing image or other issue at this page: {link}"


class ResumeLedger:
    """Completion and skip markers keyed by item id inside one output folder.

    ``{id}.json`` holds the harvested metadata and marks the item complete;
    ``{id}.skip.txt`` holds a free-text reason and marks it as not worth
    retrying. Either one means the item is done.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def metadata_path(self, item_id: int) -> Path:
        return self.output_dir / f"{item_id}.json"

    def skip_path(self, item_id: int) -> Path:
        return self.output_dir / f"{item_id}.skip.txt"

    def is_complete(self, item_id: int) -> bool:
        return self.metadata_path(item_id).exists()

    def is_done(self, item_id: int) -> bool:
        return self.is_complete(item_id) or self.skip_path(item_id).exists()

    def save_metadata(self, item_id: int, metadata: ExtractedMetadata) -> Path:
        path = self.metadata_path(item_id)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(metadata.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    def mark_skipped(self, item_id: int, reason: str) -> Path:
        path = self.skip_path(item_id)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(reason, encoding="utf-8")
        return path

    def mark_missing(self, item_id: int, link: str) -> Path:
        return self.mark_skipped(item_id, MISSING_IMAGE_MESSAGE.format(link=link))

    def mark_error(self, item_id: int, error: Exception) -> Path:
        return self.mark_skipped(item_id, f"Error: {error}")
