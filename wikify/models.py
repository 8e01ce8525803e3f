"""Data models used throughout the harvesting pipeline."""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass
from typing import Dict, Optional

from .errors import ItemProcessingError


@dataclass(frozen=True)
class InputRecord:
    """One subject page to harvest, keyed by an externally assigned id."""

    id: int
    link: str


@dataclass(frozen=True)
class ExtractedMetadata:
    """Provenance fields read from an image description page."""

    author: Optional[str] = None
    user: Optional[str] = None
    license: Optional[str] = None
    license_context: Optional[str] = None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return asdict(self)


class ItemOutcome(enum.Enum):
    SAVED = "saved"
    NO_IMAGE = "no_image"
    FAILED = "failed"


@dataclass
class ItemResult:
    """What happened to a single item inside the processor."""

    outcome: ItemOutcome
    error: Optional[ItemProcessingError] = None
