"""Configuration objects and constants for the harvester."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path

# See: https://foundation.wikimedia.org/wiki/Policy:User-Agent_policy
DEFAULT_USER_AGENT = "OmdbScanner/1.0 (test@test.com) python-requests"
USER_AGENT_ENV = "WIKIFY_USER_AGENT"

DEFAULT_WIKI_BASE = "https://en.wikipedia.org"
DEFAULT_PAUSE_SECONDS = 6.0
DEFAULT_TIMEOUT = 30.0
DEFAULT_INPUT_PATH = Path("Inputs") / "wikipedia-movie-list-short.csv"
DEFAULT_OUTPUT_DIR = Path("Outputs")

MIN_PAUSE_FACTOR = 0.5
MAX_PAUSE_FACTOR = 1.0


def resolve_user_agent(explicit: str | None = None) -> str:
    """Pick the client identification: explicit value, environment, then default."""
    if explicit:
        return explicit
    return os.getenv(USER_AGENT_ENV) or DEFAULT_USER_AGENT


@dataclass
class HarvestConfig:
    """Top-level settings that control fetching and throttling."""

    output_root: Path
    user_agent: str = DEFAULT_USER_AGENT
    wiki_base: str = DEFAULT_WIKI_BASE
    pause_seconds: float = DEFAULT_PAUSE_SECONDS
    timeout: float = DEFAULT_TIMEOUT

    def delay_for(self, rng: random.Random) -> float:
        """Return a pause between 50% and 100% of the configured base pause."""
        factor = rng.uniform(MIN_PAUSE_FACTOR, MAX_PAUSE_FACTOR)
        return self.pause_seconds * factor
