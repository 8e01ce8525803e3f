"""Input list loading."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import List

from .models import InputRecord

ID_COLUMN = "movie_id"
LINK_COLUMN = "link"


def read_records(path: Path) -> List[InputRecord]:
    """Read ``movie_id``/``link`` rows from a CSV file, in file order."""
    records: List[InputRecord] = []
    with path.open(newline="", encoding="utf-8-sig") as handle:
        reader = csv.DictReader(handle)
        missing = {ID_COLUMN, LINK_COLUMN} - set(reader.fieldnames or ())
        if missing:
            raise ValueError(f"{path}: missing column(s) {', '.join(sorted(missing))}")
        for line_no, row in enumerate(reader, start=2):
            raw_id = (row.get(ID_COLUMN) or "").strip()
            link = (row.get(LINK_COLUMN) or "").strip()
            try:
                item_id = int(raw_id)
            except ValueError:
                raise ValueError(f"{path}:{line_no}: invalid {ID_COLUMN} {raw_id!r}") from None
            if not link:
                raise ValueError(f"{path}:{line_no}: empty {LINK_COLUMN}")
            records.append(InputRecord(id=item_id, link=link))
    return records
