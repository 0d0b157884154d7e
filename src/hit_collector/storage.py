from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, Protocol

from .schema import Hit

logger = logging.getLogger(__name__)


class Store(Protocol):
    def save_hits(self, hits: Iterable[Hit]) -> None: ...


class MemoryStore:
    def __init__(self) -> None:
        self.hits: list[Hit] = []

    def save_hits(self, hits: Iterable[Hit]) -> None:
        self.hits.extend(hits)


def _to_json_line(hit: Hit) -> str:
    # None stays null so absent fields survive a round trip.
    return json.dumps(hit.model_dump(mode="json"), ensure_ascii=False, sort_keys=True, separators=(",", ":")) + "\n"


class JsonLinesStore:
    """Appends hits to a file, one JSON object per line."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def save_hits(self, hits: Iterable[Hit]) -> None:
        lines = [_to_json_line(hit) for hit in hits]
        if not lines:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with self.path.open("a", encoding="utf-8") as handle:
            handle.writelines(lines)
        logger.debug("saved %d hit(s) to %s", len(lines), self.path)

    def read_hits(self, limit: int | None = None) -> list[Hit]:
        if not self.path.exists():
            return []

        hits: list[Hit] = []
        with self.path.open(encoding="utf-8") as handle:
            for line in handle:
                if not line.strip():
                    continue
                hits.append(Hit.model_validate_json(line))
                if limit is not None and len(hits) >= limit:
                    break
        return hits
