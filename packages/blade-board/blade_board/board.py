"""Leaderboard - the local best-of-N list, stored as JSON."""
from __future__ import annotations

import json
import logging
import os
import time
import uuid
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10


@dataclass(frozen=True)
class Entry:
    id: str
    score: float
    mode: str
    photo: str | None
    date: float

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Entry:
        return cls(
            id=str(data["id"]),
            score=float(data["score"]),
            mode=str(data["mode"]),
            photo=data.get("photo"),
            date=float(data["date"]),
        )


class Leaderboard:
    """Top ``limit`` entries by descending score.

    A new entry goes in ahead of existing entries with the same score. A
    missing or unreadable file reads as an empty board; it is replaced on
    the next submit.
    """

    def __init__(self, path: str | Path, limit: int = DEFAULT_LIMIT) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.path = Path(path)
        self.limit = limit

    def entries(self) -> list[Entry]:
        if not self.path.exists():
            return []
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return [Entry.from_dict(item) for item in raw]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.warning("ignoring unreadable leaderboard %s: %s", self.path, exc)
            return []

    def top(self, n: int | None = None) -> list[Entry]:
        entries = self.entries()
        return entries if n is None else entries[:n]

    def submit(
        self,
        score: float,
        mode: str,
        photo: str | None = None,
        timestamp: float | None = None,
    ) -> Entry | None:
        """Insert a result. Returns the entry, or None if it missed the cut."""
        entry = Entry(
            id=uuid.uuid4().hex,
            score=score,
            mode=mode,
            photo=photo,
            date=timestamp if timestamp is not None else time.time(),
        )
        ranked = sorted([entry, *self.entries()], key=lambda e: e.score, reverse=True)
        kept = ranked[: self.limit]
        self._write(kept)
        if entry not in kept:
            logger.info("score %s did not reach the top %d", score, self.limit)
            return None
        logger.info("leaderboard entry %s: %s (%s) at rank %d",
                    entry.id, score, mode, kept.index(entry) + 1)
        return entry

    def _write(self, entries: list[Entry]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps([asdict(e) for e in entries]), encoding="utf-8")
        os.replace(tmp, self.path)
