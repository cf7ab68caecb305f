from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Entry:
    """One row of the Words table, under its canonical field names.

    `tags` behaves as a set for filtering (membership only) but keeps the
    stored order so responses are stable.
    """
    id: int
    phrase: str
    pronunciation: str | None = None
    translation: str | None = None
    definition: str | None = None
    usage: str | None = None
    tags: tuple[str, ...] = ()
    audio_reference: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "phrase": self.phrase,
            "pronunciation": self.pronunciation,
            "translation": self.translation,
            "definition": self.definition,
            "usage": self.usage,
            "tags": list(self.tags),
            "audioReference": self.audio_reference,
        }


@dataclass(frozen=True)
class Page:
    """Page envelope: one window of entries plus the size of the full match set."""
    entries: list[Entry] = field(default_factory=list)
    total_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "entries": [e.to_dict() for e in self.entries],
            "totalCount": self.total_count,
        }
