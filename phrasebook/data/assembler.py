from __future__ import annotations

import json
from typing import Any, Iterable, Mapping

from phrasebook.errors import InternalError
from phrasebook.models.entry import Entry, Page


def _decode_tags(raw: Any) -> tuple[str, ...]:
    if raw is None or raw == "":
        return ()
    if isinstance(raw, (list, tuple)):
        return tuple(raw)
    try:
        tags = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise InternalError(f"Malformed tags value: {raw!r}") from e
    if not isinstance(tags, list):
        raise InternalError(f"Malformed tags value: {raw!r}")
    return tuple(tags)


def entry_from_row(r: Mapping[str, Any]) -> Entry:
    # Storage column names differ from the wire names; map each one explicitly.
    return Entry(
        id=r["id"],
        phrase=r["phrase"],
        pronunciation=r["pronounciation"],
        translation=r["mandarin"],
        definition=r["definition"],
        usage=r["usage"],
        tags=_decode_tags(r["tags"]),
        audio_reference=r["audiourl"],
    )


def parse_count(value: Any) -> int:
    """Counts may come back as text; anything non-numeric is a store fault."""
    if isinstance(value, bool):
        raise InternalError(f"Non-numeric count: {value!r}")
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip(), 10)
    except (TypeError, ValueError) as e:
        raise InternalError(f"Non-numeric count: {value!r}") from e


def assemble_page(rows: Iterable[Mapping[str, Any]], count: Any) -> Page:
    return Page(entries=[entry_from_row(r) for r in rows], total_count=parse_count(count))
