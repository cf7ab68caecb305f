"""Write-side statement construction (insert, batch insert, delete)."""
from __future__ import annotations

import json
from typing import Sequence

from phrasebook.data.predicates import TABLE, Statement
from phrasebook.errors import InvalidRequest
from phrasebook.models.schemas import EntryCreate

INSERT_COLUMNS = ("phrase", "pronounciation", "mandarin", "definition", "usage", "tags", "audiourl")
BATCH_COLUMNS = ("phrase", "pronounciation", "definition", "tags", "audiourl")


def encode_tags(tags: Sequence[str]) -> str:
    return json.dumps(list(tags), ensure_ascii=False)


def values_placeholders(row_count: int, stride: int) -> str:
    """Numbered placeholder groups for a multi-row VALUES list.

    Row i (0-based) gets ?{stride*i+1} .. ?{stride*i+stride}.
    """
    if row_count < 1 or stride < 1:
        raise ValueError("row_count and stride must be positive")
    groups = []
    for i in range(row_count):
        base = stride * i
        groups.append("(" + ", ".join(f"?{base + k}" for k in range(1, stride + 1)) + ")")
    return ", ".join(groups)


def _insert_row(entry: EntryCreate) -> tuple:
    return (
        entry.phrase,
        entry.pronunciation,
        entry.translation,
        entry.definition,
        entry.usage,
        encode_tags(entry.tags),
        entry.audio_reference,
    )


def _batch_row(entry: EntryCreate) -> tuple:
    return (
        entry.phrase,
        entry.pronunciation,
        entry.definition,
        encode_tags(entry.tags),
        entry.audio_reference,
    )


def insert_one(entry: EntryCreate) -> Statement:
    sql = (
        f"INSERT INTO {TABLE} ({', '.join(INSERT_COLUMNS)}) "
        f"VALUES {values_placeholders(1, len(INSERT_COLUMNS))}"
    )
    return Statement(sql=sql, params=_insert_row(entry))


def insert_many(entries: Sequence[EntryCreate]) -> Statement:
    """One multi-row INSERT; placeholders and flattened params are built together."""
    if not entries:
        raise InvalidRequest("Invalid input, expected a non-empty array of words.")
    params: list = []
    for entry in entries:
        params.extend(_batch_row(entry))
    sql = (
        f"INSERT INTO {TABLE} ({', '.join(BATCH_COLUMNS)}) "
        f"VALUES {values_placeholders(len(entries), len(BATCH_COLUMNS))}"
    )
    return Statement(sql=sql, params=tuple(params))


def delete_by_id(entry_id: int) -> Statement:
    return Statement(sql=f"DELETE FROM {TABLE} WHERE id = ?1", params=(entry_id,))
