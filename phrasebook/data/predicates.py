"""Read-side query construction.

A filter is picked once, at the service boundary, as one of the variants
below. `build_queries` turns it into a count statement and a fetch statement
that share the same WHERE clause and filter parameters, so totalCount and the
page are always computed against the same predicate.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence, Union

from phrasebook.data.pagination import Window

TABLE = "Words"
COLUMNS = "id, phrase, pronounciation, mandarin, definition, usage, tags, audiourl"

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class AllEntries:
    pass


@dataclass(frozen=True)
class UsageEquals:
    value: str


@dataclass(frozen=True)
class TagContains:
    value: str


@dataclass(frozen=True)
class KeywordMatch:
    keyword: str


Filter = Union[AllEntries, UsageEquals, TagContains, KeywordMatch]


@dataclass(frozen=True)
class Statement:
    sql: str
    params: tuple[Any, ...] = ()


@dataclass(frozen=True)
class QueryPair:
    count: Statement
    fetch: Statement


def filter_for_tag(tag: str, special_usages: Sequence[str]) -> Filter:
    """Usage labels in `special_usages` match on usage; everything else is a tag."""
    if tag in special_usages:
        return UsageEquals(tag)
    return TagContains(tag)


def like_pattern(keyword: str) -> str:
    escaped = (
        keyword.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _keyword_clause() -> str:
    fields = [
        "phrase",
        "pronounciation",
        "mandarin",
        "definition",
        "usage",
        f"(SELECT group_concat(value, ' ') FROM json_each({TABLE}.tags))",
        "audiourl",
    ]
    return " OR ".join(f"casefold({f}) LIKE ?1 ESCAPE '{LIKE_ESCAPE}'" for f in fields)


def _where(flt: Filter) -> tuple[str, tuple[Any, ...]]:
    if isinstance(flt, AllEntries):
        return "", ()
    if isinstance(flt, UsageEquals):
        return "WHERE usage = ?1", (flt.value,)
    if isinstance(flt, TagContains):
        return (
            f"WHERE EXISTS (SELECT 1 FROM json_each({TABLE}.tags) WHERE json_each.value = ?1)",
            (flt.value,),
        )
    if isinstance(flt, KeywordMatch):
        return f"WHERE {_keyword_clause()}", (like_pattern(flt.keyword.casefold()),)
    raise TypeError(f"Unknown filter: {flt!r}")


def build_queries(flt: Filter, window: Window | None) -> QueryPair:
    """Build the (count, fetch) pair for one filter.

    With `window=None` the fetch returns every match (the unpaginated listing).
    Window parameters always follow the filter parameters.
    """
    where, params = _where(flt)

    count_sql = f"SELECT COUNT(*) AS count FROM {TABLE} {where}".strip()

    fetch_sql = f"SELECT {COLUMNS} FROM {TABLE} {where}".strip() + " ORDER BY id ASC"
    fetch_params = params
    if window is not None:
        n = len(params)
        fetch_sql += f" LIMIT ?{n + 1} OFFSET ?{n + 2}"
        fetch_params = params + (window.limit, window.offset)

    return QueryPair(
        count=Statement(sql=count_sql, params=params),
        fetch=Statement(sql=fetch_sql, params=fetch_params),
    )
