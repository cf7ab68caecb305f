from __future__ import annotations

from dataclasses import dataclass

from phrasebook.errors import InvalidRequest

# Largest value SQLite can bind as an INTEGER.
MAX_STORE_INT = 2**63 - 1


@dataclass(frozen=True)
class Window:
    offset: int
    limit: int


def window_for(page: int, page_size: int) -> Window:
    """Turn a 1-based page number into an offset/limit window.

    Pages past the end are not checked here; they simply come back empty.
    Offsets beyond what the store can bind are clamped, which still lands
    past the last row.
    """
    if isinstance(page, bool) or not isinstance(page, int):
        raise InvalidRequest("Page must be an integer.")
    if page < 1:
        raise InvalidRequest("Page must be 1 or greater.")
    if page_size < 1:
        raise ValueError("page_size must be positive")
    return Window(offset=min((page - 1) * page_size, MAX_STORE_INT), limit=page_size)
