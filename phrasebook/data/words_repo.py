from __future__ import annotations

from typing import Sequence

from phrasebook.data.assembler import assemble_page
from phrasebook.data.pagination import Window
from phrasebook.data.predicates import Filter, build_queries
from phrasebook.data import statements
from phrasebook.db.database import execute
from phrasebook.errors import InternalError
from phrasebook.models.entry import Page
from phrasebook.models.schemas import EntryCreate


class WordsRepo:
    def find_page(self, flt: Filter, window: Window | None) -> Page:
        # Count and fetch are two separate store calls; no snapshot spans both.
        queries = build_queries(flt, window)
        count_rows = execute(queries.count.sql, queries.count.params).rows
        if not count_rows:
            raise InternalError("Count query returned no rows.")
        rows = execute(queries.fetch.sql, queries.fetch.params).rows
        return assemble_page(rows, count_rows[0]["count"])

    def insert(self, entry: EntryCreate) -> int:
        stmt = statements.insert_one(entry)
        result = execute(stmt.sql, stmt.params)
        if result.last_row_id is None:
            raise InternalError("Insert did not return a generated id.")
        return int(result.last_row_id)

    def insert_many(self, entries: Sequence[EntryCreate]) -> int:
        stmt = statements.insert_many(entries)
        return execute(stmt.sql, stmt.params).row_count

    def delete(self, entry_id: int) -> int:
        stmt = statements.delete_by_id(entry_id)
        return execute(stmt.sql, stmt.params).row_count
