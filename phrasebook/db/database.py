from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, Sequence

from phrasebook.config import settings
from phrasebook.errors import InternalError

logger = logging.getLogger(__name__)

def _casefold(value):
    return value.casefold() if isinstance(value, str) else value

def _connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    # LIKE only folds ASCII; keyword search goes through Unicode casefolding instead.
    conn.create_function("casefold", 1, _casefold, deterministic=True)
    return conn

@contextmanager
def get_conn() -> Iterator[sqlite3.Connection]:
    conn = _connect(settings.DB_PATH)
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


@dataclass(frozen=True)
class QueryResult:
    """What one statement execution hands back to the data layer."""
    rows: list[sqlite3.Row] = field(default_factory=list)
    row_count: int = 0
    last_row_id: int | None = None


def execute(sql: str, params: Sequence[Any] = ()) -> QueryResult:
    """Run one parameterized statement on its own connection.

    sqlite3 refuses parameter lists that do not match the placeholders; that and
    every other driver failure comes back as InternalError with the driver text.
    """
    logger.debug("execute %s params=%d", " ".join(sql.split()), len(params))
    try:
        with get_conn() as conn:
            cur = conn.execute(sql, tuple(params))
            rows = cur.fetchall()
            return QueryResult(rows=rows, row_count=cur.rowcount, last_row_id=cur.lastrowid)
    except (sqlite3.Error, OverflowError) as e:
        raise InternalError(str(e)) from e


def init_db() -> None:
    settings.DB_PATH.parent.mkdir(parents=True, exist_ok=True)

    with get_conn() as conn:
        # Column names follow the legacy Words table; the assembler renames them.
        conn.execute(
            """
            CREATE TABLE IF NOT EXISTS Words (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                phrase TEXT NOT NULL,
                pronounciation TEXT,
                mandarin TEXT,
                definition TEXT,
                usage TEXT,
                tags TEXT NOT NULL DEFAULT '[]',
                audiourl TEXT
            );
            """
        )
        conn.execute("CREATE INDEX IF NOT EXISTS idx_words_usage ON Words(usage);")
