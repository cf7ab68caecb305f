from __future__ import annotations

import logging
from typing import Any, List, Sequence

from pydantic import ValidationError

from phrasebook.data.pagination import MAX_STORE_INT, window_for
from phrasebook.data.predicates import AllEntries, KeywordMatch, filter_for_tag
from phrasebook.data.words_repo import WordsRepo
from phrasebook.errors import InvalidRequest, NotFound
from phrasebook.models.entry import Page
from phrasebook.models.schemas import EntryCreate

logger = logging.getLogger(__name__)

# Accepted on batch items but not among the batch insert columns.
BATCH_DROPPED_FIELDS = ("translation", "usage")


def _first_error(e: ValidationError) -> str:
    err = e.errors()[0]
    loc = ".".join(str(p) for p in err.get("loc", ()))
    return f"{loc}: {err.get('msg')}" if loc else str(err.get("msg"))


class WordsService:
    """Read and write operations on the Words table.

    Request validation and filter selection live here; SQL lives in the
    data layer.
    """

    def __init__(self, repo: WordsRepo, page_size: int, special_usages: Sequence[str]):
        self.repo = repo
        self.page_size = page_size
        self.special_usages = tuple(special_usages)

    # -------------
    # Reads
    # -------------
    def list_all(self) -> Page:
        return self.repo.find_page(AllEntries(), None)

    def list_page(self, page: int) -> Page:
        return self.repo.find_page(AllEntries(), window_for(page, self.page_size))

    def list_by_tag(self, tag: str, page: int) -> Page:
        window = window_for(page, self.page_size)
        return self.repo.find_page(filter_for_tag(tag, self.special_usages), window)

    def search(self, keyword: str, page: int) -> Page:
        keyword = (keyword or "").strip()
        if not keyword:
            raise InvalidRequest("Search keyword cannot be empty.")
        window = window_for(page, self.page_size)
        result = self.repo.find_page(KeywordMatch(keyword), window)
        # Unlike listings, an empty search page is an error.
        if not result.entries:
            raise NotFound("No matching results found.")
        return result

    # -------------
    # Writes
    # -------------
    def add(self, payload: Any) -> int:
        entry = self._parse(payload)
        new_id = self.repo.insert(entry)
        logger.info("created entry id=%s", new_id)
        return new_id

    def add_batch(self, payload: Any) -> int:
        if not isinstance(payload, list) or not payload:
            raise InvalidRequest("Invalid input, expected an array of words.")
        entries: List[EntryCreate] = []
        for i, item in enumerate(payload):
            try:
                entries.append(self._parse(item))
            except InvalidRequest as e:
                raise InvalidRequest(f"Item {i}: {e.message}") from e
        dropped = sorted({f for e in entries for f in BATCH_DROPPED_FIELDS if getattr(e, f) is not None})
        if dropped:
            logger.warning("batch insert does not store %s; values ignored", ", ".join(dropped))
        inserted = self.repo.insert_many(entries)
        logger.info("batch inserted %s entries", inserted)
        return inserted

    def delete(self, entry_id: int) -> int:
        # ids the store cannot hold cannot exist
        if not 0 < entry_id <= MAX_STORE_INT or self.repo.delete(entry_id) == 0:
            raise NotFound("Record not found.")
        logger.info("deleted entry id=%s", entry_id)
        return entry_id

    @staticmethod
    def _parse(payload: Any) -> EntryCreate:
        if isinstance(payload, EntryCreate):
            return payload
        if not isinstance(payload, dict):
            raise InvalidRequest("Expected a JSON object describing one word.")
        try:
            return EntryCreate.model_validate(payload)
        except ValidationError as e:
            raise InvalidRequest(_first_error(e)) from e
