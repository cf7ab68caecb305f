from __future__ import annotations
from typing import Any
from fastapi import APIRouter, Body
from fastapi.responses import JSONResponse

from phrasebook.config import settings
from phrasebook.data.words_repo import WordsRepo
from phrasebook.service.words_service import WordsService

router = APIRouter()

words_service = WordsService(WordsRepo(), page_size=settings.PAGE_SIZE, special_usages=settings.SPECIAL_USAGES)


@router.get("/api")
def list_all():
    """Every entry, unpaginated."""
    return words_service.list_all().to_dict()


@router.get("/api/{page}")
def list_page(page: int):
    return words_service.list_page(page).to_dict()


@router.get("/api/{tag}/{page}")
def list_by_tag(tag: str, page: int):
    """Entries carrying `tag`, or whose usage is `tag` for the special usage labels."""
    return words_service.list_by_tag(tag, page).to_dict()


@router.get("/search/{keyword}/{page}")
def search(keyword: str, page: int):
    return words_service.search(keyword, page).to_dict()


@router.post("/api")
def create_entry(payload: Any = Body(None)):
    new_id = words_service.add(payload)
    return JSONResponse(
        status_code=201,
        content={"status": 201, "message": f"Record created with ID {new_id}", "id": new_id},
    )


@router.post("/api/batch")
def create_entries(payload: Any = Body(None)):
    inserted = words_service.add_batch(payload)
    return JSONResponse(
        status_code=201,
        content={
            "status": 201,
            "message": f"Batch insert successful, inserted {inserted} records.",
            "inserted": inserted,
        },
    )


@router.delete("/api/{entry_id}")
def delete_entry(entry_id: int):
    deleted = words_service.delete(entry_id)
    return {"status": 200, "message": f"Record with ID {deleted} deleted", "id": deleted}
