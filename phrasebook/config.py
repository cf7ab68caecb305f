from __future__ import annotations
import os
from dataclasses import dataclass
from pathlib import Path

@dataclass(frozen=True)
class Settings:
    DB_PATH: Path = Path(os.getenv("PHRASEBOOK_DB_PATH", Path(__file__).resolve().parent.parent / "phrasebook.db"))
    PAGE_SIZE: int = int(os.getenv("PHRASEBOOK_PAGE_SIZE", "10"))
    # Usage labels that are filtered by usage equality instead of tag membership.
    SPECIAL_USAGES: tuple[str, ...] = ("Proverb", "EL")
    CORS_ORIGINS: tuple[str, ...] = tuple(o.strip() for o in os.getenv("PHRASEBOOK_CORS_ORIGINS", "*").split(",") if o.strip())
    LOG_LEVEL: str = os.getenv("PHRASEBOOK_LOG_LEVEL", "INFO")
    LOG_FORMAT: str = os.getenv("PHRASEBOOK_LOG_FORMAT", "text")

settings = Settings()
