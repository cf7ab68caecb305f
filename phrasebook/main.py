from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phrasebook.config import settings
from phrasebook.db.database import init_db
from phrasebook.logging_setup import configure_logging
from phrasebook.web.errors import register_error_handlers
from phrasebook.web.routers import home, words

configure_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)

app = FastAPI(title="Phrasebook Words API")

@app.on_event("startup")
def on_startup() -> None:
    init_db()

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.CORS_ORIGINS),
    allow_methods=["*"],
    allow_headers=["*"],
)
register_error_handlers(app)

app.include_router(home.router)
app.include_router(words.router)
