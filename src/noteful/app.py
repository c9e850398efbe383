"""
Noteful API Server
Core functionality: Notes, Folders and Tags
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from noteful.config.settings import ALLOWED_ORIGINS
from noteful.database.connection import open_database, close_database
from noteful.database.schema import ensure_schema
from noteful.api.routes import health, folders, tags, notes
from noteful.utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager: the pool lives exactly as long as the app"""
    app.state.db_pool = await open_database()
    try:
        await ensure_schema(app.state.db_pool)
        yield
    finally:
        await close_database(app.state.db_pool)
        app.state.db_pool = None


def create_app() -> FastAPI:
    app = FastAPI(
        title="Noteful API",
        description="Backend API for notes organised in folders and tagged",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    setup_error_handling(app)

    app.include_router(health.router, tags=["Health"])
    app.include_router(folders.router, prefix="/api/folders", tags=["Folders"])
    app.include_router(tags.router, prefix="/api/tags", tags=["Tags"])
    app.include_router(notes.router, prefix="/api/notes", tags=["Notes"])
    return app


# FastAPI app instance is exported for use by uvicorn
app = create_app()
