"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from s3kanban import __version__
from s3kanban.api.dependencies import close_board_service, init_board_service
from s3kanban.api.models import APIResponse
from s3kanban.api.routes import board, cards
from s3kanban.board_store import (
    BoardStore,
    BoardStoreError,
    StorageCorruptError,
    StorageUnavailableError,
)
from s3kanban.config import find_config, load_config
from s3kanban.logging import sanitize_for_log
from s3kanban.repositioning import CardNotFoundError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator
    from pathlib import Path

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=APIResponse[None](data=None, error=message).model_dump(),
    )


def _build_store(app: FastAPI) -> BoardStore:
    """Use the store handed to create_app, or build one from config."""
    store: BoardStore | None = getattr(app.state, "store", None)
    if store is not None:
        return store
    config_path = getattr(app.state, "config_path", None) or find_config()
    config = load_config(config_path)
    return BoardStore.from_config(config.s3)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    # Startup
    init_board_service(_build_store(app))

    yield
    # Shutdown
    close_board_service()


def create_app(store: BoardStore | None = None, config_path: str | Path | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: Board Store to serve. When omitted, one is built at startup
            from the configuration file.
        config_path: Configuration file to read when no store is given.
            Located with find_config() when omitted.
    """
    app = FastAPI(
        title="s3kanban API",
        description="Single-board task tracker persisted in an S3 bucket",
        version=__version__,
        lifespan=lifespan,
    )

    # Store config for lifespan manager
    app.state.store = store
    app.state.config_path = config_path

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.warning("Invalid request body for %s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_400_BAD_REQUEST, "Invalid request body")

    @app.exception_handler(CardNotFoundError)
    async def card_not_found_handler(request: Request, exc: CardNotFoundError) -> JSONResponse:
        logger.warning("%s %s: %s", request.method, request.url.path, exc)
        return _error(status.HTTP_404_NOT_FOUND, "Card not found")

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable_handler(
        request: Request, exc: StorageUnavailableError
    ) -> JSONResponse:
        logger.error(
            "Storage unavailable during %s %s: %s",
            request.method,
            request.url.path,
            sanitize_for_log(str(exc)),
        )
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Storage unavailable")

    @app.exception_handler(StorageCorruptError)
    async def storage_corrupt_handler(request: Request, exc: StorageCorruptError) -> JSONResponse:
        logger.error("Stored board is corrupt (%s %s): %s", request.method, request.url.path, exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Stored board is corrupt")

    @app.exception_handler(BoardStoreError)
    async def board_store_error_handler(_request: Request, exc: BoardStoreError) -> JSONResponse:
        logger.error("Board store error: %s", exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    # Include routers
    app.include_router(board.router, prefix="/api")
    app.include_router(cards.router, prefix="/api")

    return app


# Default app instance
app = create_app()
