"""FastAPI dependencies for dependency injection."""

from __future__ import annotations

from collections.abc import Generator  # noqa: TC003
from typing import Annotated

from fastapi import Depends

from s3kanban.board_service import BoardService
from s3kanban.board_store import BoardStore  # noqa: TC001

# Global BoardService instance (initialized on app startup)
_board_service: BoardService | None = None


def init_board_service(store: BoardStore) -> BoardService:
    """Initialize the global BoardService instance."""
    global _board_service  # noqa: PLW0603
    _board_service = BoardService(store)
    return _board_service


def close_board_service() -> None:
    """Release the global BoardService instance."""
    global _board_service  # noqa: PLW0603
    _board_service = None


def get_board_service() -> Generator[BoardService, None, None]:
    """Dependency that provides the BoardService instance."""
    if _board_service is None:
        raise RuntimeError("BoardService not initialized. Call init_board_service() first.")
    yield _board_service


# Type alias for dependency injection
BoardServiceDep = Annotated[BoardService, Depends(get_board_service)]
