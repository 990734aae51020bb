"""Board read and health endpoints."""

import logging

from fastapi import APIRouter

from s3kanban.api.dependencies import BoardServiceDep
from s3kanban.api.models import BoardResponse, HealthResponse, board_to_response

logger = logging.getLogger(__name__)

router = APIRouter(tags=["board"])


@router.get("/board", response_model=BoardResponse)
def get_board(service: BoardServiceDep) -> BoardResponse:
    """Get the full board."""
    logger.info("[GET] /api/board")
    board = service.get_board()
    logger.info("Board loaded: %d cards", len(board.cards))
    return board_to_response(board)


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    """Liveness check. Does not touch the store."""
    return HealthResponse()
