"""Board Service - Card operations over the persisted board."""

from s3kanban.board_service.models import CardInput, CardUpdate
from s3kanban.board_service.service import BoardService
from s3kanban.repositioning.exceptions import CardNotFoundError

__all__ = [
    "BoardService",
    "CardInput",
    "CardNotFoundError",
    "CardUpdate",
]
