"""Board Store - Persistent storage for the board document."""

from s3kanban.board_store.backends import BlobBackend, MemoryBackend, S3Backend
from s3kanban.board_store.client import create_s3_client
from s3kanban.board_store.exceptions import (
    BoardStoreError,
    StorageCorruptError,
    StorageUnavailableError,
)
from s3kanban.board_store.models import Board, Card, CardStatus
from s3kanban.board_store.store import BoardStore

__all__ = [
    "BlobBackend",
    "Board",
    "BoardStore",
    "BoardStoreError",
    "Card",
    "CardStatus",
    "MemoryBackend",
    "S3Backend",
    "StorageCorruptError",
    "StorageUnavailableError",
    "create_s3_client",
]
