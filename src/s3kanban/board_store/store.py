"""BoardStore - Loads and saves the single board document."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

from s3kanban.board_store.backends import MemoryBackend, S3Backend
from s3kanban.board_store.client import create_s3_client
from s3kanban.board_store.exceptions import StorageCorruptError
from s3kanban.board_store.models import Board
from s3kanban.config import DEFAULT_BOARD_KEY

if TYPE_CHECKING:
    from s3kanban.board_store.backends import BlobBackend
    from s3kanban.config import S3Config

logger = logging.getLogger(__name__)


class BoardStore:
    """Persists the board as one JSON document in a blob backend.

    ``save`` is always a full overwrite: there is no versioning and no
    conditional write, so concurrent writers race and the last save wins.
    """

    def __init__(self, backend: BlobBackend, key: str = DEFAULT_BOARD_KEY) -> None:
        """Initialize Board Store.

        Args:
            backend: Blob backend holding the document
            key: Object key of the board document
        """
        self.backend = backend
        self.key = key

    @classmethod
    def from_config(cls, cfg: S3Config) -> BoardStore:
        """Create a store backed by the configured S3 bucket."""
        client = create_s3_client(cfg)
        return cls(S3Backend(client, cfg.bucket), key=cfg.key)

    @classmethod
    def in_memory(cls, key: str = DEFAULT_BOARD_KEY) -> BoardStore:
        """Create a store backed by process memory."""
        return cls(MemoryBackend(), key=key)

    def load(self) -> Board:
        """Load the board.

        Returns:
            The persisted board, or an empty board if no document exists yet

        Raises:
            StorageUnavailableError: If the backend cannot be reached
            StorageCorruptError: If the document cannot be parsed
        """
        data = self.backend.get(self.key)
        if data is None:
            logger.info("%s not found, returning empty board", self.key)
            return Board(cards=[])

        try:
            board = Board.from_dict(json.loads(data))
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
            raise StorageCorruptError(f"Error decoding board json in {self.key}: {e}") from e
        except ValueError as e:
            raise StorageCorruptError(f"Invalid board document in {self.key}: {e}") from e

        logger.debug("Board loaded: %d cards", len(board.cards))
        return board

    def save(self, board: Board) -> None:
        """Overwrite the persisted board.

        Raises:
            StorageUnavailableError: If the backend cannot be reached
        """
        data = json.dumps(board.to_dict()).encode("utf-8")
        self.backend.put(self.key, data)
        logger.debug("Board saved: %d cards", len(board.cards))

    def check(self) -> None:
        """Verify the backend is reachable.

        Raises:
            StorageUnavailableError: If the bucket is missing or unreachable
        """
        self.backend.check()
