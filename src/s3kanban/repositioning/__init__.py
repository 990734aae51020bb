"""Repositioning Engine - Column membership and ordering of cards."""

from s3kanban.repositioning.engine import (
    append_position,
    clamp,
    column,
    is_dense,
    move_card,
    reindex_column,
    remove_card,
)
from s3kanban.repositioning.exceptions import CardNotFoundError, RepositioningError

__all__ = [
    "CardNotFoundError",
    "RepositioningError",
    "append_position",
    "clamp",
    "column",
    "is_dense",
    "move_card",
    "reindex_column",
    "remove_card",
]
