"""REST API for s3kanban."""

from s3kanban.api.app import app, create_app
from s3kanban.api.models import (
    APIResponse,
    BoardResponse,
    CardCreate,
    CardReplace,
    CardResponse,
)

__all__ = [
    "APIResponse",
    "BoardResponse",
    "CardCreate",
    "CardReplace",
    "CardResponse",
    "app",
    "create_app",
]
