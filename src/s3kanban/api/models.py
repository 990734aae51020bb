"""Pydantic models for REST API."""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt

from s3kanban.board_service import CardInput, CardUpdate
from s3kanban.board_store import CardStatus

T = TypeVar("T")


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper, used for error bodies."""

    data: T | None = None
    error: str | None = None


class HealthResponse(BaseModel):
    """Response model for the health check."""

    status: str = "ok"


# Card models


class CardCreate(BaseModel):
    """Request model for creating a card.

    ``id`` and ``position`` are accepted for compatibility with clients that
    post whole cards, but the server assigns both.
    """

    title: str = ""
    description: str = ""
    status: CardStatus
    id: str | None = None
    position: StrictInt | None = None

    def to_input(self) -> CardInput:
        """Convert to the service input model."""
        return CardInput(title=self.title, description=self.description, status=self.status)


class CardReplace(BaseModel):
    """Request model for updating a card (full replacement).

    ``position`` may be any integer; out-of-range values are clamped.
    """

    title: str = ""
    description: str = ""
    status: CardStatus
    position: StrictInt = Field(..., description="Zero-based index in the target column")

    def to_update(self) -> CardUpdate:
        """Convert to the service update model."""
        return CardUpdate(
            title=self.title,
            description=self.description,
            status=self.status,
            position=self.position,
        )


class CardResponse(BaseModel):
    """Response model for a card."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: str
    status: CardStatus
    position: int


def card_to_response(card: Any) -> CardResponse:
    """Convert a Card model to CardResponse."""
    return CardResponse.model_validate(card)


# Board models


class BoardResponse(BaseModel):
    """Response model for the board."""

    model_config = ConfigDict(from_attributes=True)

    cards: list[CardResponse]


def board_to_response(board: Any) -> BoardResponse:
    """Convert a Board model to BoardResponse."""
    return BoardResponse.model_validate(board)
