"""Input models for Board Service operations."""

from __future__ import annotations

from dataclasses import dataclass

from s3kanban.board_store.models import CardStatus


@dataclass
class CardInput:
    """Fields supplied when creating a card.

    ID and position are assigned by the service.
    """

    title: str
    status: CardStatus
    description: str = ""


@dataclass
class CardUpdate:
    """Full replacement of a card's mutable fields."""

    title: str
    description: str
    status: CardStatus
    position: int
