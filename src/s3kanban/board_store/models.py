"""Domain models for the persisted board document."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

CARD_FIELDS = ("id", "title", "description", "status", "position")


class CardStatus(StrEnum):
    """Board column a card belongs to."""

    TODO = "ToDo"
    DOING = "Doing"
    HOLD = "Hold"
    DONE = "Done"


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


@dataclass
class Card:
    """A single card on the board.

    ``position`` is the zero-based rank of the card within its status column.
    """

    id: str
    title: str
    description: str
    status: CardStatus
    position: int

    @classmethod
    def from_dict(cls, data: Any) -> Card:
        """Parse a card from its JSON representation.

        Raises:
            ValueError: If a field is missing, has the wrong type, or the
                status is not one of the known columns.
        """
        if not isinstance(data, dict):
            raise ValueError(f"card must be an object, got {type(data).__name__}")

        missing = [f for f in CARD_FIELDS if f not in data]
        if missing:
            raise ValueError(f"card is missing fields: {', '.join(missing)}")

        for name in ("id", "title", "description", "status"):
            if not isinstance(data[name], str):
                raise ValueError(f"card field {name!r} must be a string")
        position = data["position"]
        if isinstance(position, bool) or not isinstance(position, int):
            raise ValueError("card field 'position' must be an integer")
        if position < 0:
            raise ValueError("card field 'position' must not be negative")

        return cls(
            id=data["id"],
            title=data["title"],
            description=data["description"],
            status=CardStatus(data["status"]),
            position=position,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "status": self.status.value,
            "position": self.position,
        }


@dataclass
class Board:
    """The single persisted aggregate holding every card."""

    cards: list[Card] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Board:
        """Parse a board from its JSON representation.

        Raises:
            ValueError: If the document does not have the board shape.
        """
        if not isinstance(data, dict):
            raise ValueError(f"board must be an object, got {type(data).__name__}")

        raw_cards = data.get("cards")
        # A board saved with no cards may carry "cards": null
        if raw_cards is None:
            raw_cards = []
        if not isinstance(raw_cards, list):
            raise ValueError("board field 'cards' must be a list")

        cards = [Card.from_dict(item) for item in raw_cards]

        seen: set[str] = set()
        for card in cards:
            if card.id in seen:
                raise ValueError(f"duplicate card id {card.id!r}")
            seen.add(card.id)

        return cls(cards=cards)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted JSON shape."""
        return {"cards": [card.to_dict() for card in self.cards]}

    def get_card(self, card_id: str) -> Card | None:
        """Return the card with the given ID, or None."""
        for card in self.cards:
            if card.id == card_id:
                return card
        return None
