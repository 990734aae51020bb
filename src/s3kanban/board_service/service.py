"""BoardService - Load, mutate and save the board for each operation."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from s3kanban.board_store.models import Board, Card, generate_uuid
from s3kanban.repositioning import append_position, move_card, remove_card
from s3kanban.repositioning.exceptions import CardNotFoundError

if TYPE_CHECKING:
    from collections.abc import Callable

    from s3kanban.board_service.models import CardInput, CardUpdate
    from s3kanban.board_store import BoardStore

logger = logging.getLogger(__name__)


class BoardService:
    """Card operations on the single board.

    Every call reads the board fresh from the store, transforms it in memory
    and writes the whole document back. Nothing is cached between calls and
    nothing serializes concurrent calls: two overlapping mutations both read
    the same board and the later save discards the earlier one.
    """

    def __init__(
        self,
        store: BoardStore,
        id_factory: Callable[[], str] = generate_uuid,
    ) -> None:
        """Initialize Board Service.

        Args:
            store: Board Store holding the persisted board
            id_factory: Generates IDs for new cards
        """
        self._store = store
        self._id_factory = id_factory

    def get_board(self) -> Board:
        """Return the current board."""
        return self._store.load()

    def create_card(self, card_input: CardInput) -> Card:
        """Create a card at the end of its column.

        Args:
            card_input: Title, description and status of the new card

        Returns:
            The created card with its generated ID and position

        Raises:
            StorageUnavailableError: If the store cannot be reached
            StorageCorruptError: If the stored board cannot be parsed
        """
        board = self._store.load()

        card = Card(
            id=self._id_factory(),
            title=card_input.title,
            description=card_input.description,
            status=card_input.status,
            position=append_position(board.cards, card_input.status),
        )
        board.cards.append(card)
        self._store.save(board)

        logger.info("Card created: %s in %s at %d", card.id, card.status.value, card.position)
        return card

    def update_card(self, card_id: str, update: CardUpdate) -> Card:
        """Replace a card's fields, repositioning it if status or position changed.

        Args:
            card_id: ID of the card to update
            update: New title, description, status and requested position

        Returns:
            The updated card as saved

        Raises:
            CardNotFoundError: If no card has card_id (nothing is saved)
            StorageUnavailableError: If the store cannot be reached
            StorageCorruptError: If the stored board cannot be parsed
        """
        board = self._store.load()

        current = board.get_card(card_id)
        if current is None:
            raise CardNotFoundError(f"Card with id '{card_id}' not found")

        cards = [
            replace(card, title=update.title, description=update.description)
            if card.id == card_id
            else card
            for card in board.cards
        ]
        if current.status != update.status or current.position != update.position:
            cards = move_card(cards, card_id, update.status, update.position)

        board.cards = cards
        updated = board.get_card(card_id)
        if updated is None:
            raise CardNotFoundError(f"Card with id '{card_id}' not found")

        self._store.save(board)
        logger.info("Card updated: %s", card_id)
        return updated

    def delete_card(self, card_id: str) -> None:
        """Delete a card.

        Raises:
            CardNotFoundError: If no card has card_id (nothing is saved)
            StorageUnavailableError: If the store cannot be reached
            StorageCorruptError: If the stored board cannot be parsed
        """
        board = self._store.load()
        board.cards = remove_card(board.cards, card_id)
        self._store.save(board)
        logger.info("Card deleted: %s", card_id)
