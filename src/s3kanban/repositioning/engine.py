"""Card repositioning - column membership and dense per-column ordering.

All functions are pure: they take the full card list and return a new one,
leaving the input (and the cards in it) untouched. Storage order of the list
is preserved; only ``status`` and ``position`` change.

Columns are kept dense: after any move or removal, the positions of the cards
in each affected column are exactly ``0..k-1``. This includes the column a
card leaves, not just the one it enters.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from dataclasses import replace
from typing import TYPE_CHECKING

from s3kanban.repositioning.exceptions import CardNotFoundError

if TYPE_CHECKING:
    from collections.abc import Iterable

    from s3kanban.board_store.models import Card, CardStatus

logger = logging.getLogger(__name__)


def clamp(position: int, upper: int) -> int:
    """Saturate position into [0, upper]."""
    return max(0, min(position, upper))


def column(cards: Iterable[Card], status: CardStatus) -> list[Card]:
    """Cards in one column, ordered by position.

    Ties are broken by storage order.
    """
    members = [card for card in cards if card.status == status]
    # sorted() is stable, so equal positions keep their storage order
    return sorted(members, key=lambda card: card.position)


def _find(cards: list[Card], card_id: str) -> int:
    for index, card in enumerate(cards):
        if card.id == card_id:
            return index
    raise CardNotFoundError(f"Card with id '{card_id}' not found")


def _apply_order(cards: list[Card], order: list[Card], status: CardStatus) -> list[Card]:
    """Return cards with the cards in order placed in status at their index."""
    ranks = {card.id: index for index, card in enumerate(order)}
    result = []
    for card in cards:
        rank = ranks.get(card.id)
        if rank is None:
            result.append(card)
        elif card.status != status or card.position != rank:
            result.append(replace(card, status=status, position=rank))
        else:
            result.append(card)
    return result


def reindex_column(cards: list[Card], status: CardStatus) -> list[Card]:
    """Renumber one column densely, keeping its current relative order."""
    return _apply_order(cards, column(cards, status), status)


def append_position(cards: Iterable[Card], status: CardStatus) -> int:
    """Position for a card appended to the end of a column.

    Returns:
        One past the highest position in the column, or 0 if it is empty.
    """
    positions = [card.position for card in cards if card.status == status]
    return max(positions) + 1 if positions else 0


def move_card(
    cards: list[Card],
    card_id: str,
    status: CardStatus,
    position: int,
) -> list[Card]:
    """Move a card to a status column at a position.

    The requested position may be negative or past the end of the column; it
    is clamped to the nearest valid index rather than rejected. When neither
    status nor position differ from the card's current values nothing is
    reordered.

    Args:
        cards: Every card on the board
        card_id: ID of the card to move
        status: Target column
        position: Requested zero-based index in the target column

    Returns:
        New card list with the target column (and source column, if
        different) densely renumbered

    Raises:
        CardNotFoundError: If no card has card_id
    """
    moving = cards[_find(cards, card_id)]
    source = moving.status

    if moving.status == status and moving.position == position:
        return list(cards)

    others = column((card for card in cards if card.id != card_id), status)
    index = clamp(position, len(others))
    if index != position:
        logger.debug("Clamped position %d to %d for card %s", position, index, card_id)

    order = others[:index] + [moving] + others[index:]
    result = _apply_order(cards, order, status)

    if source != status:
        result = reindex_column(result, source)

    logger.debug(
        "Moved card %s from %s to %s at position %d", card_id, source.value, status.value, index
    )
    return result


def remove_card(cards: list[Card], card_id: str) -> list[Card]:
    """Remove a card and renumber the column it leaves.

    Raises:
        CardNotFoundError: If no card has card_id
    """
    removed = cards[_find(cards, card_id)]
    remaining = [card for card in cards if card.id != card_id]
    return reindex_column(remaining, removed.status)


def is_dense(cards: Iterable[Card]) -> bool:
    """Check that every column's positions form an unbroken 0..k-1 run."""
    by_status: dict[CardStatus, list[int]] = defaultdict(list)
    for card in cards:
        by_status[card.status].append(card.position)
    return all(sorted(positions) == list(range(len(positions))) for positions in by_status.values())
