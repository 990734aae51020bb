"""Card create/update/delete endpoints."""

import logging

from fastapi import APIRouter, status

from s3kanban.api.dependencies import BoardServiceDep
from s3kanban.api.models import CardCreate, CardReplace, CardResponse, card_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/card", tags=["cards"])


@router.post("", response_model=CardResponse)
def create_card(card: CardCreate, service: BoardServiceDep) -> CardResponse:
    """Create a card at the end of its column."""
    logger.info("[POST] /api/card")
    created = service.create_card(card.to_input())
    return card_to_response(created)


@router.put("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_card(card_id: str, card: CardReplace, service: BoardServiceDep) -> None:
    """Replace a card's fields, moving it when status or position changed."""
    logger.info("[PUT] /api/card/%s", card_id)
    service.update_card(card_id, card.to_update())


@router.delete("/{card_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_card(card_id: str, service: BoardServiceDep) -> None:
    """Delete a card."""
    logger.info("[DELETE] /api/card/%s", card_id)
    service.delete_card(card_id)
