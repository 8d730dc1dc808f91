from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy.orm import Session

from core.errors import NotFoundOrUnauthorizedError
from models.card import Card
from repositories.card_repo import CardRepository
from repositories.deck_repo import DeckRepository
from schemas.card import CardCreateIn, CardDeleteIn, CardUpdateIn
from services.guards import require_user_id, validate_input
from services.revalidation import PathRevalidator, deck_path

logger = structlog.get_logger(__name__)


class CardService:
    """Card operations; a card's owner is always its parent deck's owner."""

    def __init__(self, db: Session, revalidator: PathRevalidator | None = None):
        self.deck_repo = DeckRepository(db)
        self.card_repo = CardRepository(db)
        self.revalidator = revalidator or PathRevalidator()

    def _require_owned_deck(self, deck_id: int, user_id: str) -> None:
        if self.deck_repo.get_deck(deck_id, user_id) is None:
            logger.warning("deck_access_rejected", deck_id=deck_id, user_id=user_id)
            raise NotFoundOrUnauthorizedError("Deck", deck_id)

    def create_card(self, *, user_id: str | None, data: CardCreateIn | Mapping[str, Any]) -> Card:
        owner = require_user_id(user_id)
        payload = validate_input(CardCreateIn, data)
        # an insert has no affected-row signal, so ownership is checked up front
        self._require_owned_deck(payload.deck_id, owner)
        card = self.card_repo.create_card(
            deck_id=payload.deck_id,
            front=payload.front,
            back=payload.back,
        )
        logger.info("card_created", card_id=card.id, deck_id=card.deck_id, user_id=owner)
        self.revalidator.revalidate_path(deck_path(card.deck_id))
        return card

    def update_card(self, *, user_id: str | None, data: CardUpdateIn | Mapping[str, Any]) -> Card:
        owner = require_user_id(user_id)
        payload = validate_input(CardUpdateIn, data)
        card = self.card_repo.update_card_for_user(
            card_id=payload.id,
            user_id=owner,
            front=payload.front,
            back=payload.back,
        )
        if card is None:
            logger.warning("card_update_rejected", card_id=payload.id, user_id=owner)
            raise NotFoundOrUnauthorizedError("Card", payload.id)
        logger.info("card_updated", card_id=card.id, deck_id=card.deck_id, user_id=owner)
        self.revalidator.revalidate_path(deck_path(card.deck_id))
        return card

    def delete_card(self, *, user_id: str | None, data: CardDeleteIn | Mapping[str, Any]) -> Card:
        owner = require_user_id(user_id)
        payload = validate_input(CardDeleteIn, data)
        card = self.card_repo.delete_card_for_user(card_id=payload.id, user_id=owner)
        if card is None:
            logger.warning("card_delete_rejected", card_id=payload.id, user_id=owner)
            raise NotFoundOrUnauthorizedError("Card", payload.id)
        logger.info("card_deleted", card_id=card.id, deck_id=card.deck_id, user_id=owner)
        self.revalidator.revalidate_path(deck_path(card.deck_id))
        return card

    def list_cards(self, *, user_id: str | None, deck_id: int) -> list[Card]:
        owner = require_user_id(user_id)
        self._require_owned_deck(deck_id, owner)
        return self.card_repo.get_cards_by_deck_id(deck_id)

    def get_card(self, *, user_id: str | None, card_id: int) -> Card:
        owner = require_user_id(user_id)
        card = self.card_repo.get_card_for_user(card_id, owner)
        if card is None:
            raise NotFoundOrUnauthorizedError("Card", card_id)
        return card
