from collections.abc import Mapping
from typing import Any

import structlog
from sqlalchemy.orm import Session

from core.errors import NotFoundOrUnauthorizedError
from models.deck import Deck
from repositories.deck_repo import DeckRepository
from schemas.deck import DeckCreateIn, DeckDeleteIn, DeckUpdateIn
from services.guards import require_user_id, validate_input
from services.revalidation import DECKS_PATH, PathRevalidator, deck_path

logger = structlog.get_logger(__name__)


class DeckService:
    def __init__(self, db: Session, revalidator: PathRevalidator | None = None):
        self.deck_repo = DeckRepository(db)
        self.revalidator = revalidator or PathRevalidator()

    def create_deck(self, *, user_id: str | None, data: DeckCreateIn | Mapping[str, Any]) -> Deck:
        owner = require_user_id(user_id)
        payload = validate_input(DeckCreateIn, data)
        deck = self.deck_repo.create_deck(
            user_id=owner,
            name=payload.name,
            description=payload.description,
        )
        logger.info("deck_created", deck_id=deck.id, user_id=owner)
        self.revalidator.revalidate_path(DECKS_PATH)
        return deck

    def update_deck(self, *, user_id: str | None, data: DeckUpdateIn | Mapping[str, Any]) -> Deck:
        owner = require_user_id(user_id)
        payload = validate_input(DeckUpdateIn, data)
        # an omitted description keeps its stored value; an explicit null clears it
        changes = payload.model_dump(include={"name", "description"}, exclude_unset=True)
        deck = self.deck_repo.update_deck(deck_id=payload.id, user_id=owner, changes=changes)
        if deck is None:
            logger.warning("deck_update_rejected", deck_id=payload.id, user_id=owner)
            raise NotFoundOrUnauthorizedError("Deck", payload.id)
        logger.info("deck_updated", deck_id=deck.id, user_id=owner)
        self.revalidator.revalidate_path(DECKS_PATH)
        self.revalidator.revalidate_path(deck_path(deck.id))
        return deck

    def delete_deck(self, *, user_id: str | None, data: DeckDeleteIn | Mapping[str, Any]) -> Deck:
        owner = require_user_id(user_id)
        payload = validate_input(DeckDeleteIn, data)
        # cards go with the deck through the ON DELETE CASCADE foreign key
        deck = self.deck_repo.delete_deck(deck_id=payload.id, user_id=owner)
        if deck is None:
            logger.warning("deck_delete_rejected", deck_id=payload.id, user_id=owner)
            raise NotFoundOrUnauthorizedError("Deck", payload.id)
        logger.info("deck_deleted", deck_id=payload.id, user_id=owner)
        self.revalidator.revalidate_path(DECKS_PATH)
        return deck

    def list_decks(self, *, user_id: str | None) -> list[Deck]:
        owner = require_user_id(user_id)
        return self.deck_repo.list_decks(owner)

    def get_deck(self, *, user_id: str | None, deck_id: int) -> Deck:
        owner = require_user_id(user_id)
        deck = self.deck_repo.get_deck(deck_id, owner)
        if deck is None:
            raise NotFoundOrUnauthorizedError("Deck", deck_id)
        return deck
