from typing import Any

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from models.deck import Deck, utcnow


class DeckRepository:
    def __init__(self, db: Session):
        self.db = db

    def create_deck(self, *, user_id: str, name: str, description: str | None) -> Deck:
        now = utcnow()
        entity = Deck(
            user_id=user_id,
            name=name,
            description=description,
            created_at=now,
            updated_at=now,
        )
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def list_decks(self, user_id: str) -> list[Deck]:
        stmt = (
            select(Deck)
            .where(Deck.user_id == user_id)
            .order_by(Deck.created_at.asc(), Deck.id.asc())
        )
        return list(self.db.execute(stmt).scalars())

    def get_deck(self, deck_id: int, user_id: str) -> Deck | None:
        stmt = select(Deck).where(
            Deck.id == deck_id,
            Deck.user_id == user_id,
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def update_deck(self, *, deck_id: int, user_id: str, changes: dict[str, Any]) -> Deck | None:
        """Apply ``changes``; columns missing from it keep their stored value."""
        # the owner filter makes check-and-update a single statement
        stmt = (
            update(Deck)
            .where(Deck.id == deck_id, Deck.user_id == user_id)
            .values(**changes, updated_at=utcnow())
            .returning(Deck.id)
        )
        updated_id = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if updated_id is None:
            return None
        return self.db.get(Deck, updated_id)

    def delete_deck(self, *, deck_id: int, user_id: str) -> Deck | None:
        """Delete the deck if owned by ``user_id`` and return a detached copy of it."""
        stmt = (
            delete(Deck)
            .where(Deck.id == deck_id, Deck.user_id == user_id)
            .returning(*Deck.__table__.columns)
        )
        row = self.db.execute(stmt).mappings().one_or_none()
        self.db.commit()
        if row is None:
            return None
        return Deck(**row)
