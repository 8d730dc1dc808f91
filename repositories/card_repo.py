from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from models.card import Card
from models.deck import Deck, utcnow


class CardRepository:
    def __init__(self, db: Session):
        self.db = db

    def _owned_deck_ids(self, user_id: str):
        return select(Deck.id).where(Deck.user_id == user_id)

    def create_card(self, *, deck_id: int, front: str, back: str) -> Card:
        now = utcnow()
        entity = Card(
            deck_id=deck_id,
            front=front,
            back=back,
            created_at=now,
            updated_at=now,
        )
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity

    def get_cards_by_deck_id(self, deck_id: int) -> list[Card]:
        stmt = (
            select(Card)
            .where(Card.deck_id == deck_id)
            .order_by(Card.created_at.asc(), Card.id.asc())
        )
        return list(self.db.execute(stmt).scalars())

    def get_card_for_user(self, card_id: int, user_id: str) -> Card | None:
        stmt = (
            select(Card)
            .join(Deck, Deck.id == Card.deck_id)
            .where(Card.id == card_id, Deck.user_id == user_id)
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def update_card_for_user(
        self,
        *,
        card_id: int,
        user_id: str,
        front: str,
        back: str,
    ) -> Card | None:
        stmt = (
            update(Card)
            .where(Card.id == card_id, Card.deck_id.in_(self._owned_deck_ids(user_id)))
            .values(front=front, back=back, updated_at=utcnow())
            .returning(Card.id)
        )
        updated_id = self.db.execute(stmt).scalar_one_or_none()
        self.db.commit()
        if updated_id is None:
            return None
        return self.db.get(Card, updated_id)

    def delete_card_for_user(self, *, card_id: int, user_id: str) -> Card | None:
        """Delete the card if the caller owns its deck; return a detached copy of it."""
        stmt = (
            delete(Card)
            .where(Card.id == card_id, Card.deck_id.in_(self._owned_deck_ids(user_id)))
            .returning(*Card.__table__.columns)
        )
        row = self.db.execute(stmt).mappings().one_or_none()
        self.db.commit()
        if row is None:
            return None
        return Card(**row)
