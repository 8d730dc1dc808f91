from sqlalchemy import Column, DateTime, ForeignKey, Integer, Text, func

from core.database import Base
from models.deck import utcnow


class Card(Base):
    __tablename__ = "cards"

    id = Column(Integer, primary_key=True, autoincrement=True)
    deck_id = Column(
        Integer,
        ForeignKey("decks.id", ondelete="CASCADE", name="cards_deck_id_decks_id_fk"),
        nullable=False,
        index=True,
    )
    front = Column(Text, nullable=False)
    back = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
