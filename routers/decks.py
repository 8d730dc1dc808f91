from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import get_current_user_id
from schemas.card import CardFieldsIn, CardOut
from schemas.deck import DeckCreateIn, DeckOut
from services.card_service import CardService
from services.deck_service import DeckService
from services.revalidation import PathRevalidator, get_revalidator

router = APIRouter(prefix="/decks", tags=["Decks"])


@router.post(
    "",
    response_model=DeckOut,
    status_code=201,
)
async def create_deck(
    data: DeckCreateIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    revalidator: PathRevalidator = Depends(get_revalidator),
):
    svc = DeckService(db, revalidator)
    deck = svc.create_deck(user_id=user_id, data=data)
    return DeckOut.model_validate(deck, from_attributes=True)


@router.get(
    "",
    response_model=list[DeckOut],
)
async def list_decks(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = DeckService(db)
    decks = svc.list_decks(user_id=user_id)
    return [DeckOut.model_validate(deck, from_attributes=True) for deck in decks]


@router.get(
    "/{deck_id}",
    response_model=DeckOut,
)
async def get_deck(
    deck_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = DeckService(db)
    deck = svc.get_deck(user_id=user_id, deck_id=deck_id)
    return DeckOut.model_validate(deck, from_attributes=True)


@router.put(
    "/{deck_id}",
    response_model=DeckOut,
)
async def update_deck(
    deck_id: int,
    data: DeckCreateIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    revalidator: PathRevalidator = Depends(get_revalidator),
):
    svc = DeckService(db, revalidator)
    deck = svc.update_deck(user_id=user_id, data={"id": deck_id, **data.model_dump(exclude_unset=True)})
    return DeckOut.model_validate(deck, from_attributes=True)


@router.delete(
    "/{deck_id}",
    status_code=204,
)
async def delete_deck(
    deck_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    revalidator: PathRevalidator = Depends(get_revalidator),
):
    svc = DeckService(db, revalidator)
    svc.delete_deck(user_id=user_id, data={"id": deck_id})
    return Response(status_code=204)


@router.post(
    "/{deck_id}/cards",
    response_model=CardOut,
    status_code=201,
)
async def add_card_to_deck(
    deck_id: int,
    data: CardFieldsIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    revalidator: PathRevalidator = Depends(get_revalidator),
):
    svc = CardService(db, revalidator)
    card = svc.create_card(user_id=user_id, data={"deck_id": deck_id, **data.model_dump()})
    return CardOut.model_validate(card, from_attributes=True)


@router.get(
    "/{deck_id}/cards",
    response_model=list[CardOut],
)
async def list_cards_for_deck(
    deck_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = CardService(db)
    cards = svc.list_cards(user_id=user_id, deck_id=deck_id)
    return [CardOut.model_validate(card, from_attributes=True) for card in cards]
