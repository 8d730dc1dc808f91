from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from core.database import get_db
from core.security import get_current_user_id
from schemas.card import CardFieldsIn, CardOut
from services.card_service import CardService
from services.revalidation import PathRevalidator, get_revalidator

router = APIRouter(prefix="/cards", tags=["Cards"])


@router.get(
    "/{card_id}",
    response_model=CardOut,
)
async def get_card(
    card_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    svc = CardService(db)
    card = svc.get_card(user_id=user_id, card_id=card_id)
    return CardOut.model_validate(card, from_attributes=True)


@router.put(
    "/{card_id}",
    response_model=CardOut,
)
async def update_card(
    card_id: int,
    data: CardFieldsIn,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    revalidator: PathRevalidator = Depends(get_revalidator),
):
    svc = CardService(db, revalidator)
    card = svc.update_card(user_id=user_id, data={"id": card_id, **data.model_dump()})
    return CardOut.model_validate(card, from_attributes=True)


@router.delete(
    "/{card_id}",
    status_code=204,
)
async def delete_card(
    card_id: int,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
    revalidator: PathRevalidator = Depends(get_revalidator),
):
    svc = CardService(db, revalidator)
    svc.delete_card(user_id=user_id, data={"id": card_id})
    return Response(status_code=204)
