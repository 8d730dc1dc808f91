from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator


class CardFieldsIn(BaseModel):
    front: str
    back: str

    @field_validator("front")
    @classmethod
    def _check_front(cls, value: str) -> str:
        if not value:
            raise ValueError("Front of card is required")
        return value

    @field_validator("back")
    @classmethod
    def _check_back(cls, value: str) -> str:
        if not value:
            raise ValueError("Back of card is required")
        return value


class CardCreateIn(CardFieldsIn):
    deck_id: StrictInt


class CardUpdateIn(CardFieldsIn):
    id: StrictInt


class CardDeleteIn(BaseModel):
    id: StrictInt


class CardOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    deck_id: int
    front: str
    back: str
    created_at: datetime
    updated_at: datetime
