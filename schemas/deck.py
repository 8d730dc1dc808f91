from datetime import datetime

from pydantic import BaseModel, ConfigDict, StrictInt, field_validator

NAME_MAX_LENGTH = 255


class DeckCreateIn(BaseModel):
    name: str
    description: str | None = None

    @field_validator("name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if len(value) < 1:
            raise ValueError("Name is required")
        if len(value) > NAME_MAX_LENGTH:
            raise ValueError("Name is too long")
        return value


class DeckUpdateIn(DeckCreateIn):
    id: StrictInt


class DeckDeleteIn(BaseModel):
    id: StrictInt


class DeckOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: str
    name: str
    description: str | None = None
    created_at: datetime
    updated_at: datetime
