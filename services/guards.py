from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from core.errors import UnauthenticatedError, ValidationFailedError, field_errors

SchemaT = TypeVar("SchemaT", bound=BaseModel)


def require_user_id(user_id: str | None) -> str:
    if not user_id:
        raise UnauthenticatedError()
    return user_id


def validate_input(schema: type[SchemaT], data: SchemaT | Mapping[str, Any]) -> SchemaT:
    """Return ``data`` as a validated ``schema`` instance or raise ValidationFailedError."""
    if isinstance(data, schema):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise ValidationFailedError(field_errors(exc.errors())) from exc
