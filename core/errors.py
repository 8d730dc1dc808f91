"""Error taxonomy shared by services and the HTTP layer."""

from typing import Any


class FlashdeckError(Exception):
    """Base exception for all flashdeck errors."""

    code = "error"

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> dict[str, Any]:
        return {"detail": self.message, "code": self.code}


class UnauthenticatedError(FlashdeckError):
    """No caller identity could be resolved."""

    code = "unauthenticated"

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, status_code=401)


class ValidationFailedError(FlashdeckError):
    """Input rejected by a schema before any authorization or persistence step."""

    code = "validation_failed"

    def __init__(self, errors: list[dict[str, str]]) -> None:
        self.errors = errors
        message = "; ".join(f"{err['field']}: {err['message']}" for err in errors)
        super().__init__(message or "Invalid input", status_code=422)

    def to_response(self) -> dict[str, Any]:
        response = super().to_response()
        response["errors"] = self.errors
        return response


class NotFoundOrUnauthorizedError(FlashdeckError):
    """Resource is absent or owned by someone else.

    The two cases are reported identically so that callers cannot learn
    about the existence of other users' decks and cards.
    """

    code = "not_found_or_unauthorized"

    def __init__(self, entity: str, entity_id: int) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} not found or unauthorized", status_code=404)


def field_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs."""
    flattened = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path")]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        flattened.append({"field": ".".join(loc) or "__root__", "message": message})
    return flattened
