from authx import AuthX, AuthXConfig, TokenPayload
from fastapi import Depends

from core.config import settings
from core.errors import UnauthenticatedError

_cookie_samesite = settings.JWT_COOKIE_SAMESITE.lower() if settings.JWT_COOKIE_SAMESITE else None
_cookie_domain = settings.JWT_COOKIE_DOMAIN or None

# Tokens are minted by the identity provider with the shared secret; this
# service only verifies them.
config = AuthXConfig(
    JWT_SECRET_KEY=settings.SECRET_KEY,
    JWT_ALGORITHM=settings.JWT_ALG,
    JWT_TOKEN_LOCATION=settings.JWT_TOKEN_LOCATION,
    JWT_ACCESS_COOKIE_NAME=settings.JWT_ACCESS_COOKIE_NAME,
    JWT_COOKIE_SAMESITE=_cookie_samesite or "lax",
    JWT_COOKIE_SECURE=settings.JWT_COOKIE_SECURE,
    JWT_COOKIE_DOMAIN=_cookie_domain,
    JWT_COOKIE_CSRF_PROTECT=settings.JWT_COOKIE_CSRF_PROTECT,
)

security = AuthX(config=config)


async def get_current_user_id(
    payload: TokenPayload = Depends(security.access_token_required),
) -> str:
    """Resolve the caller's opaque user id from the verified access token."""
    if not payload.sub:
        raise UnauthenticatedError("Token does not identify a user")
    return str(payload.sub)
