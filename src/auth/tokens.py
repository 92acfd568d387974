from datetime import UTC, datetime, timedelta
from uuid import UUID

import jwt

from src.config.settings import settings


def create_access_token(user_id: UUID, expires_delta: timedelta | None = None) -> str:
    """Create a signed session token for the given user."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    payload = {
        "sub": str(user_id),
        "exp": datetime.now(UTC) + expires_delta,
    }
    return jwt.encode(payload, settings.secret_key, algorithm=settings.algorithm)


def decode_access_token(token: str) -> UUID:
    """Return the user id carried by a session token.

    Raises jwt.ExpiredSignatureError for expired tokens and jwt.InvalidTokenError
    for anything else that does not verify.
    """
    payload = jwt.decode(
        token,
        settings.secret_key,
        algorithms=[settings.algorithm],
        options={"require": ["sub", "exp"]},
    )
    try:
        return UUID(payload["sub"])
    except (TypeError, ValueError) as e:
        raise jwt.InvalidTokenError("Token subject is not a user id") from e
