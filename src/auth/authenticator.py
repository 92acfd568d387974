import logging
from typing import Protocol

import jwt
from fastapi import Request

from src.auth.dtos import AuthRejection, AuthResult
from src.auth.repository import SqlUserReadModel, UserReadModel
from src.auth.tokens import decode_access_token
from src.config.settings import settings

logger = logging.getLogger(__name__)


# =============================================================================
# Protocols (interfaces) for dependency injection
# =============================================================================


class Authenticator(Protocol):
    """Protocol for establishing the caller's identity."""

    async def __call__(self, request: Request) -> AuthResult:
        """Return the authenticated user or the reason the request was rejected."""
        ...


# =============================================================================
# Default implementations
# =============================================================================


def extract_session_token(request: Request, cookie_name: str) -> str | None:
    """Read the session token from the session cookie, falling back to a Bearer header."""
    if token := request.cookies.get(cookie_name):
        return token

    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()

    return None


class SessionTokenAuthenticator:
    """Default authenticator using signed session tokens and the users table."""

    def __init__(
        self,
        user_read_model: UserReadModel,
        cookie_name: str = settings.session_cookie_name,
    ):
        self._user_read_model = user_read_model
        self._cookie_name = cookie_name

    async def __call__(self, request: Request) -> AuthResult:
        token = extract_session_token(request, self._cookie_name)
        if token is None:
            return AuthRejection(reason="Authentication required")

        try:
            user_id = decode_access_token(token)
        except jwt.ExpiredSignatureError:
            return AuthRejection(reason="Session expired")
        except jwt.InvalidTokenError as e:
            logger.info(f"Rejected session token: {e}")
            return AuthRejection(reason="Invalid session token")

        user = await self._user_read_model.get_active_user(user_id)
        if user is None:
            return AuthRejection(reason="Unknown or inactive user")

        return user


# =============================================================================
# Dependency providers (can be overridden in tests)
# =============================================================================


def get_authenticator() -> Authenticator:
    """Factory for the request authenticator. Override in tests."""
    return SessionTokenAuthenticator(user_read_model=SqlUserReadModel())
