from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class AuthenticatedUser:
    """Caller identity established from a valid session token."""

    user_id: UUID
    email: str


@dataclass(frozen=True)
class AuthRejection:
    """Reason a request could not be authenticated."""

    reason: str


AuthResult = AuthenticatedUser | AuthRejection
