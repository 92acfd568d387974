import abc
from functools import partial
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import AuthenticatedUser
from src.config.database import async_session_manager
from src.models.user import User


class UserReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_active_user(self, user_id: UUID) -> AuthenticatedUser | None:
        """Get the user if it exists and is active."""
        raise NotImplementedError


class SqlUserReadModel(UserReadModel):
    """SQL implementation of user read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_active_user(self, user_id: UUID) -> AuthenticatedUser | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(
                select(User).where(User.uuid == user_id).where(User.is_active.is_(True))
            )
            user = result.scalar_one_or_none()

            if not user:
                return None

            return AuthenticatedUser(user_id=user.uuid, email=user.email)


class UserWriteModel(abc.ABC):
    @abc.abstractmethod
    async def get_or_create_user(self, email: str) -> AuthenticatedUser:
        raise NotImplementedError


class SqlUserWriteModel(UserWriteModel):
    """SQL implementation of user write model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_or_create_user(self, email: str) -> AuthenticatedUser:
        """Get existing user by email or create a new passwordless one."""
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            result = await session.execute(select(User).where(User.email == email))
            user = result.scalar_one_or_none()

            if user is None:
                user = User(
                    uuid=uuid4(),
                    email=email,
                    hashed_password=None,
                    is_active=True,
                    is_superuser=False,
                )
                session.add(user)
                await session.flush()

            return AuthenticatedUser(user_id=user.uuid, email=user.email)
