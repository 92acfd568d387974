"""Write model for the transport step of the setup wizard."""

from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.dtos import AuthenticatedUser
from src.config.database import async_session_manager
from src.events.dtos import EventDTO
from src.events.repository.orm_models import WeddingEvent
from src.wizard.dtos import TransportPreferences


class TransportWriteModel(ABC):
    """Abstract base class for saving transport preferences."""

    @abstractmethod
    async def save_transport(
        self, user: AuthenticatedUser, preferences: TransportPreferences
    ) -> EventDTO | None:
        """Store preferences on the user's current event.

        The current event is the user's most recently created one.
        Returns None when the user has no event.
        """
        raise NotImplementedError


class SqlTransportWriteModel(TransportWriteModel):
    """SQL implementation of the transport write model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def save_transport(
        self, user: AuthenticatedUser, preferences: TransportPreferences
    ) -> EventDTO | None:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(WeddingEvent)
                .where(WeddingEvent.owner_id == user.user_id)
                .order_by(WeddingEvent.created_at.desc(), WeddingEvent.id.desc())
                .limit(1)
            )
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()

            if event is None:
                return None

            for name, value in preferences.model_dump().items():
                setattr(event, name, value)
            await session.flush()

            return EventDTO.from_event(event)
