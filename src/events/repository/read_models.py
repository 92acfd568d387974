import abc
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.auth.dtos import AuthenticatedUser
from src.config.database import async_session_manager
from src.events.dtos import MAX_EVENT_ID, EventDTO, GuestDTO
from src.events.repository.orm_models import Guest, GuestCeremony, WeddingEvent


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_event(self, event_id: int, user: AuthenticatedUser) -> EventDTO | None:
        """
        Get an event the user is allowed to see.
        Returns None both when the event does not exist and when the user has no access to it.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_event_guests(self, event_id: int) -> list[GuestDTO]:
        """Get the guests of an event, newest first, with their ceremonies."""
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    """SQL implementation of the event read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def get_event(self, event_id: int, user: AuthenticatedUser) -> EventDTO | None:
        if event_id > MAX_EVENT_ID:
            return None

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(WeddingEvent)
                .where(WeddingEvent.id == event_id)
                .where(WeddingEvent.owner_id == user.user_id)
            )
            result = await session.execute(stmt)
            event = result.scalar_one_or_none()

            if not event:
                return None

            return EventDTO.from_event(event)

    async def get_event_guests(self, event_id: int) -> list[GuestDTO]:
        if event_id > MAX_EVENT_ID:
            return []

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            stmt = (
                select(Guest)
                .where(Guest.event_id == event_id)
                .options(selectinload(Guest.ceremonies).selectinload(GuestCeremony.ceremony))
                .order_by(Guest.created_at.desc(), Guest.id.desc())
                .execution_options(populate_existing=True)
            )
            result = await session.execute(stmt)
            guests = result.scalars().all()

            return [GuestDTO.from_guest(guest) for guest in guests]
