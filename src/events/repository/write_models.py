"""Write models for events, ceremonies and guests.

Used by the CLI to seed data. Returns DTOs instead of ORM models.
"""

from abc import ABC, abstractmethod
from datetime import date, time
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import (
    CeremonyDTO,
    CeremonyNotFoundError,
    EventDTO,
    EventNotFoundError,
    FlightMode,
    GuestCeremonyDTO,
    GuestDTO,
    GuestNotFoundError,
    RSVPStatus,
    TransportMode,
)
from src.events.repository.orm_models import Ceremony, Guest, GuestCeremony, WeddingEvent


class EventWriteModel(ABC):
    """Abstract base class for event write operations."""

    @abstractmethod
    async def create_event(
        self,
        owner_id: UUID,
        title: str,
        couple_names: str,
        start_date: date,
        end_date: date,
        location: str | None = None,
        description: str | None = None,
    ) -> EventDTO:
        raise NotImplementedError

    @abstractmethod
    async def add_guest(
        self,
        event_id: int,
        first_name: str,
        last_name: str,
        email: str | None = None,
        phone: str | None = None,
        rsvp_status: RSVPStatus = RSVPStatus.PENDING,
        plus_one_allowed: bool = False,
        notes: str | None = None,
    ) -> GuestDTO:
        """Add a guest to an event. Raises EventNotFoundError for an unknown event."""
        raise NotImplementedError

    @abstractmethod
    async def add_ceremony(
        self,
        event_id: int,
        name: str,
        date: date,
        start_time: time | None = None,
    ) -> CeremonyDTO:
        raise NotImplementedError

    @abstractmethod
    async def invite_guest_to_ceremony(
        self,
        guest_id: int,
        ceremony_id: int,
        attending: bool | None = None,
        meal_preference: str | None = None,
    ) -> GuestCeremonyDTO:
        """Link a guest to a ceremony of the same event."""
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    """SQL implementation of event write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self.session_overwrite = session_overwrite

    async def create_event(
        self,
        owner_id: UUID,
        title: str,
        couple_names: str,
        start_date: date,
        end_date: date,
        location: str | None = None,
        description: str | None = None,
    ) -> EventDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            event = WeddingEvent(
                owner_id=owner_id,
                title=title,
                couple_names=couple_names,
                start_date=start_date,
                end_date=end_date,
                location=location,
                description=description,
                transport_mode=TransportMode.NONE,
                send_travel_updates=False,
                notify_guests=False,
                provides_airport_pickup=False,
                provides_venue_transfers=False,
                flight_mode=FlightMode.NONE,
            )
            session.add(event)
            await session.flush()

            return EventDTO.from_event(event)

    async def add_guest(
        self,
        event_id: int,
        first_name: str,
        last_name: str,
        email: str | None = None,
        phone: str | None = None,
        rsvp_status: RSVPStatus = RSVPStatus.PENDING,
        plus_one_allowed: bool = False,
        notes: str | None = None,
    ) -> GuestDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            await self._get_event_or_raise(session, event_id)

            guest = Guest(
                event_id=event_id,
                first_name=first_name,
                last_name=last_name,
                email=email,
                phone=phone,
                rsvp_status=rsvp_status,
                plus_one_allowed=plus_one_allowed,
                plus_one_confirmed=False,
                notes=notes,
            )
            session.add(guest)
            await session.flush()
            # created_at is filled in by the database
            await session.refresh(guest, attribute_names=["created_at", "ceremonies"])

            return GuestDTO.from_guest(guest)

    async def add_ceremony(
        self,
        event_id: int,
        name: str,
        date: date,
        start_time: time | None = None,
    ) -> CeremonyDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            await self._get_event_or_raise(session, event_id)

            ceremony = Ceremony(event_id=event_id, name=name, date=date, start_time=start_time)
            session.add(ceremony)
            await session.flush()

            return CeremonyDTO.from_ceremony(ceremony)

    async def invite_guest_to_ceremony(
        self,
        guest_id: int,
        ceremony_id: int,
        attending: bool | None = None,
        meal_preference: str | None = None,
    ) -> GuestCeremonyDTO:
        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            guest = await session.get(Guest, guest_id)
            if guest is None:
                raise GuestNotFoundError(guest_id)

            ceremony = await session.get(Ceremony, ceremony_id)
            if ceremony is None or ceremony.event_id != guest.event_id:
                raise CeremonyNotFoundError(ceremony_id)

            link = GuestCeremony(
                guest_id=guest.id,
                ceremony_id=ceremony.id,
                attending=attending,
                meal_preference=meal_preference,
            )
            session.add(link)
            await session.flush()

            return GuestCeremonyDTO(
                ceremony_id=ceremony.id,
                ceremony=CeremonyDTO.from_ceremony(ceremony),
                attending=attending,
                meal_preference=meal_preference,
            )

    async def _get_event_or_raise(self, session, event_id: int) -> WeddingEvent:
        result = await session.execute(select(WeddingEvent).where(WeddingEvent.id == event_id))
        event = result.scalar_one_or_none()
        if event is None:
            raise EventNotFoundError(event_id)
        return event
