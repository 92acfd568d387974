from dataclasses import dataclass, field
from datetime import date, datetime, time
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID

if TYPE_CHECKING:
    from src.events.repository.orm_models import Ceremony, Guest, GuestCeremony, WeddingEvent


class EventNotFoundError(Exception):
    """Raised when writing to an event that does not exist."""

    def __init__(self, event_id: int) -> None:
        self.event_id = event_id
        super().__init__(f"Event {event_id} does not exist")


class GuestNotFoundError(Exception):
    """Raised when linking a ceremony to a guest that does not exist."""

    def __init__(self, guest_id: int) -> None:
        self.guest_id = guest_id
        super().__init__(f"Guest {guest_id} does not exist")


class CeremonyNotFoundError(Exception):
    """Raised when the ceremony is missing or belongs to another event."""

    def __init__(self, ceremony_id: int) -> None:
        self.ceremony_id = ceremony_id
        super().__init__(f"Ceremony {ceremony_id} does not exist for this guest's event")


class RSVPStatus(str, Enum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    DECLINED = "declined"


class TransportMode(str, Enum):
    NONE = "none"
    ALL = "all"
    SELECTED = "selected"
    SPECIAL_DEAL = "special_deal"


class FlightMode(str, Enum):
    NONE = "none"
    COLLECT_REQUIREMENTS = "collect_requirements"
    PROVIDE_FLIGHTS = "provide_flights"


# Largest value the integer primary key columns can hold.
MAX_EVENT_ID = 2**31 - 1


def parse_event_id(raw: str) -> int | None:
    """Parse a path segment into an event id.

    Only plain ASCII digits are accepted; signs, whitespace and trailing
    text all yield None.
    """
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)


@dataclass(frozen=True)
class CeremonyDTO:
    id: int
    name: str
    date: date
    start_time: time | None = None

    @classmethod
    def from_ceremony(cls, ceremony: "Ceremony") -> "CeremonyDTO":
        return cls(
            id=ceremony.id,
            name=ceremony.name,
            date=ceremony.date,
            start_time=ceremony.start_time,
        )


@dataclass(frozen=True)
class GuestCeremonyDTO:
    """A guest's invitation to one ceremony."""

    ceremony_id: int
    ceremony: CeremonyDTO
    attending: bool | None = None
    meal_preference: str | None = None

    @classmethod
    def from_guest_ceremony(cls, link: "GuestCeremony") -> "GuestCeremonyDTO":
        return cls(
            ceremony_id=link.ceremony_id,
            ceremony=CeremonyDTO.from_ceremony(link.ceremony),
            attending=link.attending,
            meal_preference=link.meal_preference,
        )


@dataclass(frozen=True)
class GuestDTO:
    """DTO for a guest as listed under an event."""

    id: int
    event_id: int
    first_name: str
    last_name: str
    rsvp_status: RSVPStatus
    created_at: datetime
    email: str | None = None
    phone: str | None = None
    plus_one_allowed: bool = False
    plus_one_confirmed: bool = False
    plus_one_name: str | None = None
    notes: str | None = None
    ceremonies: list[GuestCeremonyDTO] = field(default_factory=list)

    @classmethod
    def from_guest(cls, guest: "Guest") -> "GuestDTO":
        """Create GuestDTO from a Guest ORM model with its ceremonies loaded."""
        return cls(
            id=guest.id,
            event_id=guest.event_id,
            first_name=guest.first_name,
            last_name=guest.last_name,
            rsvp_status=RSVPStatus(guest.rsvp_status),
            created_at=guest.created_at,
            email=guest.email,
            phone=guest.phone,
            plus_one_allowed=guest.plus_one_allowed,
            plus_one_confirmed=guest.plus_one_confirmed,
            plus_one_name=guest.plus_one_name,
            notes=guest.notes,
            ceremonies=[GuestCeremonyDTO.from_guest_ceremony(link) for link in guest.ceremonies],
        )


@dataclass(frozen=True)
class EventDTO:
    """DTO for a wedding event returned by read and write models."""

    id: int
    title: str
    couple_names: str
    start_date: date
    end_date: date
    owner_id: UUID
    location: str | None = None
    description: str | None = None
    # Transport step of the setup wizard
    transport_mode: TransportMode = TransportMode.NONE
    transport_provider_name: str | None = None
    transport_provider_phone: str | None = None
    transport_provider_email: str | None = None
    transport_instructions: str | None = None
    send_travel_updates: bool = False
    notify_guests: bool = False
    provides_airport_pickup: bool = False
    provides_venue_transfers: bool = False
    flight_mode: FlightMode = FlightMode.NONE

    @classmethod
    def from_event(cls, event: "WeddingEvent") -> "EventDTO":
        return cls(
            id=event.id,
            title=event.title,
            couple_names=event.couple_names,
            start_date=event.start_date,
            end_date=event.end_date,
            owner_id=event.owner_id,
            location=event.location,
            description=event.description,
            transport_mode=TransportMode(event.transport_mode),
            transport_provider_name=event.transport_provider_name,
            transport_provider_phone=event.transport_provider_phone,
            transport_provider_email=event.transport_provider_email,
            transport_instructions=event.transport_instructions,
            send_travel_updates=event.send_travel_updates,
            notify_guests=event.notify_guests,
            provides_airport_pickup=event.provides_airport_pickup,
            provides_venue_transfers=event.provides_venue_transfers,
            flight_mode=FlightMode(event.flight_mode),
        )
