from datetime import date, time
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum, ForeignKey, String, Text, Time, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy_utils import UUIDType

from src.config.table_names import TableNames
from src.events.dtos import FlightMode, RSVPStatus, TransportMode
from src.models.base import SerialBase, TimeStamp


class WeddingEvent(SerialBase, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    owner_id: Mapped[UUID] = mapped_column(
        UUIDType(binary=False),
        ForeignKey(f"{TableNames.USERS.value}.uuid", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    couple_names: Mapped[str] = mapped_column(String(255), nullable=False)
    start_date: Mapped[date] = mapped_column(Date, nullable=False)
    end_date: Mapped[date] = mapped_column(Date, nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=True)
    description: Mapped[str] = mapped_column(Text, nullable=True)

    # Transport wizard step
    transport_mode: Mapped[str] = mapped_column(
        Enum(TransportMode, name="transport_mode_enum", values_callable=lambda x: [e.value for e in x]),
        default=TransportMode.NONE,
        nullable=False,
    )
    transport_provider_name: Mapped[str] = mapped_column(String(255), nullable=True)
    transport_provider_phone: Mapped[str] = mapped_column(String(50), nullable=True)
    transport_provider_email: Mapped[str] = mapped_column(String(255), nullable=True)
    transport_instructions: Mapped[str] = mapped_column(Text, nullable=True)
    send_travel_updates: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notify_guests: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    provides_airport_pickup: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    provides_venue_transfers: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    flight_mode: Mapped[str] = mapped_column(
        Enum(FlightMode, name="flight_mode_enum", values_callable=lambda x: [e.value for e in x]),
        default=FlightMode.NONE,
        nullable=False,
    )

    guests: Mapped[list["Guest"]] = relationship("Guest", back_populates="event")
    ceremonies: Mapped[list["Ceremony"]] = relationship("Ceremony", back_populates="event")

    def __repr__(self) -> str:
        return f"<WeddingEvent {self.id} {self.title}>"


class Ceremony(SerialBase, TimeStamp):
    __tablename__ = TableNames.CEREMONIES.value

    event_id: Mapped[int] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    date: Mapped[date] = mapped_column(Date, nullable=False)
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True)

    event: Mapped["WeddingEvent"] = relationship("WeddingEvent", back_populates="ceremonies")

    def __repr__(self) -> str:
        return f"<Ceremony {self.name} on {self.date}>"


class Guest(SerialBase, TimeStamp):
    __tablename__ = TableNames.GUESTS.value

    event_id: Mapped[int] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    first_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=True)
    phone: Mapped[str] = mapped_column(String(50), nullable=True)

    rsvp_status: Mapped[str] = mapped_column(
        Enum(RSVPStatus, name="rsvp_status_enum", values_callable=lambda x: [e.value for e in x]),
        default=RSVPStatus.PENDING,
        nullable=False,
    )

    # Plus one
    plus_one_allowed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    plus_one_confirmed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    plus_one_name: Mapped[str] = mapped_column(String(255), nullable=True)

    notes: Mapped[str] = mapped_column(Text, nullable=True)

    event: Mapped["WeddingEvent"] = relationship("WeddingEvent", back_populates="guests")
    ceremonies: Mapped[list["GuestCeremony"]] = relationship(
        "GuestCeremony", back_populates="guest", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Guest {self.first_name} {self.last_name} - {self.rsvp_status}>"


class GuestCeremony(SerialBase, TimeStamp):
    __tablename__ = TableNames.GUEST_CEREMONIES.value
    __table_args__ = (UniqueConstraint("guest_id", "ceremony_id", name="uq_guest_ceremony"),)

    guest_id: Mapped[int] = mapped_column(
        ForeignKey(f"{TableNames.GUESTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    ceremony_id: Mapped[int] = mapped_column(
        ForeignKey(f"{TableNames.CEREMONIES.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    attending: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    meal_preference: Mapped[str] = mapped_column(String(100), nullable=True)

    guest: Mapped["Guest"] = relationship("Guest", back_populates="ceremonies")
    ceremony: Mapped["Ceremony"] = relationship("Ceremony")

    def __repr__(self) -> str:
        return f"<GuestCeremony guest={self.guest_id} ceremony={self.ceremony_id}>"
