from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel

from src.events.dtos import FlightMode, TransportMode


class TransportPreferences(BaseModel):
    """Transport step of the event setup wizard.

    Serialized with camelCase keys on the wire; snake_case names are accepted too.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    transport_mode: TransportMode = TransportMode.NONE
    transport_provider_name: str | None = None
    transport_provider_phone: str | None = None
    transport_provider_email: EmailStr | None = None
    transport_instructions: str | None = None
    send_travel_updates: bool = False
    notify_guests: bool = False
    provides_airport_pickup: bool = False
    provides_venue_transfers: bool = False
    flight_mode: FlightMode = FlightMode.NONE

    def to_wire(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


SAMPLE_TRANSPORT_PREFERENCES = TransportPreferences(
    transport_mode=TransportMode.SELECTED,
    transport_provider_name="Test Provider",
    transport_provider_phone="9810070653",
    transport_provider_email="test@example.com",
    transport_instructions="Test instructions",
    send_travel_updates=True,
    notify_guests=True,
    provides_airport_pickup=True,
    provides_venue_transfers=True,
    flight_mode=FlightMode.NONE,
)
