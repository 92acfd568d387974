import logging
from datetime import UTC, date, datetime
from uuid import uuid4

import pytest

from src.auth.authenticator import get_authenticator
from src.auth.dtos import AuthenticatedUser, AuthRejection
from src.events.dtos import EventDTO, GuestDTO, RSVPStatus
from src.events.features.list_event_guests.router import get_event_read_model
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.urls import LIST_EVENT_GUESTS_URL

OWNER = AuthenticatedUser(user_id=uuid4(), email="owner@example.com")


class StubAuthenticator:
    """Authenticator returning a fixed result."""

    def __init__(self, result=OWNER, error: Exception | None = None):
        self.result = result
        self.error = error
        self.calls = 0

    async def __call__(self, request):
        self.calls += 1
        if self.error:
            raise self.error
        return self.result


class InMemoryEventReadModel(EventReadModel):
    """In-memory event read model that records its calls."""

    def __init__(
        self,
        events: list[EventDTO] | None = None,
        guests: dict[int, list] | None = None,
        get_event_error: Exception | None = None,
        get_guests_error: Exception | None = None,
    ):
        self._events = {event.id: event for event in events or []}
        self._guests = guests or {}
        self._get_event_error = get_event_error
        self._get_guests_error = get_guests_error
        self.calls: list[tuple] = []

    async def get_event(self, event_id: int, user: AuthenticatedUser) -> EventDTO | None:
        self.calls.append(("get_event", event_id, user))
        if self._get_event_error:
            raise self._get_event_error
        event = self._events.get(event_id)
        if event is None or event.owner_id != user.user_id:
            return None
        return event

    async def get_event_guests(self, event_id: int) -> list:
        self.calls.append(("get_event_guests", event_id))
        if self._get_guests_error:
            raise self._get_guests_error
        return self._guests.get(event_id, [])


def make_event(event_id: int, owner: AuthenticatedUser = OWNER) -> EventDTO:
    return EventDTO(
        id=event_id,
        title="Our Wedding",
        couple_names="Anna & Ben",
        start_date=date(2026, 8, 15),
        end_date=date(2026, 8, 16),
        owner_id=owner.user_id,
    )


def overrides_for(read_model, authenticator=None):
    return {
        get_event_read_model: lambda: read_model,
        get_authenticator: lambda: authenticator or StubAuthenticator(),
    }


@pytest.mark.asyncio
async def test_list_guests_success(client_factory):
    """Test that the guest collection is returned unchanged inside the envelope."""
    guests = [{"id": 1, "name": "A"}]
    read_model = InMemoryEventReadModel(events=[make_event(42)], guests={42: guests})

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": [{"id": 1, "name": "A"}]}
    assert read_model.calls == [("get_event", 42, OWNER), ("get_event_guests", 42)]


@pytest.mark.asyncio
async def test_list_guests_empty_event(client_factory):
    """Test that an event without guests returns an empty list."""
    read_model = InMemoryEventReadModel(events=[make_event(7)])

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="7"))

    assert response.status_code == 200
    assert response.json() == {"success": True, "data": []}


@pytest.mark.asyncio
async def test_list_guests_serializes_guest_dtos(client_factory):
    """Test that guest DTOs from the SQL read model serialize to JSON."""
    created_at = datetime(2026, 1, 2, 3, 4, 5, tzinfo=UTC)
    guest = GuestDTO(
        id=3,
        event_id=42,
        first_name="Jane",
        last_name="Doe",
        rsvp_status=RSVPStatus.CONFIRMED,
        created_at=created_at,
        email="jane@example.com",
    )
    read_model = InMemoryEventReadModel(events=[make_event(42)], guests={42: [guest]})

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 200
    data = response.json()["data"]
    assert len(data) == 1
    assert data[0]["id"] == 3
    assert data[0]["first_name"] == "Jane"
    assert data[0]["rsvp_status"] == "confirmed"
    assert data[0]["created_at"] == created_at.isoformat()
    assert data[0]["ceremonies"] == []


@pytest.mark.asyncio
async def test_list_guests_invalid_event_id(client_factory):
    """Test that a non-numeric id is rejected before any lookup."""
    read_model = InMemoryEventReadModel(events=[make_event(42)])

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="abc"))

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "Invalid event ID",
        "code": "INVALID_INPUT",
    }
    assert read_model.calls == []


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", ["-1", "4.2", "42abc", "1e3", "%2042", "0x2A", "%D9%A4%D9%A2"])
async def test_list_guests_rejects_non_integer_ids(client_factory, raw_id):
    """Test that anything other than plain digits is invalid input."""
    read_model = InMemoryEventReadModel(events=[make_event(42)])

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(f"/api/events/{raw_id}/guests")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_INPUT"
    assert response.json()["success"] is False
    assert read_model.calls == []


@pytest.mark.asyncio
async def test_list_guests_event_not_found(client_factory):
    """Test that an unknown event returns 404."""
    read_model = InMemoryEventReadModel(events=[make_event(42)])

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="999"))

    assert response.status_code == 404
    data = response.json()
    assert data["success"] is False
    assert data["code"] == "NOT_FOUND"
    assert data["error"] == "Event not found or access denied"
    assert ("get_event_guests", 999) not in read_model.calls


@pytest.mark.asyncio
async def test_list_guests_event_of_other_user(client_factory):
    """Test that an event owned by someone else looks the same as a missing one."""
    other = AuthenticatedUser(user_id=uuid4(), email="other@example.com")
    read_model = InMemoryEventReadModel(events=[make_event(42, owner=other)], guests={42: [{"id": 1}]})

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 404
    assert response.json()["code"] == "NOT_FOUND"


@pytest.mark.asyncio
async def test_list_guests_event_lookup_fails(client_factory, caplog):
    """Test that a failing event lookup becomes a logged internal error."""
    read_model = InMemoryEventReadModel(get_event_error=RuntimeError("database unavailable"))

    with caplog.at_level(logging.ERROR):
        async with client_factory(overrides_for(read_model)) as client:
            response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "database unavailable",
        "code": "INTERNAL_ERROR",
    }
    assert "Error getting event guests" in caplog.text


@pytest.mark.asyncio
async def test_list_guests_guest_lookup_fails(client_factory):
    """Test that a failing guest lookup becomes an internal error."""
    read_model = InMemoryEventReadModel(
        events=[make_event(42)],
        get_guests_error=RuntimeError("Failed to get event guests: timeout"),
    )

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 500
    assert response.json()["code"] == "INTERNAL_ERROR"
    assert response.json()["error"] == "Failed to get event guests: timeout"


@pytest.mark.asyncio
async def test_list_guests_error_without_message(client_factory):
    """Test that an exception without a message gets the generic text."""
    read_model = InMemoryEventReadModel(get_event_error=RuntimeError())

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 500
    assert response.json()["error"] == "Failed to get event guests"


@pytest.mark.asyncio
async def test_list_guests_authentication_rejected(client_factory):
    """Test that an unauthenticated request takes the internal error path."""
    read_model = InMemoryEventReadModel(events=[make_event(42)])
    authenticator = StubAuthenticator(result=AuthRejection(reason="Authentication required"))

    async with client_factory(overrides_for(read_model, authenticator)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 500
    assert response.json() == {
        "success": False,
        "error": "Authentication required",
        "code": "INTERNAL_ERROR",
    }
    assert read_model.calls == []


@pytest.mark.asyncio
async def test_list_guests_authentication_checked_before_id(client_factory):
    """Test that authentication runs before the id is parsed."""
    read_model = InMemoryEventReadModel()
    authenticator = StubAuthenticator(result=AuthRejection(reason="Session expired"))

    async with client_factory(overrides_for(read_model, authenticator)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="abc"))

    assert response.status_code == 500
    assert response.json()["error"] == "Session expired"
    assert authenticator.calls == 1


@pytest.mark.asyncio
async def test_list_guests_authenticator_raises(client_factory):
    """Test that an authenticator crash is caught and reported as an internal error."""
    read_model = InMemoryEventReadModel(events=[make_event(42)])
    authenticator = StubAuthenticator(error=ConnectionError("user store unreachable"))

    async with client_factory(overrides_for(read_model, authenticator)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id="42"))

    assert response.status_code == 500
    assert response.json()["error"] == "user store unreachable"
    assert response.json()["code"] == "INTERNAL_ERROR"


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_id", ["2147483648", "3000000000", "99999999999999999999"])
async def test_list_guests_id_beyond_column_range(client_factory, db_session, raw_id):
    """Test that ids too large for the id column are reported as not found."""
    read_model = SqlEventReadModel(session_overwrite=db_session)

    async with client_factory(overrides_for(read_model)) as client:
        response = await client.get(LIST_EVENT_GUESTS_URL.format(event_id=raw_id))

    assert response.status_code == 404
    assert response.json() == {
        "success": False,
        "error": "Event not found or access denied",
        "code": "NOT_FOUND",
    }
