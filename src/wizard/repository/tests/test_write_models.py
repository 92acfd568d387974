"""Tests for SqlTransportWriteModel."""

from datetime import date

from src.auth.repository import SqlUserWriteModel
from src.events.dtos import FlightMode, TransportMode
from src.events.repository.read_models import SqlEventReadModel
from src.events.repository.write_models import SqlEventWriteModel
from src.wizard.dtos import SAMPLE_TRANSPORT_PREFERENCES
from src.wizard.repository.write_models import SqlTransportWriteModel


async def _create_event(db_session, owner, title: str):
    return await SqlEventWriteModel(session_overwrite=db_session).create_event(
        owner_id=owner.user_id,
        title=title,
        couple_names="Anna & Ben",
        start_date=date(2026, 8, 15),
        end_date=date(2026, 8, 16),
    )


async def test_save_transport_updates_latest_event(db_session):
    """Test that preferences land on the owner's most recent event only."""
    owner = await SqlUserWriteModel(session_overwrite=db_session).get_or_create_user(
        "owner@example.com"
    )
    older = await _create_event(db_session, owner, "Engagement")
    latest = await _create_event(db_session, owner, "Wedding")

    saved = await SqlTransportWriteModel(session_overwrite=db_session).save_transport(
        owner, SAMPLE_TRANSPORT_PREFERENCES
    )

    assert saved is not None
    assert saved.id == latest.id
    assert saved.transport_mode == TransportMode.SELECTED
    assert saved.transport_provider_name == "Test Provider"
    assert saved.provides_airport_pickup is True
    assert saved.flight_mode == FlightMode.NONE

    read_model = SqlEventReadModel(session_overwrite=db_session)
    untouched = await read_model.get_event(older.id, owner)
    assert untouched.transport_mode == TransportMode.NONE
    assert untouched.transport_provider_name is None


async def test_save_transport_without_event(db_session):
    """Test that a user with no events gets None."""
    owner = await SqlUserWriteModel(session_overwrite=db_session).get_or_create_user(
        "lonely@example.com"
    )

    saved = await SqlTransportWriteModel(session_overwrite=db_session).save_transport(
        owner, SAMPLE_TRANSPORT_PREFERENCES
    )

    assert saved is None
