import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from src.api.envelope import (
    ErrorCode,
    ErrorEnvelope,
    SuccessEnvelope,
    error_response,
    success_response,
)
from src.auth.authenticator import Authenticator, get_authenticator
from src.auth.dtos import AuthRejection
from src.wizard.dtos import TransportPreferences
from src.wizard.repository.write_models import SqlTransportWriteModel, TransportWriteModel
from src.wizard.urls import SAVE_TRANSPORT_URL

logger = logging.getLogger(__name__)

router = APIRouter()


def get_transport_write_model() -> TransportWriteModel:
    """Dependency to get transport write model instance."""
    return SqlTransportWriteModel()


@router.post(
    SAVE_TRANSPORT_URL,
    responses={
        200: {"model": SuccessEnvelope[TransportPreferences]},
        400: {"model": ErrorEnvelope},
        404: {"model": ErrorEnvelope},
        500: {"model": ErrorEnvelope},
    },
)
async def save_transport(
    preferences: TransportPreferences,
    request: Request,
    authenticator: Authenticator = Depends(get_authenticator),
    write_model: TransportWriteModel = Depends(get_transport_write_model),
) -> JSONResponse:
    """
    Save the transport step of the setup wizard on the caller's current event.
    Responds with the stored preferences in their wire format.
    """
    try:
        auth = await authenticator(request)
        if isinstance(auth, AuthRejection):
            logger.error(f"Error saving transport settings: authentication failed ({auth.reason})")
            return error_response(500, auth.reason, ErrorCode.INTERNAL_ERROR)

        event = await write_model.save_transport(auth, preferences)
        if event is None:
            return error_response(404, "No event found for current user", ErrorCode.NOT_FOUND)

        logger.info(f"Saved transport settings for event {event.id}")
        return success_response(preferences.to_wire())
    except Exception as e:
        logger.exception("Error saving transport settings")
        return error_response(
            500, str(e) or "Failed to save transport settings", ErrorCode.INTERNAL_ERROR
        )
