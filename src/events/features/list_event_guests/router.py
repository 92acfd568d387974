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
from src.events.dtos import GuestDTO, parse_event_id
from src.events.repository.read_models import EventReadModel, SqlEventReadModel
from src.events.urls import LIST_EVENT_GUESTS_URL

logger = logging.getLogger(__name__)

router = APIRouter()


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


@router.get(
    LIST_EVENT_GUESTS_URL,
    responses={
        200: {"model": SuccessEnvelope[list[GuestDTO]]},
        400: {"model": ErrorEnvelope},
        404: {"model": ErrorEnvelope},
        500: {"model": ErrorEnvelope},
    },
)
async def list_event_guests(
    event_id: str,
    request: Request,
    authenticator: Authenticator = Depends(get_authenticator),
    read_model: EventReadModel = Depends(get_event_read_model),
) -> JSONResponse:
    """
    List the guests of an event the caller has access to.

    Missing events and events owned by someone else both answer 404.
    """
    try:
        auth = await authenticator(request)
        if isinstance(auth, AuthRejection):
            # Rejections share the internal error path; there is no dedicated 401 yet.
            logger.error(f"Error getting event guests: authentication failed ({auth.reason})")
            return error_response(500, auth.reason, ErrorCode.INTERNAL_ERROR)

        parsed_id = parse_event_id(event_id)
        if parsed_id is None:
            return error_response(400, "Invalid event ID", ErrorCode.INVALID_INPUT)

        event = await read_model.get_event(parsed_id, auth)
        if not event:
            return error_response(404, "Event not found or access denied", ErrorCode.NOT_FOUND)

        guests = await read_model.get_event_guests(event.id)

        return success_response(guests)
    except Exception as e:
        logger.exception("Error getting event guests")
        return error_response(500, str(e) or "Failed to get event guests", ErrorCode.INTERNAL_ERROR)
