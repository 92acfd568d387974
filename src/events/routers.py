from fastapi import APIRouter

from .features.list_event_guests.router import router as list_event_guests_router

router = APIRouter()

router.include_router(list_event_guests_router)
