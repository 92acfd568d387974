from fastapi import APIRouter

from .features.save_transport.router import router as save_transport_router

router = APIRouter()

router.include_router(save_transport_router)
