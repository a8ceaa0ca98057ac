from fastapi import HTTPException
from starlette.requests import Request

from app.core.config import Settings
from app.services.hotel_service import HotelSearchService
from app.storage.session_store import InMemorySessionStore


def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise HTTPException(status_code=500, detail=f"{name} not initialized")
    return value


def get_session_store(request: Request) -> InMemorySessionStore:
    return _state(request, "session_store")


def get_hotel_service(request: Request) -> HotelSearchService:
    return _state(request, "hotel_service")


def get_app_settings(request: Request) -> Settings:
    return _state(request, "settings")
