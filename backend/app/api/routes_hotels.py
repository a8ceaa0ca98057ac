import logging

from fastapi import APIRouter, Depends, HTTPException

from app.api import get_hotel_service, get_session_store
from app.core.errors import GeocodeError
from app.models.domain import Coordinate
from app.models.schemas import (
    HotelSchema,
    HotelSearchRequest,
    HotelSearchResponse,
    ResolvedLocationSchema,
)
from app.services.hotel_service import HotelSearchService
from app.storage.session_store import InMemorySessionStore, SessionSnapshot

logger = logging.getLogger(__name__)

router = APIRouter()


def _to_response(snapshot: SessionSnapshot) -> HotelSearchResponse:
    result = snapshot.result
    return HotelSearchResponse(
        session_id=snapshot.session_id,
        state=snapshot.state,
        location=ResolvedLocationSchema.from_domain(snapshot.location) if snapshot.location else None,
        hotels=[HotelSchema.from_domain(h) for h in result.hotels] if result else [],
        source=result.source if result else None,
        degraded=result.degraded if result else False,
        notice=snapshot.notice,
    )


@router.post("/search", response_model=HotelSearchResponse)
def search_hotels(
    request: HotelSearchRequest,
    service: HotelSearchService = Depends(get_hotel_service),
    store: InMemorySessionStore = Depends(get_session_store),
) -> HotelSearchResponse:
    session = store.get_or_create(request.session_id)
    token = session.begin()
    coordinate = None
    if request.lat is not None and request.lng is not None:
        coordinate = Coordinate(lat=request.lat, lng=request.lng)

    try:
        outcome = service.search(
            query=request.location,
            coordinate=coordinate,
            radius_meters=request.radius_meters,
        )
    except GeocodeError as exc:
        session.fail(token, str(exc))
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception:  # noqa: BLE001
        logger.exception("Search %d failed for session %s", token, session.session_id)
        session.fail(token, "Search failed, please try again.")
        raise

    if not session.complete(token, outcome.location, outcome.result):
        logger.info("Discarding superseded search %d for session %s", token, session.session_id)
        raise HTTPException(status_code=409, detail="Superseded by a newer search")
    return _to_response(session.snapshot())


@router.get("/sessions/{session_id}", response_model=HotelSearchResponse)
def get_session(
    session_id: str,
    store: InMemorySessionStore = Depends(get_session_store),
) -> HotelSearchResponse:
    session = store.get(session_id)
    if not session:
        raise HTTPException(status_code=404, detail="Session not found")
    return _to_response(session.snapshot())


@router.delete("/sessions/{session_id}", status_code=204)
def reset_session(
    session_id: str,
    store: InMemorySessionStore = Depends(get_session_store),
) -> None:
    if not store.delete(session_id):
        raise HTTPException(status_code=404, detail="Session not found")
