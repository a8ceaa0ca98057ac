from fastapi import APIRouter, Depends, HTTPException

from app.api import get_hotel_service
from app.core.errors import GeocodeError
from app.models.schemas import CoordinateSchema, GeocodeRequest, ResolvedLocationSchema
from app.services.hotel_service import HotelSearchService

router = APIRouter()


@router.post("", response_model=ResolvedLocationSchema)
def geocode(
    request: GeocodeRequest,
    service: HotelSearchService = Depends(get_hotel_service),
) -> ResolvedLocationSchema:
    try:
        location = service.geocoding_service.resolve(request.query)
    except GeocodeError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ResolvedLocationSchema.from_domain(location)


@router.post("/reverse", response_model=ResolvedLocationSchema)
def reverse_geocode(
    coordinate: CoordinateSchema,
    service: HotelSearchService = Depends(get_hotel_service),
) -> ResolvedLocationSchema:
    location = service.geocoding_service.reverse_resolve(coordinate.to_domain())
    return ResolvedLocationSchema.from_domain(location)
