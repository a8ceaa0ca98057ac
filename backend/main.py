from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import routes_directions, routes_geocode, routes_health, routes_hotels
from app.core.config import Settings, settings as default_settings
from app.core.logging import configure_logging
from app.services.hotel_service import HotelSearchService
from app.storage.session_store import InMemorySessionStore


def create_app(
    settings: Optional[Settings] = None,
    hotel_service: Optional[HotelSearchService] = None,
) -> FastAPI:
    settings = settings or default_settings
    configure_logging(settings.log_level)
    app = FastAPI(title=settings.app_name, version="0.1.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(routes_health.router, tags=["health"])
    app.include_router(routes_geocode.router, prefix="/geocode", tags=["geocoding"])
    app.include_router(routes_hotels.router, prefix="/hotels", tags=["hotels"])
    app.include_router(routes_directions.router, prefix="/directions", tags=["directions"])

    # Shared services live on app.state for the route dependencies
    app.state.settings = settings
    app.state.hotel_service = hotel_service or HotelSearchService(settings=settings)
    app.state.session_store = InMemorySessionStore(max_sessions=settings.max_sessions)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
