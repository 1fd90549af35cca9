"""Contact Geo API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ContactApiError → {"error": message} responses
    - CORS configured from settings (not hardcoded)
    - ContactService built once in the lifespan and stored on app.state;
      geocoding client closed and engine disposed on shutdown
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from contact_api.api.error_handlers import register_error_handlers
from contact_api.api.routes import contacts, health
from contact_api.config import Settings, get_settings
from contact_api.infrastructure.database import DatabaseSessionManager
from contact_api.infrastructure.geocoding_client import GeocodingClient
from contact_api.infrastructure.observability import setup_logging
from contact_api.services.contact_service import ContactService

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    geocoder: GeocodingClient | None = None
    try:
        await db_manager.create_tables()
        geocoder = GeocodingClient(
            settings.geocoding_url, api_key=settings.geocoding_api_key,
        )
        app.state.contact_service = ContactService(db_manager, geocoder)
        logger.info(f"Contact API started on port {settings.port}")
        yield
    finally:
        logger.info("Contact API shutting down")
        if geocoder is not None:
            await geocoder.aclose()
        await db_manager.dispose()
        app.state.contact_service = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application. The service itself is created at startup."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Contact Geo API", version=health.SERVICE_VERSION,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(contacts.router)

    register_error_handlers(app)
    return app


def run() -> None:
    """Console entry point: serve the app on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "contact_api.main:create_app", factory=True,
        host=settings.host, port=settings.port,
    )


if __name__ == "__main__":
    run()
