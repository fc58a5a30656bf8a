"""FastAPI application factory."""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.api.routes.siting import router as siting_router
from core.config import Settings, get_settings

logger = logging.getLogger(__name__)

API_TITLE = "Hydrogen Siting API"
API_VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        source = "Supabase" if settings.supabase_url and settings.supabase_key else "bundled reference data"
        logger.info("Starting %s %s with infrastructure from %s", API_TITLE, API_VERSION, source)
        logger.info(
            "Search radii: renewables %.0f km, demand %.0f km; jitter %s",
            settings.renewable_radius_km,
            settings.demand_radius_km,
            "on" if settings.jitter_enabled else "off",
        )
        yield
        logger.info("Shutting down")

    app = FastAPI(title=API_TITLE, version=API_VERSION, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(siting_router)
    return app


__all__ = ["API_TITLE", "API_VERSION", "create_app"]
