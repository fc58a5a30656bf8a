"""Hydrogen site analysis API routes."""
import logging

from fastapi import APIRouter, Depends, HTTPException

from core.clients.supabase import InfrastructureUnavailableError, SupabaseClient
from core.config import Settings, get_settings
from domain.siting.models import SiteValidationError
from domain.siting.seed_data import DEMAND_CENTERS, RENEWABLE_SOURCES
from domain.siting.services import (
    InMemoryInfrastructureRepository,
    InfrastructureRepository,
    SiteAnalysisRequest,
    SiteAnalysisResponse,
    SupabaseInfrastructureRepository,
    analyze_site_request,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["siting"])


def get_infrastructure_repository() -> InfrastructureRepository:
    client = SupabaseClient()
    if client.is_configured:
        return SupabaseInfrastructureRepository(client)
    logger.warning("Supabase not configured; serving bundled reference infrastructure")
    return InMemoryInfrastructureRepository(RENEWABLE_SOURCES, DEMAND_CENTERS)


@router.get("/health")
async def health() -> dict:
    return {"status": "ok"}


@router.post("/analyze-site", response_model=SiteAnalysisResponse)
async def analyze_site(
    request: SiteAnalysisRequest,
    repository: InfrastructureRepository = Depends(get_infrastructure_repository),
    settings: Settings = Depends(get_settings),
) -> SiteAnalysisResponse:
    try:
        return await analyze_site_request(request, repository, settings=settings)
    except SiteValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except InfrastructureUnavailableError as exc:
        logger.error("Infrastructure fetch failed: %s", exc)
        raise HTTPException(status_code=502, detail="Could not analyze this location") from exc
