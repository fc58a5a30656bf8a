"""Infrastructure selection and the site-analysis service layer."""
from __future__ import annotations

import asyncio
import logging
import random
from typing import Any, Dict, Iterable, List, Optional, Protocol, Sequence, Tuple

from pydantic import BaseModel, ConfigDict, Field

from core.clients.supabase import SupabaseClient
from core.config import Settings, get_settings
from .distance import distance_km
from .models import (
    Coordinate,
    DemandLevel,
    DemandSignal,
    RenewableSignal,
    RenewableType,
    SiteAnalysis,
    SiteValidationError,
    validate_coordinate,
)
from .regions import RegionProvider
from .scoring import score_site

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_CAPACITY_MW = 100.0


class RenewableSourceRecord(BaseModel):
    """Row from the ``renewable_sources`` table; coordinates may be decimal strings."""

    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    type: str
    latitude: Any
    longitude: Any
    capacity: Optional[float] = None


class DemandCenterRecord(BaseModel):
    """Row from the ``demand_centers`` table."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[str] = None
    name: Optional[str] = None
    type: str
    latitude: Any
    longitude: Any
    demand_level: str = Field(alias="demandLevel")


class SiteAnalysisRequest(BaseModel):
    latitude: float
    longitude: float


class SiteFactorsResponse(BaseModel):
    renewableAccess: int
    transportCost: str
    demandProximity: str
    waterAvailability: str
    regulatorySupport: str


class SiteAnalysisResponse(BaseModel):
    suitabilityScore: int
    factors: SiteFactorsResponse
    recommendations: List[str]
    co2SavedAnnually: int
    industriesSupported: int
    renewableUtilization: int

    @classmethod
    def from_analysis(cls, analysis: SiteAnalysis) -> "SiteAnalysisResponse":
        return cls(**analysis.to_dict())


class InfrastructureRepository(Protocol):
    async def renewable_sources(self) -> List[Dict[str, Any]]:
        ...

    async def demand_centers(self) -> List[Dict[str, Any]]:
        ...


class SupabaseInfrastructureRepository:
    """Reads renewable sources and demand centres from Supabase REST."""

    def __init__(self, client: Optional[SupabaseClient] = None) -> None:
        self._client = client or SupabaseClient()

    async def renewable_sources(self) -> List[Dict[str, Any]]:
        return await self._client.fetch("renewable_sources?select=*")

    async def demand_centers(self) -> List[Dict[str, Any]]:
        return await self._client.fetch("demand_centers?select=*")


class InMemoryInfrastructureRepository:
    """Static infrastructure, used for seeded data and tests."""

    def __init__(
        self,
        renewable_sources: Optional[Iterable[Dict[str, Any]]] = None,
        demand_centers: Optional[Iterable[Dict[str, Any]]] = None,
    ) -> None:
        self._renewables = list(renewable_sources or [])
        self._demand = list(demand_centers or [])

    async def renewable_sources(self) -> List[Dict[str, Any]]:
        return list(self._renewables)

    async def demand_centers(self) -> List[Dict[str, Any]]:
        return list(self._demand)


def _record_coordinate(latitude: Any, longitude: Any) -> Optional[Coordinate]:
    try:
        return validate_coordinate(latitude, longitude)
    except SiteValidationError:
        return None


def _coerce_record(model: Any, raw: Any) -> Optional[Any]:
    if isinstance(raw, model):
        return raw
    try:
        return model.model_validate(raw)
    except ValueError as exc:
        logger.warning("Skipping malformed %s: %s", model.__name__, exc)
        return None


def select_nearby_renewables(
    candidate: Coordinate,
    records: Iterable[Any],
    radius_km: float = 100.0,
    limit: Optional[int] = 5,
) -> List[RenewableSignal]:
    """Annotate renewable sources with distance and keep those strictly inside ``radius_km``."""

    nearby: List[Tuple[float, RenewableSignal]] = []
    for raw in records:
        record = _coerce_record(RenewableSourceRecord, raw)
        if record is None:
            continue
        location = _record_coordinate(record.latitude, record.longitude)
        if location is None:
            logger.warning("Skipping renewable source %s with invalid coordinates", record.name or record.id)
            continue
        distance = distance_km(candidate, location)
        if distance >= radius_km:
            continue
        capacity = record.capacity if record.capacity is not None else DEFAULT_SOURCE_CAPACITY_MW
        try:
            signal = RenewableSignal(
                type=RenewableType.from_value(record.type),
                distance_km=distance,
                capacity_mw=capacity,
            )
        except SiteValidationError as exc:
            logger.warning("Skipping renewable source %s: %s", record.name or record.id, exc)
            continue
        nearby.append((distance, signal))

    nearby.sort(key=lambda item: item[0])
    signals = [signal for _, signal in nearby]
    return signals[:limit] if limit is not None else signals


def select_nearby_demand(
    candidate: Coordinate,
    records: Iterable[Any],
    radius_km: float = 150.0,
    limit: Optional[int] = 5,
) -> List[DemandSignal]:
    """Annotate demand centres with distance and keep those strictly inside ``radius_km``."""

    nearby: List[Tuple[float, DemandSignal]] = []
    for raw in records:
        record = _coerce_record(DemandCenterRecord, raw)
        if record is None:
            continue
        location = _record_coordinate(record.latitude, record.longitude)
        if location is None:
            logger.warning("Skipping demand centre %s with invalid coordinates", record.name or record.id)
            continue
        try:
            level = DemandLevel.from_value(record.demand_level)
        except SiteValidationError as exc:
            logger.warning("Skipping demand centre %s: %s", record.name or record.id, exc)
            continue
        distance = distance_km(candidate, location)
        if distance >= radius_km:
            continue
        nearby.append((distance, DemandSignal(type=record.type, distance_km=distance, level=level)))

    nearby.sort(key=lambda item: item[0])
    signals = [signal for _, signal in nearby]
    return signals[:limit] if limit is not None else signals


async def fetch_infrastructure(
    repository: InfrastructureRepository,
) -> Tuple[List[Dict[str, Any]], List[Dict[str, Any]]]:
    """Fetch both tables concurrently; the first failure is re-raised after both settle."""

    results = await asyncio.gather(
        repository.renewable_sources(),
        repository.demand_centers(),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    renewable_records, demand_records = results
    return renewable_records, demand_records


def build_jitter_source(settings: Settings) -> Optional[random.Random]:
    if not settings.jitter_enabled:
        return None
    return random.Random(settings.jitter_seed)


def analyze_location(
    candidate: Coordinate,
    renewable_records: Sequence[Any],
    demand_records: Sequence[Any],
    *,
    settings: Optional[Settings] = None,
    rng: Optional[random.Random] = None,
    region_provider: Optional[RegionProvider] = None,
) -> SiteAnalysis:
    """Select nearby infrastructure for ``candidate`` and score it."""

    settings = settings or get_settings()
    renewables = select_nearby_renewables(
        candidate, renewable_records, settings.renewable_radius_km, settings.max_signals
    )
    demand = select_nearby_demand(
        candidate, demand_records, settings.demand_radius_km, settings.max_signals
    )
    logger.info(
        "Analyzing (%.4f, %.4f): %d renewable sources, %d demand centres nearby",
        candidate.latitude,
        candidate.longitude,
        len(renewables),
        len(demand),
    )
    return score_site(candidate, renewables, demand, region_provider=region_provider, rng=rng)


async def analyze_site_request(
    request: SiteAnalysisRequest,
    repository: InfrastructureRepository,
    *,
    settings: Optional[Settings] = None,
    region_provider: Optional[RegionProvider] = None,
) -> SiteAnalysisResponse:
    settings = settings or get_settings()
    candidate = validate_coordinate(request.latitude, request.longitude)
    renewable_records, demand_records = await fetch_infrastructure(repository)
    analysis = analyze_location(
        candidate,
        renewable_records,
        demand_records,
        settings=settings,
        rng=build_jitter_source(settings),
        region_provider=region_provider,
    )
    return SiteAnalysisResponse.from_analysis(analysis)


__all__ = [
    "DemandCenterRecord",
    "InMemoryInfrastructureRepository",
    "InfrastructureRepository",
    "RenewableSourceRecord",
    "SiteAnalysisRequest",
    "SiteAnalysisResponse",
    "SupabaseInfrastructureRepository",
    "analyze_location",
    "analyze_site_request",
    "build_jitter_source",
    "fetch_infrastructure",
    "select_nearby_demand",
    "select_nearby_renewables",
]
