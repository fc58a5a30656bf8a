"""
Green-hydrogen site suitability workflow.

Scores a candidate coordinate against nearby renewable sources and
industrial demand centres, producing a ``SiteAnalysis`` with a 0-100
suitability score and supporting metrics.
"""

from .distance import distance_km, haversine
from .models import (
    Coordinate,
    DemandLevel,
    DemandSignal,
    RenewableSignal,
    RenewableType,
    SiteAnalysis,
    SiteFactors,
    SiteValidationError,
)
from .regions import BoundingBoxRegionProvider, RegionProfile, RegionProvider, india_region_provider
from .scoring import score_site

__all__ = [
    "BoundingBoxRegionProvider",
    "Coordinate",
    "DemandLevel",
    "DemandSignal",
    "RegionProfile",
    "RegionProvider",
    "RenewableSignal",
    "RenewableType",
    "SiteAnalysis",
    "SiteFactors",
    "SiteValidationError",
    "distance_km",
    "haversine",
    "india_region_provider",
    "score_site",
]
