"""Suitability scoring for green-hydrogen production sites.

The composite score blends two distance-decayed components and a handful of
flat bonuses::

    score = 0.4 * renewable + 0.4 * demand
            + diversity + capacity + region + industrial

and is clamped to ``[SCORE_FLOOR, SCORE_CEILING]``.  Component scores and
``factors.renewable_access`` use a 0-100 scale.  Secondary metrics are derived
from the same inputs; the only non-deterministic part is the optional jitter
drawn from an injected ``random.Random``.
"""
from __future__ import annotations

import logging
import random
from typing import Dict, List, Optional, Sequence

from .models import (
    Coordinate,
    DemandLevel,
    DemandSignal,
    RenewableSignal,
    SiteAnalysis,
    SiteFactors,
)
from .regions import RegionProfile, RegionProvider, india_region_provider

logger = logging.getLogger(__name__)

SCORE_FLOOR = 20
SCORE_CEILING = 100

RENEWABLE_WEIGHT = 0.4
DEMAND_WEIGHT = 0.4

RENEWABLE_DECAY_PER_KM = 2.0
DEMAND_DECAY_PER_KM = 1.5
MAX_SOURCE_CAPACITY_BONUS = 50.0
CAPACITY_BONUS_DIVISOR_MW = 10.0

BASELINE_RENEWABLE_SCORE = 20.0
BASELINE_DEMAND_SCORE = 25.0

DEMAND_LEVEL_MULTIPLIER: Dict[DemandLevel, float] = {
    DemandLevel.HIGH: 1.5,
    DemandLevel.MEDIUM: 1.2,
    DemandLevel.LOW: 1.0,
}

DEMAND_LEVEL_INDUSTRIES: Dict[DemandLevel, int] = {
    DemandLevel.HIGH: 3,
    DemandLevel.MEDIUM: 2,
    DemandLevel.LOW: 1,
}

DIVERSITY_POINTS_PER_TYPE = 2
MAX_DIVERSITY_BONUS = 6

# (aggregate MW threshold, bonus points), checked in order.
CAPACITY_BONUS_BANDS = (
    (1000.0, 15),
    (500.0, 10),
    (400.0, 5),
)
RENEWABLE_RICH_THRESHOLD_MW = 400.0

HEAVY_INDUSTRY_KEYWORDS = ("steel", "chemical", "refinery")
INDUSTRIAL_BONUS = 15

CO2_BASE_TONNES = 15000
CO2_TONNES_PER_SCORE_POINT = 2000
CO2_TONNES_PER_MW = 100
CO2_JITTER_TONNES = 5000.0

BASELINE_INDUSTRIES_SUPPORTED = 2
MAX_INDUSTRIES_SUPPORTED = 20

BASELINE_UTILIZATION = 25.0
UTILIZATION_WITH_RENEWABLES = 40.0
UTILIZATION_MW_PER_POINT = 50.0
MAX_UTILIZATION = 95
UTILIZATION_JITTER_POINTS = 9

NO_DEMAND_DISTANCE_KM = 100.0
WEAK_COMPONENT_THRESHOLD = 40.0

DEFAULT_RECOMMENDATION = "Site shows good potential for hydrogen infrastructure development"


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def renewable_distance_score(distance_km: float) -> float:
    """Linear decay of 2 points per km; zero distance is maximal proximity."""

    return max(0.0, 100.0 - distance_km * RENEWABLE_DECAY_PER_KM)


def demand_distance_score(distance_km: float) -> float:
    return max(0.0, 100.0 - distance_km * DEMAND_DECAY_PER_KM)


def source_capacity_bonus(capacity_mw: float) -> float:
    return min(MAX_SOURCE_CAPACITY_BONUS, capacity_mw / CAPACITY_BONUS_DIVISOR_MW)


def total_capacity_mw(renewables: Sequence[RenewableSignal]) -> float:
    return sum(signal.capacity_mw for signal in renewables)


def calculate_renewable_score(renewables: Sequence[RenewableSignal]) -> float:
    """Average per-source score (distance decay + capacity bonus), clamped to 0-100."""

    if not renewables:
        return BASELINE_RENEWABLE_SCORE
    total = sum(
        renewable_distance_score(signal.distance_km) + source_capacity_bonus(signal.capacity_mw)
        for signal in renewables
    )
    return clamp(total / len(renewables), 0.0, 100.0)


def calculate_demand_score(demand: Sequence[DemandSignal]) -> float:
    """Average level-weighted distance decay, clamped to 0-100."""

    if not demand:
        return BASELINE_DEMAND_SCORE
    total = sum(
        demand_distance_score(signal.distance_km) * DEMAND_LEVEL_MULTIPLIER[signal.level]
        for signal in demand
    )
    return clamp(total / len(demand), 0.0, 100.0)


def calculate_diversity_bonus(demand: Sequence[DemandSignal]) -> int:
    distinct_types = {signal.type.strip().lower() for signal in demand if signal.type}
    return min(MAX_DIVERSITY_BONUS, len(distinct_types) * DIVERSITY_POINTS_PER_TYPE)


def calculate_capacity_bonus(total_mw: float) -> int:
    for threshold, bonus in CAPACITY_BONUS_BANDS:
        if total_mw > threshold:
            return bonus
    return 0


def is_heavy_industry(industry_type: str) -> bool:
    lowered = industry_type.lower()
    return any(keyword in lowered for keyword in HEAVY_INDUSTRY_KEYWORDS)


def has_heavy_industry(demand: Sequence[DemandSignal]) -> bool:
    return any(is_heavy_industry(signal.type) for signal in demand)


def calculate_industries_supported(demand: Sequence[DemandSignal]) -> int:
    if not demand:
        return BASELINE_INDUSTRIES_SUPPORTED
    supported = sum(DEMAND_LEVEL_INDUSTRIES[signal.level] for signal in demand)
    return min(MAX_INDUSTRIES_SUPPORTED, supported)


def calculate_renewable_utilization(
    renewables: Sequence[RenewableSignal], rng: Optional[random.Random] = None
) -> int:
    if renewables:
        utilization = UTILIZATION_WITH_RENEWABLES + total_capacity_mw(renewables) / UTILIZATION_MW_PER_POINT
    else:
        utilization = BASELINE_UTILIZATION
    if rng is not None:
        utilization += rng.randint(0, UTILIZATION_JITTER_POINTS)
    return int(min(MAX_UTILIZATION, round(utilization)))


def calculate_co2_saved(
    suitability_score: int, total_mw: float, rng: Optional[random.Random] = None
) -> int:
    tonnes = (
        CO2_BASE_TONNES
        + suitability_score * CO2_TONNES_PER_SCORE_POINT
        + total_mw * CO2_TONNES_PER_MW
    )
    if rng is not None:
        tonnes += rng.uniform(0.0, CO2_JITTER_TONNES)
    return max(0, int(round(tonnes)))


def classify_transport_cost(demand: Sequence[DemandSignal]) -> str:
    if demand:
        average_distance = sum(signal.distance_km for signal in demand) / len(demand)
    else:
        average_distance = NO_DEMAND_DISTANCE_KM
    if average_distance < 50:
        return "Low"
    if average_distance < 100:
        return "Medium"
    return "High"


def classify_demand_proximity(demand_score: float) -> str:
    if demand_score > 70:
        return "Excellent"
    if demand_score > 50:
        return "Good"
    if demand_score > 30:
        return "Fair"
    return "Limited"


def classify_water_availability(candidate: Coordinate, region: RegionProfile) -> str:
    """Latitude-band heuristic; coastal sites are assumed to have desalination access."""

    if region.coastal:
        return "Excellent"
    latitude = abs(candidate.latitude)
    if latitude < 15:
        return "Very Good"
    if latitude < 30:
        return "Good"
    return "Moderate"


def classify_regulatory_support(region: RegionProfile, heavy_industry: bool) -> str:
    if heavy_industry or region.strong_policy_support:
        return "Strong"
    return "Moderate"


def build_recommendations(
    renewables: Sequence[RenewableSignal],
    demand: Sequence[DemandSignal],
    renewable_score: float,
    demand_score: float,
    region: RegionProfile,
    heavy_industry: bool,
) -> List[str]:
    recommendations: List[str] = []
    if renewables and renewable_score < WEAK_COMPONENT_THRESHOLD:
        recommendations.append(
            "Consider establishing renewable energy partnerships or grid connections"
        )
    if demand and demand_score < WEAK_COMPONENT_THRESHOLD:
        recommendations.append(
            "Identify and develop relationships with potential industrial customers"
        )
    if region.coastal:
        recommendations.append("Leverage coastal location for hydrogen export opportunities")
    if total_capacity_mw(renewables) > RENEWABLE_RICH_THRESHOLD_MW:
        recommendations.append("Maximize utilization of abundant renewable energy sources")
    if heavy_industry:
        recommendations.append(
            "Use industrial proximity to secure long-term offtake from heavy industry"
        )
    if not recommendations:
        recommendations.append(DEFAULT_RECOMMENDATION)
    return recommendations


def score_site(
    candidate: Coordinate,
    renewables: Sequence[RenewableSignal],
    demand: Sequence[DemandSignal],
    *,
    region_provider: Optional[RegionProvider] = None,
    rng: Optional[random.Random] = None,
) -> SiteAnalysis:
    """Score ``candidate`` against pre-filtered, distance-annotated signals.

    Args:
        candidate: Validated site coordinate.
        renewables: Renewable sources already within the renewable search radius.
        demand: Demand centres already within the demand search radius.
        region_provider: Source of the geography bonus; India's table by default.
        rng: Jitter source for CO2 and utilisation metrics. ``None`` disables
            jitter so identical inputs always yield identical output.
    """

    if not isinstance(candidate, Coordinate):
        candidate = Coordinate(*candidate)
    provider = region_provider or india_region_provider()
    region = provider.profile(candidate)

    renewable_score = calculate_renewable_score(renewables)
    demand_score = calculate_demand_score(demand)
    total_mw = total_capacity_mw(renewables)
    heavy_industry = has_heavy_industry(demand)

    components: Dict[str, float] = {
        "renewable_score": renewable_score,
        "demand_score": demand_score,
        "diversity_bonus": float(calculate_diversity_bonus(demand)),
        "capacity_bonus": float(calculate_capacity_bonus(total_mw)),
        "region_bonus": float(region.bonus),
        "industrial_bonus": float(INDUSTRIAL_BONUS if heavy_industry else 0),
    }
    raw_score = (
        renewable_score * RENEWABLE_WEIGHT
        + demand_score * DEMAND_WEIGHT
        + components["diversity_bonus"]
        + components["capacity_bonus"]
        + components["region_bonus"]
        + components["industrial_bonus"]
    )
    suitability_score = int(round(clamp(raw_score, SCORE_FLOOR, SCORE_CEILING)))
    logger.debug(
        "Scored (%.4f, %.4f) in %s: raw=%.2f final=%d components=%s",
        candidate.latitude,
        candidate.longitude,
        region.name,
        raw_score,
        suitability_score,
        components,
    )

    factors = SiteFactors(
        renewable_access=int(round(renewable_score)),
        transport_cost=classify_transport_cost(demand),
        demand_proximity=classify_demand_proximity(demand_score),
        water_availability=classify_water_availability(candidate, region),
        regulatory_support=classify_regulatory_support(region, heavy_industry),
    )

    return SiteAnalysis(
        suitability_score=suitability_score,
        factors=factors,
        recommendations=tuple(
            build_recommendations(
                renewables, demand, renewable_score, demand_score, region, heavy_industry
            )
        ),
        co2_saved_annually=calculate_co2_saved(suitability_score, total_mw, rng),
        industries_supported=calculate_industries_supported(demand),
        renewable_utilization=calculate_renewable_utilization(renewables, rng),
        components=components,
    )


__all__ = [
    "DEFAULT_RECOMMENDATION",
    "SCORE_CEILING",
    "SCORE_FLOOR",
    "build_recommendations",
    "calculate_capacity_bonus",
    "calculate_co2_saved",
    "calculate_demand_score",
    "calculate_diversity_bonus",
    "calculate_industries_supported",
    "calculate_renewable_score",
    "calculate_renewable_utilization",
    "classify_demand_proximity",
    "classify_regulatory_support",
    "classify_transport_cost",
    "classify_water_availability",
    "demand_distance_score",
    "has_heavy_industry",
    "renewable_distance_score",
    "score_site",
]
