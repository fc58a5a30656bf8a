"""Region potential lookup used for the geography bonus.

The default table is a coarse stand-in for a renewable resource-density map of
India.  Callers targeting another jurisdiction inject their own provider into
the scorer instead of editing the table.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Protocol, Sequence

from .models import Coordinate


class RegionPotential(Enum):
    HIGH = "high"
    COASTAL = "coastal"
    BASELINE = "baseline"


REGION_BONUS_POINTS = {
    RegionPotential.HIGH: 15,
    RegionPotential.COASTAL: 10,
    RegionPotential.BASELINE: 0,
}


@dataclass(frozen=True)
class RegionProfile:
    name: str
    potential: RegionPotential
    coastal: bool = False
    strong_policy_support: bool = False

    @property
    def bonus(self) -> int:
        return REGION_BONUS_POINTS[self.potential]


@dataclass(frozen=True)
class BoundingBox:
    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def contains(self, coordinate: Coordinate) -> bool:
        return (
            self.min_lat <= coordinate.latitude <= self.max_lat
            and self.min_lon <= coordinate.longitude <= self.max_lon
        )


@dataclass(frozen=True)
class RegionEntry:
    bbox: BoundingBox
    profile: RegionProfile


class RegionProvider(Protocol):
    def profile(self, coordinate: Coordinate) -> RegionProfile:
        ...


OUTSIDE_PROFILE = RegionProfile(name="unclassified", potential=RegionPotential.BASELINE)


class BoundingBoxRegionProvider:
    """Ordered bounding-box table; the first matching entry wins."""

    def __init__(
        self,
        entries: Iterable[RegionEntry],
        fallback: Optional[RegionProfile] = None,
    ) -> None:
        self._entries: List[RegionEntry] = list(entries)
        self._fallback = fallback or OUTSIDE_PROFILE

    @property
    def entries(self) -> Sequence[RegionEntry]:
        return tuple(self._entries)

    def profile(self, coordinate: Coordinate) -> RegionProfile:
        for entry in self._entries:
            if entry.bbox.contains(coordinate):
                return entry.profile
        return self._fallback


def _entry(
    name: str,
    potential: RegionPotential,
    lat_range: tuple,
    lon_range: tuple,
    *,
    coastal: bool = False,
    strong_policy_support: bool = True,
) -> RegionEntry:
    return RegionEntry(
        bbox=BoundingBox(lat_range[0], lat_range[1], lon_range[0], lon_range[1]),
        profile=RegionProfile(
            name=name,
            potential=potential,
            coastal=coastal,
            strong_policy_support=strong_policy_support,
        ),
    )


# India-wide policy support reflects the National Green Hydrogen Mission.
INDIA_REGIONS: List[RegionEntry] = [
    _entry("Gujarat", RegionPotential.HIGH, (20.0, 24.0), (68.0, 74.0), coastal=True),
    _entry("Rajasthan", RegionPotential.HIGH, (24.0, 30.0), (69.0, 78.0)),
    _entry("Maharashtra", RegionPotential.HIGH, (16.0, 21.0), (72.0, 80.0)),
    _entry("Tamil Nadu", RegionPotential.COASTAL, (8.0, 15.0), (76.0, 82.0), coastal=True),
    _entry("Karnataka", RegionPotential.COASTAL, (11.0, 16.0), (74.0, 78.0), coastal=True),
    _entry("Kerala", RegionPotential.COASTAL, (8.0, 12.8), (74.8, 77.5), coastal=True),
    _entry("Andhra Pradesh and Odisha coast", RegionPotential.COASTAL, (15.0, 22.0), (80.0, 87.5), coastal=True),
    _entry("India", RegionPotential.BASELINE, (6.0, 37.0), (68.0, 98.0)),
]


def india_region_provider() -> BoundingBoxRegionProvider:
    return BoundingBoxRegionProvider(INDIA_REGIONS)


__all__ = [
    "BoundingBox",
    "BoundingBoxRegionProvider",
    "INDIA_REGIONS",
    "OUTSIDE_PROFILE",
    "REGION_BONUS_POINTS",
    "RegionEntry",
    "RegionPotential",
    "RegionProfile",
    "RegionProvider",
    "india_region_provider",
]
