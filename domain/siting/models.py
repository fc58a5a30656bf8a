"""Domain models for hydrogen site suitability analysis."""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class SiteValidationError(ValueError):
    """Raised when a candidate site cannot be scored because its input is malformed."""


class RenewableType(Enum):
    WIND = "wind"
    SOLAR = "solar"
    HYDRO = "hydro"
    OTHER = "other"

    @classmethod
    def from_value(cls, value: Any) -> "RenewableType":
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        for member in cls:
            if member is not cls.OTHER and member.value in normalized:
                return member
        return cls.OTHER


class DemandLevel(Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def from_value(cls, value: Any) -> "DemandLevel":
        if isinstance(value, cls):
            return value
        normalized = str(value or "").strip().lower()
        for level in cls:
            if level.value.lower() == normalized:
                return level
        raise SiteValidationError(f"Unknown demand level: {value!r}")


def _as_float(value: Any, label: str) -> float:
    if isinstance(value, bool):
        raise SiteValidationError(f"{label} must be numeric, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise SiteValidationError(f"{label} must be numeric, got {value!r}") from exc
    if math.isnan(number) or math.isinf(number):
        raise SiteValidationError(f"{label} must be finite, got {value!r}")
    return number


def _non_negative(value: Any, label: str) -> float:
    number = _as_float(value, label)
    if number < 0:
        raise SiteValidationError(f"{label} must be >= 0, got {number}")
    return number


@dataclass(frozen=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees, validated on construction."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        latitude = _as_float(self.latitude, "latitude")
        longitude = _as_float(self.longitude, "longitude")
        if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
            raise SiteValidationError(
                f"latitude {latitude} outside [{MIN_LATITUDE}, {MAX_LATITUDE}]"
            )
        if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
            raise SiteValidationError(
                f"longitude {longitude} outside [{MIN_LONGITUDE}, {MAX_LONGITUDE}]"
            )
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.latitude, self.longitude)


def validate_coordinate(latitude: Any, longitude: Any) -> Coordinate:
    """Parse and range-check a raw latitude/longitude pair."""

    return Coordinate(latitude, longitude)


@dataclass(frozen=True)
class RenewableSignal:
    type: RenewableType
    distance_km: float
    capacity_mw: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "distance_km", _non_negative(self.distance_km, "distance_km"))
        object.__setattr__(self, "capacity_mw", _non_negative(self.capacity_mw, "capacity_mw"))


@dataclass(frozen=True)
class DemandSignal:
    type: str
    distance_km: float
    level: DemandLevel

    def __post_init__(self) -> None:
        object.__setattr__(self, "distance_km", _non_negative(self.distance_km, "distance_km"))


@dataclass(frozen=True)
class SiteFactors:
    renewable_access: int
    transport_cost: str
    demand_proximity: str
    water_availability: str
    regulatory_support: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "renewableAccess": self.renewable_access,
            "transportCost": self.transport_cost,
            "demandProximity": self.demand_proximity,
            "waterAvailability": self.water_availability,
            "regulatorySupport": self.regulatory_support,
        }


@dataclass(frozen=True)
class SiteAnalysis:
    """Outcome of scoring one candidate coordinate.

    ``factors.renewable_access`` is expressed on the same 0-100 scale as
    ``suitability_score``.
    """

    suitability_score: int
    factors: SiteFactors
    recommendations: Tuple[str, ...]
    co2_saved_annually: int
    industries_supported: int
    renewable_utilization: int
    components: Mapping[str, float] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "components", MappingProxyType(dict(self.components)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "suitabilityScore": self.suitability_score,
            "factors": self.factors.to_dict(),
            "recommendations": list(self.recommendations),
            "co2SavedAnnually": self.co2_saved_annually,
            "industriesSupported": self.industries_supported,
            "renewableUtilization": self.renewable_utilization,
        }

    def site_record_fields(self) -> Dict[str, int]:
        """Scalar fields merged onto a persisted hydrogen site record."""

        return {
            "suitability_score": self.suitability_score,
            "co2_saved_annually": self.co2_saved_annually,
            "industries_supported": self.industries_supported,
            "renewable_utilization": self.renewable_utilization,
        }


__all__ = [
    "Coordinate",
    "DemandLevel",
    "DemandSignal",
    "MAX_LATITUDE",
    "MAX_LONGITUDE",
    "MIN_LATITUDE",
    "MIN_LONGITUDE",
    "RenewableSignal",
    "RenewableType",
    "SiteAnalysis",
    "SiteFactors",
    "SiteValidationError",
    "validate_coordinate",
]
