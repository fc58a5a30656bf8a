"""Pytest configuration and shared fixtures for siting tests."""

import sys
from pathlib import Path

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from domain.siting.models import (  # noqa: E402
    Coordinate,
    DemandLevel,
    DemandSignal,
    RenewableSignal,
    RenewableType,
)


# ============================================================================
# Shared Fixtures - Coordinates
# ============================================================================


@pytest.fixture
def ahmedabad():
    """Candidate inside the Gujarat high-potential region."""
    return Coordinate(23.0225, 72.5714)


@pytest.fixture
def london():
    """Candidate outside every configured region."""
    return Coordinate(51.5, -0.1)


# ============================================================================
# Shared Fixtures - Signals
# ============================================================================


@pytest.fixture
def nearby_wind():
    return RenewableSignal(type=RenewableType.WIND, distance_km=5.0, capacity_mw=400.0)


@pytest.fixture
def nearby_steel():
    return DemandSignal(type="steel", distance_km=20.0, level=DemandLevel.HIGH)


@pytest.fixture
def renewable_records():
    """Storage rows as returned by the datastore, with decimal-string coordinates."""
    return [
        {"name": "Near Solar", "type": "solar", "latitude": "23.05", "longitude": "72.60", "capacity": 750},
        {"name": "Mid Wind", "type": "Wind Farm", "latitude": "23.50", "longitude": "72.57", "capacity": None},
        {"name": "Far Hydro", "type": "hydro", "latitude": "28.00", "longitude": "77.00", "capacity": 300},
    ]


@pytest.fixture
def demand_records():
    return [
        {"name": "Steel Works", "type": "steel", "latitude": "23.10", "longitude": "72.60", "demand_level": "high"},
        {"name": "Port", "type": "transport", "latitude": "22.00", "longitude": "72.60", "demandLevel": "Medium"},
        {"name": "Distant Plant", "type": "power", "latitude": "28.00", "longitude": "77.00", "demand_level": "low"},
    ]
