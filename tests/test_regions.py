"""Tests for domain/siting/regions.py."""

import pytest

from domain.siting.models import Coordinate
from domain.siting.regions import (
    INDIA_REGIONS,
    OUTSIDE_PROFILE,
    BoundingBox,
    BoundingBoxRegionProvider,
    RegionEntry,
    RegionPotential,
    RegionProfile,
    india_region_provider,
)


class TestBoundingBox:
    """Test bounding-box containment."""

    def test_contains_interior_point(self):
        bbox = BoundingBox(10.0, 20.0, 70.0, 80.0)
        assert bbox.contains(Coordinate(15.0, 75.0))

    def test_edges_are_inclusive(self):
        bbox = BoundingBox(10.0, 20.0, 70.0, 80.0)
        assert bbox.contains(Coordinate(10.0, 80.0))

    def test_excludes_outside_point(self):
        bbox = BoundingBox(10.0, 20.0, 70.0, 80.0)
        assert not bbox.contains(Coordinate(25.0, 75.0))


class TestBoundingBoxRegionProvider:
    """Test ordered region lookup."""

    def test_first_match_wins(self):
        first = RegionProfile(name="first", potential=RegionPotential.HIGH)
        second = RegionProfile(name="second", potential=RegionPotential.COASTAL)
        provider = BoundingBoxRegionProvider(
            [
                RegionEntry(BoundingBox(0.0, 10.0, 0.0, 10.0), first),
                RegionEntry(BoundingBox(0.0, 10.0, 0.0, 10.0), second),
            ]
        )
        assert provider.profile(Coordinate(5.0, 5.0)) is first

    def test_fallback_profile(self):
        provider = BoundingBoxRegionProvider([])
        assert provider.profile(Coordinate(5.0, 5.0)) is OUTSIDE_PROFILE

    def test_bonus_points_by_potential(self):
        assert RegionProfile("a", RegionPotential.HIGH).bonus == 15
        assert RegionProfile("b", RegionPotential.COASTAL).bonus == 10
        assert RegionProfile("c", RegionPotential.BASELINE).bonus == 0


class TestIndiaRegions:
    """Test the bundled India region table."""

    @pytest.mark.parametrize(
        "latitude,longitude,name",
        [
            (23.0225, 72.5714, "Gujarat"),
            (26.9157, 73.5, "Rajasthan"),
            (19.7515, 75.7139, "Maharashtra"),
            (9.9252, 78.1198, "Tamil Nadu"),
            (15.3173, 75.7139, "Karnataka"),
            (28.7041, 82.0, "India"),
        ],
    )
    def test_known_locations(self, latitude, longitude, name):
        profile = india_region_provider().profile(Coordinate(latitude, longitude))
        assert profile.name == name

    def test_high_potential_regions_listed_first(self):
        potentials = [entry.profile.potential for entry in INDIA_REGIONS]
        assert potentials[:3] == [RegionPotential.HIGH] * 3
        assert potentials[-1] is RegionPotential.BASELINE

    def test_national_policy_support(self):
        profile = india_region_provider().profile(Coordinate(30.0, 90.0))
        assert profile.strong_policy_support

    def test_outside_india(self):
        profile = india_region_provider().profile(Coordinate(51.5, -0.1))
        assert profile is OUTSIDE_PROFILE
        assert not profile.strong_policy_support
