"""Unit tests for spatial classification.

Tests cover:
- Containment with the inclusive boundary convention
- Confidence tiers from boundary distance
- Tie-breaking between overlapping regions
- Batch classification, aggregates and parallel execution
- Empty region stores
"""

import math
import random

import pytest

from boroughmap.config import ClassifierConfig
from boroughmap.core.classifier import classify, classify_batch, tag_records
from boroughmap.core.geometry import point_in_ring
from boroughmap.domain import (
    Confidence,
    Coordinate,
    Region,
    RegionBoundary,
    RegionStore,
    Ring,
)
from boroughmap.exceptions import ClassificationError


def at(x: float, y: float) -> Coordinate:
    """Point from planar (x=lon, y=lat) values."""
    return Coordinate(lat=y, lon=x)


class TestContainment:
    """Points inside a ring are HIGH confidence."""

    def test_center_of_unit_square(self, unit_square_store):
        result = classify(at(0.5, 0.5), unit_square_store)
        assert result.region is Region.MANHATTAN
        assert result.confidence is Confidence.HIGH
        assert result.distance == 0

    def test_point_on_boundary_is_contained(self, unit_square_store):
        result = classify(at(1.0, 0.25), unit_square_store)
        assert result.confidence is Confidence.HIGH
        assert result.distance == 0

    def test_axis_order_matters(self):
        """A tall thin region only contains the point in (lat, lon) order."""
        ring = Ring.from_lonlat([[0, 0], [0.1, 0], [0.1, 5], [0, 5], [0, 0]])
        store = RegionStore.from_boundaries([RegionBoundary(Region.BRONX, ring, ring)])

        assert classify(Coordinate(lat=3.0, lon=0.05), store).confidence is Confidence.HIGH
        assert classify(Coordinate(lat=0.05, lon=3.0), store).confidence is Confidence.NONE

    def test_native_orders_convert_to_same_point(self):
        ring = Ring.from_lonlat([[0, 0], [0.1, 0], [0.1, 5], [0, 5], [0, 0]])
        store = RegionStore.from_boundaries([RegionBoundary(Region.BRONX, ring, ring)])

        from_provider = classify(Coordinate.from_lonlat([0.05, 3.0]), store)
        from_human = classify(Coordinate.from_latlon((3.0, 0.05)), store)
        assert from_provider == from_human
        assert from_provider.confidence is Confidence.HIGH


class TestConfidenceTiers:
    """Tiers assigned from the distance to the nearest boundary."""

    def test_medium_just_outside(self, unit_square_store):
        result = classify(at(1.0005, 0.5), unit_square_store)
        assert result.region is Region.MANHATTAN
        assert result.confidence is Confidence.MEDIUM
        assert result.distance == pytest.approx(0.0005)

    def test_low(self, unit_square_store):
        result = classify(at(0.5, -0.003), unit_square_store)
        assert result.region is Region.MANHATTAN
        assert result.confidence is Confidence.LOW
        assert result.distance == pytest.approx(0.003)

    def test_too_far_is_unclassified(self, unit_square_store):
        result = classify(at(1.01, 0.5), unit_square_store)
        assert result.region is Region.UNCLASSIFIED
        assert result.confidence is Confidence.NONE
        assert result.distance == pytest.approx(0.01)

    def test_threshold_boundaries_are_exclusive(self, unit_square_store):
        """Exactly at a threshold falls into the next tier."""
        config = ClassifierConfig(medium_threshold=0.25, low_threshold=0.5)
        assert classify(at(1.25, 0.5), unit_square_store, config=config).confidence is (
            Confidence.LOW
        )
        assert classify(at(1.5, 0.5), unit_square_store, config=config).confidence is (
            Confidence.NONE
        )

    def test_nearest_region_wins(self, five_region_store):
        # Between Manhattan (x 0..1) and Brooklyn (x 2..3), closer to Brooklyn.
        result = classify(at(1.9996, 0.5), five_region_store)
        assert result.region is Region.BROOKLYN
        assert result.confidence is Confidence.MEDIUM

    def test_far_point_distance_exceeds_low_threshold(self, five_region_store):
        rng = random.Random(7)
        for _ in range(100):
            point = at(rng.uniform(-50, 50), rng.uniform(5, 50))
            result = classify(point, five_region_store)
            assert result.region is Region.UNCLASSIFIED
            assert result.confidence is Confidence.NONE
            assert result.distance > 0.005


class TestSimplifiedRings:
    """Containment uses simplified rings unless told otherwise."""

    @pytest.fixture
    def coarse_store(self):
        full = Ring.from_lonlat([[0, 0], [1, 0], [1, 1], [0.5, 2], [0, 1], [0, 0]])
        simplified = Ring.from_lonlat([[0, 0], [1, 0], [1, 1], [0, 1], [0, 0]])
        return RegionStore.from_boundaries([RegionBoundary(Region.QUEENS, full, simplified)])

    def test_default_uses_simplified(self, coarse_store):
        result = classify(at(0.5, 1.5), coarse_store)
        assert result.confidence is not Confidence.HIGH

    def test_full_resolution(self, coarse_store):
        result = classify(at(0.5, 1.5), coarse_store, use_simplified=False)
        assert result.confidence is Confidence.HIGH

    def test_config_default(self, coarse_store):
        config = ClassifierConfig(use_simplified=False)
        assert classify(at(0.5, 1.5), coarse_store, config=config).confidence is (
            Confidence.HIGH
        )


class TestTieBreak:
    """Overlapping rings resolve to the first region in stable order."""

    def test_first_region_in_order_wins(self, make_square):
        a = Ring.from_lonlat(make_square(0.0, 0.0))
        b = Ring.from_lonlat(make_square(0.5, 0.5))
        for boundaries in (
            [RegionBoundary(Region.QUEENS, a, a), RegionBoundary(Region.BROOKLYN, b, b)],
            [RegionBoundary(Region.BROOKLYN, b, b), RegionBoundary(Region.QUEENS, a, a)],
        ):
            store = RegionStore.from_boundaries(boundaries)
            assert classify(at(0.75, 0.75), store).region is Region.BROOKLYN


class TestEmptyStore:
    """An empty store never fails a batch."""

    def test_classify_raises(self):
        with pytest.raises(ClassificationError):
            classify(at(0.0, 0.0), RegionStore())

    def test_batch_returns_unclassified(self):
        batch = classify_batch([at(0.0, 0.0), at(1.0, 1.0)], RegionStore())
        assert len(batch) == 2
        assert isinstance(batch.error, ClassificationError)
        assert all(r.region is Region.UNCLASSIFIED for r in batch.results)
        assert all(r.confidence is Confidence.NONE for r in batch.results)
        assert all(math.isinf(r.distance) for r in batch.results)


class TestBatch:
    """Tests for batch classification."""

    @pytest.fixture
    def points(self):
        rng = random.Random(42)
        return [at(rng.uniform(-1.0, 10.0), rng.uniform(-0.5, 1.5)) for _ in range(1000)]

    def test_thousand_points_five_regions(self, points, five_region_store):
        batch = classify_batch(points, five_region_store)
        assert len(batch.results) == 1000
        assert sum(batch.by_confidence.values()) == 1000
        assert sum(batch.by_region.values()) == 1000
        assert batch.error is None

    def test_results_match_single_classification(self, points, five_region_store):
        batch = classify_batch(points[:50], five_region_store)
        assert batch.results == [classify(p, five_region_store) for p in points[:50]]

    def test_high_confidence_implies_containment(self, points, five_region_store):
        batch = classify_batch(points, five_region_store)
        for point, result in zip(points, batch.results):
            if result.confidence is Confidence.HIGH:
                ring = five_region_store[result.region].simplified
                assert point_in_ring(point, ring)

    def test_parallel_preserves_order(self, points, five_region_store):
        sequential = classify_batch(points[:200], five_region_store)
        parallel = classify_batch(points[:200], five_region_store, max_workers=2)
        assert parallel.results == sequential.results

    def test_empty_batch(self, five_region_store):
        batch = classify_batch([], five_region_store)
        assert batch.results == []
        assert batch.region_stats() == []


class TestTagRecords:
    """Tests for classifying lat/lng records."""

    def test_records_tagged(self, unit_square_store):
        records = [
            {"id": "a", "lat": 0.5, "lng": 0.5},
            {"id": "b", "lat": 0.5, "lng": 1.0005},
            {"id": "c", "lat": 40.0, "lng": -73.0},
        ]
        tagged, batch = tag_records(records, unit_square_store)

        assert [r["borough"] for r in tagged] == ["manhattan", "manhattan", "unclassified"]
        assert [r["classification_confidence"] for r in tagged] == ["high", "medium", "none"]
        assert tagged[0]["id"] == "a"
        assert "borough" not in records[0]
        assert len(batch) == 3
