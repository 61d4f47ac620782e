"""End-to-end tests: raw Overpass payloads to classified points."""

import json
import random

import pytest

from boroughmap.config import AssemblyConfig, BoroughmapSettings
from boroughmap.core import RegionStoreBuilder, classify, classify_batch
from boroughmap.domain import Confidence, Coordinate, Region
from boroughmap.io import (
    RegionStoreReader,
    RegionStoreWriter,
    read_raw_directory,
)


def overpass_square(x0: float, y0: float, size: float, per_side: int, first_id: int) -> dict:
    """Overpass relation response for a square boundary split into four ways.

    The second way is stored reversed and the members are listed out of
    order, as real relations often are.
    """
    step = size / per_side
    ring: list[tuple[float, float]] = []
    ring += [(x0 + i * step, y0) for i in range(per_side)]
    ring += [(x0 + size, y0 + i * step) for i in range(per_side)]
    ring += [(x0 + size - i * step, y0 + size) for i in range(per_side)]
    ring += [(x0, y0 + size - i * step) for i in range(per_side)]

    node_ids = [first_id + i for i in range(len(ring))]
    elements: list[dict] = [
        {"type": "node", "id": nid, "lon": lon, "lat": lat}
        for nid, (lon, lat) in zip(node_ids, ring)
    ]

    closed = node_ids + [node_ids[0]]
    way_ids = []
    for k in range(4):
        nodes = closed[k * per_side : (k + 1) * per_side + 1]
        if k == 1:
            nodes = list(reversed(nodes))
        way_id = first_id + 10_000 + k
        way_ids.append(way_id)
        elements.append({"type": "way", "id": way_id, "nodes": nodes})

    # Way with a dangling node reference
    elements.append({"type": "way", "id": first_id + 20_000, "nodes": [node_ids[0], 1]})

    members = [{"type": "way", "ref": w, "role": "outer"} for w in (way_ids[2], way_ids[0], way_ids[3], way_ids[1])]
    members.append({"type": "way", "ref": first_id + 20_000, "role": "outer"})
    elements.append({"type": "relation", "id": first_id, "members": members})
    return {"elements": elements}


@pytest.fixture
def raw_dir(tmp_path):
    """Five borough payloads laid out west to east, 0.1 degree apart."""
    directory = tmp_path / "raw"
    directory.mkdir()
    for index, region in enumerate(Region.boroughs()):
        payload = overpass_square(
            x0=-74.25 + index * 0.1,
            y0=40.5,
            size=0.08,
            per_side=20,
            first_id=(index + 1) * 100_000,
        )
        (directory / f"{region.value}.json").write_text(json.dumps(payload))
    return directory


@pytest.fixture
def built_store(raw_dir):
    sources = read_raw_directory(raw_dir)
    settings = BoroughmapSettings(assembly=AssemblyConfig(simplify_stride=10))
    return RegionStoreBuilder(settings).build(sources)


class TestBuildPipeline:
    """Raw payloads assemble into one closed ring per borough."""

    def test_all_boroughs_built(self, built_store):
        assert built_store.ok
        assert built_store.store.regions == Region.boroughs()

    def test_rings_closed_and_simplified(self, built_store):
        for boundary in built_store.store.boundaries:
            assert len(boundary.full) == 81
            assert len(boundary.simplified) == 9
            assert boundary.full.coordinates[0] == boundary.full.coordinates[-1]
            assert boundary.simplified.coordinates[0] == boundary.simplified.coordinates[-1]

    def test_dangling_ways_dropped(self, built_store):
        assert built_store.stats.dropped_segments == 5
        assert set(built_store.dropped) == set(Region.boroughs())

    def test_canonical_order_preserved(self, built_store):
        """Latitudes stay latitudes after ingestion."""
        manhattan = built_store.store[Region.MANHATTAN].full
        min_lon, min_lat, max_lon, max_lat = manhattan.bounding_box()
        assert min_lat == pytest.approx(40.5)
        assert max_lat == pytest.approx(40.58)
        assert min_lon == pytest.approx(-74.25)


class TestClassifyAfterReload:
    """A saved and reloaded store classifies the same as the built one."""

    def test_reload_and_classify(self, built_store, tmp_path):
        path = tmp_path / "boroughs.json"
        RegionStoreWriter(built_store.store, path).save()
        store = RegionStoreReader(path).load()
        assert store == built_store.store

        inside_queens = Coordinate(lat=40.54, lon=-74.05 + 0.04)
        result = classify(inside_queens, store)
        assert result.region is Region.QUEENS
        assert result.confidence is Confidence.HIGH

        near_bronx = Coordinate(lat=40.54, lon=-73.95 - 0.0005)
        result = classify(near_bronx, store)
        assert result.region is Region.BRONX
        assert result.confidence is Confidence.MEDIUM

        far_away = Coordinate(lat=41.5, lon=-73.0)
        assert classify(far_away, store).region is Region.UNCLASSIFIED

    def test_batch_distribution(self, built_store):
        rng = random.Random(3)
        points = [
            Coordinate(lat=rng.uniform(40.45, 40.63), lon=rng.uniform(-74.3, -73.7))
            for _ in range(1000)
        ]
        batch = classify_batch(points, built_store.store)

        assert len(batch.results) == 1000
        assert sum(batch.by_confidence.values()) == 1000
        assert sum(s.count for s in batch.region_stats()) == 1000
        assert batch.by_confidence[Confidence.HIGH] > 0
        assert batch.by_confidence[Confidence.NONE] > 0
