"""Spatial classification of points into regions.

Key components:
- classify: Classify one point against a region store
- classify_batch: Classify many points, optionally in worker processes
- tag_records: Annotate dict records carrying lat/lng keys

Classification rules:
1. Containment is tested against every region's ring (simplified by default).
   Points on a boundary count as contained. If several rings contain the
   point, the region first in the stable Region ordering wins.
2. Otherwise the minimum boundary distance to each ring is computed in raw
   degrees and the nearest region is kept (earliest region on a tie).
3. The distance d picks the confidence tier:
   d < medium_threshold -> MEDIUM, d < low_threshold -> LOW, else the point
   is UNCLASSIFIED with confidence NONE.

The store is never mutated, so calls are independent and safe to run in
parallel.
"""

import math
from collections.abc import Iterable, Mapping, Sequence
from concurrent.futures import ProcessPoolExecutor
from typing import Any

import structlog

from boroughmap.config import ClassifierConfig
from boroughmap.core.geometry import distance_to_ring, point_in_ring
from boroughmap.domain import (
    BatchResult,
    ClassificationResult,
    Confidence,
    Coordinate,
    RegionStore,
)
from boroughmap.exceptions import ClassificationError

logger = structlog.get_logger(__name__)

_DEFAULT_CONFIG = ClassifierConfig()


def classify(
    point: Coordinate,
    regions: RegionStore,
    use_simplified: bool | None = None,
    config: ClassifierConfig | None = None,
) -> ClassificationResult:
    """Classify a point into a region with a confidence tier.

    The point is taken in canonical form only. Callers holding native
    coordinates convert them once at the boundary with
    ``Coordinate.from_lonlat`` (provider order) or ``Coordinate.from_latlon``
    (human order); nothing here reorders axes.

    Args:
        point: Query point as a canonical ``Coordinate``
        regions: Region store to classify against
        use_simplified: Test simplified rings (None = config default)
        config: Thresholds and defaults (None = built-in defaults)

    Returns:
        ClassificationResult for the point

    Raises:
        ClassificationError: If the region store is empty
    """
    if regions.is_empty():
        raise ClassificationError("region store is empty")

    config = config or _DEFAULT_CONFIG
    if use_simplified is None:
        use_simplified = config.use_simplified

    rings = [(b.region, b.ring(use_simplified)) for b in regions.boundaries]

    for region, ring in rings:
        if point_in_ring(point, ring):
            return ClassificationResult(region, Confidence.HIGH, 0.0)

    nearest_region, nearest_distance = rings[0][0], math.inf
    for region, ring in rings:
        distance = distance_to_ring(point, ring)
        if distance < nearest_distance:
            nearest_region, nearest_distance = region, distance

    if nearest_distance < config.medium_threshold:
        return ClassificationResult(nearest_region, Confidence.MEDIUM, nearest_distance)
    if nearest_distance < config.low_threshold:
        return ClassificationResult(nearest_region, Confidence.LOW, nearest_distance)
    return ClassificationResult.unclassified(nearest_distance)


def _classify_chunk(
    points: list[Coordinate],
    regions: RegionStore,
    use_simplified: bool | None,
    config_dict: dict[str, Any],
) -> list[ClassificationResult]:
    """Classify a chunk of points.

    Top-level function designed to be picklable for use with ProcessPoolExecutor.
    """
    config = ClassifierConfig(**config_dict)
    return [classify(p, regions, use_simplified, config) for p in points]


def _chunked(points: Sequence[Coordinate], size: int) -> list[list[Coordinate]]:
    return [list(points[i : i + size]) for i in range(0, len(points), size)]


def classify_batch(
    points: Sequence[Coordinate],
    regions: RegionStore,
    use_simplified: bool | None = None,
    config: ClassifierConfig | None = None,
    max_workers: int | None = None,
) -> BatchResult:
    """Classify many points independently.

    Results keep the input order. With max_workers greater than one the
    points are split into chunks and classified in worker processes.

    An empty store does not fail the batch: every point is returned as
    unclassified with confidence NONE and the ClassificationError is
    attached to the result.

    Args:
        points: Query points in canonical order
        regions: Region store to classify against
        use_simplified: Test simplified rings (None = config default)
        config: Thresholds and defaults
        max_workers: Worker processes (None or 1 = run in this process)

    Returns:
        BatchResult with per-point results and aggregate counts
    """
    config = config or _DEFAULT_CONFIG

    if regions.is_empty():
        error = ClassificationError("region store is empty")
        logger.warning("Classifying against empty region store", points=len(points))
        return BatchResult(
            results=[ClassificationResult.unclassified() for _ in points],
            error=error,
        )

    if not max_workers or max_workers <= 1 or len(points) < 2:
        results = [classify(p, regions, use_simplified, config) for p in points]
        return BatchResult(results=results)

    chunk_size = math.ceil(len(points) / max_workers)
    chunks = _chunked(points, chunk_size)
    config_dict = config.model_dump()

    logger.info(
        "Starting parallel classification",
        points=len(points),
        chunks=len(chunks),
        max_workers=max_workers,
    )

    results: list[ClassificationResult] = []
    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        for chunk_results in executor.map(
            _classify_chunk,
            chunks,
            [regions] * len(chunks),
            [use_simplified] * len(chunks),
            [config_dict] * len(chunks),
        ):
            results.extend(chunk_results)

    return BatchResult(results=results)


def tag_records(
    records: Iterable[Mapping[str, Any]],
    regions: RegionStore,
    config: ClassifierConfig | None = None,
    max_workers: int | None = None,
) -> tuple[list[dict[str, Any]], BatchResult]:
    """Classify records that carry ``lat`` and ``lng`` keys.

    Returns copies of the records with ``borough`` and
    ``classification_confidence`` keys added, plus the underlying batch.
    """
    records = [dict(r) for r in records]
    points = [Coordinate(lat=float(r["lat"]), lon=float(r["lng"])) for r in records]

    logger.info("Classifying records", count=len(records))
    batch = classify_batch(points, regions, config=config, max_workers=max_workers)

    for record, result in zip(records, batch.results):
        record["borough"] = result.region.value
        record["classification_confidence"] = result.confidence.value

    return records, batch
