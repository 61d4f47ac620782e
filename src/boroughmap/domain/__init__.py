"""Domain models for boroughmap.

This module contains the core domain models representing coordinates,
boundary segments, rings, regions and classification results. All models
are designed to be:

- Immutable where possible (using frozen dataclasses)
- Picklable for worker processes (parallel batch classification)
- Independent of the provider's coordinate order

Key classes:
- Coordinate: A geographic position in canonical (lat, lon) order
- Segment: One polyline from a raw boundary way
- Component: Segments chained by shared endpoints
- Ring: A closed component accepted by the classifier
- Region: Closed set of boroughs plus UNCLASSIFIED
- RegionStore: Read-only mapping from region to boundary rings
- ClassificationResult: Region, confidence tier and distance for one point
"""

from boroughmap.domain.coordinate import Component, Coordinate, Ring, Segment
from boroughmap.domain.region import Region, RegionBoundary, RegionStore
from boroughmap.domain.result import (
    BatchResult,
    ClassificationResult,
    Confidence,
    RegionStats,
)

__all__: list[str] = [
    # Enums
    "Confidence",
    "Region",
    # Geometry
    "Component",
    "Coordinate",
    "Ring",
    "Segment",
    # Regions
    "RegionBoundary",
    "RegionStore",
    # Results
    "BatchResult",
    "ClassificationResult",
    "RegionStats",
]
