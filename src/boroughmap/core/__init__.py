"""Core boundary and classification algorithms for boroughmap.

This module contains the core algorithms for:

- Geometry operations (point-in-ring, point-to-ring distance)
- Segment chain assembly (joining raw ways by shared endpoints)
- Canonical ring selection, closing and stride simplification
- Spatial classification with confidence tiers
- Region store build orchestration

All services are designed to be:
- Stateless (safe for use in worker processes)
- Pure (no side effects besides logging)

Key functions:
- assemble: Chain segments into components
- select_canonical: Pick and close the representative ring
- simplify: Stride-sample a ring while keeping it closed
- classify: Classify one point
- classify_batch: Classify many points

Key classes:
- RegionStoreBuilder: Builds a RegionStore from raw boundary data
"""

from boroughmap.core.assembler import assemble
from boroughmap.core.builder import (
    BuildReport,
    RegionStoreBuilder,
    boundary_from_segments,
    build_region,
)
from boroughmap.core.classifier import classify, classify_batch, tag_records
from boroughmap.core.geometry import (
    distance_to_ring,
    distance_to_segment,
    point_in_ring,
    point_on_segment,
)
from boroughmap.core.ring import close_component, select_canonical, simplify

__all__ = [
    # Builder
    "BuildReport",
    "RegionStoreBuilder",
    "boundary_from_segments",
    "build_region",
    # Assembly
    "assemble",
    "close_component",
    "select_canonical",
    "simplify",
    # Classification
    "classify",
    "classify_batch",
    "tag_records",
    # Geometry functions
    "distance_to_ring",
    "distance_to_segment",
    "point_in_ring",
    "point_on_segment",
]
