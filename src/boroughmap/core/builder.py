"""Region store build orchestration.

This module coordinates the boundary pipeline for every borough:
ingest raw ways, assemble segments, select the canonical ring and simplify
it. Failures are isolated per region and reported instead of raised.

Key components:
- build_region: Build one region boundary from raw provider data
- RegionStoreBuilder: Build a full region store with logging and stats
"""

import time
from collections.abc import Mapping
from dataclasses import dataclass, field

import structlog

from boroughmap.config import AssemblyConfig, BoroughmapSettings
from boroughmap.core.assembler import assemble
from boroughmap.core.ring import select_canonical, simplify
from boroughmap.domain import Region, RegionBoundary, RegionStore, Segment
from boroughmap.exceptions import AssemblyError, BoroughmapError, DataError, GeometryError
from boroughmap.io.converter import RawBoundary, ingest_segments
from boroughmap.utils import BuildLogger, BuildStats


def build_region(
    region: Region,
    raw: RawBoundary,
    stride: int = 10,
) -> tuple[RegionBoundary, list[DataError]]:
    """Build the boundary of one region.

    Args:
        region: Borough being built
        raw: Raw provider data for the borough
        stride: Simplification stride

    Returns:
        Tuple of (boundary, dropped way errors)

    Raises:
        AssemblyError: If no usable component can be assembled
        GeometryError: If the simplified ring is invalid
    """
    segments, dropped = ingest_segments(raw)
    return boundary_from_segments(region, segments, stride), dropped


def boundary_from_segments(
    region: Region,
    segments: list[Segment],
    stride: int = 10,
) -> RegionBoundary:
    """Assemble, select and simplify already-ingested segments.

    Raises:
        AssemblyError: If no usable component can be assembled
        GeometryError: If the simplified ring is invalid
    """
    components = assemble(segments)
    full = select_canonical(components)
    simplified = simplify(full, stride)
    return RegionBoundary(region=region, full=full, simplified=simplified)


@dataclass
class BuildReport:
    """Outcome of a region store build.

    Attributes:
        store: Store holding every region that built successfully
        errors: Regions excluded from the store, with the reason
        dropped: Malformed ways dropped during ingestion, per region
        stats: Counts and timings
    """

    store: RegionStore
    errors: dict[Region, BoroughmapError] = field(default_factory=dict)
    dropped: dict[Region, list[DataError]] = field(default_factory=dict)
    stats: BuildStats = field(default_factory=BuildStats)

    @property
    def ok(self) -> bool:
        return not self.errors


class RegionStoreBuilder:
    """Builds an immutable region store from raw boundary data.

    Manages the complete workflow:
    1. Ingest outer ways, dropping malformed ones
    2. Assemble segments into components
    3. Select and close the canonical ring
    4. Simplify the ring for fast containment tests
    5. Collect successful regions into a RegionStore

    Example:
        builder = RegionStoreBuilder(BoroughmapSettings())
        report = builder.build(read_raw_directory(Path("raw")))
        store = report.store
    """

    def __init__(
        self,
        config: BoroughmapSettings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            config: Settings containing the assembly config
            logger: Bound logger (defaults to the package logger)
        """
        self.config = config or BoroughmapSettings()
        self.logger = logger or structlog.get_logger("boroughmap")

    @property
    def assembly(self) -> AssemblyConfig:
        return self.config.assembly

    def build(self, sources: Mapping[Region, RawBoundary]) -> BuildReport:
        """Build a region store.

        Regions are processed in stable order. A region that fails assembly
        or simplification is excluded and recorded; the build carries on.

        Args:
            sources: Raw boundary data per borough

        Returns:
            BuildReport with the store, per-region errors and statistics
        """
        build_logger = BuildLogger(self.logger)
        stats = build_logger.stats
        stats.start_time = time.time()

        self.logger.info(
            "Starting region store build",
            regions=len(sources),
            stride=self.assembly.simplify_stride,
        )

        boundaries: list[RegionBoundary] = []
        errors: dict[Region, BoroughmapError] = {}
        dropped: dict[Region, list[DataError]] = {}

        for region in sorted(sources, key=lambda r: r.order):
            raw = sources[region]
            build_logger.log_region_start(region.value, len(raw.outer_way_ids))
            start = time.time()

            segments, region_dropped = ingest_segments(raw)
            for error in region_dropped:
                build_logger.log_segment_dropped(region.value, error.way_id, error.reason)
            if region_dropped:
                dropped[region] = region_dropped

            try:
                boundary = boundary_from_segments(
                    region, segments, self.assembly.simplify_stride
                )
            except (AssemblyError, GeometryError) as e:
                build_logger.log_region_failed(region.value, e)
                errors[region] = e
                continue

            boundaries.append(boundary)
            build_logger.log_region_built(
                region.value,
                full_points=len(boundary.full),
                simplified_points=len(boundary.simplified),
                duration_ms=(time.time() - start) * 1000,
            )

        stats.end_time = time.time()

        self.logger.info(
            "Region store build complete",
            built=stats.built_count,
            failed=stats.failed_count,
            dropped_segments=stats.dropped_segments,
            duration_seconds=round(stats.duration_seconds, 2),
        )

        return BuildReport(
            store=RegionStore.from_boundaries(boundaries),
            errors=errors,
            dropped=dropped,
            stats=stats,
        )
