"""I/O layer for boroughmap.

This module handles provider payloads, region store persistence and
GeoJSON export. It is the only place where coordinates change between the
provider's [lon, lat] order and the canonical (lat, lon) order.

Key responsibilities:
- Parse Overpass relation responses into raw boundaries
- Ingest raw ways into segments, rejecting malformed coordinates
- Save and load region stores
- Export borough polygons and classified points as GeoJSON

Key classes:
- RegionStoreReader: Load persisted region stores
- RegionStoreWriter: Save region stores
"""

from boroughmap.io.converter import (
    RawBoundary,
    ingest_segments,
    parse_overpass_response,
)
from boroughmap.io.reader import (
    RegionStoreReader,
    read_overpass_file,
    read_point_records,
    read_raw_directory,
)
from boroughmap.io.writer import (
    RegionStoreWriter,
    boroughs_geojson,
    points_geojson,
    write_json,
)

__all__ = [
    "RawBoundary",
    "RegionStoreReader",
    "RegionStoreWriter",
    "boroughs_geojson",
    "ingest_segments",
    "parse_overpass_response",
    "points_geojson",
    "read_overpass_file",
    "read_point_records",
    "read_raw_directory",
    "write_json",
]
