"""Conversion between provider boundary data and domain segments.

This module handles the transformation between Overpass API payloads,
which carry coordinates in [lon, lat] order, and the domain Segment model,
which stores canonical (lat, lon) coordinates.

Malformed ways are returned as DataError values so the caller can log them
and continue with the remaining ways.
"""

import math
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

from boroughmap.domain import Coordinate, Segment
from boroughmap.exceptions import DataError


@dataclass
class RawBoundary:
    """Boundary data for one region as delivered by the provider.

    Attributes:
        ways: Way id to ordered coordinates in provider [lon, lat] order
        outer_way_ids: Ways flagged with the "outer" role, in relation order
    """

    ways: dict[int, list[Any]] = field(default_factory=dict)
    outer_way_ids: list[int] = field(default_factory=list)


def is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def coordinate_from_lonlat(way_id: int | str, pair: Any) -> Coordinate:
    """Convert one provider [lon, lat] pair to a canonical coordinate.

    Raises:
        DataError: If the pair is missing an axis or holds non-numeric values
    """
    if not isinstance(pair, Sequence) or isinstance(pair, str) or len(pair) < 2:
        raise DataError(way_id, f"malformed coordinate {pair!r}")
    lon, lat = pair[0], pair[1]
    if not (is_finite_number(lon) and is_finite_number(lat)):
        raise DataError(way_id, f"non-numeric coordinate {pair!r}")
    return Coordinate(lat=float(lat), lon=float(lon))


def way_to_segment(way_id: int | str, pairs: Sequence[Any] | None) -> Segment:
    """Convert a provider way to a segment.

    Raises:
        DataError: If the way is missing, empty or has a malformed coordinate
    """
    if not pairs:
        raise DataError(way_id, "way has no coordinates")
    coords = tuple(coordinate_from_lonlat(way_id, pair) for pair in pairs)
    return Segment(coords, way_id=way_id)


def ingest_segments(raw: RawBoundary) -> tuple[list[Segment], list[DataError]]:
    """Build segments for the outer ways of a raw boundary.

    Segments keep the relation's outer-way order. Ways that are missing or
    malformed are dropped and reported.

    Returns:
        Tuple of (segments, errors)
    """
    segments: list[Segment] = []
    errors: list[DataError] = []

    for way_id in raw.outer_way_ids:
        try:
            segments.append(way_to_segment(way_id, raw.ways.get(way_id)))
        except DataError as e:
            errors.append(e)

    return segments, errors


def parse_overpass_response(payload: Mapping[str, Any]) -> RawBoundary:
    """Build a RawBoundary from an Overpass ``[out:json]`` relation response.

    Expects the response of ``relation(<id>);(._;>;);out;``: node, way and
    relation elements. Only the first relation's outer way members are used.
    Node references that cannot be resolved become None coordinates so that
    ingestion rejects the whole way.

    Args:
        payload: Decoded JSON response

    Returns:
        RawBoundary with ways in [lon, lat] order
    """
    elements = payload.get("elements", [])

    nodes: dict[int, list[Any]] = {}
    ways: dict[int, list[int]] = {}
    relation: Mapping[str, Any] | None = None

    for element in elements:
        kind = element.get("type")
        if kind == "node":
            nodes[element["id"]] = [element.get("lon"), element.get("lat")]
        elif kind == "way":
            ways[element["id"]] = list(element.get("nodes", []))
        elif kind == "relation" and relation is None:
            relation = element

    if relation is None:
        return RawBoundary()

    outer_way_ids = [
        member["ref"]
        for member in relation.get("members", [])
        if member.get("role") == "outer" and member.get("type") == "way"
    ]

    return RawBoundary(
        ways={
            way_id: [nodes.get(node_id) for node_id in node_ids]
            for way_id, node_ids in ways.items()
        },
        outer_way_ids=outer_way_ids,
    )
