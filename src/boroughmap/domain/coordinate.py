"""Core geometric types for boundary representation.

This module defines the geometric types used throughout boroughmap:
- Coordinate: A geographic position in canonical (lat, lon) order
- Segment: One ordered polyline taken from a single raw boundary way
- Component: A chain of segments joined end to end, open or closed
- Ring: A closed component with at least three distinct vertices

The canonical order is fixed by field names. Provider data and persisted
stores use [lon, lat] pairs; the only conversions are from_lonlat/to_lonlat
and from_latlon/to_latlon.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any

from boroughmap.exceptions import GeometryError


@dataclass(frozen=True, slots=True)
class Coordinate:
    """A geographic position in degrees.

    Immutable and hashable for use in sets/dicts. Equality is exact, which
    matches how shared boundary nodes are encoded by the provider.

    Attributes:
        lat: Latitude (north-south axis, used as y)
        lon: Longitude (east-west axis, used as x)
    """

    lat: float
    lon: float

    @classmethod
    def from_lonlat(cls, pair: Sequence[Any]) -> "Coordinate":
        """Build a coordinate from a provider-ordered [lon, lat] pair."""
        return cls(lat=float(pair[1]), lon=float(pair[0]))

    @classmethod
    def from_latlon(cls, pair: Sequence[Any]) -> "Coordinate":
        """Build a coordinate from a [lat, lon] pair."""
        return cls(lat=float(pair[0]), lon=float(pair[1]))

    def to_lonlat(self) -> list[float]:
        """Convert to provider-ordered [lon, lat] list."""
        return [self.lon, self.lat]

    def to_latlon(self) -> tuple[float, float]:
        """Convert to (lat, lon) tuple."""
        return (self.lat, self.lon)


def _distinct_count(coordinates: Iterable[Coordinate]) -> int:
    return len(set(coordinates))


@dataclass(frozen=True, slots=True)
class Segment:
    """An ordered, non-empty polyline sourced from one raw boundary way.

    Attributes:
        coordinates: Coordinates in way order
        way_id: Identifier of the source way (informational)
    """

    coordinates: tuple[Coordinate, ...]
    way_id: int | str | None = None

    def __post_init__(self) -> None:
        if not self.coordinates:
            raise GeometryError("segment must contain at least one coordinate")

    @property
    def start(self) -> Coordinate:
        return self.coordinates[0]

    @property
    def end(self) -> Coordinate:
        return self.coordinates[-1]

    def reversed(self) -> "Segment":
        """Return the same segment walked from end to start."""
        return Segment(tuple(reversed(self.coordinates)), self.way_id)


@dataclass(frozen=True, slots=True)
class Component:
    """A maximal chain of segments joined by shared endpoints.

    Attributes:
        coordinates: Chained coordinates; shared endpoints appear once
    """

    coordinates: tuple[Coordinate, ...]

    def __len__(self) -> int:
        return len(self.coordinates)

    @property
    def is_closed(self) -> bool:
        """True if the chain returns to its first coordinate."""
        return len(self.coordinates) > 1 and self.coordinates[0] == self.coordinates[-1]

    def distinct_vertex_count(self) -> int:
        """Number of distinct coordinates in the chain."""
        return _distinct_count(self.coordinates)


@dataclass(frozen=True, slots=True)
class Ring:
    """A closed boundary accepted by the classifier.

    A ring repeats its first coordinate at the end and has at least
    three distinct vertices, so at least four coordinates.

    Raises:
        GeometryError: If the coordinates do not form a valid ring
    """

    coordinates: tuple[Coordinate, ...]

    def __post_init__(self) -> None:
        coords = self.coordinates
        if len(coords) < 4:
            raise GeometryError(f"ring needs at least 4 coordinates, got {len(coords)}")
        if coords[0] != coords[-1]:
            raise GeometryError("ring is not closed")
        if _distinct_count(coords) < 3:
            raise GeometryError("ring needs at least 3 distinct vertices")

    def __len__(self) -> int:
        return len(self.coordinates)

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Return (min_lon, min_lat, max_lon, max_lat)."""
        lons = [c.lon for c in self.coordinates]
        lats = [c.lat for c in self.coordinates]
        return (min(lons), min(lats), max(lons), max(lats))

    def to_lonlat(self) -> list[list[float]]:
        """Serialize to provider-ordered [lon, lat] pairs."""
        return [c.to_lonlat() for c in self.coordinates]

    @classmethod
    def from_lonlat(cls, pairs: Iterable[Sequence[Any]]) -> "Ring":
        """Deserialize from provider-ordered [lon, lat] pairs.

        Raises:
            GeometryError: If the pairs do not form a valid ring
        """
        return cls(tuple(Coordinate.from_lonlat(p) for p in pairs))
