"""Region identifiers and the immutable region store.

This module defines the closed set of regions a point can be classified into
and the read-only store that maps each region to its boundary rings.
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any

from boroughmap.domain.coordinate import Ring


class Region(str, Enum):
    """New York City boroughs plus the unclassified sentinel.

    Declaration order is the stable ordering used to break ties when more
    than one borough ring contains a point.
    """

    MANHATTAN = "manhattan"
    BROOKLYN = "brooklyn"
    QUEENS = "queens"
    BRONX = "bronx"
    STATEN_ISLAND = "staten_island"
    UNCLASSIFIED = "unclassified"

    @classmethod
    def boroughs(cls) -> tuple["Region", ...]:
        """All real boroughs in stable order."""
        return tuple(r for r in cls if r is not cls.UNCLASSIFIED)

    @property
    def order(self) -> int:
        """Position in the stable region ordering."""
        return list(Region).index(self)

    @property
    def relation_id(self) -> int | None:
        """OpenStreetMap relation id of the borough boundary."""
        return _RELATION_IDS.get(self)

    @property
    def color(self) -> str:
        """Display colour used when rendering the region."""
        return _COLORS[self]

    @property
    def display_name(self) -> str:
        return self.value.replace("_", " ").title()


_RELATION_IDS: dict[Region, int] = {
    Region.MANHATTAN: 2552485,
    Region.BROOKLYN: 369518,
    Region.QUEENS: 2552484,
    Region.BRONX: 2552486,
    Region.STATEN_ISLAND: 369519,
}

_COLORS: dict[Region, str] = {
    Region.MANHATTAN: "#DC2626",
    Region.BROOKLYN: "#059669",
    Region.QUEENS: "#1D4ED8",
    Region.BRONX: "#7C2D12",
    Region.STATEN_ISLAND: "#A16207",
    Region.UNCLASSIFIED: "#4B5563",
}


@dataclass(frozen=True, slots=True)
class RegionBoundary:
    """A borough with its canonical ring at two resolutions.

    Attributes:
        region: Borough identifier (never UNCLASSIFIED)
        full: Full-resolution ring
        simplified: Stride-simplified ring
    """

    region: Region
    full: Ring
    simplified: Ring

    def __post_init__(self) -> None:
        if self.region is Region.UNCLASSIFIED:
            raise ValueError("the unclassified sentinel cannot own a boundary")

    def ring(self, simplified: bool = True) -> Ring:
        return self.simplified if simplified else self.full

    def to_dict(self) -> dict[str, Any]:
        """Serialize with rings in provider [lon, lat] order."""
        return {
            "name": self.region.value,
            "full_boundary": self.full.to_lonlat(),
            "simplified_boundary": self.simplified.to_lonlat(),
        }

    @classmethod
    def from_dict(cls, region: Region, data: dict[str, Any]) -> "RegionBoundary":
        """Deserialize from provider-ordered data.

        Raises:
            GeometryError: If either ring is invalid
        """
        return cls(
            region=region,
            full=Ring.from_lonlat(data["full_boundary"]),
            simplified=Ring.from_lonlat(data["simplified_boundary"]),
        )


@dataclass(frozen=True)
class RegionStore:
    """Read-only mapping from borough to boundary.

    Built once per boundary load and passed explicitly to every
    classification call. Boundaries are kept in stable region order, and
    the store is picklable so worker processes can share it.

    Example:
        store = RegionStore.from_boundaries([manhattan, brooklyn])
        ring = store[Region.MANHATTAN].simplified
    """

    boundaries: tuple[RegionBoundary, ...] = ()

    def __post_init__(self) -> None:
        regions = [b.region for b in self.boundaries]
        if len(set(regions)) != len(regions):
            raise ValueError("duplicate region in store")
        ordered = tuple(sorted(self.boundaries, key=lambda b: b.region.order))
        object.__setattr__(self, "boundaries", ordered)

    @classmethod
    def from_boundaries(cls, boundaries: Iterable[RegionBoundary]) -> "RegionStore":
        return cls(tuple(boundaries))

    def __len__(self) -> int:
        return len(self.boundaries)

    def __iter__(self) -> Iterator[Region]:
        return (b.region for b in self.boundaries)

    def __contains__(self, region: object) -> bool:
        return any(b.region == region for b in self.boundaries)

    def __getitem__(self, region: Region) -> RegionBoundary:
        for boundary in self.boundaries:
            if boundary.region == region:
                return boundary
        raise KeyError(region)

    def get(self, region: Region) -> RegionBoundary | None:
        try:
            return self[region]
        except KeyError:
            return None

    def is_empty(self) -> bool:
        return not self.boundaries

    @property
    def regions(self) -> tuple[Region, ...]:
        return tuple(self)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the persisted store layout."""
        return {b.region.value: b.to_dict() for b in self.boundaries}
