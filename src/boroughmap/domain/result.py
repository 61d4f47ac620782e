"""Classification result types.

This module defines the confidence tiers and the records produced by the
spatial classifier for single points and batches.
"""

import math
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from boroughmap.domain.region import Region


class Confidence(str, Enum):
    """Graded classification certainty.

    - HIGH: point is inside (or on) a borough ring
    - MEDIUM: outside, but closer than the medium threshold
    - LOW: outside, but closer than the low threshold
    - NONE: too far from every borough
    """

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Outcome of classifying one point.

    Attributes:
        region: Containing or nearest borough, or UNCLASSIFIED
        confidence: Confidence tier
        distance: Distance to the nearest boundary in degrees (0 if contained)
    """

    region: Region
    confidence: Confidence
    distance: float

    @classmethod
    def unclassified(cls, distance: float = math.inf) -> "ClassificationResult":
        return cls(Region.UNCLASSIFIED, Confidence.NONE, distance)

    def to_dict(self) -> dict[str, Any]:
        return {
            "borough": self.region.value,
            "confidence": self.confidence.value,
            "distance": None if math.isinf(self.distance) else self.distance,
        }


@dataclass
class RegionStats:
    """Distribution of classified points within one region."""

    region: Region
    count: int = 0
    high_confidence: int = 0
    medium_confidence: int = 0
    low_confidence: int = 0


@dataclass
class BatchResult:
    """Results of a batch classification, in input order, with aggregates.

    Attributes:
        results: One result per input point, same order as the input
        error: Set when the batch could not be classified (e.g. empty store)
    """

    results: list[ClassificationResult] = field(default_factory=list)
    error: Exception | None = None

    def __len__(self) -> int:
        return len(self.results)

    @property
    def by_region(self) -> Counter[Region]:
        return Counter(r.region for r in self.results)

    @property
    def by_confidence(self) -> Counter[Confidence]:
        return Counter(r.confidence for r in self.results)

    def region_stats(self) -> list[RegionStats]:
        """Per-region statistics sorted by point count, largest first."""
        stats: dict[Region, RegionStats] = {}
        for result in self.results:
            entry = stats.setdefault(result.region, RegionStats(result.region))
            entry.count += 1
            if result.confidence is Confidence.HIGH:
                entry.high_confidence += 1
            elif result.confidence is Confidence.MEDIUM:
                entry.medium_confidence += 1
            elif result.confidence is Confidence.LOW:
                entry.low_confidence += 1
        return sorted(stats.values(), key=lambda s: (-s.count, s.region.order))
