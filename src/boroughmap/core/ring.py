"""Canonical ring selection, closing and stride simplification."""

from collections.abc import Sequence

import structlog

from boroughmap.domain import Component, Ring
from boroughmap.exceptions import AssemblyError, GeometryError

logger = structlog.get_logger(__name__)

MIN_DISTINCT_VERTICES = 3


def close_component(component: Component) -> Ring:
    """Close a component into a ring by repeating its first coordinate.

    Raises:
        GeometryError: If the closed coordinates are not a valid ring
    """
    coords = component.coordinates
    if not component.is_closed:
        coords = coords + (coords[0],)
    return Ring(coords)


def select_canonical(components: Sequence[Component]) -> Ring:
    """Pick the representative boundary among assembled components.

    Components with fewer than three distinct vertices are discarded. Of the
    rest, the one with the most coordinates wins (the earliest on a tie) and
    is closed into a ring. Secondary components such as outlying islands are
    dropped.

    Args:
        components: Output of assemble()

    Returns:
        Closed canonical ring

    Raises:
        AssemblyError: If no component survives filtering
    """
    candidates = [
        c for c in components if c.distinct_vertex_count() >= MIN_DISTINCT_VERTICES
    ]
    if not candidates:
        raise AssemblyError(
            f"none of {len(components)} components has "
            f"{MIN_DISTINCT_VERTICES} distinct vertices"
        )

    canonical = max(candidates, key=len)

    if len(candidates) > 1:
        logger.debug(
            "Discarded secondary components",
            kept=len(canonical),
            discarded=[len(c) for c in candidates if c is not canonical],
        )

    return close_component(canonical)


def simplify(ring: Ring, stride: int) -> Ring:
    """Keep every stride-th coordinate of a ring, preserving closure.

    A stride of 1 returns the ring unchanged. Otherwise the sampled
    coordinates are re-closed by appending the first one when sampling
    dropped the closing repeat.

    Args:
        ring: Ring to simplify
        stride: Sampling step, at least 1

    Returns:
        Simplified closed ring

    Raises:
        GeometryError: If stride is not positive or too few coordinates remain
    """
    if stride < 1:
        raise GeometryError(f"stride must be a positive integer, got {stride}")
    if stride == 1:
        return ring

    sampled = ring.coordinates[::stride]
    if sampled[0] != sampled[-1]:
        sampled = sampled + (sampled[0],)

    if len(sampled) < 4:
        raise GeometryError(
            f"stride {stride} leaves {len(sampled)} coordinates from {len(ring)}"
        )
    return Ring(sampled)
