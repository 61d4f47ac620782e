"""Segment chain assembly.

Joins the unordered, arbitrarily oriented outer ways of a boundary relation
into maximal chains (components) by exact endpoint equality.

The pool is scanned in stable input order. The first remaining segment seeds
a component, which is then extended at either end by any remaining segment
that shares an endpoint with it, reversing the segment when it connects
backwards. A component stops growing only when no remaining segment touches
either of its ends; a closed chain keeps absorbing segments that meet its
shared start and end node.

Each extension scans the remaining pool, so assembly is O(n^2) in the number
of segments. That is fine for borough relations (hundreds of ways) and does
not scale to tens of thousands of segments.
"""

from collections.abc import Sequence

import structlog

from boroughmap.domain import Component, Coordinate, Segment

logger = structlog.get_logger(__name__)


def _attach(
    chain: list[Coordinate], segment: Segment
) -> list[Coordinate] | None:
    """Attach a segment to either end of a chain.

    Returns the extended chain, or None if the segment does not touch
    either end. Shared endpoints are not duplicated.
    """
    head, tail = chain[0], chain[-1]
    coords = segment.coordinates

    if segment.start == tail:
        return chain + list(coords[1:])
    if segment.end == tail:
        return chain + list(reversed(coords[:-1]))
    if segment.end == head:
        return list(coords[:-1]) + chain
    if segment.start == head:
        return list(reversed(coords[1:])) + chain
    return None


def assemble(segments: Sequence[Segment]) -> list[Component]:
    """Chain segments sharing endpoints into components.

    Membership of each component is deterministic for a given input order.
    The order of coordinates inside a component follows extension order and
    is not otherwise guaranteed.

    Segments without a partner become singleton components. Degenerate
    (single-coordinate) and duplicate segments are accepted and produce
    degenerate components that ring selection rejects.

    Args:
        segments: Segments in source order

    Returns:
        Components in the order their seed segments appeared
    """
    pool = list(segments)
    components: list[Component] = []

    while pool:
        seed = pool.pop(0)
        chain = list(seed.coordinates)

        extended = True
        while extended:
            extended = False
            for index, candidate in enumerate(pool):
                joined = _attach(chain, candidate)
                if joined is not None:
                    chain = joined
                    del pool[index]
                    extended = True
                    break

        components.append(Component(tuple(chain)))

    logger.debug(
        "Segments assembled",
        segments=len(segments),
        components=len(components),
        closed=sum(1 for c in components if c.is_closed),
    )
    return components
