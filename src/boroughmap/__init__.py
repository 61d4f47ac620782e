"""Boroughmap - Assemble borough boundaries and classify points into boroughs.

Boroughmap turns the unordered outer ways of an OpenStreetMap boundary relation
into closed borough rings, stores them at full and simplified resolution, and
classifies arbitrary coordinates into New York City boroughs with a graded
confidence when a point lies outside every ring.

Example:
    $ boroughmap build raw/ -o boroughs.json
    $ boroughmap classify 40.7580 -73.9855 --store boroughs.json
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
