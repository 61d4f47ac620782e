"""Readers for region stores and raw provider payloads.

This module provides the RegionStoreReader class for loading a persisted
region store and helpers for loading saved Overpass responses and point
records.
"""

import json
from pathlib import Path
from typing import Any

import structlog

from boroughmap.domain import Region, RegionBoundary, RegionStore
from boroughmap.exceptions import GeometryError, RegionStoreLoadError
from boroughmap.io.converter import RawBoundary, is_finite_number, parse_overpass_response

logger = structlog.get_logger(__name__)


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


class RegionStoreReader:
    """Loads a persisted region store.

    Rings are stored in provider [lon, lat] order and converted back to
    canonical coordinates on load. Regions whose rings fail validation are
    skipped and recorded in ``skipped``.

    Example:
        reader = RegionStoreReader(Path("boroughs.json"))
        store = reader.load()
    """

    def __init__(self, path: Path) -> None:
        """Initialize the reader.

        Args:
            path: Path to the region store JSON file
        """
        self._path = path
        self._skipped: dict[str, str] = {}

    @property
    def skipped(self) -> dict[str, str]:
        """Region names that were skipped on the last load, with reasons."""
        return dict(self._skipped)

    def load(self) -> RegionStore:
        """Load the region store.

        Returns:
            Immutable RegionStore

        Raises:
            RegionStoreLoadError: If the file is missing or not a region store
        """
        self._skipped = {}

        try:
            data = _read_json(self._path)
        except (OSError, json.JSONDecodeError) as e:
            raise RegionStoreLoadError(str(self._path), str(e)) from e

        if not isinstance(data, dict):
            raise RegionStoreLoadError(str(self._path), "expected a JSON object")

        regions = data.get("regions", data)
        if not isinstance(regions, dict):
            raise RegionStoreLoadError(str(self._path), "'regions' must be an object")

        boundaries: list[RegionBoundary] = []
        for name, entry in regions.items():
            try:
                region = Region(name)
                if region is Region.UNCLASSIFIED:
                    raise ValueError("reserved region name")
                boundaries.append(RegionBoundary.from_dict(region, entry))
            except (GeometryError, ValueError, KeyError, TypeError) as e:
                logger.warning("Skipping region", region=name, error=str(e))
                self._skipped[name] = str(e)

        store = RegionStore.from_boundaries(boundaries)
        logger.info(
            "Region store loaded",
            path=str(self._path),
            regions=len(store),
            skipped=len(self._skipped),
        )
        return store


def read_overpass_file(path: Path) -> RawBoundary:
    """Load a saved Overpass relation response.

    Raises:
        FileNotFoundError: If the file does not exist
        json.JSONDecodeError: If the file is not valid JSON
    """
    return parse_overpass_response(_read_json(path))


def read_raw_directory(directory: Path) -> dict[Region, RawBoundary]:
    """Load ``<region>.json`` Overpass responses from a directory.

    Boroughs without a file are omitted.
    """
    sources: dict[Region, RawBoundary] = {}
    for region in Region.boroughs():
        path = directory / f"{region.value}.json"
        if path.exists():
            sources[region] = read_overpass_file(path)
        else:
            logger.debug("No raw boundary file", region=region.value, path=str(path))
    return sources


def read_point_records(path: Path) -> list[dict[str, Any]]:
    """Load a JSON list of point records carrying ``lat`` and ``lng`` keys.

    Raises:
        ValueError: If the file is not a list of objects with finite numeric
            lat/lng values
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON list of records in {path}")
    for index, record in enumerate(data):
        if not isinstance(record, dict) or "lat" not in record or "lng" not in record:
            raise ValueError(f"Record {index} in {path} has no lat/lng")
        if not (is_finite_number(record["lat"]) and is_finite_number(record["lng"])):
            raise ValueError(
                f"Record {index} in {path} has non-numeric lat/lng "
                f"({record['lat']!r}, {record['lng']!r})"
            )
    return data
