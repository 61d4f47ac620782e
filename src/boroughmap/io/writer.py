"""Writers for region stores and GeoJSON exports.

Coordinates are written in provider/GeoJSON [lon, lat] order; the
conversion back from canonical order happens here and nowhere else.
"""

import json
from collections.abc import Sequence
from pathlib import Path
from typing import Any

import structlog

from boroughmap.domain import ClassificationResult, Coordinate, RegionStore
from boroughmap.exceptions import RegionStoreSaveError

logger = structlog.get_logger(__name__)

STORE_FORMAT_VERSION = 1


class RegionStoreWriter:
    """Saves a region store as JSON.

    Example:
        writer = RegionStoreWriter(store, Path("boroughs.json"))
        writer.save()
    """

    def __init__(self, store: RegionStore, output_path: Path) -> None:
        """Initialize the writer.

        Args:
            store: Region store to persist
            output_path: Path where the JSON file will be written
        """
        self._store = store
        self._output_path = output_path

    def to_dict(self) -> dict[str, Any]:
        return {
            "version": STORE_FORMAT_VERSION,
            "regions": self._store.to_dict(),
        }

    def save(self) -> None:
        """Write the store, creating parent directories as needed.

        Raises:
            RegionStoreSaveError: If the file cannot be written
        """
        try:
            write_json(self.to_dict(), self._output_path)
        except OSError as e:
            raise RegionStoreSaveError(str(self._output_path), str(e)) from e

        logger.info(
            "Region store saved",
            path=str(self._output_path),
            regions=len(self._store),
        )


def write_json(data: Any, path: Path, indent: int | None = None) -> None:
    """Write JSON to a path, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(data, f, indent=indent)


def boroughs_geojson(store: RegionStore, simplified: bool = False) -> dict[str, Any]:
    """Render region rings as a GeoJSON FeatureCollection of Polygons.

    Args:
        store: Region store to render
        simplified: Render simplified rings instead of full ones

    Returns:
        GeoJSON FeatureCollection
    """
    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {
                    "type": "Polygon",
                    "coordinates": [boundary.ring(simplified).to_lonlat()],
                },
                "properties": {
                    "name": boundary.region.display_name,
                    "borough": boundary.region.value,
                    "color": boundary.region.color,
                },
            }
            for boundary in store.boundaries
        ],
    }


def points_geojson(
    points: Sequence[Coordinate],
    results: Sequence[ClassificationResult],
) -> dict[str, Any]:
    """Render classified points as a GeoJSON FeatureCollection.

    Raises:
        ValueError: If points and results differ in length
    """
    if len(points) != len(results):
        raise ValueError(
            f"Got {len(points)} points but {len(results)} classification results"
        )

    return {
        "type": "FeatureCollection",
        "features": [
            {
                "type": "Feature",
                "geometry": {"type": "Point", "coordinates": point.to_lonlat()},
                "properties": {
                    **result.to_dict(),
                    "color": result.region.color,
                },
            }
            for point, result in zip(points, results)
        ],
    }
