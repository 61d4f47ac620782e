"""Exception hierarchy for Boroughmap."""


class BoroughmapError(Exception):
    """Base exception for all Boroughmap errors."""

    pass


class DataError(BoroughmapError):
    """Malformed or missing coordinate data in a raw boundary way."""

    def __init__(self, way_id: int | str, reason: str) -> None:
        self.way_id = way_id
        self.reason = reason
        super().__init__(f"Invalid way '{way_id}': {reason}")


class AssemblyError(BoroughmapError):
    """No usable boundary component could be assembled."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"No boundary available: {reason}")


class GeometryError(BoroughmapError):
    """A ring failed closure or size validation."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid geometry: {reason}")


class ClassificationError(BoroughmapError):
    """Classification could not be performed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Classification failed: {reason}")


class RegionStoreError(BoroughmapError):
    """Errors related to loading or saving a region store."""

    pass


class RegionStoreLoadError(RegionStoreError):
    """Error loading a region store file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load region store '{path}': {reason}")


class RegionStoreSaveError(RegionStoreError):
    """Error saving a region store file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save region store '{path}': {reason}")
