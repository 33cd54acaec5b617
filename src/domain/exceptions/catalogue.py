class CatalogueError(Exception):
    """Base exception for stop catalogue construction failures."""


class CatalogueLoadError(CatalogueError):
    """Raised when a whole stop batch cannot be read or has the wrong shape."""


class RecordFieldMissing(CatalogueError):
    """Raised when a single stop record lacks a value the column mapping requires."""
