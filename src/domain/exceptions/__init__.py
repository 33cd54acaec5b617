from .catalogue import CatalogueError, CatalogueLoadError, RecordFieldMissing

__all__ = [
    "CatalogueError",
    "CatalogueLoadError",
    "RecordFieldMissing",
]
