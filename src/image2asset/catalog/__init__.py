"""Catalog package turning SVG trees into Xcode asset catalogs."""

from .builder import CatalogBuilder, build_catalog
from .errors import (
    CatalogError,
    CatalogIOError,
    DirectoryNotFoundError,
    DuplicateIconNameError,
    InvalidFileNameError,
)
from .schema import BuildSummary, Contents, ImageEntry

__all__ = [
    "CatalogBuilder",
    "build_catalog",
    "CatalogError",
    "CatalogIOError",
    "DirectoryNotFoundError",
    "DuplicateIconNameError",
    "InvalidFileNameError",
    "BuildSummary",
    "Contents",
    "ImageEntry",
]
