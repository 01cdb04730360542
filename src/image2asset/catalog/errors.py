"""Exceptions raised while building an asset catalog."""
from __future__ import annotations


class CatalogError(Exception):
    """Base class for every error that aborts a catalog build."""


class DirectoryNotFoundError(CatalogError, FileNotFoundError):
    """The input path does not exist or is not a directory."""


class InvalidFileNameError(CatalogError, ValueError):
    """An ``.svg`` entry has a base name outside the allowed character set."""


class DuplicateIconNameError(CatalogError):
    """Two source images would produce the same imageset."""


class CatalogIOError(CatalogError, OSError):
    """A filesystem operation on the catalog failed."""
