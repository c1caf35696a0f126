"""Exceptions raised while locating, reading, or decoding a collection."""

from pathlib import Path
from typing import Optional


class CatalogError(Exception):
    """Base class for every collection loading failure."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class CatalogNotFoundError(CatalogError, FileNotFoundError):
    """No collection.nml exists at any candidate location."""


class CatalogIOError(CatalogError, OSError):
    """The collection file exists but could not be opened or read."""


class CatalogDecodeError(CatalogError, ValueError):
    """The input is not well-formed NML."""
