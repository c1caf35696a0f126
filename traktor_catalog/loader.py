"""
Lazy, process-wide access to the Traktor collection.

The first call to any function here locates and parses ``collection.nml``;
every later call reuses that outcome. A failed load is cached too and is not
retried for the lifetime of the loader (call ``reset()`` to force a new
attempt).

Concurrent first callers coalesce into a single parse: one thread parses
while the rest wait on the lock, and all of them see the same collection or
the same error.
"""

import threading
from types import TracebackType
from typing import Callable, List, Optional

from loguru import logger

from .collection import TraktorCollection, parse_collection
from .errors import CatalogError
from .models import Playlist


class CollectionLoader:
    """Init-on-first-use holder for a ``TraktorCollection``."""

    def __init__(self, parse: Callable[[], TraktorCollection] = parse_collection) -> None:
        self._parse = parse
        self._lock = threading.Lock()  # serializes the one-time load
        self._loaded = False
        self._collection: Optional[TraktorCollection] = None
        self._error: Optional[CatalogError] = None
        self._error_tb: Optional[TracebackType] = None

    @property
    def loaded(self) -> bool:
        """True once a load has been attempted, successful or not."""
        return self._loaded

    def get(self) -> TraktorCollection:
        """
        Return the collection, loading it on first use.

        Raises:
            CatalogError: the (cached) reason the load failed.
        """
        if not self._loaded:
            with self._lock:
                if not self._loaded:
                    self._load()

        if self._error is not None:
            # Restore the original traceback so repeated raises do not grow it.
            raise self._error.with_traceback(self._error_tb)
        return self._collection

    def _load(self) -> None:
        try:
            self._collection = self._parse()
        except CatalogError as exc:
            self._error = exc
            self._error_tb = exc.__traceback__
            logger.error(f"Traktor collection could not be loaded: {exc}")
        # Published last so lock-free readers never see a half-set outcome.
        self._loaded = True

    def reset(self) -> None:
        """Drop the cached outcome; the next ``get()`` parses again."""
        with self._lock:
            self._loaded = False
            self._collection = None
            self._error = None
            self._error_tb = None

    def __repr__(self) -> str:
        if not self._loaded:
            status = "not loaded"
        elif self._error is not None:
            status = f"failed: {self._error}"
        else:
            status = repr(self._collection)
        return f"CollectionLoader({status})"


# ---------------------------------------------------------------------------
# Default loader and query API
# ---------------------------------------------------------------------------

_loader = CollectionLoader()


def get_loader() -> CollectionLoader:
    """The process-wide loader behind the functions below."""
    return _loader


def get_collection() -> TraktorCollection:
    """Return the shared collection. Raises the cached ``CatalogError`` on failure."""
    return _loader.get()


def get_playlists() -> List[Playlist]:
    """All playlists in tree order; empty if the collection is unavailable."""
    try:
        return list(_loader.get().playlists)
    except CatalogError:
        return []


def get_sorted_playlist_names() -> List[str]:
    """Playlist names sorted alphabetically (duplicates kept)."""
    return sorted(p.name for p in get_playlists())


def get_playlist_by_name(name: str) -> Optional[Playlist]:
    """First playlist named exactly ``name``, or None."""
    try:
        return _loader.get().get_playlist_by_name(name)
    except CatalogError:
        return None


def load_collection() -> int:
    """Load the collection now and return its playlist count (0 on failure)."""
    try:
        collection = _loader.get()
    except CatalogError:
        return 0
    count = len(collection.playlists)
    logger.info(f"Traktor collection loaded. Number of playlists: {count}")
    return count
