"""
Traktor Collection Index

Holds every track and playlist from one parse of ``collection.nml`` and
answers read-only queries against them.

Usage:
    collection = parse_collection()                 # auto-discover
    collection = parse_collection_from_path(path)   # known location
    track = collection.get_track_by_key(key)
    techno = collection.get_tracks_by_bpm_range(128, 135)
    playlist = collection.get_playlist_by_path("Sets/Friday")

A collection is built once and never mutated. Tracks are stored in a tuple
and playlists hold references to those same ``Track`` objects, so sharing a
collection between threads needs no locking.
"""

from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple, Union

from loguru import logger

from .config import CatalogSettings
from .decoder import decode_collection_file
from .errors import CatalogDecodeError, CatalogIOError, CatalogNotFoundError
from .models import NmlDocument, Playlist, Track
from .normalizer import entry_to_track
from .playlists import extract_playlists


class TraktorCollection:
    """
    In-memory index of a Traktor collection.

    * ``tracks`` — every collection entry, in document order.
    * ``playlists`` — every playlist node, in pre-order tree order.
    * ``get_track_by_key()`` — O(1) lookup by primary key.

    Everything else is a linear scan.
    """

    def __init__(
        self,
        tracks: Iterable[Track],
        playlists: Iterable[Playlist] = (),
        version: str = "",
        track_map: Optional[Dict[str, Track]] = None,
    ) -> None:
        self.version = version
        self.tracks: Tuple[Track, ...] = tuple(tracks)
        self.playlists: Tuple[Playlist, ...] = tuple(playlists)
        if track_map is None:
            track_map = self.build_track_map(self.tracks)
        self._by_key: Dict[str, Track] = track_map

    @staticmethod
    def build_track_map(tracks: Iterable[Track]) -> Dict[str, Track]:
        """
        Map primary keys to tracks. When two entries share a key the later
        one wins, matching what Traktor itself resolves playlist entries to.
        """
        by_key: Dict[str, Track] = {}
        for track in tracks:
            if track.primary_key in by_key:
                logger.warning(f"Duplicate primary key in collection, keeping later entry: {track.primary_key}")
            by_key[track.primary_key] = track
        return by_key

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def get_track_by_key(self, key: str) -> Optional[Track]:
        """Return the track with this primary key, or None."""
        return self._by_key.get(key)

    def get_playlist_by_name(self, name: str) -> Optional[Playlist]:
        """
        Return the first playlist named exactly ``name`` (case-sensitive).

        Playlist names are not unique across folders; use
        ``get_playlist_by_path()`` to disambiguate.
        """
        for playlist in self.playlists:
            if playlist.name == name:
                return playlist
        return None

    def get_playlist_by_path(self, path: str) -> Optional[Playlist]:
        """Return the first playlist whose full path is exactly ``path``."""
        for playlist in self.playlists:
            if playlist.path == path:
                return playlist
        return None

    def playlist_names(self, sort: bool = True) -> List[str]:
        """Names of all playlists, sorted unless ``sort`` is False."""
        names = [p.name for p in self.playlists]
        return sorted(names) if sort else names

    # ------------------------------------------------------------------
    # Search / filter
    # ------------------------------------------------------------------

    def search_tracks(self, query: str) -> List[Track]:
        """Tracks whose artist, title, or album contains ``query``, ignoring case."""
        q = query.lower()
        return [
            t for t in self.tracks
            if q in t.artist.lower()
            or q in t.title.lower()
            or q in t.album.lower()
        ]

    def get_tracks_by_bpm_range(self, min_bpm: float, max_bpm: float) -> List[Track]:
        """Tracks with ``min_bpm <= bpm <= max_bpm``."""
        return [t for t in self.tracks if min_bpm <= t.bpm <= max_bpm]

    def get_tracks_by_key(self, key: str) -> List[Track]:
        """Tracks whose key equals ``key``, ignoring case."""
        k = key.lower()
        return [t for t in self.tracks if t.key.lower() == k]

    # ------------------------------------------------------------------
    # Repr
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.tracks)

    def __repr__(self) -> str:
        return (
            f"TraktorCollection(version={self.version!r}, "
            f"{len(self.tracks)} tracks, {len(self.playlists)} playlists)"
        )


# ---------------------------------------------------------------------------
# Building and parsing
# ---------------------------------------------------------------------------

def build_collection(document: NmlDocument) -> TraktorCollection:
    """Normalize a decoded document and extract its playlist tree."""
    tracks = [entry_to_track(entry) for entry in document.entries]
    track_map = TraktorCollection.build_track_map(tracks)
    try:
        playlists = extract_playlists(document.root, track_map)
    except RecursionError as exc:
        raise CatalogDecodeError("Playlist tree too deeply nested") from exc
    return TraktorCollection(
        tracks=tracks,
        playlists=playlists,
        version=document.version,
        track_map=track_map,
    )


def parse_collection_from_path(path: Union[str, Path]) -> TraktorCollection:
    """
    Parse the collection file at ``path``.

    Raises:
        CatalogIOError: the file cannot be read.
        CatalogDecodeError: the file is not valid NML.
    """
    document = decode_collection_file(path)
    collection = build_collection(document)
    logger.info(
        f"Traktor collection parsed from {path}: "
        f"{len(collection.tracks)} tracks, {len(collection.playlists)} playlists "
        f"(NML version {collection.version or 'unknown'})"
    )
    return collection


def collection_location(settings: Optional[CatalogSettings] = None) -> Optional[Path]:
    """
    Return the first existing candidate collection file, or None.

    Raises:
        CatalogIOError: a candidate location cannot be inspected.
    """
    settings = settings or CatalogSettings.from_env()
    for candidate in settings.candidate_paths():
        try:
            found = candidate.is_file()
        except OSError as exc:
            raise CatalogIOError(f"Cannot inspect collection location {candidate}: {exc}", path=candidate) from exc
        if found:
            logger.debug(f"Traktor collection found at {candidate}")
            return candidate
        logger.debug(f"No Traktor collection at {candidate}")
    return None


def is_available(settings: Optional[CatalogSettings] = None) -> bool:
    """True if a collection file exists at one of the known locations."""
    try:
        return collection_location(settings) is not None
    except CatalogIOError:
        return False


def parse_collection(settings: Optional[CatalogSettings] = None) -> TraktorCollection:
    """
    Locate the collection file and parse it.

    Raises:
        CatalogNotFoundError: no candidate location holds a collection file.
        CatalogIOError, CatalogDecodeError: see ``parse_collection_from_path``.
    """
    location = collection_location(settings)
    if location is None:
        raise CatalogNotFoundError("No Traktor collection.nml found in any known location")
    return parse_collection_from_path(location)
