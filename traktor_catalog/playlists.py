"""
Playlist Tree Extraction

Walks the ``PLAYLISTS`` node tree depth-first, pre-order, in document order.
Any node carrying a ``PLAYLIST`` element becomes a ``Playlist``; descent into
its subnodes happens independently, so a node may be both a playlist and a
folder.

Playlist entries reference tracks by primary key. Keys with no matching track
(audio removed from the collection after the playlist was saved) stay in
``track_keys`` but are left out of ``tracks``.
"""

from typing import List, Mapping

from loguru import logger

from .models import Node, Playlist, Track

ROOT_NODE_NAME = "$ROOT"


def _child_path(parent_path: str, name: str) -> str:
    if not name or name == ROOT_NODE_NAME:
        return parent_path
    return f"{parent_path}/{name}" if parent_path else name


def _build_playlist(node: Node, path: str, track_map: Mapping[str, Track]) -> Playlist:
    keys: List[str] = []
    tracks: List[Track] = []
    for ref in node.playlist.keys:
        keys.append(ref.key)
        track = track_map.get(ref.key)
        if track is not None:
            tracks.append(track)

    missing = len(keys) - len(tracks)
    if missing:
        logger.debug(f"Playlist '{path}': {missing} of {len(keys)} entries not in collection")

    return Playlist(
        name=node.name,
        path=path,
        uuid=node.playlist.uuid,
        track_keys=tuple(keys),
        tracks=tuple(tracks),
    )


def extract_playlists(
    node: Node,
    track_map: Mapping[str, Track],
    parent_path: str = "",
) -> List[Playlist]:
    """Return every playlist under ``node`` (inclusive) in pre-order."""
    path = _child_path(parent_path, node.name)

    playlists: List[Playlist] = []
    if node.playlist is not None:
        playlists.append(_build_playlist(node, path, track_map))

    for subnode in node.subnodes:
        playlists.extend(extract_playlists(subnode, track_map, path))

    return playlists
