"""
Primary keys and file paths from Traktor's split LOCATION fields.

Traktor stores a location as three attributes:

    VOLUME="Macintosh HD"  DIR="/:Music/:House/:"  FILE="track.mp3"

``DIR`` uses the two-character token ``/:`` as its segment separator.
Playlist entries refer to tracks by the plain concatenation of the three
fields, which is why the primary key must not insert any delimiter.
"""

import os

DIR_SEPARATOR_TOKEN = "/:"

# Volume names that mean "the boot volume", i.e. paths rooted at "/".
SYSTEM_ROOT_VOLUMES = frozenset({"Macintosh HD", ":"})

MOUNTED_VOLUMES_ROOT = "/Volumes"


def build_primary_key(volume: str, directory: str, file_name: str) -> str:
    """Return the key playlist entries use to reference this location."""
    return volume + directory + file_name


def build_file_path(volume: str, directory: str, file_name: str) -> str:
    """
    Convert a Traktor location into a native file path.

    >>> build_file_path("Macintosh HD", "/:Music/:House/:", "track.mp3")
    '/Music/House/track.mp3'
    >>> build_file_path("Backup", "/:Music/:House/:", "track.mp3")
    '/Volumes/Backup/Music/House/track.mp3'
    >>> build_file_path("", "/:A", "b.mp3")
    'A/b.mp3'
    """
    relative = directory.replace(DIR_SEPARATOR_TOKEN, os.sep)
    if relative.startswith(os.sep):
        relative = relative[len(os.sep):]

    if volume in SYSTEM_ROOT_VOLUMES:
        parts = [os.sep, relative, file_name]
    elif volume:
        parts = [MOUNTED_VOLUMES_ROOT, volume, relative, file_name]
    else:
        parts = [relative, file_name]

    parts = [p for p in parts if p]
    if not parts:
        return ""
    return os.path.normpath(os.path.join(*parts))
