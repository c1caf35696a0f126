"""
Data Models for the Traktor Catalog Index

Two layers live here:

* The NML document model (``NmlDocument`` and its parts) mirrors the
  ``collection.nml`` schema. Field aliases are the XML attribute names, so the
  decoder can validate attribute dicts straight into these models. It is
  discarded once the collection has been normalized.
* The canonical records (``Track``, ``Playlist``) are what the index owns and
  what callers query. They are frozen after construction.
"""

from typing import Annotated, List, Optional, Tuple

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _blank_to_zero(value):
    """Treat empty numeric attributes as zero, as Traktor writes them."""
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    return value


NmlInt = Annotated[int, BeforeValidator(_blank_to_zero)]
NmlFloat = Annotated[float, BeforeValidator(_blank_to_zero)]


class _NmlElement(BaseModel):
    """Base for models validated from XML attribute dicts."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Entry parts
# ---------------------------------------------------------------------------

class Location(_NmlElement):
    """File location, split into Traktor's volume / dir / file triple."""

    dir: str = Field("", alias="DIR")
    file: str = Field("", alias="FILE")
    volume: str = Field("", alias="VOLUME")
    volume_id: str = Field("", alias="VOLUMEID")


class Album(_NmlElement):
    title: str = Field("", alias="TITLE")
    track: NmlInt = Field(0, alias="TRACK")
    of_tracks: NmlInt = Field(0, alias="OF_TRACKS")


class Info(_NmlElement):
    bitrate: NmlInt = Field(0, alias="BITRATE")
    genre: str = Field("", alias="GENRE")
    label: str = Field("", alias="LABEL")
    comment: str = Field("", alias="COMMENT")
    comment2: str = Field("", alias="COMMENT2")
    cover_art_id: str = Field("", alias="COVERARTID")
    key: str = Field("", alias="KEY")
    play_count: NmlInt = Field(0, alias="PLAYCOUNT")
    play_time: NmlInt = Field(0, alias="PLAYTIME")
    play_time_float: NmlFloat = Field(0.0, alias="PLAYTIME_FLOAT")
    import_date: str = Field("", alias="IMPORT_DATE")
    last_played: str = Field("", alias="LAST_PLAYED")
    ranking: NmlInt = Field(0, alias="RANKING")
    release_date: str = Field("", alias="RELEASE_DATE")
    remixer: str = Field("", alias="REMIXER")
    producer: str = Field("", alias="PRODUCER")
    mix: str = Field("", alias="MIX")
    file_size: NmlInt = Field(0, alias="FILESIZE")
    flags: NmlInt = Field(0, alias="FLAGS")


class Tempo(_NmlElement):
    bpm: NmlFloat = Field(0.0, alias="BPM")
    bpm_quality: NmlFloat = Field(0.0, alias="BPM_QUALITY")


class Loudness(_NmlElement):
    peak_db: NmlFloat = Field(0.0, alias="PEAK_DB")
    perceived_db: NmlFloat = Field(0.0, alias="PERCEIVED_DB")
    analyzed_db: NmlFloat = Field(0.0, alias="ANALYZED_DB")


class MusicalKey(_NmlElement):
    value: NmlInt = Field(0, alias="VALUE")


class CuePoint(_NmlElement):
    """A cue, loop, grid or fade marker (``CUE_V2``)."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    name: str = Field("", alias="NAME")
    type: NmlInt = Field(0, alias="TYPE", description="0 cue, 1 fade-in, 2 fade-out, 3 load, 4 grid, 5 loop")
    start: NmlFloat = Field(0.0, alias="START", description="Start position in milliseconds")
    length: NmlFloat = Field(0.0, alias="LEN", description="Loop length in milliseconds")
    repeats: NmlInt = Field(0, alias="REPEATS")
    hot_cue: NmlInt = Field(0, alias="HOTCUE", description="Hot-cue slot, -1 when unassigned")


class LoopInfo(_NmlElement):
    loop_start: NmlFloat = Field(0.0, alias="LOOP_START")
    loop_end: NmlFloat = Field(0.0, alias="LOOP_END")


class Entry(_NmlElement):
    """One ``COLLECTION/ENTRY`` element."""

    artist: str = Field("", alias="ARTIST")
    title: str = Field("", alias="TITLE")
    audio_id: str = Field("", alias="AUDIO_ID")
    modified_date: str = Field("", alias="MODIFIED_DATE")
    modified_time: str = Field("", alias="MODIFIED_TIME")
    location: Location = Field(default_factory=Location, alias="LOCATION")
    album: Album = Field(default_factory=Album, alias="ALBUM")
    info: Info = Field(default_factory=Info, alias="INFO")
    tempo: Tempo = Field(default_factory=Tempo, alias="TEMPO")
    loudness: Loudness = Field(default_factory=Loudness, alias="LOUDNESS")
    musical_key: MusicalKey = Field(default_factory=MusicalKey, alias="MUSICAL_KEY")
    cue_points: List[CuePoint] = Field(default_factory=list, alias="CUE_V2")
    loop_info: LoopInfo = Field(default_factory=LoopInfo, alias="LOOPINFO")


# ---------------------------------------------------------------------------
# Playlist tree
# ---------------------------------------------------------------------------

class PrimaryKeyRef(_NmlElement):
    """``PLAYLIST/ENTRY/PRIMARYKEY`` — a reference to a collection entry."""

    type: str = Field("", alias="TYPE")
    key: str = Field("", alias="KEY")


class PlaylistData(_NmlElement):
    entries: NmlInt = Field(0, alias="ENTRIES")
    type: str = Field("", alias="TYPE")
    uuid: str = Field("", alias="UUID")
    keys: List[PrimaryKeyRef] = Field(default_factory=list)


class Node(_NmlElement):
    """A folder, a playlist, or both."""

    type: str = Field("", alias="TYPE")
    name: str = Field("", alias="NAME")
    count: NmlInt = Field(0, alias="COUNT")
    subnodes: List["Node"] = Field(default_factory=list)
    playlist: Optional[PlaylistData] = None


class NmlDocument(_NmlElement):
    """The decoded ``collection.nml`` file."""

    version: str = Field("", alias="VERSION")
    declared_entries: NmlInt = 0
    entries: List[Entry] = Field(default_factory=list)
    root: Node = Field(default_factory=Node)


# ---------------------------------------------------------------------------
# Canonical records
# ---------------------------------------------------------------------------

class Track(BaseModel):
    """A collection track, normalized from an NML entry."""

    model_config = ConfigDict(frozen=True)

    artist: str = ""
    title: str = ""
    album: str = ""
    genre: str = ""
    label: str = ""
    comment: str = ""
    remixer: str = ""
    producer: str = ""
    mix: str = ""
    bpm: float = Field(0.0, description="Beats per minute")
    key: str = Field("", description="Key as written by Traktor (INFO@KEY)")
    musical_key: int = Field(0, description="Numeric key value 0-23 (MUSICAL_KEY@VALUE)")
    rating: int = Field(0, description="Raw ranking 0-255")
    play_count: int = 0
    duration: float = Field(0.0, description="Length in seconds")
    bitrate: int = 0
    file_size: int = Field(0, description="File size in kilobytes")
    file_path: str = Field("", description="Platform-native absolute path")
    file_name: str = ""
    volume: str = ""
    import_date: str = ""
    last_played: str = ""
    release_date: str = ""
    peak_db: float = 0.0
    perceived_db: float = 0.0
    analyzed_db: float = 0.0
    audio_id: str = ""
    cue_points: Tuple[CuePoint, ...] = ()
    primary_key: str = Field(..., description="volume + dir + file, used by playlist entries")


class Playlist(BaseModel):
    """A playlist node with its authored keys and the tracks they resolve to."""

    model_config = ConfigDict(frozen=True)

    name: str
    path: str = Field("", description="Ancestor names joined by '/', root excluded")
    uuid: str = ""
    track_keys: Tuple[str, ...] = ()
    tracks: Tuple[Track, ...] = Field((), description="Resolved tracks, shared with the collection")

    @property
    def missing_count(self) -> int:
        """Number of authored keys that did not resolve to a track."""
        return len(self.track_keys) - len(self.tracks)
