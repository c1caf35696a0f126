"""Convert decoded NML entries into canonical ``Track`` records."""

from .models import Entry, Track
from .paths import build_file_path, build_primary_key


def entry_to_track(entry: Entry) -> Track:
    """Flatten one collection entry, computing its primary key and file path."""
    loc = entry.location
    info = entry.info

    return Track(
        artist=entry.artist,
        title=entry.title,
        album=entry.album.title,
        genre=info.genre,
        label=info.label,
        comment=info.comment,
        remixer=info.remixer,
        producer=info.producer,
        mix=info.mix,
        bpm=entry.tempo.bpm,
        key=info.key,
        musical_key=entry.musical_key.value,
        rating=info.ranking,
        play_count=info.play_count,
        duration=info.play_time_float,
        bitrate=info.bitrate,
        file_size=info.file_size,
        file_path=build_file_path(loc.volume, loc.dir, loc.file),
        file_name=loc.file,
        volume=loc.volume,
        import_date=info.import_date,
        last_played=info.last_played,
        release_date=info.release_date,
        peak_db=entry.loudness.peak_db,
        perceived_db=entry.loudness.perceived_db,
        analyzed_db=entry.loudness.analyzed_db,
        audio_id=entry.audio_id,
        cue_points=tuple(entry.cue_points),
        primary_key=build_primary_key(loc.volume, loc.dir, loc.file),
    )
