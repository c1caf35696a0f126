"""Shared fixtures: a small but realistic collection.nml."""

import pytest

from traktor_catalog.collection import TraktorCollection, parse_collection_from_path

KEY_HOUSE = "Macintosh HD/:Users/:dj/:Music/:House/:never_grow_old.mp3"
KEY_TECHNO = "Backup/:Techno/:floorshow.wav"
KEY_ELECTRO = "Backup/:Electro/:cryptic.flac"
KEY_LOOSE = "/:Loose/:loose.mp3"
KEY_DELETED = "Backup/:Gone/:deleted.mp3"

SAMPLE_NML = f"""<?xml version="1.0" encoding="UTF-8" standalone="no" ?>
<NML VERSION="19">
  <HEAD COMPANY="www.native-instruments.com" PROGRAM="Traktor"></HEAD>
  <MUSICFOLDERS></MUSICFOLDERS>
  <COLLECTION ENTRIES="4">
    <ENTRY MODIFIED_DATE="2024/3/2" MODIFIED_TIME="41437" AUDIO_ID="AWEWZmZ3" TITLE="Never Grow Old" ARTIST="Floorplan">
      <LOCATION DIR="/:Users/:dj/:Music/:House/:" FILE="never_grow_old.mp3" VOLUME="Macintosh HD" VOLUMEID="Macintosh HD"></LOCATION>
      <ALBUM TRACK="4" OF_TRACKS="9" TITLE="Paradise"></ALBUM>
      <MODIFICATION_INFO AUTHOR_TYPE="user"></MODIFICATION_INFO>
      <INFO BITRATE="320000" GENRE="House" LABEL="M-Plant" COMMENT="gospel" KEY="8A" PLAYCOUNT="3" PLAYTIME="402" PLAYTIME_FLOAT="401.5" IMPORT_DATE="2024/1/5" LAST_PLAYED="2024/3/1" RANKING="255" RELEASE_DATE="2014/1/1" REMIXER="" PRODUCER="Robert Hood" FILESIZE="15700" FLAGS="14"></INFO>
      <TEMPO BPM="124.000000" BPM_QUALITY="100.000000"></TEMPO>
      <LOUDNESS PEAK_DB="-0.5" PERCEIVED_DB="-1.25" ANALYZED_DB="-1.25"></LOUDNESS>
      <MUSICAL_KEY VALUE="21"></MUSICAL_KEY>
      <CUE_V2 NAME="AutoGrid" DISPL_ORDER="0" TYPE="4" START="52.1" LEN="0" REPEATS="-1" HOTCUE="0"></CUE_V2>
      <CUE_V2 NAME="Drop" DISPL_ORDER="0" TYPE="5" START="60000.5" LEN="7741.9" REPEATS="-1" HOTCUE="1"></CUE_V2>
    </ENTRY>
    <ENTRY TITLE="Floorshow" ARTIST="Surgeon">
      <LOCATION DIR="/:Techno/:" FILE="floorshow.wav" VOLUME="Backup"></LOCATION>
      <INFO GENRE="Techno" KEY="5a"></INFO>
      <TEMPO BPM="135.000000"></TEMPO>
    </ENTRY>
    <ENTRY TITLE="Cryptic" ARTIST="DJ Stingray">
      <LOCATION DIR="/:Electro/:" FILE="cryptic.flac" VOLUME="Backup"></LOCATION>
      <ALBUM TITLE="Aqualung"></ALBUM>
      <INFO GENRE="Electro" KEY="5A"></INFO>
      <TEMPO BPM="128.000000"></TEMPO>
    </ENTRY>
    <ENTRY TITLE="No Tempo">
      <LOCATION DIR="/:Loose/:" FILE="loose.mp3" VOLUME=""></LOCATION>
    </ENTRY>
  </COLLECTION>
  <SETS ENTRIES="0"></SETS>
  <PLAYLISTS>
    <NODE TYPE="FOLDER" NAME="$ROOT">
      <SUBNODES COUNT="4">
        <NODE TYPE="PLAYLIST" NAME="Warmup">
          <PLAYLIST ENTRIES="2" TYPE="LIST" UUID="6b1a0c7e">
            <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_HOUSE}"></PRIMARYKEY></ENTRY>
            <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_DELETED}"></PRIMARYKEY></ENTRY>
          </PLAYLIST>
        </NODE>
        <NODE TYPE="FOLDER" NAME="Sets">
          <SUBNODES COUNT="2">
            <NODE TYPE="PLAYLIST" NAME="Friday">
              <PLAYLIST ENTRIES="2" TYPE="LIST" UUID="0f9d3e21">
                <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_TECHNO}"></PRIMARYKEY></ENTRY>
                <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_ELECTRO}"></PRIMARYKEY></ENTRY>
              </PLAYLIST>
            </NODE>
            <NODE TYPE="FOLDER" NAME="Archive">
              <SUBNODES COUNT="1">
                <NODE TYPE="PLAYLIST" NAME="Warmup">
                  <PLAYLIST ENTRIES="1" TYPE="LIST" UUID="aa21">
                    <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_ELECTRO}"></PRIMARYKEY></ENTRY>
                  </PLAYLIST>
                </NODE>
              </SUBNODES>
            </NODE>
          </SUBNODES>
        </NODE>
        <NODE TYPE="PLAYLIST" NAME="Hybrid">
          <PLAYLIST ENTRIES="1" TYPE="LIST" UUID="c3">
            <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_LOOSE}"></PRIMARYKEY></ENTRY>
          </PLAYLIST>
          <SUBNODES COUNT="1">
            <NODE TYPE="PLAYLIST" NAME="Inner">
              <PLAYLIST ENTRIES="1" TYPE="LIST" UUID="c4">
                <ENTRY><PRIMARYKEY TYPE="TRACK" KEY="{KEY_HOUSE}"></PRIMARYKEY></ENTRY>
              </PLAYLIST>
            </NODE>
          </SUBNODES>
        </NODE>
        <NODE TYPE="SMARTLIST" NAME="Recently Added">
          <SMARTLIST UUID="d5"><SEARCH_EXPRESSION VERSION="1" QUERY="$IMPORTDATE &gt; DATE(2024/1/1)"></SEARCH_EXPRESSION></SMARTLIST>
        </NODE>
      </SUBNODES>
    </NODE>
  </PLAYLISTS>
</NML>
"""


@pytest.fixture
def sample_nml() -> str:
    return SAMPLE_NML


@pytest.fixture
def collection_file(tmp_path):
    path = tmp_path / "collection.nml"
    path.write_text(SAMPLE_NML, encoding="utf-8")
    return path


@pytest.fixture
def collection(collection_file) -> TraktorCollection:
    return parse_collection_from_path(collection_file)
