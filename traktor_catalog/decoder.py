"""
NML Decoder

Turns the raw ``collection.nml`` bytes into an ``NmlDocument``. The XML is
parsed with ElementTree; each element's attributes are gathered into plain
dicts keyed by attribute name and validated in one pass by the pydantic
document models, which supply zero defaults for anything missing.

No schema validation beyond that is done: unknown attributes and elements are
ignored, optional ones may be absent.
"""

import time
from pathlib import Path
from typing import Any, Dict, Optional, Union
from xml.etree import ElementTree as ET

from loguru import logger
from pydantic import ValidationError

from .errors import CatalogDecodeError, CatalogIOError
from .models import NmlDocument

ROOT_TAG = "NML"

# Single-instance children of an ENTRY, validated as nested models.
_ENTRY_CHILDREN = ("LOCATION", "ALBUM", "INFO", "TEMPO", "LOUDNESS", "MUSICAL_KEY", "LOOPINFO")


def _entry_data(elem: ET.Element) -> Dict[str, Any]:
    data: Dict[str, Any] = dict(elem.attrib)
    for tag in _ENTRY_CHILDREN:
        child = elem.find(tag)
        if child is not None:
            data[tag] = dict(child.attrib)
    data["CUE_V2"] = [dict(cue.attrib) for cue in elem.findall("CUE_V2")]
    return data


def _playlist_data(elem: ET.Element) -> Dict[str, Any]:
    data: Dict[str, Any] = dict(elem.attrib)
    keys = []
    for entry in elem.findall("ENTRY"):
        primary_key = entry.find("PRIMARYKEY")
        keys.append(dict(primary_key.attrib) if primary_key is not None else {})
    data["keys"] = keys
    return data


def _node_data(elem: ET.Element) -> Dict[str, Any]:
    data: Dict[str, Any] = dict(elem.attrib)
    data["subnodes"] = [_node_data(sub) for sub in elem.findall("SUBNODES/NODE")]
    playlist = elem.find("PLAYLIST")
    if playlist is not None:
        data["playlist"] = _playlist_data(playlist)
    return data


def _document_data(root: ET.Element) -> Dict[str, Any]:
    data: Dict[str, Any] = {"VERSION": root.get("VERSION", "")}

    collection = root.find("COLLECTION")
    if collection is not None:
        data["declared_entries"] = collection.get("ENTRIES", "")
        data["entries"] = [_entry_data(entry) for entry in collection.findall("ENTRY")]

    tree_root = root.find("PLAYLISTS/NODE")
    if tree_root is not None:
        data["root"] = _node_data(tree_root)

    return data


def decode_collection(
    data: Union[bytes, str],
    source: Optional[Path] = None,
) -> NmlDocument:
    """
    Decode NML content into an ``NmlDocument``.

    Args:
        data:   The complete file content.
        source: Where the content came from; only used in error messages.

    Raises:
        CatalogDecodeError: content is not well-formed XML, the root element
            is not ``NML``, or a numeric attribute does not parse.
    """
    where = f" ({source})" if source else ""

    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise CatalogDecodeError(f"Malformed NML{where}: {exc}", path=source) from exc

    if root.tag != ROOT_TAG:
        raise CatalogDecodeError(
            f"Not a Traktor collection{where}: root element is <{root.tag}>, expected <{ROOT_TAG}>",
            path=source,
        )

    try:
        return NmlDocument.model_validate(_document_data(root))
    except ValidationError as exc:
        raise CatalogDecodeError(
            f"Invalid NML{where}: {exc.error_count()} bad attribute value(s): {exc}",
            path=source,
        ) from exc
    except RecursionError as exc:
        raise CatalogDecodeError(f"Playlist tree too deeply nested{where}", path=source) from exc


def decode_collection_file(path: Union[str, Path]) -> NmlDocument:
    """
    Read and decode a collection file.

    Raises:
        CatalogIOError: the file cannot be opened or read.
        CatalogDecodeError: see ``decode_collection``.
    """
    path = Path(path).expanduser()
    t0 = time.perf_counter()
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise CatalogIOError(f"Cannot read collection file {path}: {exc}", path=path) from exc

    document = decode_collection(content, source=path)
    elapsed_ms = int((time.perf_counter() - t0) * 1000)
    logger.debug(
        f"Decoded {path} ({len(content) / (1024 * 1024):.1f}MB, "
        f"{len(document.entries)} entries) in {elapsed_ms}ms"
    )
    return document
