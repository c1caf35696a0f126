"""
Collection location settings.

Traktor keeps its catalog at
``~/Documents/Native Instruments/<Traktor version>/collection.nml``. The
version folders below are tried in order and the first existing file wins.

Environment overrides:
  TRAKTOR_COLLECTION_PATH  explicit collection.nml; disables the version search
  TRAKTOR_VERSIONS         comma-separated version folders tried first
  TRAKTOR_DOCUMENTS_DIR    replaces ~/Documents as the search base
"""

import os
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger
from pydantic import BaseModel, Field

COLLECTION_FILENAME = "collection.nml"
VENDOR_DIRNAME = "Native Instruments"

KNOWN_VERSIONS: Tuple[str, ...] = (
    "Traktor 4.4.1",
    "Traktor 4.4.0",
)


def _default_documents_dir() -> Optional[Path]:
    try:
        return Path.home() / "Documents"
    except (RuntimeError, KeyError):
        # No resolvable home directory.
        return None


class CatalogSettings(BaseModel):
    """Where to look for collection.nml."""

    collection_path: Optional[Path] = Field(None, description="Explicit collection file")
    documents_dir: Optional[Path] = Field(default_factory=_default_documents_dir)
    versions: Tuple[str, ...] = KNOWN_VERSIONS

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """Build settings from the TRAKTOR_* environment variables."""
        settings = cls()

        explicit = os.environ.get("TRAKTOR_COLLECTION_PATH")
        if explicit:
            settings = settings.model_copy(update={"collection_path": Path(explicit).expanduser()})

        documents = os.environ.get("TRAKTOR_DOCUMENTS_DIR")
        if documents:
            settings = settings.model_copy(update={"documents_dir": Path(documents).expanduser()})

        extra = os.environ.get("TRAKTOR_VERSIONS", "")
        extra_versions = tuple(v.strip() for v in extra.split(",") if v.strip())
        if extra_versions:
            merged = extra_versions + tuple(v for v in KNOWN_VERSIONS if v not in extra_versions)
            settings = settings.model_copy(update={"versions": merged})

        return settings

    def candidate_paths(self) -> List[Path]:
        """Every location to try, in priority order."""
        if self.collection_path is not None:
            return [self.collection_path]
        if self.documents_dir is None:
            logger.debug("No documents directory available; no collection candidates.")
            return []
        base = self.documents_dir / VENDOR_DIRNAME
        return [base / version / COLLECTION_FILENAME for version in self.versions]
