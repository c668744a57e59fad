"""
Local JSON persistence adapter.

One file per collection (``<data_dir>/users.json`` ...). The version token
is unused: writes simply replace the file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional
import json
import os
import tempfile

from lusciana.core.logging_setup import get_logger
from lusciana.repositories.base import CollectionStore, empty_collection, with_defaults

logger = get_logger("repositories.json")


class LocalJsonStore(CollectionStore):
    backend = "local"

    def __init__(self, data_dir: str | Path) -> None:
        self.data_dir = Path(data_dir)

    def path_for(self, name: str) -> Path:
        empty_collection(name)  # rejects unknown names
        return self.data_dir / f"{name}.json"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def read(self, name: str) -> tuple[dict, Optional[str]]:
        path = self.path_for(name)
        if not path.exists():
            logger.debug("collection %s not found at %s, using empty default", name, path)
            return empty_collection(name), None
        with path.open("r", encoding="utf-8") as f:
            return with_defaults(name, json.load(f)), None

    def write(self, name: str, document: dict, version_token: Optional[str] = None) -> None:
        path = self.path_for(name)
        path.parent.mkdir(parents=True, exist_ok=True)
        # One temp file per write: concurrent writers race on os.replace only, last one wins.
        fd, tmp_name = tempfile.mkstemp(prefix=f".{name}.", suffix=".tmp", dir=path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(json.dumps(document, ensure_ascii=False, indent=2))
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.debug("collection %s written to %s (%d records)", name, path, len(document.get(name) or []))
