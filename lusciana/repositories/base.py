"""Collection store interface shared by the local and remote backends."""
from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from typing import Any, Optional

from lusciana.core.errors import CorruptCollectionError

USERS = "users"
BUGS = "bugs"
DEVIS = "devis"
COLLECTIONS = (USERS, BUGS, DEVIS)


def empty_collection(name: str) -> dict:
    if name not in COLLECTIONS:
        raise KeyError(f"Unknown collection: {name}")
    return {name: []}


def with_defaults(name: str, document: Any) -> dict:
    """Make sure a loaded document carries its record array.

    A missing array is completed; any other shape raises CorruptCollectionError.
    """
    if not isinstance(document, dict):
        raise CorruptCollectionError(details=f"{name}: objet JSON attendu, reçu {type(document).__name__}")
    doc = copy.deepcopy(document)
    records = doc.get(name)
    if records is None:
        doc[name] = []
    elif not isinstance(records, list):
        raise CorruptCollectionError(details=f"{name}: liste attendue, reçu {type(records).__name__}")
    return doc


class CollectionStore(ABC):
    """Read/replace a whole named collection.

    ``read`` returns ``(document, version_token)``; ``write`` replaces the
    document. There is no locking: two read-modify-write cycles on the same
    collection can interleave and the later write wins.
    """

    backend = "abstract"

    @abstractmethod
    def read(self, name: str) -> tuple[dict, Optional[str]]:
        ...

    @abstractmethod
    def write(self, name: str, document: dict, version_token: Optional[str] = None) -> None:
        ...

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    def ensure(self, name: str) -> bool:
        """Create the empty collection when missing. Returns True when it was created."""
        if self.exists(name):
            return False
        self.write(name, empty_collection(name), None)
        return True

    def ensure_all(self) -> list[str]:
        return [name for name in COLLECTIONS if self.ensure(name)]

    def records(self, name: str) -> tuple[list[dict], dict, Optional[str]]:
        """Convenience: ``(records, document, version_token)`` for a collection."""
        document, version = self.read(name)
        return document[name], document, version
