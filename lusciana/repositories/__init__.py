"""
Persistence adapters.

Each collection (users, bugs, devis) is one JSON document read and replaced
as a whole. Services depend on the CollectionStore interface and never know
whether the document lives on local disk or in a GitHub repository.
"""

from lusciana.repositories.base import COLLECTIONS, CollectionStore, empty_collection
from lusciana.repositories.factory import build_store

__all__ = ["COLLECTIONS", "CollectionStore", "empty_collection", "build_store"]
