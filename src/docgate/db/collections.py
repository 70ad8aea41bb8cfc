# src/docgate/db/collections.py
"""Collection handles and the registry that caches them by name."""

import threading
from typing import Any, Dict, List, Optional

from bson.errors import BSONError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from rich.markup import escape

from docgate.core.errors import StoreFailure
from docgate.core.logging import log, color_palette
from docgate.core.query import TranslatedQuery
from docgate.core.query.operators import SET_OPERATOR
from docgate.db.policies import CollectionPolicy, PolicyTable

# Errors raised by the driver, including documents or filters it cannot encode.
STORE_ERRORS = (PyMongoError, BSONError, OverflowError)


def _store_failure(collection: str, operation: str, error: Exception) -> StoreFailure:
    log.error(f"{operation} failed on {color_palette['collection'](collection)}: {escape(str(error))}")
    return StoreFailure(str(error), type(error).__name__)


class DocumentCollection:
    """A schema-less collection addressed by name, with its identifier policy."""

    def __init__(self, name: str, collection: Any, policy: CollectionPolicy):
        self.name = name
        self.collection = collection
        self.policy = policy

    def find(self, query: TranslatedQuery) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection.find(query.filter)
            if query.sort:
                cursor = cursor.sort(query.sort_list)
            return list(cursor.limit(query.limit))
        except STORE_ERRORS as e:
            raise _store_failure(self.name, "find", e) from e

    def update_by_id(self, identifier: str, flat_update: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Set the given paths on the matching document; returns it after the update, or None."""
        match = self.policy.identifier_filter(identifier)
        try:
            return self.collection.find_one_and_update(
                match,
                {SET_OPERATOR: flat_update},
                upsert=False,
                return_document=ReturnDocument.AFTER,
            )
        except STORE_ERRORS as e:
            raise _store_failure(self.name, "update", e) from e

    def delete_by_id(self, identifier: str) -> Optional[Dict[str, Any]]:
        """Remove the matching document; returns it, or None if nothing matched."""
        match = self.policy.identifier_filter(identifier)
        try:
            return self.collection.find_one_and_delete(match)
        except STORE_ERRORS as e:
            raise _store_failure(self.name, "delete", e) from e


class CollectionRegistry:
    """
    Create-if-absent cache of collection handles.

    Handles live for the lifetime of the process. The key space is whatever
    collection names clients ask for, so nothing is evicted.
    """

    def __init__(self, database: Any, policies: Optional[PolicyTable] = None):
        self.database = database
        self.policies = policies or PolicyTable()
        self._handles: Dict[str, DocumentCollection] = {}
        self._lock = threading.Lock()

    def get(self, name: str) -> DocumentCollection:
        handle = self._handles.get(name)
        if handle is not None:
            return handle
        with self._lock:
            handle = self._handles.get(name)
            if handle is None:
                policy = self.policies.lookup(name)
                handle = DocumentCollection(name, self.database[name], policy)
                self._handles[name] = handle
                log.debug(f"Registered collection {color_palette['collection'](name)} ({policy.id_type.value} ids)")
        return handle

    def names(self) -> List[str]:
        with self._lock:
            return sorted(self._handles)

    def __len__(self) -> int:
        return len(self._handles)
