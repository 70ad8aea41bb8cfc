# src/docgate/db/policies.py
"""
Per-collection identifier policies.

Collections are schema-less, so the only thing the gateway needs to know
about one ahead of time is how to match its `_id` field against the raw
`id` query parameter. That knowledge lives in a small static table keyed by
collection name instead of in branches inside each operation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from bson import ObjectId
from bson.errors import InvalidId

from docgate.core.errors import InvalidIdentifier
from docgate.core.query.coercion import coerce_scalar
from docgate.core.query.operators import IN_OPERATOR

ID_FIELD = "_id"


class IdType(str, Enum):
    RAW = "raw"            # the raw string, or its integer form
    STRING = "string"      # the raw string only
    OBJECT_ID = "objectid" # a BSON ObjectId parsed from the raw string


@dataclass(frozen=True)
class CollectionPolicy:
    """How documents of one collection are addressed by identifier."""

    id_type: IdType = IdType.RAW
    id_field: str = ID_FIELD

    def identifier_match(self, identifier: str) -> Any:
        """Return the value to compare the identifier field against."""
        if self.id_type is IdType.STRING:
            return identifier
        if self.id_type is IdType.OBJECT_ID:
            try:
                return ObjectId(identifier)
            except (InvalidId, TypeError) as e:
                raise InvalidIdentifier(str(e)) from e

        # Only canonical int64 spellings get a numeric alternative, so "007"
        # never also matches 7.
        numeric = coerce_scalar(identifier)
        if type(numeric) is int and str(numeric) == identifier:
            return {IN_OPERATOR: [identifier, numeric]}
        return identifier

    def identifier_filter(self, identifier: str) -> Dict[str, Any]:
        return {self.id_field: self.identifier_match(identifier)}


DEFAULT_POLICY = CollectionPolicy()


class PolicyTable:
    """Static lookup of collection policies; unknown collections get the default."""

    def __init__(self, policies: Mapping[str, CollectionPolicy] | None = None):
        self._policies = dict(policies or {})

    @classmethod
    def from_id_types(cls, id_types: Mapping[str, str]) -> "PolicyTable":
        return cls({name: CollectionPolicy(id_type=IdType(kind)) for name, kind in id_types.items()})

    def lookup(self, collection: str) -> CollectionPolicy:
        return self._policies.get(collection, DEFAULT_POLICY)

    def __contains__(self, collection: str) -> bool:
        return collection in self._policies

    def __len__(self) -> int:
        return len(self._policies)
