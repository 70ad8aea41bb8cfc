"""
Shared test fixtures for docgate tests.

This module provides:
- An in-memory fake of the pymongo database/collection surface the gateway uses
- Sample documents
- A FastAPI TestClient wired to the fake database
"""

from __future__ import annotations

import copy
from typing import Any, Dict, List, Optional

import bson
import pytest
from fastapi.testclient import TestClient
from pymongo import ReturnDocument

from docgate.core.config import GatewayConfig
from docgate.gateway import DocGate

_MISSING = object()

# =============================================================================
# In-memory store
# =============================================================================


def _lookup(document: Dict[str, Any], path: str) -> Any:
    current: Any = document
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return _MISSING
        current = current[part]
    return current


def _assign(document: Dict[str, Any], path: str, value: Any) -> None:
    *parents, leaf = path.split(".")
    current = document
    for part in parents:
        current = current.setdefault(part, {})
    current[leaf] = value


def _same(stored: Any, expected: Any) -> bool:
    if isinstance(stored, bool) != isinstance(expected, bool):
        return False
    if isinstance(stored, list) and not isinstance(expected, list):
        return any(_same(item, expected) for item in stored)
    return stored == expected


def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
    for path, condition in query.items():
        stored = _lookup(document, path)
        if isinstance(condition, dict) and "$exists" in condition:
            if (stored is not _MISSING) != condition["$exists"]:
                return False
        elif isinstance(condition, dict) and "$in" in condition:
            if stored is _MISSING or not any(_same(stored, v) for v in condition["$in"]):
                return False
        elif stored is _MISSING or not _same(stored, condition):
            return False
    return True


def _sort_key(document: Dict[str, Any], path: str) -> tuple:
    # Missing fields sort first, as in MongoDB.
    value = _lookup(document, path)
    if value is _MISSING or value is None:
        return (0, 0)
    return (1, value)


class FakeCursor:
    def __init__(self, documents: List[Dict[str, Any]]):
        self.documents = documents
        self.sort_spec: Optional[list] = None
        self.limit_value: Optional[int] = None

    def sort(self, spec: list) -> "FakeCursor":
        self.sort_spec = spec
        for field, direction in reversed(spec):
            self.documents.sort(key=lambda doc: _sort_key(doc, field), reverse=direction == -1)
        return self

    def limit(self, count: int) -> "FakeCursor":
        self.limit_value = count
        return self

    def __iter__(self):
        documents = self.documents
        if self.limit_value:
            documents = documents[: abs(self.limit_value)]
        return iter(copy.deepcopy(documents))


class FakeCollection:
    def __init__(self, name: str, documents: Optional[List[Dict[str, Any]]] = None):
        self.name = name
        self.documents: List[Dict[str, Any]] = list(documents or [])
        self.fail_with: Optional[Exception] = None
        self.calls: List[tuple] = []

    def _check(self, *documents: Dict[str, Any]) -> None:
        if self.fail_with is not None:
            raise self.fail_with
        # The driver encodes every filter and update before sending it.
        for document in documents:
            bson.encode(document)

    def find(self, query: Dict[str, Any]) -> FakeCursor:
        self.calls.append(("find", query))
        self._check(query)
        return FakeCursor([doc for doc in self.documents if _matches(doc, query)])

    def find_one_and_update(self, query, update, upsert=False, return_document=ReturnDocument.BEFORE):
        self.calls.append(("find_one_and_update", query, update))
        self._check(query, update)
        for document in self.documents:
            if _matches(document, query):
                for path, value in update["$set"].items():
                    _assign(document, path, copy.deepcopy(value))
                return copy.deepcopy(document)
        return None

    def find_one_and_delete(self, query):
        self.calls.append(("find_one_and_delete", query))
        self._check(query)
        for index, document in enumerate(self.documents):
            if _matches(document, query):
                return self.documents.pop(index)
        return None


class FakeDatabase:
    name = "docgate_test"

    def __init__(self):
        self.collections: Dict[str, FakeCollection] = {}

    def __getitem__(self, name: str) -> FakeCollection:
        if name not in self.collections:
            self.collections[name] = FakeCollection(name)
        return self.collections[name]


# =============================================================================
# Fixtures
# =============================================================================


def sample_users() -> List[Dict[str, Any]]:
    return [
        {"_id": "u1", "name": "Ada", "age": 36, "status": "active", "profile": {"city": "London"}},
        {"_id": "u2", "name": "Grace", "age": 45, "status": "pending", "deletedAt": None},
        {"_id": "u3", "name": "Linus", "age": 28, "status": "banned", "tags": ["kernel", "git"]},
        {"_id": 4, "name": "Guido", "age": 52, "status": "active", "verified": True},
    ]


@pytest.fixture
def database() -> FakeDatabase:
    db = FakeDatabase()
    db["users"].documents.extend(sample_users())
    db["shiftwise_data"].documents.extend(
        [
            {"_id": "42", "shift": "night", "crew": {"lead": "Ana", "size": 4}},
            {"_id": 42, "shift": "day"},
        ]
    )
    return db


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(log_requests=False)


@pytest.fixture
def client(database: FakeDatabase, config: GatewayConfig) -> TestClient:
    app = DocGate(config, database).generate_all_routes()
    return TestClient(app)
