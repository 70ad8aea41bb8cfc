"""Document store access components for the DocGate gateway."""

from docgate.db.client import DbClient, DbConfig, PoolConfig
from docgate.db.collections import CollectionRegistry, DocumentCollection
from docgate.db.policies import CollectionPolicy, IdType, PolicyTable

__all__ = [
    "DbClient",
    "DbConfig",
    "PoolConfig",
    "CollectionRegistry",
    "DocumentCollection",
    "CollectionPolicy",
    "IdType",
    "PolicyTable",
]
