# src/docgate/db/client.py
"""MongoDB connection management."""

from typing import Optional

from pydantic import BaseModel
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError, PyMongoError
from rich.markup import escape

from docgate.core.config import GatewayConfig
from docgate.core.logging import log, color_palette


class PoolConfig(BaseModel):
    """Connection pool settings passed to the Mongo client."""

    max_pool_size: int = 100
    min_pool_size: int = 0
    server_selection_timeout_ms: int = 5000
    connect_timeout_ms: int = 10000


class DbConfig(BaseModel):
    """Where to connect, and which database to use when the URI names none."""

    uri: str
    database_name: str
    pool_config: PoolConfig = PoolConfig()

    @classmethod
    def from_gateway(cls, config: GatewayConfig) -> "DbConfig":
        return cls(uri=config.mongo_uri, database_name=config.database_name)


class DbClient:
    """Owns the Mongo client and hands out the configured database."""

    def __init__(self, config: DbConfig, client: Optional[MongoClient] = None):
        self.config = config
        pool = config.pool_config
        self.client = client or MongoClient(
            config.uri,
            maxPoolSize=pool.max_pool_size,
            minPoolSize=pool.min_pool_size,
            serverSelectionTimeoutMS=pool.server_selection_timeout_ms,
            connectTimeoutMS=pool.connect_timeout_ms,
        )
        self.database = self._resolve_database()

    def _resolve_database(self) -> Database:
        try:
            return self.client.get_default_database(default=self.config.database_name)
        except ConfigurationError:
            return self.client[self.config.database_name]

    def get_db(self) -> Database:
        return self.database

    def test_connection(self) -> bool:
        """Ping the server; returns False instead of raising when it is unreachable."""
        try:
            self.client.admin.command("ping")
        except PyMongoError as e:
            log.error(f"MongoDB connection error: {escape(str(e))}")
            return False
        log.success(f"MongoDB connected to {color_palette['collection'](self.database.name)}")
        return True

    def close(self) -> None:
        self.client.close()
