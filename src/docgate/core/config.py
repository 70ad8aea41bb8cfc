# src/docgate/core/config.py
"""Gateway configuration, built directly or from environment variables."""

from os import getenv
from typing import Dict, List, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator

DEFAULT_LIMIT = 50
ID_TYPES = {"raw", "string", "objectid"}


def load_env(path: Optional[str] = None, override: bool = False) -> bool:
    """
    Load a .env file into the process environment.

    Returns True if a file was found and loaded.
    """
    env_path = path or find_dotenv(usecwd=True)
    if not env_path:
        return False
    return load_dotenv(env_path, override=override)


def _env_bool(name: str, default: bool) -> bool:
    raw = getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    raw = getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


def _csv(raw: str) -> List[str]:
    return [item.strip() for item in raw.split(",") if item.strip()]


def parse_id_types(raw: str) -> Dict[str, str]:
    """Parse `name:type,name:type` into a mapping of collection to identifier type."""
    table: Dict[str, str] = {}
    for entry in _csv(raw):
        name, _, id_type = entry.partition(":")
        table[name.strip()] = (id_type.strip() or "raw").lower()
    return table


class GatewayConfig(BaseModel):
    """Configuration for a DocGate application."""

    project_name: str = "docgate"
    version: str = "0.1.0"
    description: str = "Generic HTTP gateway over schema-less document collections"
    author: Optional[str] = None
    email: Optional[str] = None

    host: str = "0.0.0.0"
    port: int = 5000

    mongo_uri: str = "mongodb://localhost:27017/docgate"
    database_name: str = "docgate"

    default_limit: int = DEFAULT_LIMIT
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    debug_mode: bool = False
    log_requests: bool = True

    # Collections whose identifiers are not matched with the default `raw` policy.
    collection_id_types: Dict[str, str] = Field(
        default_factory=lambda: {"shiftwise_data": "string"}
    )

    @field_validator("collection_id_types")
    @classmethod
    def _check_id_types(cls, value: Dict[str, str]) -> Dict[str, str]:
        for name, id_type in value.items():
            if id_type not in ID_TYPES:
                raise ValueError(
                    f"Unknown identifier type '{id_type}' for collection '{name}' "
                    f"(expected one of {sorted(ID_TYPES)})"
                )
        return value

    @classmethod
    def from_env(cls, **overrides) -> "GatewayConfig":
        """Build a config from the process environment; keyword overrides win."""
        from docgate import __version__

        values = {
            "project_name": getenv("DOCGATE_PROJECT_NAME", "docgate"),
            "version": __version__,
            "host": getenv("HOST", "0.0.0.0"),
            "port": _env_int("PORT", 5000),
            "mongo_uri": getenv("MONGODB_URI", "mongodb://localhost:27017/docgate"),
            "database_name": getenv("MONGODB_DB", "docgate"),
            "default_limit": _env_int("DOCGATE_DEFAULT_LIMIT", DEFAULT_LIMIT),
            "cors_origins": _csv(getenv("DOCGATE_CORS_ORIGINS", "*")),
            "debug_mode": _env_bool("DOCGATE_DEBUG", False),
            "log_requests": _env_bool("DOCGATE_LOG_REQUESTS", True),
            "collection_id_types": parse_id_types(
                getenv("DOCGATE_ID_TYPES", "shiftwise_data:string")
            ),
        }
        values.update(overrides)
        return cls(**values)
