"""
docgate-py: A generic HTTP gateway over schema-less document collections.
"""

__version__ = "0.1.0"

from docgate.core.config import GatewayConfig, load_env
from docgate.core.query import TranslatedQuery, translate
from docgate.core.update import build_set_instruction, flatten, unflatten
from docgate.db import CollectionRegistry, DbClient, DbConfig, PoolConfig
from docgate.gateway import DocGate, create_app

__all__ = [
    "__version__",
    "GatewayConfig",
    "load_env",
    "TranslatedQuery",
    "translate",
    "flatten",
    "unflatten",
    "build_set_instruction",
    "CollectionRegistry",
    "DbClient",
    "DbConfig",
    "PoolConfig",
    "DocGate",
    "create_app",
]
