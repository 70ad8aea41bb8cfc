"""Core utilities for the DocGate gateway."""

from docgate.core.config import GatewayConfig, load_env
from docgate.core.errors import (
    DocumentNotFound,
    GatewayError,
    InvalidIdentifier,
    InvalidRequest,
    StoreFailure,
)
from docgate.core.logging import Logger, log, color_palette

__all__ = [
    "GatewayConfig",
    "load_env",
    "GatewayError",
    "InvalidRequest",
    "InvalidIdentifier",
    "DocumentNotFound",
    "StoreFailure",
    "Logger",
    "log",
    "color_palette",
]
