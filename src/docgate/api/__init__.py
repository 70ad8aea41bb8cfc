"""API generation components for the DocGate gateway."""

from docgate.api.routers.documents import DocumentRouter
from docgate.api.routers.health import HealthRouter

__all__ = ["DocumentRouter", "HealthRouter"]
