# src/docgate/api/routers/health.py
from datetime import datetime
from typing import Callable

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from ...core.config import GatewayConfig
from ...db.collections import CollectionRegistry
from ..responses import HealthResponse


class HealthRouter:
    """Health check routes for API monitoring."""

    def __init__(
        self,
        router: APIRouter,
        registry: CollectionRegistry,
        config: GatewayConfig,
        database_check: Callable[[], bool],
        start_time: datetime,
    ):
        self.router = router
        self.registry = registry
        self.config = config
        self.database_check = database_check
        self.start_time = start_time

    def register_all_routes(self) -> None:
        @self.router.get(
            "",
            response_model=HealthResponse,
            summary="Health check",
            description="Get the current health status of the API",
        )
        def health_check() -> HealthResponse:
            is_connected = self.database_check()
            uptime = (datetime.now() - self.start_time).total_seconds()
            return HealthResponse(
                status="healthy" if is_connected else "degraded",
                timestamp=datetime.now(),
                version=self.config.version,
                uptime=uptime,
                database_connected=is_connected,
                collections_cached=self.registry.names(),
            )

        @self.router.get(
            "/ping",
            response_class=PlainTextResponse,
            summary="Ping",
            description="Simple ping endpoint for load balancers",
        )
        def ping() -> str:
            return "pong"
