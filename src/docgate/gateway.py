"""Main DocGate application builder."""

from datetime import datetime
from typing import Any, Callable, Dict, Optional

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from rich.markup import escape

from docgate.api.routers.documents import DocumentRouter
from docgate.api.routers.health import HealthRouter
from docgate.core.config import GatewayConfig
from docgate.core.errors import GatewayError
from docgate.core.logging import log, color_palette
from docgate.db.client import DbClient, DbConfig
from docgate.db.collections import CollectionRegistry
from docgate.db.policies import PolicyTable


class DocGate:
    """Builds the FastAPI application that serves every collection of one database."""

    def __init__(
        self,
        config: GatewayConfig,
        database: Any,
        app: Optional[FastAPI] = None,
        database_check: Optional[Callable[[], bool]] = None,
    ):
        """
        Initialize the gateway.

        Args:
            config: Gateway configuration
            database: A pymongo `Database` (or anything indexable by collection name)
            app: Existing FastAPI app to configure instead of a new one
            database_check: Connectivity check used by the health route
        """
        self.config = config
        self.app = app or FastAPI()
        self.routers: Dict[str, APIRouter] = {}
        self.start_time = datetime.now()
        self.database_check = database_check or (lambda: True)
        self.registry = CollectionRegistry(
            database, PolicyTable.from_id_types(config.collection_id_types)
        )
        log.debug_enabled = config.debug_mode
        self._initialize_app()

    def _initialize_app(self) -> None:
        """Initialize FastAPI app configuration."""
        self.app.title = self.config.project_name
        self.app.version = self.config.version
        self.app.description = self.config.description

        if self.config.author:
            self.app.contact = {"name": self.config.author, "email": self.config.email}

        self.app.add_middleware(
            CORSMiddleware,
            allow_origins=self.config.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    def gen_document_routes(self) -> None:
        """Generate the read/update/delete routes shared by all collections."""
        log.section("Generating Document Routes")

        router = APIRouter(tags=["Documents"])
        DocumentRouter(router, self.registry, self.config).register_all_routes()
        self.routers["documents"] = router

        @router.get("/", response_class=PlainTextResponse, include_in_schema=False)
        def home() -> str:
            return "API is running. Use /get-data?collection=your_collection to query."

        self.app.include_router(router)

        with log.indented():
            for method, path in (("GET", "/get-data"), ("PUT", "/update-document"), ("DELETE", "/delete-document")):
                log.info(f"{color_palette['method'](method)} {color_palette['path'](path)}")

        id_types = self.config.collection_id_types
        if id_types:
            log.table(
                headers=["Collection", "Identifier"],
                rows=[[name, kind] for name, kind in sorted(id_types.items())],
            )
        log.success("Generated document routes")

    def gen_health_routes(self) -> None:
        """Generate health check routes for API monitoring."""
        router = APIRouter(prefix="/health", tags=["Health"])
        HealthRouter(
            router, self.registry, self.config, self.database_check, self.start_time
        ).register_all_routes()
        self.routers["health"] = router
        self.app.include_router(router)

        log.success("Generated health routes")

    def configure_error_handlers(self) -> None:
        """
        Configure global error handlers for the API.

        Every error is reported in the `{"success": false, ...}` envelope.
        """

        @self.app.exception_handler(GatewayError)
        async def gateway_error_handler(request: Request, exc: GatewayError):
            return JSONResponse(status_code=exc.status_code, content=exc.to_body())

        @self.app.exception_handler(RequestValidationError)
        async def validation_error_handler(request: Request, exc: RequestValidationError):
            messages = [str(error.get("msg", error)) for error in exc.errors()]
            return JSONResponse(
                status_code=400,
                content={"success": False, "message": "; ".join(messages) or "Invalid request"},
            )

        @self.app.exception_handler(Exception)
        async def general_exception_handler(request: Request, exc: Exception):
            log.error(f"Unhandled exception on {request.url.path}: {escape(str(exc))}")
            return JSONResponse(
                status_code=500,
                content={
                    "success": False,
                    "error": "Internal server error",
                    "detail": str(exc) if self.config.debug_mode else None,
                },
            )

    def generate_all_routes(self) -> FastAPI:
        """Generate every route and error handler; returns the configured app."""
        self.configure_error_handlers()
        self.gen_health_routes()
        self.gen_document_routes()
        return self.app


def create_app(
    config: Optional[GatewayConfig] = None,
    db_client: Optional[DbClient] = None,
    database: Any = None,
) -> FastAPI:
    """
    Build a ready-to-serve FastAPI app.

    Pass `database` to serve an existing database object directly; otherwise a
    `DbClient` is created from the config.
    """
    config = config or GatewayConfig.from_env()
    database_check = None
    if database is None:
        db_client = db_client or DbClient(DbConfig.from_gateway(config))
        database = db_client.get_db()
    if db_client is not None:
        database_check = db_client.test_connection

    return DocGate(config, database, database_check=database_check).generate_all_routes()
