# src/docgate/api/routers/documents.py
from typing import Any, Optional

from fastapi import APIRouter, Body, Query, Request

from ...core.config import GatewayConfig
from ...core.errors import DocumentNotFound, InvalidRequest
from ...core.logging import log, color_palette
from ...core.query import translate
from ...core.query.operators import COLLECTION_KEY
from ...core.update import build_set_instruction
from ...db.collections import CollectionRegistry
from ...ui import display_query, display_update
from ..responses import (
    ERROR_RESPONSES,
    NOT_FOUND_RESPONSE,
    DocumentListResponse,
    DocumentResponse,
    encode_document,
    encode_documents,
)


def _require(value: Optional[str], message: str) -> str:
    if not value:
        raise InvalidRequest(message)
    return value


class DocumentRouter:
    """Generates the read/update/delete routes shared by every collection."""

    def __init__(self, router: APIRouter, registry: CollectionRegistry, config: GatewayConfig):
        self.router = router
        self.registry = registry
        self.config = config

    def register_all_routes(self) -> None:
        self._add_read_route()
        self._add_update_route()
        self._add_delete_route()

    def _add_read_route(self) -> None:
        registry = self.registry
        config = self.config

        @self.router.get(
            "/get-data",
            response_model=DocumentListResponse,
            responses=ERROR_RESPONSES,
            summary="Query any collection",
            description=(
                "Every query parameter except `collection`, `limit`, `sortBy` and `sortOrder` "
                "filters on the field of the same name. Comma-separated values match any of "
                "the values; `<field>__exists=true|false` checks for presence."
            ),
        )
        def get_data(
            request: Request,
            collection: Optional[str] = Query(None, description="Collection to query"),
            limit: Optional[str] = Query(None, description="Maximum number of documents"),
            sort_by: Optional[str] = Query(None, alias="sortBy"),
            sort_order: Optional[str] = Query(None, alias="sortOrder", description="asc or desc"),
        ) -> DocumentListResponse:
            name = _require(collection, f"Missing required '{COLLECTION_KEY}' parameter.")
            # limit, sortBy and sortOrder are declared for the OpenAPI schema;
            # translate reads them from the raw query string with every filter.
            query = translate(dict(request.query_params), config.default_limit)

            if config.log_requests:
                log.info(f"GET {color_palette['collection'](name)} filter={color_palette['value'](query.filter)}")
            if config.debug_mode:
                display_query(name, query)

            documents = registry.get(name).find(query)
            return DocumentListResponse(data=encode_documents(documents))

    def _add_update_route(self) -> None:
        registry = self.registry
        config = self.config

        @self.router.put(
            "/update-document",
            response_model=DocumentResponse,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary="Partially update a document by id",
            description="Nested objects in the body are applied as dot-path `$set` updates; arrays replace the stored value.",
        )
        def update_document(
            collection: Optional[str] = Query(None),
            id: Optional[str] = Query(None, description="Identifier, matched as given"),
            payload: Any = Body(None),
        ) -> DocumentResponse:
            if not collection or not id:
                raise InvalidRequest("Missing 'collection' or 'id' in query.")

            flat_update = build_set_instruction(payload)
            if config.log_requests:
                log.info(
                    f"PUT {color_palette['collection'](collection)} id={color_palette['value'](id)} "
                    f"paths={color_palette['field'](', '.join(flat_update))}"
                )
            if config.debug_mode:
                display_update(collection, id, flat_update)

            updated = registry.get(collection).update_by_id(id, flat_update)
            if updated is None:
                log.warn(f"Document {color_palette['value'](id)} not found in {color_palette['collection'](collection)}")
                raise DocumentNotFound(collection, id)

            return DocumentResponse(
                data=encode_document(updated),
                message="Document updated successfully",
            )

    def _add_delete_route(self) -> None:
        registry = self.registry
        config = self.config

        @self.router.delete(
            "/delete-document",
            response_model=DocumentResponse,
            responses={**ERROR_RESPONSES, **NOT_FOUND_RESPONSE},
            summary="Delete a document by id",
        )
        def delete_document(
            collection: Optional[str] = Query(None),
            id: Optional[str] = Query(None, description="Identifier, matched as given"),
        ) -> DocumentResponse:
            if not collection or not id:
                raise InvalidRequest("Missing 'collection' or 'id' in query.")

            if config.log_requests:
                log.info(f"DELETE {color_palette['collection'](collection)} id={color_palette['value'](id)}")

            deleted = registry.get(collection).delete_by_id(id)
            if deleted is None:
                raise DocumentNotFound(collection, id)

            return DocumentResponse(
                data=encode_document(deleted),
                message="Document deleted successfully.",
            )
