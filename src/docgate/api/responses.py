# src/docgate/api/responses.py
"""Response envelopes and JSON-safe encoding of store documents."""

from datetime import datetime
from typing import Any, Dict, List, Optional

from bson import (
    Binary,
    Code,
    DBRef,
    Decimal128,
    MaxKey,
    MinKey,
    ObjectId,
    Regex,
    Timestamp,
    json_util,
)
from bson.json_util import RELAXED_JSON_OPTIONS
from fastapi.encoders import jsonable_encoder
from pydantic import BaseModel


class DocumentListResponse(BaseModel):
    success: bool = True
    data: List[Dict[str, Any]]


class DocumentResponse(BaseModel):
    success: bool = True
    data: Optional[Dict[str, Any]] = None
    message: str


class ErrorResponse(BaseModel):
    success: bool = False
    message: Optional[str] = None
    error: Optional[str] = None
    type: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: datetime
    version: str
    uptime: float
    database_connected: bool
    collections_cached: List[str]


ERROR_RESPONSES: Dict[int | str, Dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Missing or invalid parameters"},
    500: {"model": ErrorResponse, "description": "Document store error"},
}

NOT_FOUND_RESPONSE: Dict[int | str, Dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "No document with this identifier"},
}


def _extended_json(value: Any) -> Any:
    return json_util.default(value, json_options=RELAXED_JSON_OPTIONS)


def _binary_json(value: bytes) -> Any:
    # Raw bytes come back from the driver for generic binary subtype 0.
    return _extended_json(value if isinstance(value, Binary) else Binary(value))


# ObjectIds and decimals read naturally as strings; other BSON types without
# a JSON counterpart use their relaxed Extended JSON form.
BSON_ENCODERS = {
    ObjectId: str,
    Decimal128: str,
    Binary: _binary_json,
    bytes: _binary_json,
    Regex: _extended_json,
    Timestamp: _extended_json,
    Code: _extended_json,
    DBRef: _extended_json,
    MinKey: _extended_json,
    MaxKey: _extended_json,
}


def encode_document(document: Any) -> Any:
    """Convert a store document into plain JSON types."""
    return jsonable_encoder(document, custom_encoder=BSON_ENCODERS)


def encode_documents(documents: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [encode_document(doc) for doc in documents]
