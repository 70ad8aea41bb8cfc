# src/docgate/core/errors.py
"""Error taxonomy shared by the store layer and the HTTP layer."""

from typing import Any, Dict


class GatewayError(Exception):
    """Base error; carries the HTTP status it should be reported with."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "message": self.message}


class InvalidRequest(GatewayError):
    """A required parameter is missing or the request body is unusable."""

    status_code = 400


class InvalidIdentifier(GatewayError):
    """The identifier cannot be cast to the collection's identifier type."""

    status_code = 400

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": f"Invalid ID format: {self.message}"}


class DocumentNotFound(GatewayError):
    """No document matched the requested identifier."""

    status_code = 404

    def __init__(self, collection: str, identifier: str):
        super().__init__("Document not found.")
        self.collection = collection
        self.identifier = identifier


class StoreFailure(GatewayError):
    """The document store raised while serving the request."""

    status_code = 500

    def __init__(self, message: str, error_type: str = "StoreFailure"):
        super().__init__(message)
        self.error_type = error_type

    def to_body(self) -> Dict[str, Any]:
        return {"success": False, "error": self.message, "type": self.error_type}
