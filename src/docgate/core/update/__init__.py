"""Normalization of JSON update payloads into flat `$set` instructions."""

from typing import Any, Dict, Mapping

from docgate.core.errors import InvalidRequest
from docgate.core.update.flatten import PATH_SEPARATOR, flatten, unflatten


def build_set_instruction(payload: Any, id_field: str = "_id") -> Dict[str, Any]:
    """
    Turn a request body into the flat path->value mapping for a `$set` update.

    The identifier field is dropped since the store treats it as immutable.
    """
    if not isinstance(payload, Mapping):
        raise InvalidRequest("Update body must be a JSON object.")

    flat = flatten(payload)
    flat.pop(id_field, None)
    if not flat:
        raise InvalidRequest("Update body contains no fields to set.")
    return flat


__all__ = ["flatten", "unflatten", "build_set_instruction", "PATH_SEPARATOR"]
