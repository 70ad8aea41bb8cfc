# src/docgate/core/update/flatten.py
"""Flattening of nested update payloads into dot-path partial updates."""

from typing import Any, Dict, Mapping

PATH_SEPARATOR = "."


def flatten(node: Any, prefix: str = "") -> Dict[str, Any]:
    """
    Flatten a JSON tree into `{dot.path: leaf}`.

    Mappings are recursed into; everything else (scalars, None, lists)
    is a leaf. `{"a": {"b": 1, "c": [1, 2]}}` -> `{"a.b": 1, "a.c": [1, 2]}`.
    """
    if not isinstance(node, Mapping):
        return {prefix: node}

    flat: Dict[str, Any] = {}
    for key, value in node.items():
        child = f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)
        flat.update(flatten(value, child))
    return flat


def unflatten(flat: Mapping[str, Any]) -> Dict[str, Any]:
    """Rebuild the nested tree from a mapping produced by `flatten`."""
    tree: Dict[str, Any] = {}
    for path, value in flat.items():
        *parents, leaf = path.split(PATH_SEPARATOR)
        cursor = tree
        for part in parents:
            cursor = cursor.setdefault(part, {})
        cursor[leaf] = value
    return tree
