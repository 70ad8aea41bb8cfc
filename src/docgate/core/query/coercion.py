# src/docgate/core/query/coercion.py
"""Best-effort type inference for query-string literals."""

import re
from typing import Iterable, List, Union

Scalar = Union[int, float, bool, str]

# Decimal integers and floats with an optional sign and exponent.
# Hex literals, underscores and nan/inf spellings stay strings.
_NUMBER = re.compile(r'^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$')
_INTEGER = re.compile(r'^[+-]?\d+$')

# BSON stores integers in at most 8 bytes.
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def _as_int64(candidate: str) -> int | None:
    # 19 digits covers every int64; longer strings are never parsed as int.
    if len(candidate.lstrip("+-")) > 19:
        return None
    value = int(candidate)
    return value if INT64_MIN <= value <= INT64_MAX else None


def coerce_scalar(token: str) -> Scalar:
    """
    Infer the value a query-string literal stands for.

    Numbers win over booleans, booleans over strings:
    `"42"` -> 42, `"1.5"` -> 1.5, `"true"` -> True, `"abc"` -> "abc".
    Integers too wide for the store become floats.
    """
    candidate = token.strip()
    if candidate and _NUMBER.match(candidate):
        if _INTEGER.match(candidate):
            value = _as_int64(candidate)
            return value if value is not None else float(candidate)
        return float(candidate)
    if token == 'true':
        return True
    if token == 'false':
        return False
    return token


def coerce_all(tokens: Iterable[str]) -> List[Scalar]:
    return [coerce_scalar(token) for token in tokens]


def parse_int(raw: str | None, default: int) -> int:
    """Parse an integer query parameter, falling back to `default` on any failure."""
    if raw is None:
        return default
    candidate = raw.strip()
    if not _INTEGER.match(candidate):
        return default
    value = _as_int64(candidate)
    return value if value is not None else default
