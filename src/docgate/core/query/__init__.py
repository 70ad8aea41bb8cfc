"""Translation of query-string parameters into document-store queries."""

from docgate.core.query.builder import QueryBuilder, TranslatedQuery, translate
from docgate.core.query.coercion import coerce_all, coerce_scalar, parse_int

__all__ = [
    "QueryBuilder",
    "TranslatedQuery",
    "translate",
    "coerce_scalar",
    "coerce_all",
    "parse_int",
]
