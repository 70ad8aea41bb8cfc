# src/docgate/core/query/builder.py
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from ..config import DEFAULT_LIMIT
from .coercion import coerce_all, parse_int
from .operators import (
    ASCENDING,
    DESCENDING,
    EXISTS_OPERATOR,
    EXISTS_SUFFIX,
    IN_OPERATOR,
    LIMIT_KEY,
    RESERVED_KEYS,
    SORT_BY_KEY,
    SORT_ORDER_KEY,
    VALUE_SEPARATOR,
)

SortSpec = Tuple[str, int]


@dataclass(frozen=True)
class TranslatedQuery:
    """The filter, sort and limit derived from one request's query string."""

    filter: Dict[str, Any] = field(default_factory=dict)
    sort: Optional[SortSpec] = None
    limit: int = DEFAULT_LIMIT

    @property
    def sort_list(self) -> list[SortSpec]:
        return [self.sort] if self.sort else []


class QueryBuilder:
    """
    Builds a document-store query from raw API request parameters.

    Reserved keys (`collection`, `limit`, `sortBy`, `sortOrder`) control the
    query; every other key filters on the field of the same name:

    - `?age=42` matches `age == 42`
    - `?status=active,pending` matches `status in ["active", "pending"]`
    - `?deletedAt__exists=false` matches documents without `deletedAt`
    """

    def __init__(self, params: Mapping[str, str], default_limit: int = DEFAULT_LIMIT):
        self.params = params
        self.default_limit = default_limit

    def build(self) -> TranslatedQuery:
        return TranslatedQuery(
            filter=self.build_filter(),
            sort=self.build_sort(),
            limit=self.build_limit(),
        )

    def build_limit(self) -> int:
        return parse_int(self.params.get(LIMIT_KEY), self.default_limit)

    def build_sort(self) -> Optional[SortSpec]:
        sort_by = self.params.get(SORT_BY_KEY)
        if not sort_by:
            return None
        order = self.params.get(SORT_ORDER_KEY) or 'asc'
        return sort_by, DESCENDING if order.lower() == 'desc' else ASCENDING

    def build_filter(self) -> Dict[str, Any]:
        filters: Dict[str, Any] = {}
        for key, raw in self.params.items():
            if key in RESERVED_KEYS:
                continue
            if key.endswith(EXISTS_SUFFIX):
                field_name = key[: -len(EXISTS_SUFFIX)]
                filters[field_name] = {EXISTS_OPERATOR: raw == 'true'}
                continue

            values = coerce_all(raw.split(VALUE_SEPARATOR))
            filters[key] = values[0] if len(values) == 1 else {IN_OPERATOR: values}
        return filters


def translate(params: Mapping[str, str], default_limit: int = DEFAULT_LIMIT) -> TranslatedQuery:
    """Translate a raw query-string mapping into a `TranslatedQuery`."""
    return QueryBuilder(params, default_limit).build()
