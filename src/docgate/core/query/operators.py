# src/docgate/core/query/operators.py

# Query-string keys that steer the query instead of filtering on a field.
# For example, `?collection=users&sortBy=age` never filters on `collection`.
COLLECTION_KEY = 'collection'
LIMIT_KEY = 'limit'
SORT_BY_KEY = 'sortBy'
SORT_ORDER_KEY = 'sortOrder'

RESERVED_KEYS = frozenset({COLLECTION_KEY, LIMIT_KEY, SORT_BY_KEY, SORT_ORDER_KEY})

# `?deletedAt__exists=false` checks for the presence of `deletedAt`.
EXISTS_SUFFIX = '__exists'

# Separator for multi-valued filters: `?status=active,pending`.
VALUE_SEPARATOR = ','

# Document store operators emitted by the translator.
IN_OPERATOR = '$in'         # Field equals one of a list of values
EXISTS_OPERATOR = '$exists' # Field is present (or absent)
SET_OPERATOR = '$set'       # Partial update of the given paths

ASCENDING = 1
DESCENDING = -1
