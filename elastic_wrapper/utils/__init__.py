"""
Utility functions for elastic-wrapper.

The query factory lives in ``elastic_wrapper.utils.query_builder``; it is
not re-exported here because it depends on the builders, which depend on
the validation helpers below.
"""

from .connection import (
    get_elasticsearch_client,
    reset_elasticsearch_client,
    test_connection,
)
from .validation import (
    validate_index_name,
    validate_size,
    clamp_value,
)
from .response_parser import (
    response_body,
    parse_hits,
    parse_sources,
    parse_total,
    parse_inner_hits,
    parse_aggregations,
    extract_bucket_values,
    parse_bulk_failures,
)

__all__ = [
    # Connection
    "get_elasticsearch_client",
    "reset_elasticsearch_client",
    "test_connection",
    # Validation
    "validate_index_name",
    "validate_size",
    "clamp_value",
    # Response parsing
    "response_body",
    "parse_hits",
    "parse_sources",
    "parse_total",
    "parse_inner_hits",
    "parse_aggregations",
    "extract_bucket_values",
    "parse_bulk_failures",
]
