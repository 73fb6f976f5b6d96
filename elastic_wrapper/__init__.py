"""
elastic-wrapper: fluent Query DSL builders and thin operation wrappers
over the official Elasticsearch client.

Typical usage:
    from elastic_wrapper import ElasticsearchService, query_builder as q

    service = ElasticsearchService()
    query = (
        q.bool_query()
        .must(q.keyword_wildcard("field1", "*Test*"))
        .filter(q.day_range("createTime").from_("2024-01-01").to("2024-02-01"))
        .must(q.nested_query("appInfo", q.keyword_term("appInfo.custNo", "C001")).inner_hit("app_hits"))
    )
    response = service.search("posts", query)
"""

from .es_types import RangeRelation, ScoreMode, SearchSource, SortOrder
from .exceptions import ElasticsearchOperationError, InvalidArgumentError
from .wrappers import (
    BaseQueryBuilder,
    BoolQueryBuilder,
    FuzzyQueryBuilder,
    NestedQueryBuilder,
    RangeQueryBuilder,
    WildcardQueryBuilder,
)
from .utils import query_builder
from .operations import BulkOperations, DocumentOperations, IndexOperations
from .service import ElasticsearchService

__version__ = "0.1.0"

__all__ = [
    # Types
    "RangeRelation",
    "ScoreMode",
    "SearchSource",
    "SortOrder",
    # Errors
    "ElasticsearchOperationError",
    "InvalidArgumentError",
    # Builders
    "BaseQueryBuilder",
    "BoolQueryBuilder",
    "FuzzyQueryBuilder",
    "NestedQueryBuilder",
    "RangeQueryBuilder",
    "WildcardQueryBuilder",
    "query_builder",
    # Operations
    "BulkOperations",
    "DocumentOperations",
    "IndexOperations",
    "ElasticsearchService",
]
