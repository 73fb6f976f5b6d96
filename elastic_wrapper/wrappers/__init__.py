"""
Fluent builders for Query DSL objects.
"""

from .base import BaseQueryBuilder, QueryLike, to_query
from .boolean import BoolQueryBuilder
from .fuzzy import FuzzyQueryBuilder
from .nested import NestedQueryBuilder
from .range import RangeQueryBuilder
from .wildcard import WildcardQueryBuilder

__all__ = [
    "BaseQueryBuilder",
    "BoolQueryBuilder",
    "FuzzyQueryBuilder",
    "NestedQueryBuilder",
    "QueryLike",
    "RangeQueryBuilder",
    "WildcardQueryBuilder",
    "to_query",
]
