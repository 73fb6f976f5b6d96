"""
Query building utilities for Elasticsearch.

One-line factories for the fluent builders plus a few plain Query DSL
helpers. Everything here is side-effect free.
"""

from typing import Any, Dict, Iterable, Optional, Union

from elastic_wrapper.es_types import ScoreMode
from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils.validation import (
    require_not_none,
    validate_field_name,
    validate_value,
)
from elastic_wrapper.wrappers import (
    BoolQueryBuilder,
    FuzzyQueryBuilder,
    NestedQueryBuilder,
    QueryLike,
    RangeQueryBuilder,
    WildcardQueryBuilder,
)
from elastic_wrapper.wrappers.fuzzy import AUTO


DATETIME_FORMAT = "yyyy-MM-dd HH:mm:ss"
DATE_FORMAT = "yyyy-MM-dd"

KEYWORD_SUFFIX = ".keyword"


def range_query(field: str) -> RangeQueryBuilder:
    """
    Start a range query.

    Example:
        range_query("age").from_(18, True).to(30, False).build()
    """
    return RangeQueryBuilder(field)


def fuzzy_query(field: str, value: Any) -> FuzzyQueryBuilder:
    return FuzzyQueryBuilder(field, value)


def wildcard_query(field: str, pattern: str) -> WildcardQueryBuilder:
    """
    Start a wildcard query, e.g. ``wildcard_query("title", "intro*")``.
    """
    return WildcardQueryBuilder(field, pattern)


def nested_query(
    path: str,
    query: QueryLike,
    score_mode: Union[ScoreMode, str] = ScoreMode.NONE,
) -> NestedQueryBuilder:
    """
    Start a nested query.

    Args:
        path: Nested field path
        query: Query run against the nested documents
        score_mode: Score mode, none (no scoring) by default

    Returns:
        NestedQueryBuilder
    """
    return NestedQueryBuilder(path, query, score_mode)


def bool_query() -> BoolQueryBuilder:
    return BoolQueryBuilder()


def keyword_field(field: str) -> str:
    """
    Name of the exact-match keyword sub-field of a text field.

    Args:
        field: Field name, with or without the ".keyword" suffix

    Returns:
        Field name ending in ".keyword"
    """
    validate_field_name(field)
    if field.endswith(KEYWORD_SUFFIX):
        return field
    return f"{field}{KEYWORD_SUFFIX}"


def term_query(field: str, value: Any) -> Dict[str, Any]:
    """
    Build a term query for exact matching.

    Args:
        field: Field name
        value: Value to match, not analyzed

    Returns:
        Term query dict
    """
    validate_field_name(field)
    validate_value(value)
    return {"term": {field: value}}


def keyword_term(field: str, value: Any) -> Dict[str, Any]:
    """Exact match on the keyword sub-field of ``field``."""
    return term_query(keyword_field(field), value)


def terms_query(field: str, values: Iterable[Any]) -> Dict[str, Any]:
    """
    Build a terms query matching any of ``values``.
    """
    validate_field_name(field)
    values = list(require_not_none(values, "Values cannot be None"))
    if not values:
        raise InvalidArgumentError("Values cannot be empty")
    return {"terms": {field: values}}


def keyword_wildcard(field: str, pattern: str) -> WildcardQueryBuilder:
    """
    Wildcard query on the keyword sub-field of ``field``.

    Example:
        keyword_wildcard("email", "*@gmail.com")
    """
    return wildcard_query(keyword_field(field), pattern)


def date_range(field: str, date_format: str = DATETIME_FORMAT) -> RangeQueryBuilder:
    """
    Range query on a date field with an explicit format.

    Args:
        field: Date field name
        date_format: Date pattern, "yyyy-MM-dd HH:mm:ss" by default

    Returns:
        RangeQueryBuilder with the format set
    """
    return range_query(field).format(date_format)


def day_range(field: str) -> RangeQueryBuilder:
    """Range query on a date field using the "yyyy-MM-dd" format."""
    return date_range(field, DATE_FORMAT)


def default_fuzzy(field: str, value: Any) -> FuzzyQueryBuilder:
    """
    Fuzzy query with automatic fuzziness, prefix length 2 and 10 max expansions.
    """
    return (
        fuzzy_query(field, value)
        .fuzziness(AUTO)
        .prefix_length(2)
        .max_expansions(10)
    )


def match_all() -> Dict[str, Any]:
    return {"match_all": {}}


def terms_aggregation(field: str, size: Optional[int] = None) -> Dict[str, Any]:
    """
    Build a terms aggregation over ``field``.

    Args:
        field: Field to bucket on, usually a keyword field
        size: Number of buckets to return (cluster default when None)

    Returns:
        Aggregation dict to register with SearchSource.add_aggregation
    """
    validate_field_name(field)
    terms: Dict[str, Any] = {"field": field}
    if size is not None:
        terms["size"] = size
    return {"terms": terms}
