"""
Shared type definitions for queries and search requests.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union


class SortOrder(str, Enum):
    """Sort order for search requests."""
    ASC = "asc"
    DESC = "desc"


class ScoreMode(str, Enum):
    """How matching nested documents contribute to the parent's score."""
    AVG = "avg"
    MAX = "max"
    MIN = "min"
    NONE = "none"
    SUM = "sum"


class RangeRelation(str, Enum):
    """Relation between a range query and range-typed field values."""
    INTERSECTS = "INTERSECTS"
    CONTAINS = "CONTAINS"
    WITHIN = "WITHIN"


@dataclass
class SearchSource:
    """
    A complete search request: query plus paging, sorting and aggregations.

    ``query`` may be a Query DSL dict or any query builder; builders are
    built when the request is serialized.
    """
    query: Any = field(default_factory=lambda: {"match_all": {}})
    size: Optional[int] = None
    from_: Optional[int] = None
    sort: List[Dict[str, Any]] = field(default_factory=list)
    aggregations: Dict[str, Any] = field(default_factory=dict)
    source: Union[bool, List[str], Dict[str, Any], None] = None
    highlight: Optional[Dict[str, Any]] = None
    track_total_hits: Union[bool, int, None] = None

    def add_sort(self, field_name: str, order: Union[SortOrder, str] = SortOrder.ASC) -> "SearchSource":
        """Append a sort criterion; earlier criteria take precedence."""
        self.sort.append({field_name: {"order": SortOrder(order).value}})
        return self

    def add_aggregation(self, name: str, aggregation: Dict[str, Any]) -> "SearchSource":
        """Register an aggregation under ``name``."""
        self.aggregations[name] = aggregation
        return self

    def _built_query(self) -> Dict[str, Any]:
        build = getattr(self.query, "build", None)
        return build() if callable(build) else self.query

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a search request body."""
        body: Dict[str, Any] = {"query": self._built_query()}

        if self.size is not None:
            body["size"] = self.size
        if self.from_ is not None:
            body["from"] = self.from_
        if self.sort:
            body["sort"] = self.sort
        if self.aggregations:
            body["aggs"] = self.aggregations
        if self.source is not None:
            body["_source"] = self.source
        if self.highlight:
            body["highlight"] = self.highlight
        if self.track_total_hits is not None:
            body["track_total_hits"] = self.track_total_hits

        return body

    def to_kwargs(self) -> Dict[str, Any]:
        """Convert to keyword arguments for Elasticsearch.search()."""
        renames = {"from": "from_", "_source": "source"}
        return {renames.get(key, key): value for key, value in self.to_dict().items()}
