"""
Bool query builder.
"""

from typing import Any, Dict, List, Union

from elastic_wrapper.utils.validation import require_not_none, require_text
from elastic_wrapper.wrappers.base import BaseQueryBuilder, QueryLike, to_query


CLAUSES = ("must", "should", "must_not", "filter")


class BoolQueryBuilder(BaseQueryBuilder):
    """
    Builder for compound ``bool`` queries.

    - must: has to match, contributes to the score (AND)
    - should: contributes to the score (OR)
    - must_not: has to not match, no scoring
    - filter: has to match, no scoring

    Clauses keep insertion order. Empty clause lists are left out of the
    built query.
    """

    def __init__(self) -> None:
        super().__init__()
        self._clauses: Dict[str, List[Dict[str, Any]]] = {clause: [] for clause in CLAUSES}
        self._query = {"bool": {}}

    def _params(self) -> Dict[str, Any]:
        return self._query["bool"]

    def _add(self, clause: str, query: QueryLike) -> "BoolQueryBuilder":
        self._clauses[clause].append(to_query(query))
        return self

    def must(self, query: QueryLike) -> "BoolQueryBuilder":
        return self._add("must", query)

    def should(self, query: QueryLike) -> "BoolQueryBuilder":
        return self._add("should", query)

    def must_not(self, query: QueryLike) -> "BoolQueryBuilder":
        return self._add("must_not", query)

    def filter(self, query: QueryLike) -> "BoolQueryBuilder":
        return self._add("filter", query)

    def minimum_should_match(self, minimum: Union[int, str]) -> "BoolQueryBuilder":
        """
        Minimum number (or percentage, e.g. "75%") of should clauses that must match.
        """
        require_not_none(minimum, "Minimum should match cannot be None")
        if isinstance(minimum, str):
            minimum = require_text(minimum, "Minimum should match cannot be empty").strip()
        self._params()["minimum_should_match"] = minimum
        return self

    def has_clauses(self) -> bool:
        return any(self._clauses.values())

    def build(self) -> Dict[str, Any]:
        params = self._params()
        for clause in CLAUSES:
            if self._clauses[clause]:
                params[clause] = list(self._clauses[clause])
            else:
                params.pop(clause, None)
        return super().build()
