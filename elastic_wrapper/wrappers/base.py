"""
Base class shared by the fluent query builders.
"""

import copy
from typing import Any, Dict, Optional, TypeVar, Union

from elastic_wrapper.logging import get_logger
from elastic_wrapper.utils import validation


logger = get_logger(__name__)

B = TypeVar("B", bound="BaseQueryBuilder")


class BaseQueryBuilder:
    """
    Fluent builder around one Query DSL object.

    Subclasses own the query dict in ``self._query`` and point
    ``_params()`` at the object that receives ``boost`` and ``_name``:
    the per-field parameter object for field-level queries, the query body
    for compound queries. ``build()`` returns a deep copy, so a built query
    is not affected by later calls on the builder.
    """

    def __init__(self) -> None:
        self._query: Dict[str, Any] = {}
        self._boost: Optional[float] = None
        self._name: Optional[str] = None

    def boost(self: B, boost: float) -> B:
        """
        Set the relevance boost of this query.

        Args:
            boost: Multiplier applied to the query's score contribution
        """
        self._boost = float(validation.require_not_none(boost, "Boost cannot be None"))
        return self

    def name(self: B, name: str) -> B:
        """
        Name this query so matching hits report it in ``matched_queries``.

        Args:
            name: Query name
        """
        self._name = validation.require_text(name, "Query name cannot be empty")
        return self

    def _params(self) -> Dict[str, Any]:
        raise NotImplementedError

    def build(self) -> Dict[str, Any]:
        """
        Apply boost and name and return the finished Query DSL dict.

        Returns:
            Query DSL dict
        """
        params = self._params()
        if self._boost is not None:
            params["boost"] = self._boost
        if self._name is not None:
            params["_name"] = self._name

        query = copy.deepcopy(self._query)
        logger.debug("Built query: %s", query)
        return query

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._query!r})"

    # Validators shared by the builders

    validate_field_name = staticmethod(validation.validate_field_name)
    validate_value = staticmethod(validation.validate_value)
    validate_path = staticmethod(validation.validate_path)
    validate_query = staticmethod(validation.validate_query)


QueryLike = Union[BaseQueryBuilder, Dict[str, Any]]


def to_query(query: QueryLike) -> Dict[str, Any]:
    """
    Normalize a builder or a Query DSL dict to a dict.

    Raises:
        InvalidArgumentError: If query is None
    """
    validation.validate_query(query)
    if isinstance(query, BaseQueryBuilder):
        return query.build()
    return query
