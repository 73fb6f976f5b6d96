"""
Range query builder.
"""

from typing import Any, Dict, Optional, Union

from elastic_wrapper.es_types import RangeRelation
from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils.validation import require_text
from elastic_wrapper.wrappers.base import BaseQueryBuilder


def _non_negative_days(days: int) -> int:
    if days is None or int(days) < 0:
        raise InvalidArgumentError("Days must be a non-negative integer")
    return int(days)


class RangeQueryBuilder(BaseQueryBuilder):
    """
    Builder for ``range`` queries over numbers, dates and strings.

    Example:
        RangeQueryBuilder("age").from_(18, inclusive=True).to(30, inclusive=False).build()
        # {"range": {"age": {"gte": 18, "lt": 30}}}

    Dates accept the cluster's date math ("now", "now-7d"), optionally
    with an explicit ``format`` and ``time_zone``.
    """

    def __init__(
        self,
        field: str,
        from_: Any = None,
        to: Any = None,
        inclusive: bool = True,
    ) -> None:
        """
        Args:
            field: Field to query
            from_: Optional lower bound
            to: Optional upper bound
            inclusive: Whether the bounds given here are inclusive

        Raises:
            InvalidArgumentError: If field is None or blank
        """
        super().__init__()
        self.validate_field_name(field)
        self._field = field
        self._query = {"range": {field: {}}}

        if from_ is not None:
            self.from_(from_, inclusive)
        if to is not None:
            self.to(to, inclusive)

    def _params(self) -> Dict[str, Any]:
        return self._query["range"][self._field]

    def _set_bound(self, key: str, other: str, value: Any) -> "RangeQueryBuilder":
        self.validate_value(value)
        params = self._params()
        params.pop(other, None)
        params[key] = value
        return self

    def from_(self, value: Any, inclusive: bool = True) -> "RangeQueryBuilder":
        """
        Set the lower bound.

        Args:
            value: Lower bound
            inclusive: True for ``gte``, False for ``gt``
        """
        if inclusive:
            return self._set_bound("gte", "gt", value)
        return self._set_bound("gt", "gte", value)

    def to(self, value: Any, inclusive: bool = True) -> "RangeQueryBuilder":
        """
        Set the upper bound.

        Args:
            value: Upper bound
            inclusive: True for ``lte``, False for ``lt``
        """
        if inclusive:
            return self._set_bound("lte", "lt", value)
        return self._set_bound("lt", "lte", value)

    def gt(self, value: Any) -> "RangeQueryBuilder":
        return self.from_(value, inclusive=False)

    def gte(self, value: Any) -> "RangeQueryBuilder":
        return self.from_(value, inclusive=True)

    def lt(self, value: Any) -> "RangeQueryBuilder":
        return self.to(value, inclusive=False)

    def lte(self, value: Any) -> "RangeQueryBuilder":
        return self.to(value, inclusive=True)

    def from_now(self) -> "RangeQueryBuilder":
        return self.from_("now")

    def to_now(self) -> "RangeQueryBuilder":
        return self.to("now")

    def from_days_ago(self, days: int) -> "RangeQueryBuilder":
        """Lower bound ``days`` days before now, e.g. ``from_days_ago(30).to_now()``."""
        return self.from_(f"now-{_non_negative_days(days)}d")

    def to_days_from_now(self, days: int) -> "RangeQueryBuilder":
        """Upper bound ``days`` days after now."""
        return self.to(f"now+{_non_negative_days(days)}d")

    def inclusive(self) -> "RangeQueryBuilder":
        """Make the bounds already set inclusive: [from, to]."""
        params = self._params()
        if "gt" in params:
            params["gte"] = params.pop("gt")
        if "lt" in params:
            params["lte"] = params.pop("lt")
        return self

    def exclusive(self) -> "RangeQueryBuilder":
        """Make the bounds already set exclusive: (from, to)."""
        params = self._params()
        if "gte" in params:
            params["gt"] = params.pop("gte")
        if "lte" in params:
            params["lt"] = params.pop("lte")
        return self

    def format(self, date_format: str) -> "RangeQueryBuilder":
        """
        Set the date format used to parse string bounds.

        Args:
            date_format: Date pattern such as "yyyy-MM-dd"
        """
        self._params()["format"] = require_text(date_format, "Date format cannot be empty")
        return self

    def time_zone(self, time_zone: str) -> "RangeQueryBuilder":
        """
        Set the time zone used to convert date bounds to UTC.

        Args:
            time_zone: Zone id ("UTC", "Asia/Shanghai") or offset ("+08:00")
        """
        self._params()["time_zone"] = require_text(time_zone, "Time zone cannot be empty")
        return self

    def relation(self, relation: Union[RangeRelation, str]) -> "RangeQueryBuilder":
        """
        Set how the range matches range-typed fields.

        Args:
            relation: INTERSECTS (default on the cluster), CONTAINS or WITHIN

        Raises:
            InvalidArgumentError: If relation is blank or unknown
        """
        if isinstance(relation, RangeRelation):
            value = relation.value
        else:
            value = require_text(relation, "Relation cannot be empty").strip().upper()
        try:
            self._params()["relation"] = RangeRelation(value).value
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown range relation '{relation}', expected one of "
                f"{[r.value for r in RangeRelation]}"
            ) from None
        return self

    @property
    def bounds(self) -> Dict[str, Optional[Any]]:
        """Bounds currently set, keyed by gt/gte/lt/lte."""
        params = self._params()
        return {key: params[key] for key in ("gt", "gte", "lt", "lte") if key in params}
