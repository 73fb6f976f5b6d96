"""
Wildcard query builder.
"""

from typing import Any, Dict

from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils.validation import require_text
from elastic_wrapper.wrappers.base import BaseQueryBuilder


class WildcardQueryBuilder(BaseQueryBuilder):
    """
    Builder for ``wildcard`` queries.

    ``*`` matches zero or more characters, ``?`` exactly one. Patterns
    starting with ``*`` are slow on large indices; prefer ``starts_with``
    where possible.
    """

    def __init__(self, field: str, pattern: str) -> None:
        """
        Args:
            field: Field to query, usually a keyword field
            pattern: Pattern containing at least one ``*`` or ``?``

        Raises:
            InvalidArgumentError: If field or pattern is blank, or the
                pattern has no wildcard character
        """
        super().__init__()
        self.validate_field_name(field)
        require_text(pattern, "Wildcard pattern cannot be empty")
        if "*" not in pattern and "?" not in pattern:
            raise InvalidArgumentError("Wildcard pattern must contain '*' or '?'")

        self._field = field
        self._query = {"wildcard": {field: {"value": pattern}}}

    @classmethod
    def starts_with(cls, field: str, prefix: str) -> "WildcardQueryBuilder":
        """Match values starting with ``prefix`` (``prefix*``)."""
        require_text(prefix, "Prefix cannot be empty")
        return cls(field, f"{prefix}*")

    @classmethod
    def ends_with(cls, field: str, suffix: str) -> "WildcardQueryBuilder":
        """Match values ending with ``suffix`` (``*suffix``)."""
        require_text(suffix, "Suffix cannot be empty")
        return cls(field, f"*{suffix}")

    @classmethod
    def contains(cls, field: str, text: str) -> "WildcardQueryBuilder":
        """Match values containing ``text`` (``*text*``)."""
        require_text(text, "Text cannot be empty")
        return cls(field, f"*{text}*")

    def _params(self) -> Dict[str, Any]:
        return self._query["wildcard"][self._field]

    @property
    def pattern(self) -> str:
        return self._params()["value"]

    def rewrite(self, method: str) -> "WildcardQueryBuilder":
        """
        Set the rewrite method, e.g. "constant_score" or "top_terms_10".
        """
        self._params()["rewrite"] = require_text(method, "Rewrite method cannot be empty")
        return self

    def case_insensitive(self, enabled: bool = True) -> "WildcardQueryBuilder":
        self._params()["case_insensitive"] = bool(enabled)
        return self
