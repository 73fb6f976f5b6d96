"""
Nested query builder.
"""

from typing import Any, Dict, Optional, Union

from elastic_wrapper.es_types import ScoreMode
from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils.validation import require_not_none, require_text
from elastic_wrapper.wrappers.base import BaseQueryBuilder, QueryLike, to_query


class NestedQueryBuilder(BaseQueryBuilder):
    """
    Builder for ``nested`` queries over sub-documents indexed as nested objects.

    Example:
        NestedQueryBuilder("appInfo", term_query("appInfo.custNo.keyword", "C001"))
            .score_mode(ScoreMode.NONE)
            .inner_hit("app_hits")
            .build()

    ``inner_hit`` asks the cluster to report which nested documents matched,
    under the given name in each hit's ``inner_hits``.
    """

    def __init__(
        self,
        path: str,
        query: QueryLike,
        score_mode: Optional[Union[ScoreMode, str]] = None,
    ) -> None:
        """
        Args:
            path: Path of the nested field, e.g. "appInfo"
            query: Query run against each nested document
            score_mode: Optional score mode; the cluster defaults to avg

        Raises:
            InvalidArgumentError: If path is blank or query is None
        """
        super().__init__()
        self.validate_path(path)
        self.validate_query(query)
        self._query = {"nested": {"path": path, "query": to_query(query)}}
        if score_mode is not None:
            self.score_mode(score_mode)

    def _params(self) -> Dict[str, Any]:
        return self._query["nested"]

    def score_mode(self, score_mode: Union[ScoreMode, str]) -> "NestedQueryBuilder":
        """
        Set how nested matches score the parent document.

        Args:
            score_mode: avg, max, min, none or sum
        """
        require_not_none(score_mode, "Score mode cannot be None")
        try:
            mode = ScoreMode(score_mode.lower() if isinstance(score_mode, str) else score_mode)
        except ValueError:
            raise InvalidArgumentError(f"Unknown score mode '{score_mode}'") from None
        self._params()["score_mode"] = mode.value
        return self

    def inner_hit(self, name: str) -> "NestedQueryBuilder":
        """
        Request inner hits under ``name``.

        Raises:
            InvalidArgumentError: If name is blank
        """
        require_text(name, "Inner hit name cannot be empty")
        self._params()["inner_hits"] = {"name": name}
        return self

    def inner_hits(self, options: Dict[str, Any]) -> "NestedQueryBuilder":
        """
        Request inner hits with a full inner_hits body (name, size, _source, sort...).

        Raises:
            InvalidArgumentError: If options is None
        """
        require_not_none(options, "Inner hits options cannot be None")
        self._params()["inner_hits"] = dict(options)
        return self

    def ignore_unmapped(self, enabled: bool = True) -> "NestedQueryBuilder":
        """Match nothing instead of failing when the path is not mapped."""
        self._params()["ignore_unmapped"] = bool(enabled)
        return self
