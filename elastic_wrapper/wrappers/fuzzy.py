"""
Fuzzy query builder.
"""

import re
from typing import Any, Dict, Union

from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils.validation import require_not_none
from elastic_wrapper.wrappers.base import BaseQueryBuilder


AUTO = "AUTO"

_AUTO_PATTERN = re.compile(r"^AUTO(:\d+,\d+)?$")


class FuzzyQueryBuilder(BaseQueryBuilder):
    """
    Builder for ``fuzzy`` queries, matching terms within an edit distance.

    Example:
        FuzzyQueryBuilder("title", "elasticsarch").fuzziness(2).prefix_length(3).build()
    """

    def __init__(self, field: str, value: Any) -> None:
        """
        Args:
            field: Field to query
            value: Term to match approximately

        Raises:
            InvalidArgumentError: If field is blank or value is None
        """
        super().__init__()
        self.validate_field_name(field)
        self.validate_value(value)
        self._field = field
        self._query = {"fuzzy": {field: {"value": value}}}

    def _params(self) -> Dict[str, Any]:
        return self._query["fuzzy"][self._field]

    def fuzziness(self, fuzziness: Union[str, int]) -> "FuzzyQueryBuilder":
        """
        Set the maximum edit distance.

        Args:
            fuzziness: "AUTO", "AUTO:low,high", or 0, 1, 2
        """
        if fuzziness is None:
            raise InvalidArgumentError("Fuzziness cannot be None")

        if isinstance(fuzziness, str):
            value = fuzziness.strip()
            if value.isdigit():
                value = int(value)
            elif not _AUTO_PATTERN.match(value.upper()):
                raise InvalidArgumentError(f"Invalid fuzziness '{fuzziness}'")
            else:
                value = value.upper()
        elif isinstance(fuzziness, bool):
            raise InvalidArgumentError("Fuzziness must be \"AUTO\" or an edit distance, not a boolean")
        else:
            value = fuzziness

        if isinstance(value, int) and not 0 <= value <= 2:
            raise InvalidArgumentError("Fuzziness must be between 0 and 2")

        self._params()["fuzziness"] = value
        return self

    def prefix_length(self, prefix_length: int) -> "FuzzyQueryBuilder":
        """Number of leading characters that must match exactly."""
        require_not_none(prefix_length, "Prefix length cannot be None")
        if prefix_length < 0:
            raise InvalidArgumentError("Prefix length cannot be negative")
        self._params()["prefix_length"] = prefix_length
        return self

    def max_expansions(self, max_expansions: int) -> "FuzzyQueryBuilder":
        """Maximum number of term variations the query expands to."""
        require_not_none(max_expansions, "Max expansions cannot be None")
        if max_expansions <= 0:
            raise InvalidArgumentError("Max expansions must be greater than 0")
        self._params()["max_expansions"] = max_expansions
        return self

    def transpositions(self, enabled: bool = True) -> "FuzzyQueryBuilder":
        """Count swapping two adjacent characters as a single edit."""
        self._params()["transpositions"] = bool(enabled)
        return self
