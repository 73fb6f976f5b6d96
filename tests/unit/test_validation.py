"""
Unit tests for input validation helpers.
"""

import pytest

from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils.validation import (
    clamp_value,
    is_blank,
    require_not_none,
    require_text,
    validate_index_name,
    validate_size,
    validate_value,
)


class TestArgumentChecks:

    @pytest.mark.parametrize("value, expected", [
        (None, True), ("", True), ("  \t", True), ("a", False), (0, False), ([], False),
    ])
    def test_is_blank(self, value, expected):
        assert is_blank(value) is expected

    def test_require_text_returns_value(self):
        assert require_text("posts", "msg") == "posts"

    def test_require_text_uses_message(self):
        with pytest.raises(InvalidArgumentError, match="Name required"):
            require_text("", "Name required")

    def test_require_not_none_accepts_falsy(self):
        assert require_not_none(0, "msg") == 0

    def test_validate_value_accepts_numbers(self):
        assert validate_value(0) == 0
        assert validate_value(False) is False


class TestIndexName:

    @pytest.mark.parametrize("index", ["posts", "es-index.posts", "logs-*", "app_logs-2024.01"])
    def test_valid_names(self, index):
        validate_index_name(index)

    @pytest.mark.parametrize("index", [
        "", " ", None, "_internal", "-posts", "+posts",
        "my index", "a/b", "a\\b", 'a"b', "a<b", "a>b", "a|b", "a,b", "a#b", "a:b",
    ])
    def test_invalid_names(self, index):
        with pytest.raises(InvalidArgumentError):
            validate_index_name(index)


class TestSizes:

    def test_validate_size_clamps(self):
        assert validate_size(50) == 50
        assert validate_size(-5) == 0
        assert validate_size(20000) == 10000
        assert validate_size(500, max_size=100) == 100

    def test_clamp_value(self):
        assert clamp_value(5, 1, 10) == 5
        assert clamp_value(0, 1, 10) == 1
        assert clamp_value(11, 1, 10) == 10
