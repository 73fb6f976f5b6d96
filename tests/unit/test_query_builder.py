"""
Unit tests for the query factory functions.
"""

import pytest

from elastic_wrapper.exceptions import InvalidArgumentError
from elastic_wrapper.utils import query_builder as q
from elastic_wrapper.wrappers import FuzzyQueryBuilder, NestedQueryBuilder, RangeQueryBuilder


class TestBuilderFactories:

    def test_factories_return_builders(self):
        assert isinstance(q.range_query("age"), RangeQueryBuilder)
        assert isinstance(q.fuzzy_query("title", "x"), FuzzyQueryBuilder)
        assert q.bool_query().build() == {"bool": {}}
        assert q.wildcard_query("title", "a*").build() == {"wildcard": {"title": {"value": "a*"}}}

    def test_nested_query_defaults_to_no_scoring(self):
        builder = q.nested_query("appInfo", q.match_all())

        assert isinstance(builder, NestedQueryBuilder)
        assert builder.build()["nested"]["score_mode"] == "none"

    def test_nested_query_score_mode_override(self):
        query = q.nested_query("appInfo", q.match_all(), "avg").build()

        assert query["nested"]["score_mode"] == "avg"

    def test_default_fuzzy_preset(self):
        assert q.default_fuzzy("custName", "Alise").build() == {
            "fuzzy": {
                "custName": {
                    "value": "Alise",
                    "fuzziness": "AUTO",
                    "prefix_length": 2,
                    "max_expansions": 10,
                }
            }
        }


class TestKeywordHelpers:

    def test_keyword_field_appends_suffix_once(self):
        assert q.keyword_field("field1") == "field1.keyword"
        assert q.keyword_field("field1.keyword") == "field1.keyword"

    def test_keyword_term(self):
        assert q.keyword_term("appInfo.custNo", "C001") == {"term": {"appInfo.custNo.keyword": "C001"}}

    def test_keyword_wildcard(self):
        query = q.keyword_wildcard("field1", "*Test*").build()

        assert query == {"wildcard": {"field1.keyword": {"value": "*Test*"}}}

    def test_keyword_field_blank_rejected(self):
        with pytest.raises(InvalidArgumentError):
            q.keyword_field(" ")


class TestPlainQueries:

    def test_term_query(self):
        assert q.term_query("status", "active") == {"term": {"status": "active"}}

    def test_term_query_blank_value_rejected(self):
        with pytest.raises(InvalidArgumentError):
            q.term_query("status", "")

    def test_terms_query(self):
        assert q.terms_query("idNoList", ("ID001", "ID003")) == {"terms": {"idNoList": ["ID001", "ID003"]}}

    @pytest.mark.parametrize("values", [None, []])
    def test_terms_query_requires_values(self, values):
        with pytest.raises(InvalidArgumentError):
            q.terms_query("idNoList", values)

    def test_match_all(self):
        assert q.match_all() == {"match_all": {}}

    def test_terms_aggregation(self):
        assert q.terms_aggregation("field2.keyword") == {"terms": {"field": "field2.keyword"}}
        assert q.terms_aggregation("field2.keyword", size=5) == {"terms": {"field": "field2.keyword", "size": 5}}


class TestDateRanges:

    def test_date_range_uses_datetime_format(self):
        query = q.date_range("createTime").from_("2024-01-01 00:00:00").build()

        assert query["range"]["createTime"] == {
            "format": "yyyy-MM-dd HH:mm:ss",
            "gte": "2024-01-01 00:00:00",
        }

    def test_day_range_uses_date_format(self):
        query = q.day_range("createTime").from_("2024-01-01").to("2024-02-01", False).build()

        assert query["range"]["createTime"] == {
            "format": "yyyy-MM-dd",
            "gte": "2024-01-01",
            "lt": "2024-02-01",
        }


def test_combined_query():
    """Bool query combining every builder kind, as used against the posts index."""
    query = (
        q.bool_query()
        .must(q.keyword_wildcard("field1", "*Test*"))
        .must(q.nested_query("appInfo", q.keyword_term("appInfo.custNo", "C001")).inner_hit("app_hits"))
        .should(q.default_fuzzy("field2", "Valeu1"))
        .filter(q.day_range("createTime").from_("2024-01-01").to("2024-12-31"))
        .build()
    )

    bool_body = query["bool"]
    assert bool_body["must"][0] == {"wildcard": {"field1.keyword": {"value": "*Test*"}}}
    assert bool_body["must"][1]["nested"] == {
        "path": "appInfo",
        "query": {"term": {"appInfo.custNo.keyword": "C001"}},
        "score_mode": "none",
        "inner_hits": {"name": "app_hits"},
    }
    assert bool_body["should"][0]["fuzzy"]["field2"]["fuzziness"] == "AUTO"
    assert bool_body["filter"][0]["range"]["createTime"]["format"] == "yyyy-MM-dd"
