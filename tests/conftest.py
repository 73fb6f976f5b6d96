"""
Pytest configuration and fixtures for elastic-wrapper tests.
"""

import os
import sys
from unittest.mock import Mock, patch

import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(__file__))
sys.path.insert(0, project_root)

from elastic_wrapper.utils import connection  # noqa: E402


TEST_INDEX = "es-index.posts"

ENV_PREFIXES = ("ELASTIC_", "ELASTICSEARCH_")


@pytest.fixture
def mock_elasticsearch():
    """Mock Elasticsearch client returning realistic responses."""
    mock_es = Mock()

    mock_es.ping.return_value = True

    mock_es.index.return_value = {
        "_index": TEST_INDEX,
        "_id": "doc1",
        "_version": 1,
        "result": "created",
    }
    mock_es.update.return_value = {"_index": TEST_INDEX, "_id": "doc1", "result": "updated"}
    mock_es.delete.return_value = {"_index": TEST_INDEX, "_id": "doc1", "result": "deleted"}
    mock_es.get.return_value = {
        "_index": TEST_INDEX,
        "_id": "doc1",
        "found": True,
        "_source": {"field1": "Test Document 1", "field2": "Value1"},
    }
    mock_es.mget.return_value = {
        "docs": [
            {"_index": TEST_INDEX, "_id": "doc1", "found": True, "_source": {"field1": "Test Document 1"}},
            {"_index": TEST_INDEX, "_id": "missing", "found": False},
        ]
    }

    mock_es.search.return_value = {
        "took": 3,
        "timed_out": False,
        "hits": {
            "total": {"value": 2, "relation": "eq"},
            "hits": [
                {
                    "_index": TEST_INDEX,
                    "_id": "doc1",
                    "_score": 1.0,
                    "_source": {"field1": "Test Document 1", "field2": "Value1"},
                    "inner_hits": {
                        "app_hits": {
                            "hits": {
                                "total": {"value": 1, "relation": "eq"},
                                "hits": [
                                    {"_nested": {"field": "appInfo", "offset": 0},
                                     "_source": {"contNo": "CN001", "custName": "Alice", "custNo": "C001"}}
                                ],
                            }
                        }
                    },
                },
                {
                    "_index": TEST_INDEX,
                    "_id": "doc2",
                    "_score": 0.5,
                    "_source": {"field1": "Test Document 2", "field2": "Value2"},
                },
            ],
        },
        "aggregations": {
            "by_field2": {
                "buckets": [
                    {"key": "Value1", "doc_count": 1},
                    {"key": "Value2", "doc_count": 1},
                ]
            }
        },
    }

    mock_es.bulk.return_value = {
        "took": 7,
        "errors": True,
        "items": [
            {"index": {"_index": TEST_INDEX, "_id": "a1", "status": 201, "result": "created"}},
            {"index": {
                "_index": TEST_INDEX,
                "_id": "a2",
                "status": 400,
                "error": {"type": "mapper_parsing_exception", "reason": "failed to parse field [createTime]"},
            }},
        ],
    }

    mock_es.reindex.return_value = {"took": 12, "total": 2, "created": 2, "failures": []}

    mock_es.indices.create.return_value = {"acknowledged": True, "index": TEST_INDEX}
    mock_es.indices.exists.return_value = True
    mock_es.indices.delete.return_value = {"acknowledged": True}
    mock_es.indices.put_settings.return_value = {"acknowledged": True}
    mock_es.indices.get.return_value = {TEST_INDEX: {"aliases": {}, "mappings": {}, "settings": {}}}
    mock_es.indices.forcemerge.return_value = {"_shards": {"total": 1, "successful": 1, "failed": 0}}
    mock_es.indices.refresh.return_value = {"_shards": {"total": 1, "successful": 1, "failed": 0}}

    return mock_es


@pytest.fixture
def mock_es_client(mock_elasticsearch):
    """Patch the shared client lookup used by operations created without a client."""
    with patch("elastic_wrapper.operations.base.get_elasticsearch_client", return_value=mock_elasticsearch), \
         patch("elastic_wrapper.service.get_elasticsearch_client", return_value=mock_elasticsearch):
        yield mock_elasticsearch


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every ELASTIC_* / ELASTICSEARCH_* variable for the test."""
    for name in list(os.environ):
        if name.startswith(ENV_PREFIXES):
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_client_cache():
    """Make sure no test leaks a cached client into the next one."""
    connection._es_client = None
    yield
    connection._es_client = None


@pytest.fixture
def sample_documents():
    """Documents shaped like the posts index: a nested appInfo list plus flat fields."""
    return [
        {
            "appInfo": [
                {"contNo": "CN001", "custName": "Alice", "custNo": "C001"},
                {"contNo": "CN002", "custName": "Bob", "custNo": "C002"},
            ],
            "field1": "Test Document 1",
            "field2": "Value1",
            "idNoList": ["ID001", "ID002"],
            "createTime": "2024-01-15 10:30:00",
        },
        {
            "appInfo": [
                {"contNo": "CN003", "custName": "Carol", "custNo": "C003"},
            ],
            "field1": "Test Document 2",
            "field2": "Value2",
            "idNoList": ["ID003"],
            "createTime": "2024-02-20 08:00:00",
        },
    ]


@pytest.fixture
def posts_mappings():
    """Mappings for the posts index with appInfo as a nested field."""
    return {
        "properties": {
            "appInfo": {
                "type": "nested",
                "properties": {
                    "contNo": {"type": "keyword"},
                    "custName": {"type": "text", "fields": {"keyword": {"type": "keyword"}}},
                    "custNo": {"type": "keyword"},
                },
            },
            "field1": {"type": "text", "fields": {"keyword": {"type": "keyword"}}},
            "field2": {"type": "text", "fields": {"keyword": {"type": "keyword"}}},
            "idNoList": {"type": "keyword"},
            "createTime": {"type": "date", "format": "yyyy-MM-dd HH:mm:ss"},
        }
    }
