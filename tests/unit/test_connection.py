"""
Unit tests for client construction and caching.
"""

from unittest.mock import Mock, patch

from elastic_wrapper.utils import connection
from elastic_wrapper.utils.connection import (
    build_client_params,
    get_elasticsearch_client,
    reset_elasticsearch_client,
    test_connection as check_connection,
)


BASE_CONFIG = {
    "hosts": ["http://localhost:9200"],
    "username": None,
    "password": None,
    "api_key": None,
    "timeout_ms": 30000,
    "verify_certs": True,
    "ca_certs": None,
}


class TestBuildClientParams:

    def test_minimal(self):
        assert build_client_params(BASE_CONFIG) == {
            "hosts": ["http://localhost:9200"],
            "request_timeout": 30.0,
            "verify_certs": True,
        }

    def test_basic_auth_and_ca(self):
        config = dict(BASE_CONFIG, username="elastic", password="changeme", ca_certs="/ca.pem")
        params = build_client_params(config)

        assert params["basic_auth"] == ("elastic", "changeme")
        assert params["ca_certs"] == "/ca.pem"

    def test_api_key_wins_over_basic_auth(self):
        config = dict(BASE_CONFIG, username="elastic", password="changeme", api_key="abc==")
        params = build_client_params(config)

        assert params["api_key"] == "abc=="
        assert "basic_auth" not in params

    def test_username_without_password_ignored(self):
        assert "basic_auth" not in build_client_params(dict(BASE_CONFIG, username="elastic"))


class TestClientCache:

    def test_client_created_once(self, clean_env):
        clean_env.setenv("ELASTIC_URL", "http://es:9200")
        with patch("elastic_wrapper.utils.connection.Elasticsearch") as es_class:
            first = get_elasticsearch_client()
            second = get_elasticsearch_client()

        assert first is second
        es_class.assert_called_once_with(
            hosts=["http://es:9200"],
            request_timeout=30.0,
            verify_certs=True,
        )

    def test_reset_closes_and_rebuilds(self, clean_env):
        with patch("elastic_wrapper.utils.connection.Elasticsearch") as es_class:
            es_class.side_effect = [Mock(), Mock()]
            first = get_elasticsearch_client()
            reset_elasticsearch_client()
            second = get_elasticsearch_client()

        first.close.assert_called_once()
        assert first is not second
        assert es_class.call_count == 2

    def test_reset_without_client(self):
        reset_elasticsearch_client()

        assert connection._es_client is None


class TestConnectionCheck:

    def test_ping_true(self, mock_elasticsearch):
        assert check_connection(mock_elasticsearch) is True

    def test_ping_false(self, mock_elasticsearch):
        mock_elasticsearch.ping.return_value = False

        assert check_connection(mock_elasticsearch) is False

    def test_ping_error_reported_as_unreachable(self, mock_elasticsearch):
        mock_elasticsearch.ping.side_effect = ConnectionError("refused")

        assert check_connection(mock_elasticsearch) is False

    def test_uses_shared_client(self, mock_elasticsearch):
        with patch("elastic_wrapper.utils.connection.get_elasticsearch_client", return_value=mock_elasticsearch):
            assert check_connection() is True
