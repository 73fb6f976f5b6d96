"""
Elasticsearch connection management.
"""

from typing import Any, Dict, Optional
from elasticsearch import Elasticsearch

from elastic_wrapper.config.environments import get_elasticsearch_config
from elastic_wrapper.logging import get_logger


logger = get_logger(__name__)

_es_client: Optional[Elasticsearch] = None


def build_client_params(config: Dict[str, Any]) -> Dict[str, Any]:
    """
    Translate connection configuration into Elasticsearch constructor arguments.

    Args:
        config: Elasticsearch configuration (see get_elasticsearch_config)

    Returns:
        Keyword arguments for Elasticsearch()
    """
    params = {
        "hosts": list(config["hosts"]),
        "request_timeout": config["timeout_ms"] / 1000.0,
        "verify_certs": config.get("verify_certs", True),
    }

    if config.get("ca_certs"):
        params["ca_certs"] = config["ca_certs"]

    # API key wins over basic auth
    if config.get("api_key"):
        params["api_key"] = config["api_key"]
    elif config.get("username") and config.get("password"):
        params["basic_auth"] = (config["username"], config["password"])

    return params


def get_elasticsearch_client(environment: Optional[str] = None) -> Elasticsearch:
    """
    Get the shared Elasticsearch client, creating it on first use.

    The handle is built once from the environment configuration and reused
    by every operation wrapper afterwards.

    Args:
        environment: Environment name (uses current if not specified)

    Returns:
        Configured Elasticsearch client
    """
    global _es_client

    if _es_client is None:
        config = get_elasticsearch_config(environment)
        logger.info("Connecting to Elasticsearch at %s", ", ".join(config["hosts"]))
        _es_client = Elasticsearch(**build_client_params(config))

    return _es_client


def reset_elasticsearch_client() -> None:
    """Close and forget the shared client so the next call rebuilds it."""
    global _es_client

    if _es_client is not None:
        _es_client.close()
    _es_client = None


def test_connection(client: Optional[Elasticsearch] = None) -> bool:
    """
    Test Elasticsearch connectivity.

    Args:
        client: Client to check (uses the shared client if not specified)

    Returns:
        True if the cluster answered
    """
    try:
        es = client if client is not None else get_elasticsearch_client()
        return bool(es.ping())
    except Exception as e:
        logger.warning("Elasticsearch connection test failed: %s", e)
        return False


# Keep pytest from collecting the helper above as a test
test_connection.__test__ = False
