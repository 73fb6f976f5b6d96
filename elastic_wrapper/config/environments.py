"""
Environment configuration management.
"""

import os
from typing import Dict, Any, List, Optional


DEFAULT_SCHEME = "http"
DEFAULT_HOST = "localhost"
DEFAULT_PORT = 9200
DEFAULT_TIMEOUT_MS = 30000


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read ELASTIC_<name>, falling back to ELASTICSEARCH_<name>."""
    return os.getenv(f"ELASTIC_{name}", os.getenv(f"ELASTICSEARCH_{name}", default))


def _env_bool(name: str, default: bool) -> bool:
    value = _env(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


def get_hosts() -> List[str]:
    """
    Resolve the list of Elasticsearch node URLs.

    ELASTIC_HOSTS (comma-separated) wins over ELASTIC_URL, which wins over
    the ELASTIC_SCHEME/ELASTIC_HOST/ELASTIC_PORT triple.

    Returns:
        Non-empty list of node URLs
    """
    hosts = _env("HOSTS")
    if hosts:
        parsed = [host.strip() for host in hosts.split(",") if host.strip()]
        if parsed:
            return parsed

    url = _env("URL")
    if url:
        return [url]

    scheme = _env("SCHEME", DEFAULT_SCHEME)
    host = _env("HOST", DEFAULT_HOST)
    port = int(_env("PORT", str(DEFAULT_PORT)))
    return [f"{scheme}://{host}:{port}"]


def get_environment_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Build configuration from the current environment variables.

    Args:
        environment: Ignored (kept for compatibility)

    Returns:
        Environment configuration dictionary
    """
    return {
        "name": get_current_environment(),
        "elasticsearch": {
            "hosts": get_hosts(),
            "username": _env("USERNAME"),
            "password": _env("PASSWORD"),
            "api_key": _env("API_KEY"),
            "timeout_ms": int(_env("TIMEOUT", str(DEFAULT_TIMEOUT_MS))),
            "verify_certs": _env_bool("VERIFY_CERTS", True),
            "ca_certs": _env("CA_CERTS"),
        },
        "logging": {
            "level": _env("LOG_LEVEL", "INFO"),
        },
        "defaults": {
            "max_results": 10000,
        },
    }


def get_current_environment() -> str:
    """
    Get the current environment name.

    Returns:
        ELASTIC_ENVIRONMENT, or 'default' when unset
    """
    return os.getenv("ELASTIC_ENVIRONMENT", "default")


def get_elasticsearch_config(environment: Optional[str] = None) -> Dict[str, Any]:
    """
    Get Elasticsearch connection configuration.

    Args:
        environment: Ignored (kept for compatibility)

    Returns:
        Elasticsearch configuration dictionary
    """
    return get_environment_config(environment)["elasticsearch"]
