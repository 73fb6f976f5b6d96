"""
Configuration management for elastic-wrapper.
"""

from .environments import (
    get_current_environment,
    get_elasticsearch_config,
    get_environment_config,
    get_hosts,
)

__all__ = [
    "get_current_environment",
    "get_elasticsearch_config",
    "get_environment_config",
    "get_hosts",
]
