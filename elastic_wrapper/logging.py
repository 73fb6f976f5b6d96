"""Logging configuration for elastic-wrapper.
"""

import logging
import sys
from enum import Enum
from typing import Optional, TextIO, Union


class LogLevel(str, Enum):
    """Logging level enumeration."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def setup_logging(
    level: Union[str, LogLevel] = LogLevel.INFO,
    format_string: Optional[str] = None,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """Configure logging for the library and the MCP server.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL) as string or LogLevel enum
        format_string: Custom format string (optional)
        include_timestamp: Whether to include timestamps in logs
        stream: Output stream, stdout when not given

    Returns:
        Configured logger instance

    """
    level_str = level.value if isinstance(level, LogLevel) else str(level).upper()
    numeric_level = getattr(logging, level_str, logging.INFO)

    if format_string is None:
        if include_timestamp:
            format_string = "%(asctime)s  %(name)s  %(levelname)s  %(message)s"
        else:
            format_string = "%(name)s  %(levelname)s  %(message)s"

    logging.basicConfig(
        level=numeric_level,
        format=format_string,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=stream if stream is not None else sys.stdout,
        force=True,
    )

    return logging.getLogger("elastic_wrapper")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for a specific module.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance

    """
    return logging.getLogger(name)
