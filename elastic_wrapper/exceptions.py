"""
Error types raised by the query builders and the operation wrappers.
"""

from contextlib import contextmanager
from typing import Iterator

from elastic_wrapper.logging import get_logger


logger = get_logger(__name__)


class InvalidArgumentError(ValueError):
    """A required builder argument was None or blank."""


class ElasticsearchOperationError(Exception):
    """
    An Elasticsearch client call failed.

    Every operation wrapper raises this single error type, whatever the
    underlying failure was (transport error, serialization error, rejection
    by the cluster). The caught exception is kept on ``cause`` and as
    ``__cause__``.
    """

    def __init__(self, operation: str, target: str, cause: BaseException):
        self.operation = operation
        self.target = target
        self.cause = cause
        super().__init__(f"{operation} failed for '{target}': {cause}")


@contextmanager
def operation_errors(operation: str, target: str) -> Iterator[None]:
    """
    Translate any exception raised in the block into ElasticsearchOperationError.

    An ElasticsearchOperationError raised by a nested operation is re-raised
    unchanged.

    Args:
        operation: Operation kind, e.g. "index" or "create_index"
        target: Index (or index pair) the operation was aimed at

    Raises:
        ElasticsearchOperationError: If the block raises
    """
    try:
        yield
    except ElasticsearchOperationError:
        raise
    except Exception as e:
        logger.error("%s failed for '%s': %s: %s", operation, target, type(e).__name__, e)
        raise ElasticsearchOperationError(operation, target, e) from e
