"""
Operation wrappers over the Elasticsearch client.
"""

from .base import BaseOperations, to_source
from .bulk import BulkOperations
from .document import DocumentOperations
from .index import IndexOperations

__all__ = [
    "BaseOperations",
    "BulkOperations",
    "DocumentOperations",
    "IndexOperations",
    "to_source",
]
