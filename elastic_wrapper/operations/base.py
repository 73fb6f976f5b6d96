"""
Base class for the operation wrappers.
"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Dict, Optional

from elasticsearch import Elasticsearch

from elastic_wrapper.utils.connection import get_elasticsearch_client


class BaseOperations:
    """Holds the Elasticsearch client shared by an operation group."""

    _client: Elasticsearch

    def __init__(self, client: Optional[Elasticsearch] = None) -> None:
        self._client = client if client is not None else get_elasticsearch_client()

    @property
    def client(self) -> Elasticsearch:
        return self._client


def to_source(document: Any) -> Dict[str, Any]:
    """
    Convert a document payload to the dict sent as ``_source``.

    Accepts mappings, dataclass instances and objects with a ``to_dict()``
    method. Values such as datetimes are left to the client's serializer.

    Raises:
        TypeError: If the document cannot be converted
    """
    if isinstance(document, Mapping):
        return dict(document)
    if dataclasses.is_dataclass(document) and not isinstance(document, type):
        return dataclasses.asdict(document)
    to_dict = getattr(document, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Cannot serialize document of type {type(document).__name__}")
