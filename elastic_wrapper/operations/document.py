"""
Single-document operations and search.
"""

from typing import Any, List, Optional

from elastic_wrapper.es_types import SearchSource
from elastic_wrapper.exceptions import operation_errors
from elastic_wrapper.logging import get_logger
from elastic_wrapper.operations.base import BaseOperations, to_source
from elastic_wrapper.wrappers.base import QueryLike, to_query


logger = get_logger(__name__)


class DocumentOperations(BaseOperations):
    """
    Index, update, delete, fetch and search documents.

    Every method returns the client's response unchanged and raises
    ElasticsearchOperationError if the client call fails.
    """

    def index(self, index: str, document: Any, id: Optional[str] = None) -> Any:
        """
        Index a document.

        Args:
            index: Target index
            document: Document payload
            id: Document id; generated by the cluster when omitted

        Returns:
            Index response; the document id is in ``response["_id"]``
        """
        with operation_errors("index", index):
            source = to_source(document)
            if id is None:
                return self._client.index(index=index, document=source)
            return self._client.index(index=index, id=id, document=source)

    def update(self, index: str, id: str, document: Any) -> Any:
        """
        Partially update a document, creating it if it does not exist.

        Args:
            index: Target index
            id: Document id
            document: Fields to merge into the stored document

        Returns:
            Update response
        """
        with operation_errors("update", index):
            return self._client.update(
                index=index,
                id=id,
                doc=to_source(document),
                doc_as_upsert=True,
            )

    def delete(self, index: str, id: str) -> Any:
        with operation_errors("delete", index):
            return self._client.delete(index=index, id=id)

    def get(self, index: str, id: str) -> Any:
        """
        Fetch one document by id.

        Returns:
            Get response with ``found`` and ``_source``
        """
        with operation_errors("get", index):
            return self._client.get(index=index, id=id)

    def multi_get(self, index: str, ids: List[str]) -> Any:
        """
        Fetch several documents from one index in a single request.

        Returns:
            Multi-get response with one entry per id under ``docs``
        """
        with operation_errors("multi_get", index):
            return self._client.mget(index=index, ids=list(ids))

    def search(self, index: str, query: QueryLike) -> Any:
        """
        Search with a query and the cluster's default paging.

        Args:
            index: Index or index pattern
            query: Query builder or Query DSL dict

        Returns:
            Search response
        """
        built = to_query(query)
        with operation_errors("search", index):
            logger.debug("Search on %s: %s", index, built)
            return self._client.search(index=index, query=built)

    def search_source(self, index: str, source: SearchSource) -> Any:
        """
        Search with a full request: query, paging, sorting, aggregations.

        Args:
            index: Index or index pattern
            source: Search request description

        Returns:
            Search response
        """
        with operation_errors("search", index):
            logger.debug("Search on %s: %s", index, source.to_dict())
            return self._client.search(index=index, **source.to_kwargs())
