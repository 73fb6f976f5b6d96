"""
Bulk document operations.
"""

from typing import Any, Dict, List, Mapping

from elastic_wrapper.exceptions import operation_errors
from elastic_wrapper.logging import get_logger
from elastic_wrapper.operations.base import BaseOperations, to_source


logger = get_logger(__name__)


class BulkOperations(BaseOperations):
    """
    Index, update or delete many documents in one bulk request.

    The request fails as a whole only on transport or request-level
    errors. Per-item failures are reported in the returned response; see
    ``utils.response_parser.parse_bulk_failures``.
    """

    def _bulk(self, action: str, index: str, operations: List[Dict[str, Any]]) -> Any:
        logger.debug("Bulk %s on %s: %d lines", action, index, len(operations))
        return self._client.bulk(operations=operations)

    def bulk_index(self, index: str, documents: List[Any]) -> Any:
        """
        Index documents with cluster-generated ids.

        Args:
            index: Target index
            documents: Document payloads

        Returns:
            Bulk response
        """
        with operation_errors("bulk_index", index):
            operations: List[Dict[str, Any]] = []
            for document in documents:
                operations.append({"index": {"_index": index}})
                operations.append(to_source(document))
            return self._bulk("index", index, operations)

    def bulk_update(self, index: str, documents: Mapping[str, Any]) -> Any:
        """
        Partially update documents, creating those that do not exist.

        Args:
            index: Target index
            documents: Mapping of document id to fields to merge

        Returns:
            Bulk response
        """
        with operation_errors("bulk_update", index):
            operations: List[Dict[str, Any]] = []
            for doc_id, document in documents.items():
                operations.append({"update": {"_index": index, "_id": doc_id}})
                operations.append({"doc": to_source(document), "doc_as_upsert": True})
            return self._bulk("update", index, operations)

    def bulk_delete(self, index: str, ids: List[str]) -> Any:
        """
        Delete documents by id.

        Returns:
            Bulk response
        """
        with operation_errors("bulk_delete", index):
            operations = [{"delete": {"_index": index, "_id": doc_id}} for doc_id in ids]
            return self._bulk("delete", index, operations)
