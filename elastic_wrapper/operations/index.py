"""
Index management operations.
"""

from typing import Any, Dict, Optional

from elastic_wrapper.exceptions import operation_errors
from elastic_wrapper.logging import get_logger
from elastic_wrapper.operations.base import BaseOperations


logger = get_logger(__name__)

REINDEX_BATCH_SIZE = 1000


class IndexOperations(BaseOperations):
    """Create, inspect, tune and remove indices."""

    def create_index(
        self,
        index: str,
        mappings: Optional[Dict[str, Any]] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Create an index.

        Args:
            index: Index name
            mappings: Field mappings; not sent when empty
            settings: Index settings (shards, replicas, analyzers); not sent when empty

        Returns:
            Create response with ``acknowledged``
        """
        params: Dict[str, Any] = {}
        if mappings:
            params["mappings"] = mappings
        if settings:
            params["settings"] = settings

        with operation_errors("create_index", index):
            logger.info("Creating index %s", index)
            return self._client.indices.create(index=index, **params)

    def index_exists(self, index: str) -> Any:
        """
        Check whether an index exists.

        Returns:
            Head response, truthy when the index exists
        """
        with operation_errors("index_exists", index):
            return self._client.indices.exists(index=index)

    def delete_index(self, index: str) -> Any:
        with operation_errors("delete_index", index):
            logger.info("Deleting index %s", index)
            return self._client.indices.delete(index=index)

    def update_index_settings(self, index: str, settings: Dict[str, Any]) -> Any:
        """
        Update dynamic settings of an existing index, e.g. number_of_replicas.
        """
        with operation_errors("update_index_settings", index):
            return self._client.indices.put_settings(index=index, settings=settings)

    def get_index(self, index: str) -> Any:
        """
        Get aliases, mappings and settings of an index.
        """
        with operation_errors("get_index", index):
            return self._client.indices.get(index=index)

    def reindex(
        self,
        source_index: str,
        target_index: str,
        mappings: Optional[Dict[str, Any]] = None,
        settings: Optional[Dict[str, Any]] = None,
        batch_size: int = REINDEX_BATCH_SIZE,
    ) -> Any:
        """
        Create ``target_index`` and copy every document of ``source_index`` into it.

        Args:
            source_index: Index to copy from
            target_index: Index to create and copy into
            mappings: Mappings for the new index
            settings: Settings for the new index
            batch_size: Documents per scroll batch

        Returns:
            Reindex response
        """
        target = f"{source_index} -> {target_index}"
        with operation_errors("reindex", target):
            self.create_index(target_index, mappings, settings)
            logger.info("Reindexing %s", target)
            return self._client.reindex(
                source={"index": source_index, "size": batch_size},
                dest={"index": target_index},
            )

    def optimize_index(self, index: str, max_num_segments: int) -> Any:
        """
        Force-merge an index down to at most ``max_num_segments`` segments per shard.
        """
        with operation_errors("optimize_index", index):
            return self._client.indices.forcemerge(index=index, max_num_segments=max_num_segments)

    def refresh_index(self, index: str) -> Any:
        """Make recent changes visible to search."""
        with operation_errors("refresh_index", index):
            return self._client.indices.refresh(index=index)
