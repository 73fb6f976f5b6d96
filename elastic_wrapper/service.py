"""
Single entry point over the document, index and bulk operations.
"""

from typing import Any, Dict, List, Mapping, Optional

from elasticsearch import Elasticsearch

from elastic_wrapper.es_types import SearchSource
from elastic_wrapper.operations import BulkOperations, DocumentOperations, IndexOperations
from elastic_wrapper.operations.index import REINDEX_BATCH_SIZE
from elastic_wrapper.utils.connection import get_elasticsearch_client
from elastic_wrapper.wrappers.base import QueryLike


class ElasticsearchService:
    """
    Facade grouping DocumentOperations, IndexOperations and BulkOperations.

    Every method delegates to one operation wrapper with the same
    signature, returns the client's response unchanged and raises
    ElasticsearchOperationError on failure.

    Example:
        service = ElasticsearchService()
        service.create_index("posts", mappings={"properties": {"appInfo": {"type": "nested"}}})
        service.index("posts", {"field1": "Test Document"}, id="doc1")
        service.search("posts", keyword_term("field1", "Test Document"))
    """

    def __init__(self, client: Optional[Elasticsearch] = None) -> None:
        client = client if client is not None else get_elasticsearch_client()
        self.documents = DocumentOperations(client)
        self.indices = IndexOperations(client)
        self.bulk = BulkOperations(client)

    # ========== DOCUMENTS ==========

    def index(self, index: str, document: Any, id: Optional[str] = None) -> Any:
        return self.documents.index(index, document, id)

    def update(self, index: str, id: str, document: Any) -> Any:
        return self.documents.update(index, id, document)

    def delete(self, index: str, id: str) -> Any:
        return self.documents.delete(index, id)

    def get(self, index: str, id: str) -> Any:
        return self.documents.get(index, id)

    def multi_get(self, index: str, ids: List[str]) -> Any:
        return self.documents.multi_get(index, ids)

    def search(self, index: str, query: QueryLike) -> Any:
        return self.documents.search(index, query)

    def search_source(self, index: str, source: SearchSource) -> Any:
        return self.documents.search_source(index, source)

    # ========== INDICES ==========

    def create_index(
        self,
        index: str,
        mappings: Optional[Dict[str, Any]] = None,
        settings: Optional[Dict[str, Any]] = None,
    ) -> Any:
        return self.indices.create_index(index, mappings, settings)

    def delete_index(self, index: str) -> Any:
        return self.indices.delete_index(index)

    def index_exists(self, index: str) -> Any:
        return self.indices.index_exists(index)

    def get_index(self, index: str) -> Any:
        return self.indices.get_index(index)

    def update_index_settings(self, index: str, settings: Dict[str, Any]) -> Any:
        return self.indices.update_index_settings(index, settings)

    def reindex(
        self,
        source_index: str,
        target_index: str,
        mappings: Optional[Dict[str, Any]] = None,
        settings: Optional[Dict[str, Any]] = None,
        batch_size: int = REINDEX_BATCH_SIZE,
    ) -> Any:
        return self.indices.reindex(source_index, target_index, mappings, settings, batch_size)

    def optimize_index(self, index: str, max_num_segments: int) -> Any:
        return self.indices.optimize_index(index, max_num_segments)

    def refresh_index(self, index: str) -> Any:
        return self.indices.refresh_index(index)

    # ========== BULK ==========

    def bulk_index(self, index: str, documents: List[Any]) -> Any:
        return self.bulk.bulk_index(index, documents)

    def bulk_update(self, index: str, documents: Mapping[str, Any]) -> Any:
        return self.bulk.bulk_update(index, documents)

    def bulk_delete(self, index: str, ids: List[str]) -> Any:
        return self.bulk.bulk_delete(index, ids)
