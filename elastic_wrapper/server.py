"""
FastMCP server exposing elastic-wrapper operations as tools.

Tools:
- health: Check Elasticsearch connectivity
- search_documents: Search with a raw Query DSL query, paging and sorting
- get_document: Fetch one document by id
- index_document: Index (or overwrite) one document
- bulk_index_documents: Index many documents in one request
- index_exists: Check whether an index exists
"""

import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastmcp import FastMCP

from elastic_wrapper.config import get_current_environment, get_environment_config
from elastic_wrapper.es_types import SearchSource
from elastic_wrapper.logging import get_logger, setup_logging
from elastic_wrapper.service import ElasticsearchService
from elastic_wrapper.utils import (
    parse_bulk_failures,
    response_body,
    test_connection,
    validate_index_name,
    validate_size,
)

# Load environment variables
load_dotenv()

logger = get_logger(__name__)

mcp = FastMCP("elastic-wrapper")

_service: Optional[ElasticsearchService] = None


def get_service() -> ElasticsearchService:
    """Shared service, created on first use."""
    global _service
    if _service is None:
        _service = ElasticsearchService()
    return _service


def health() -> Dict[str, Any]:
    """
    Check connectivity to Elasticsearch.

    Returns status, environment and configured hosts.
    """
    config = get_environment_config()
    connected = test_connection(get_service().documents.client)
    return {
        "status": "healthy" if connected else "unavailable",
        "environment": get_current_environment(),
        "hosts": config["elasticsearch"]["hosts"],
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def search_documents(
    index: str,
    query: Dict[str, Any],
    size: int = 10,
    from_offset: int = 0,
    sort: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """
    Search an index with an Elasticsearch Query DSL query.

    Args:
        index: Index or index pattern (e.g., "posts", "logs-*")
        query: Elasticsearch Query DSL query
        size: Number of results (0-10000)
        from_offset: Pagination offset
        sort: Sort criteria

    Returns:
        Raw Elasticsearch response
    """
    validate_index_name(index)
    max_results = get_environment_config()["defaults"]["max_results"]
    source = SearchSource(
        query=query,
        size=validate_size(size, max_results),
        from_=max(0, from_offset),
        sort=list(sort or []),
    )
    return response_body(get_service().search_source(index, source))


def get_document(index: str, id: str) -> Dict[str, Any]:
    """
    Fetch one document by id.

    Args:
        index: Index name
        id: Document id

    Returns:
        Raw get response including "found" and "_source"
    """
    validate_index_name(index)
    return response_body(get_service().get(index, id))


def index_document(
    index: str,
    document: Dict[str, Any],
    id: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Index a document, overwriting any document with the same id.

    Args:
        index: Index name
        document: Document body
        id: Document id, generated when omitted

    Returns:
        Raw index response including "_id" and "result"
    """
    validate_index_name(index)
    return response_body(get_service().index(index, document, id))


def bulk_index_documents(index: str, documents: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Index many documents in a single bulk request.

    Args:
        index: Index name
        documents: Document bodies

    Returns:
        Counts of indexed and failed items plus the failures
    """
    validate_index_name(index)
    response = response_body(get_service().bulk_index(index, documents))
    failures = parse_bulk_failures(response)
    return {
        "took": response.get("took"),
        "errors": bool(response.get("errors")),
        "indexed": len(response.get("items", [])) - len(failures),
        "failed": len(failures),
        "failures": failures,
    }


def index_exists(index: str) -> Dict[str, Any]:
    """
    Check whether an index exists.
    """
    validate_index_name(index)
    return {"index": index, "exists": bool(get_service().index_exists(index))}


for _tool in (health, search_documents, get_document, index_document, bulk_index_documents, index_exists):
    mcp.tool()(_tool)


def main() -> None:
    """Run the MCP server over stdio."""
    level = get_environment_config()["logging"]["level"]
    # stdout carries the MCP protocol
    setup_logging(level, stream=sys.stderr)
    logger.info("Starting elastic-wrapper MCP server")
    mcp.run()


if __name__ == "__main__":
    main()
