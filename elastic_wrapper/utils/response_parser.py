"""
Response parsing utilities for Elasticsearch.
"""

from typing import Dict, Any, List


def response_body(response: Any) -> Any:
    """
    Plain body of a client response.

    The client returns ObjectApiResponse objects; their ``body`` is the
    decoded JSON. Plain dicts are returned as they are.
    """
    return getattr(response, "body", response)


def parse_hits(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Extract hits from search response.

    Args:
        response: Elasticsearch response

    Returns:
        List of hit documents
    """
    return response.get("hits", {}).get("hits", [])


def parse_sources(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """Extract the ``_source`` of every hit, skipping hits without one."""
    return [hit["_source"] for hit in parse_hits(response) if "_source" in hit]


def parse_total(response: Dict[str, Any]) -> int:
    """
    Total hit count of a search response.

    Handles both the object form ({"value": n, "relation": ...}) and the
    legacy integer form.
    """
    total = response.get("hits", {}).get("total", 0)
    if isinstance(total, dict):
        return total.get("value", 0)
    return total


def parse_inner_hits(hit: Dict[str, Any], name: str) -> List[Dict[str, Any]]:
    """
    Nested documents that matched under the inner hits ``name`` of one hit.

    Args:
        hit: A single search hit
        name: Inner hits name given to the nested query

    Returns:
        List of inner hit documents
    """
    return hit.get("inner_hits", {}).get(name, {}).get("hits", {}).get("hits", [])


def parse_aggregations(response: Dict[str, Any]) -> Dict[str, Any]:
    """
    Extract aggregations from response.

    Args:
        response: Elasticsearch response

    Returns:
        Aggregations dict
    """
    return response.get("aggregations", {})


def extract_bucket_values(
    aggregation: Dict[str, Any],
    value_field: str = "key",
) -> List[Any]:
    """
    Extract values from aggregation buckets.

    Args:
        aggregation: Aggregation result
        value_field: Field to extract from each bucket

    Returns:
        List of values
    """
    buckets = aggregation.get("buckets", [])
    return [bucket.get(value_field) for bucket in buckets if value_field in bucket]


def parse_bulk_failures(response: Dict[str, Any]) -> List[Dict[str, Any]]:
    """
    Per-item failures of a bulk response.

    A bulk request succeeds as a whole even when some items fail; the
    failures are only reported item by item.

    Args:
        response: Bulk response

    Returns:
        One dict per failed item with action, _index, _id, status and error
    """
    if not response.get("errors"):
        return []

    failures = []
    for item in response.get("items", []):
        for action, result in item.items():
            if "error" in result:
                failures.append({
                    "action": action,
                    "_index": result.get("_index"),
                    "_id": result.get("_id"),
                    "status": result.get("status"),
                    "error": result["error"],
                })
    return failures
