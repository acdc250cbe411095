"""Service layer for ElasticQuery.

Wires the HTTP client and configured index into a ``DocumentManager``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ElasticQuery.services.document_manager import DocumentManager, HitMapper, SearchClient

if TYPE_CHECKING:
    from ElasticQuery.config import AppConfig


def create_document_manager(config: AppConfig, hit_mapper: HitMapper | None = None) -> DocumentManager:
    """Create a document manager for the configured cluster and index.

    Args:
        config: Application configuration.
        hit_mapper: Optional mapping from hits to domain objects.

    Returns:
        DocumentManager backed by an ``ElasticsearchClient``.
    """
    from ElasticQuery.client.client import ElasticsearchClient

    client = ElasticsearchClient(
        config.elasticsearch.url,
        timeout=config.elasticsearch.timeout,
        max_attempts=config.elasticsearch.max_attempts,
    )
    return DocumentManager(client=client, index=config.elasticsearch.index, hit_mapper=hit_mapper)


__all__ = [
    "DocumentManager",
    "HitMapper",
    "SearchClient",
    "create_document_manager",
]
