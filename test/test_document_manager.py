"""Tests for DocumentManager execution and hit mapping."""

import sys
import unittest
from pathlib import Path
from types import SimpleNamespace

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticQuery.config import ElasticsearchConfig
from ElasticQuery.core.models import Hit
from ElasticQuery.dsl import filters, queries
from ElasticQuery.services import DocumentManager, create_document_manager


class _StubClient:
    def __init__(self, payload: dict) -> None:
        self.payload = payload
        self.calls: list[tuple[dict, str | None]] = []
        self.closed = False

    def search(self, body: dict, *, index: str | None = None) -> dict:
        self.calls.append((body, index))
        return self.payload

    def close(self) -> None:
        self.closed = True


_PAYLOAD = {
    "took": 3,
    "hits": {
        "total": 2,
        "max_score": 1.0,
        "hits": [
            {"_index": "events", "_id": "a", "_score": 1.0, "_source": {"title": "Jazz"}},
            {"_index": "events", "_id": "b", "_score": 0.5, "_source": {"title": "Blues"}},
        ],
    },
}


class TestDocumentManager(unittest.TestCase):
    def test_query_builder_runs_through_manager(self) -> None:
        client = _StubClient(_PAYLOAD)
        manager = DocumentManager(client=client, index="events")

        result = (
            manager.create_query_builder()
            .add_query(queries.Match("title", "jazz"))
            .add_filter(filters.Term("city", "paris"))
            .set_max_results(2)
            .get_result()
        )

        self.assertEqual(len(result), 2)
        self.assertEqual(result.total, 2)
        body, index = client.calls[0]
        self.assertEqual(index, "events")
        self.assertEqual(
            body,
            {
                "query": {
                    "filtered": {
                        "query": {"match": {"title": {"query": "jazz"}}},
                        "filter": {"term": {"city": "paris"}},
                    }
                },
                "size": 2,
            },
        )

    def test_to_documents_uses_hit_mapper(self) -> None:
        manager = DocumentManager(
            client=_StubClient(_PAYLOAD),
            hit_mapper=lambda hit: SimpleNamespace(id=hit.id, title=hit.source["title"]),
        )
        result = manager.create_query_builder().get_result()

        documents = manager.to_documents(result)

        self.assertEqual([doc.title for doc in documents], ["Jazz", "Blues"])
        self.assertEqual(documents[0].id, "a")

    def test_to_documents_without_mapper_returns_hits(self) -> None:
        manager = DocumentManager(client=_StubClient(_PAYLOAD))
        documents = manager.to_documents(manager.create_query_builder().get_result())
        self.assertTrue(all(isinstance(doc, Hit) for doc in documents))

    def test_close_closes_client(self) -> None:
        client = _StubClient(_PAYLOAD)
        DocumentManager(client=client).close()
        self.assertTrue(client.closed)

    def test_create_document_manager_from_config(self) -> None:
        config = SimpleNamespace(
            elasticsearch=ElasticsearchConfig(url="http://es:9200", index="events", timeout=5.0, max_attempts=2)
        )
        manager = create_document_manager(config)
        try:
            self.assertEqual(manager.index, "events")
            self.assertEqual(manager.client.search_url("events"), "http://es:9200/events/_search")
            self.assertEqual(manager.client.max_attempts, 2)
        finally:
            manager.close()


if __name__ == "__main__":
    unittest.main()
