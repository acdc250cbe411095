"""Tests for Elasticsearch response parsing."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticQuery.client.parser import parse_search_response


def _payload() -> dict:
    return {
        "took": 7,
        "timed_out": False,
        "hits": {
            "total": 42,
            "max_score": 2.5,
            "hits": [
                {
                    "_index": "events",
                    "_type": "event",
                    "_id": "1",
                    "_score": 2.5,
                    "_source": {"title": "Jazz in Paris", "city": "paris"},
                },
                {
                    "_index": "events",
                    "_type": "event",
                    "_id": "2",
                    "_score": None,
                    "_source": {"title": "Blues night"},
                    "sort": [1420070400000],
                },
            ],
        },
        "aggregations": {"by_city": {"buckets": [{"key": "paris", "doc_count": 30}]}},
    }


class TestParseSearchResponse(unittest.TestCase):
    def test_parse_hits_and_metadata(self) -> None:
        result = parse_search_response(_payload())

        self.assertEqual(result.total, 42)
        self.assertEqual(result.max_score, 2.5)
        self.assertEqual(result.took, 7)
        self.assertFalse(result.timed_out)
        self.assertEqual(len(result), 2)
        first, second = result
        self.assertEqual(first.id, "1")
        self.assertEqual(first.doc_type, "event")
        self.assertEqual(first.source["title"], "Jazz in Paris")
        self.assertIsNone(second.score)
        self.assertEqual(second.sort, (1420070400000,))
        self.assertEqual(result.aggregations["by_city"]["buckets"][0]["key"], "paris")

    def test_total_object_form(self) -> None:
        payload = _payload()
        payload["hits"]["total"] = {"value": 9, "relation": "eq"}
        self.assertEqual(parse_search_response(payload).total, 9)

    def test_missing_hits_section(self) -> None:
        result = parse_search_response({"took": 1})
        self.assertEqual(result.total, 0)
        self.assertEqual(len(result), 0)
        self.assertEqual(dict(result.aggregations), {})

    def test_hit_source_is_read_only(self) -> None:
        hit = parse_search_response(_payload()).hits[0]
        with self.assertRaises(TypeError):
            hit.source["title"] = "changed"

    def test_error_payload(self) -> None:
        with self.assertRaisesRegex(ValueError, "index_not_found"):
            parse_search_response({"error": {"type": "index_not_found_exception", "reason": "no such index [index_not_found]"}})
        with self.assertRaisesRegex(ValueError, "SearchPhaseExecutionException"):
            parse_search_response({"error": "SearchPhaseExecutionException[Failed to execute phase]", "status": 400})

    def test_non_mapping_payload(self) -> None:
        with self.assertRaises(ValueError):
            parse_search_response(["not", "an", "object"])


if __name__ == "__main__":
    unittest.main()
