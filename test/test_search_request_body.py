"""Tests for SearchRequest serialization into an Elasticsearch body."""

import json
import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticQuery.core.builder import QueryBuilder
from ElasticQuery.dsl import aggregations, filters, queries
from ElasticQuery.renderers import render_request_json


class TestSearchRequestBody(unittest.TestCase):
    def test_full_request_body(self) -> None:
        by_city = aggregations.Terms("by_city", "city", size=5)
        by_city.add_aggregation(aggregations.Avg("avg_price", "price"))

        request = (
            QueryBuilder()
            .add_query(queries.Match("title", "jazz"))
            .add_query(queries.Term("status", "published"))
            .add_filter(filters.Term("city", "paris"))
            .add_filter(filters.GeoDistance("location", {"lat": 48.85, "lon": 2.35}, "10km"))
            .add_filter(filters.Terms("category", ["music", "festival"]))
            .add_sort("_score")
            .add_sort({"date": {"order": "desc"}})
            .add_aggregation(by_city)
            .set_first_results(10)
            .set_max_results(5)
            .set_min_score(0.2)
            .get_search_request()
        )

        self.assertEqual(
            request.to_dict(),
            {
                "query": {
                    "filtered": {
                        "query": {
                            "bool": {
                                "must": [
                                    {"match": {"title": {"query": "jazz"}}},
                                    {"term": {"status": "published"}},
                                ]
                            }
                        },
                        "filter": {
                            "and": [
                                {
                                    "bool": {
                                        "must": [
                                            {"term": {"city": "paris"}},
                                            {"terms": {"category": ["music", "festival"]}},
                                        ]
                                    }
                                },
                                {"geo_distance": {"distance": "10km", "location": {"lat": 48.85, "lon": 2.35}}},
                            ]
                        },
                    }
                },
                "from": 10,
                "size": 5,
                "sort": ["_score", {"date": {"order": "desc"}}],
                "min_score": 0.2,
                "aggs": {
                    "by_city": {
                        "terms": {"field": "city", "size": 5},
                        "aggs": {"avg_price": {"avg": {"field": "price"}}},
                    }
                },
            },
        )

    def test_zero_offset_is_kept(self) -> None:
        body = QueryBuilder().set_first_results(0).get_search_request().to_dict()
        self.assertEqual(body, {"from": 0})

    def test_unset_options_are_omitted(self) -> None:
        body = QueryBuilder().add_query(queries.MatchAll()).get_search_request().to_dict()
        self.assertEqual(body, {"query": {"match_all": {}}})

    def test_render_request_json_round_trips_body(self) -> None:
        request = QueryBuilder().add_filter(filters.Exists("title")).set_max_results(3).get_search_request()
        self.assertEqual(json.loads(render_request_json(request)), request.to_dict())

    def test_nested_filter_fragments_serialize(self) -> None:
        fragment = filters.Not(filters.Query(queries.QueryString("jazz AND blues", default_field="title")))
        self.assertEqual(
            fragment.to_dict(),
            {"not": {"filter": {"query": {"query_string": {"query": "jazz AND blues", "default_field": "title"}}}}},
        )


if __name__ == "__main__":
    unittest.main()
