"""Tests for the click command line interface."""

import json
import os
import sys
import unittest
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticQuery.cli import cli

DEFAULT_CONFIG = str(REPO_ROOT / "config" / "default.yml")

_PAYLOAD = {
    "took": 2,
    "hits": {
        "total": 1,
        "max_score": 1.5,
        "hits": [{"_index": "events", "_id": "42", "_score": 1.5, "_source": {"title": "Jazz at the Sunset"}}],
    },
}


class TestCli(unittest.TestCase):
    def setUp(self) -> None:
        patcher = patch.dict(os.environ)
        patcher.start()
        self.addCleanup(patcher.stop)
        os.environ.pop("ELASTICSEARCH_URL", None)

    def test_build_prints_composed_body(self) -> None:
        result = CliRunner().invoke(cli, ["--config", DEFAULT_CONFIG, "build"], catch_exceptions=False)

        self.assertEqual(result.exit_code, 0, result.output)
        body = json.loads(result.stdout)
        self.assertEqual(body["size"], 20)
        self.assertEqual(body["from"], 0)
        filter_chain = body["query"]["filtered"]["filter"]["and"]
        self.assertEqual(
            filter_chain[0],
            {"bool": {"must": [{"term": {"city": "paris"}}, {"terms": {"category": ["music", "festival"]}}]}},
        )
        self.assertIn("geo_distance", filter_chain[1])

    def test_search_renders_hits(self) -> None:
        with patch("ElasticQuery.client.client.ElasticsearchClient.search", return_value=_PAYLOAD) as search:
            result = CliRunner().invoke(cli, ["--config", DEFAULT_CONFIG, "search"], catch_exceptions=False)

        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("events/42", result.output)
        self.assertIn("Jazz at the Sunset", result.output)
        body = search.call_args.args[0]
        self.assertIn("aggs", body)
        self.assertEqual(search.call_args.kwargs["index"], "events")

    def test_search_failure_aborts(self) -> None:
        with patch(
            "ElasticQuery.client.client.ElasticsearchClient.search",
            side_effect=ValueError("Search failed: index_not_found"),
        ):
            result = CliRunner().invoke(cli, ["--config", DEFAULT_CONFIG, "search", "--format", "json"])

        self.assertNotEqual(result.exit_code, 0)


if __name__ == "__main__":
    unittest.main()
