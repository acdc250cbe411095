"""Tests for the filter classification policy."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from ElasticQuery.core.classify import FilterKind, classify_filter, filter_type_name, is_and_filter
from ElasticQuery.dsl import filters, queries
from ElasticQuery.dsl.base import Filter


class GeoCustom(Filter):
    pass


class CustomFilter(Filter):
    pass


class ScriptWithDefaults(filters.Script):
    pass


class TestClassifyFilter(unittest.TestCase):
    def test_script_and_numeric_range_are_and_filters(self) -> None:
        self.assertIs(classify_filter(filters.Script("doc['price'].value > 10")), FilterKind.AND)
        self.assertIs(classify_filter(filters.NumericRange("price", gte=10)), FilterKind.AND)

    def test_geo_filters_are_and_filters(self) -> None:
        point = {"lat": 48.85, "lon": 2.35}
        geo_filters = [
            filters.GeoDistance("location", point, "10km"),
            filters.GeoDistanceRange("location", point, gte="1km", lte="5km"),
            filters.GeoBoundingBox("location", {"lat": 49, "lon": 2}, {"lat": 48, "lon": 3}),
            filters.GeoPolygon("location", [point, {"lat": 49, "lon": 2}, {"lat": 48, "lon": 3}]),
            filters.GeoShape("area", {"type": "envelope", "coordinates": [[2, 49], [3, 48]]}),
            filters.GeohashCell("location", point, precision=5),
        ]
        for fragment in geo_filters:
            with self.subTest(fragment=type(fragment).__name__):
                self.assertIs(classify_filter(fragment), FilterKind.AND)

    def test_cacheable_filters_are_bool_filters(self) -> None:
        bool_filters = [
            filters.Term("city", "paris"),
            filters.Terms("tags", ["a", "b"]),
            filters.Range("date", gte="2014-01-01"),
            filters.Exists("title"),
            filters.Missing("title"),
            filters.Prefix("name", "ja"),
            filters.Ids(["1", "2"]),
            filters.Type("event"),
            filters.Query(queries.Match("title", "jazz")),
            filters.Not(filters.Term("city", "lyon")),
            filters.Bool(must=[filters.Term("a", 1)]),
            filters.And([filters.Term("a", 1)]),
            filters.Or([filters.Term("a", 1)]),
        ]
        for fragment in bool_filters:
            with self.subTest(fragment=type(fragment).__name__):
                self.assertIs(classify_filter(fragment), FilterKind.BOOL)

    def test_unknown_filter_type_defaults_to_bool(self) -> None:
        self.assertIs(classify_filter(CustomFilter()), FilterKind.BOOL)

    def test_geo_prefix_applies_to_any_type_name(self) -> None:
        self.assertIs(classify_filter(GeoCustom()), FilterKind.AND)

    def test_script_name_must_match_exactly(self) -> None:
        self.assertEqual(filter_type_name(ScriptWithDefaults("1 == 1")), "ScriptWithDefaults")
        self.assertIs(classify_filter(ScriptWithDefaults("1 == 1")), FilterKind.BOOL)

    def test_type_name_has_no_module_prefix(self) -> None:
        self.assertEqual(filter_type_name(filters.GeoDistance("loc", "u09tvw", "1km")), "GeoDistance")

    def test_is_and_filter(self) -> None:
        self.assertTrue(is_and_filter(filters.NumericRange("price", lt=5)))
        self.assertFalse(is_and_filter(filters.Range("price", lt=5)))


if __name__ == "__main__":
    unittest.main()
