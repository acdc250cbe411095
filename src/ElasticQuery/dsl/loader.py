"""Build fragments from their wire-format mappings.

Used by the YAML request configuration: a fragment is written exactly as it
appears in an Elasticsearch request body, e.g. ``{"term": {"city": "paris"}}``.
The outer key selects the fragment class, the value becomes its body as is.
"""

from __future__ import annotations

from typing import Any, Mapping

from ElasticQuery.dsl import aggregations, filters, queries
from ElasticQuery.dsl.base import Aggregation, DslObject, Filter, Query

_QUERY_TYPES: tuple[type[Query], ...] = (
    queries.MatchAll,
    queries.Match,
    queries.MultiMatch,
    queries.Term,
    queries.Terms,
    queries.Range,
    queries.Prefix,
    queries.QueryString,
    queries.Ids,
    queries.ConstantScore,
    queries.Bool,
    queries.Filtered,
)

_FILTER_TYPES: tuple[type[Filter], ...] = (
    filters.Term,
    filters.Terms,
    filters.Range,
    filters.NumericRange,
    filters.Exists,
    filters.Missing,
    filters.Prefix,
    filters.Regexp,
    filters.Ids,
    filters.Type,
    filters.MatchAll,
    filters.Query,
    filters.Not,
    filters.Bool,
    filters.And,
    filters.Or,
    filters.Script,
    filters.GeoDistance,
    filters.GeoDistanceRange,
    filters.GeoBoundingBox,
    filters.GeoPolygon,
    filters.GeoShape,
    filters.GeohashCell,
)

_AGGREGATION_TYPES: tuple[type[Aggregation], ...] = (
    aggregations.Terms,
    aggregations.Avg,
    aggregations.Sum,
    aggregations.Min,
    aggregations.Max,
    aggregations.Stats,
    aggregations.ValueCount,
    aggregations.Cardinality,
    aggregations.Histogram,
    aggregations.DateHistogram,
    aggregations.Range,
    aggregations.Filter,
)

QUERY_REGISTRY: dict[str, type[Query]] = {cls.base_name(): cls for cls in _QUERY_TYPES}
FILTER_REGISTRY: dict[str, type[Filter]] = {cls.base_name(): cls for cls in _FILTER_TYPES}
AGGREGATION_REGISTRY: dict[str, type[Aggregation]] = {cls.base_name(): cls for cls in _AGGREGATION_TYPES}


def _split_fragment(value: Any, config_key: str) -> tuple[str, Any]:
    """Return the single ``(wire_name, body)`` pair of a fragment mapping."""
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key} must be an object")
    if len(value) != 1:
        raise ValueError(f"{config_key} must have exactly one key, got {sorted(map(str, value))}")
    ((name, body),) = value.items()
    return str(name), body


def _lookup(registry: Mapping[str, type[DslObject]], name: str, config_key: str, kind: str) -> type[DslObject]:
    cls = registry.get(name)
    if cls is None:
        raise ValueError(f"{config_key} has unknown {kind} type: {name}")
    return cls


def load_query(value: Any, config_key: str = "query") -> Query:
    """Build a query fragment from ``{name: body}``."""
    name, body = _split_fragment(value, config_key)
    return _lookup(QUERY_REGISTRY, name, config_key, "query").from_body(body)  # type: ignore[return-value]


def load_filter(value: Any, config_key: str = "filter") -> Filter:
    """Build a filter fragment from ``{name: body}``."""
    name, body = _split_fragment(value, config_key)
    return _lookup(FILTER_REGISTRY, name, config_key, "filter").from_body(body)  # type: ignore[return-value]


def load_aggregation(agg_name: str, value: Any, config_key: str = "aggregations") -> Aggregation:
    """Build a named aggregation, including nested ``aggs``.

    Args:
        agg_name: Name the aggregation is registered under.
        value: Mapping with one aggregation type key and an optional ``aggs``.
        config_key: Key path used in error messages.

    Returns:
        Aggregation with its sub-aggregations attached.
    """
    if not isinstance(value, Mapping):
        raise TypeError(f"{config_key}.{agg_name} must be an object")
    nested = value.get("aggs", value.get("aggregations"))
    own = {k: v for k, v in value.items() if k not in ("aggs", "aggregations")}
    name, body = _split_fragment(own, f"{config_key}.{agg_name}")
    cls = _lookup(AGGREGATION_REGISTRY, name, f"{config_key}.{agg_name}", "aggregation")
    aggregation = cls.from_body(body, agg_name)  # type: ignore[call-arg]

    if nested is not None:
        if not isinstance(nested, Mapping):
            raise TypeError(f"{config_key}.{agg_name}.aggs must be an object")
        for sub_name, sub_value in nested.items():
            aggregation.add_aggregation(
                load_aggregation(str(sub_name), sub_value, f"{config_key}.{agg_name}.aggs")
            )
    return aggregation  # type: ignore[return-value]
