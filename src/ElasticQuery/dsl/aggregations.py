"""Aggregation definitions."""

from __future__ import annotations

from typing import Any, Sequence

from ElasticQuery.dsl.base import Aggregation, Filter as _Filter, compact


class Terms(Aggregation):
    def __init__(self, agg_name: str, field: str, *, size: int | None = None, order: Any = None) -> None:
        super().__init__(agg_name, compact({"field": field, "size": size, "order": order}))


class _FieldMetric(Aggregation):
    def __init__(self, agg_name: str, field: str) -> None:
        super().__init__(agg_name, {"field": field})


class Avg(_FieldMetric):
    pass


class Sum(_FieldMetric):
    pass


class Min(_FieldMetric):
    pass


class Max(_FieldMetric):
    pass


class Stats(_FieldMetric):
    pass


class ValueCount(_FieldMetric):
    pass


class Cardinality(Aggregation):
    def __init__(self, agg_name: str, field: str, *, precision_threshold: int | None = None) -> None:
        super().__init__(agg_name, compact({"field": field, "precision_threshold": precision_threshold}))


class Histogram(Aggregation):
    def __init__(self, agg_name: str, field: str, interval: Any, *, min_doc_count: int | None = None) -> None:
        super().__init__(agg_name, compact({"field": field, "interval": interval, "min_doc_count": min_doc_count}))


class DateHistogram(Aggregation):
    def __init__(self, agg_name: str, field: str, interval: str, *, format: str | None = None) -> None:  # noqa: A002
        super().__init__(agg_name, compact({"field": field, "interval": interval, "format": format}))


class Range(Aggregation):
    """Bucket documents into ``[{"from": .., "to": ..}, ...]`` ranges."""

    def __init__(self, agg_name: str, field: str, ranges: Sequence[dict[str, Any]]) -> None:
        super().__init__(agg_name, {"field": field, "ranges": [dict(r) for r in ranges]})


class Filter(Aggregation):
    """Single bucket of the documents matching a filter."""

    def __init__(self, agg_name: str, filter: _Filter) -> None:  # noqa: A002
        super().__init__(agg_name, filter)
