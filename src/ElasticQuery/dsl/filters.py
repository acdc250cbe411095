"""Filter fragments (boolean inclusion/exclusion conditions).

Class names double as the declared filter type, which is what
``ElasticQuery.core.classify`` inspects: keep ``Script``, ``NumericRange``
and the ``Geo*`` names stable.
"""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ElasticQuery.dsl.base import Filter, Query as _Query, compact

GeoPoint = Any  # {"lat": .., "lon": ..}, [lon, lat], "lat,lon" or a geohash


class Term(Filter):
    def __init__(self, field: str, value: Any, *, cache: bool | None = None) -> None:
        super().__init__(compact({field: value, "_cache": cache}))


class Terms(Filter):
    def __init__(self, field: str, values: Sequence[Any], *, execution: str | None = None) -> None:
        super().__init__(compact({field: list(values), "execution": execution}))


class Range(Filter):
    def __init__(self, field: str, **bounds: Any) -> None:
        super().__init__({field: compact(bounds)})


class NumericRange(Filter):
    """Range filter evaluated through field data instead of the inverted index."""

    def __init__(self, field: str, **bounds: Any) -> None:
        super().__init__({field: compact(bounds)})


class Exists(Filter):
    def __init__(self, field: str) -> None:
        super().__init__({"field": field})


class Missing(Filter):
    def __init__(self, field: str, *, existence: bool | None = None, null_value: bool | None = None) -> None:
        super().__init__(compact({"field": field, "existence": existence, "null_value": null_value}))


class Prefix(Filter):
    def __init__(self, field: str, value: str) -> None:
        super().__init__({field: value})


class Regexp(Filter):
    def __init__(self, field: str, pattern: str, *, flags: str | None = None) -> None:
        super().__init__({field: compact({"value": pattern, "flags": flags})})


class Ids(Filter):
    def __init__(self, values: Sequence[str], doc_type: str | None = None) -> None:
        super().__init__(compact({"values": list(values), "type": doc_type}))


class Type(Filter):
    def __init__(self, doc_type: str) -> None:
        super().__init__({"value": doc_type})


class MatchAll(Filter):
    def __init__(self) -> None:
        super().__init__({})


class Query(Filter):
    """Wrap a query so it can be used as a filter."""

    def __init__(self, query: _Query) -> None:
        super().__init__(query)


class Not(Filter):
    def __init__(self, filter: Filter) -> None:  # noqa: A002
        super().__init__({"filter": filter})


class Bool(Filter):
    """Cacheable boolean filter group.

    Elasticsearch evaluates each clause as a bitset and can cache them, which
    makes this the natural home for cheap term-like filters.
    """

    def __init__(
        self,
        must: Sequence[Filter] = (),
        should: Sequence[Filter] = (),
        must_not: Sequence[Filter] = (),
    ) -> None:
        body: dict[str, Any] = {}
        for key, clauses in (("must", must), ("should", should), ("must_not", must_not)):
            if clauses:
                body[key] = list(clauses)
        super().__init__(body)

    @property
    def must(self) -> tuple[Any, ...]:
        return tuple(self._params.get("must", ()))


class And(Filter):
    """Filter chain evaluated clause by clause, stopping at the first miss."""

    def __init__(self, filters: Sequence[Filter]) -> None:
        super().__init__(list(filters))

    @property
    def filters(self) -> tuple[Any, ...]:
        if isinstance(self._params, Mapping):
            return tuple(self._params.get("filters", ()))
        return tuple(self._params)


class Or(Filter):
    def __init__(self, filters: Sequence[Filter]) -> None:
        super().__init__(list(filters))


class Script(Filter):
    def __init__(self, script: str, params: Mapping[str, Any] | None = None, *, lang: str | None = None) -> None:
        super().__init__(compact({"script": script, "params": dict(params) if params else None, "lang": lang}))


class GeoDistance(Filter):
    def __init__(self, field: str, location: GeoPoint, distance: str, *, distance_type: str | None = None) -> None:
        super().__init__(compact({"distance": distance, field: location, "distance_type": distance_type}))


class GeoDistanceRange(Filter):
    def __init__(
        self,
        field: str,
        location: GeoPoint,
        *,
        gte: str | None = None,
        lte: str | None = None,
        gt: str | None = None,
        lt: str | None = None,
    ) -> None:
        super().__init__(compact({field: location, "gte": gte, "lte": lte, "gt": gt, "lt": lt}))


class GeoBoundingBox(Filter):
    def __init__(self, field: str, top_left: GeoPoint, bottom_right: GeoPoint) -> None:
        super().__init__({field: {"top_left": top_left, "bottom_right": bottom_right}})


class GeoPolygon(Filter):
    def __init__(self, field: str, points: Sequence[GeoPoint]) -> None:
        super().__init__({field: {"points": list(points)}})


class GeoShape(Filter):
    def __init__(self, field: str, shape: Mapping[str, Any], *, relation: str | None = None) -> None:
        super().__init__({field: compact({"shape": dict(shape), "relation": relation})})


class GeohashCell(Filter):
    def __init__(self, field: str, location: GeoPoint, *, precision: Any = None, neighbors: bool | None = None) -> None:
        super().__init__(compact({field: location, "precision": precision, "neighbors": neighbors}))
