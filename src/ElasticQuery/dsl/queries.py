"""Query fragments (relevance-scoring conditions)."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from ElasticQuery.dsl.base import Filter, Query, compact


class MatchAll(Query):
    def __init__(self, boost: float | None = None) -> None:
        super().__init__(compact({"boost": boost}))


class Match(Query):
    """Full-text match on a single field."""

    def __init__(self, field: str, query: Any, *, operator: str | None = None, boost: float | None = None) -> None:
        super().__init__({field: compact({"query": query, "operator": operator, "boost": boost})})


class MultiMatch(Query):
    def __init__(self, query: Any, fields: Sequence[str], *, type: str | None = None) -> None:  # noqa: A002
        super().__init__(compact({"query": query, "fields": list(fields), "type": type}))


class Term(Query):
    def __init__(self, field: str, value: Any, *, boost: float | None = None) -> None:
        body: Any = {"value": value, "boost": boost} if boost is not None else value
        super().__init__({field: body})


class Terms(Query):
    def __init__(self, field: str, values: Sequence[Any]) -> None:
        super().__init__({field: list(values)})


class Range(Query):
    def __init__(self, field: str, **bounds: Any) -> None:
        super().__init__({field: compact(bounds)})


class Prefix(Query):
    def __init__(self, field: str, value: str) -> None:
        super().__init__({field: value})


class QueryString(Query):
    def __init__(self, query: str, *, default_field: str | None = None, default_operator: str | None = None) -> None:
        super().__init__(
            compact({"query": query, "default_field": default_field, "default_operator": default_operator})
        )


class Ids(Query):
    def __init__(self, values: Sequence[str], doc_type: str | None = None) -> None:
        super().__init__(compact({"values": list(values), "type": doc_type}))


class ConstantScore(Query):
    def __init__(self, filter: Filter, boost: float | None = None) -> None:  # noqa: A002
        super().__init__(compact({"filter": filter, "boost": boost}))


class Bool(Query):
    """Boolean combination of queries.

    Only non-empty clause lists are serialized.
    """

    def __init__(
        self,
        must: Sequence[Query] = (),
        should: Sequence[Query] = (),
        must_not: Sequence[Query] = (),
        *,
        minimum_should_match: Any = None,
    ) -> None:
        body: dict[str, Any] = {}
        for key, clauses in (("must", must), ("should", should), ("must_not", must_not)):
            if clauses:
                body[key] = list(clauses)
        if minimum_should_match is not None:
            body["minimum_should_match"] = minimum_should_match
        super().__init__(body)

    @property
    def must(self) -> tuple[Any, ...]:
        return tuple(self._params.get("must", ()))


class Filtered(Query):
    """Query gated by a filter.

    When ``query`` is absent only the filter is serialized and the engine
    scores every matching document equally.
    """

    def __init__(self, query: Query | None, filter: Filter | None) -> None:  # noqa: A002
        super().__init__(compact({"query": query, "filter": filter}))

    @property
    def query(self) -> Query | None:
        return self._params.get("query") if isinstance(self._params, Mapping) else None

    @property
    def filter(self) -> Filter | None:
        return self._params.get("filter") if isinstance(self._params, Mapping) else None
