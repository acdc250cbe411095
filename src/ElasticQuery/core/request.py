"""Finalized search request envelope."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from ElasticQuery.dsl import queries
from ElasticQuery.dsl.base import Aggregation, Filter, Query, serialize

Sort = Union[str, Mapping[str, Any]]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """Composed request handed to the execution layer.

    Attributes:
        query: Composed relevance query, if any query was registered.
        filter: Composed filter tree, if any filter was registered.
        offset: Index of the first hit (``from``).
        limit: Maximum number of hits (``size``).
        min_score: Hits scoring below this are dropped.
        sort: Sort specifications in registration order.
        aggregations: Aggregation definitions in registration order.
    """

    query: Query | None = None
    filter: Filter | None = None
    offset: int | None = None
    limit: int | None = None
    min_score: float | None = None
    sort: tuple[Sort, ...] = ()
    aggregations: tuple[Aggregation, ...] = ()

    @property
    def search_query(self) -> Query | None:
        """Query actually sent to the engine.

        A composed filter always travels inside a ``filtered`` query, with or
        without a relevance query. No match-all is added when both are
        absent; the engine matches every document in that case.
        """
        if self.filter is not None:
            return queries.Filtered(self.query, self.filter)
        return self.query

    def to_dict(self) -> dict[str, Any]:
        """Serialize into an Elasticsearch search body."""
        body: dict[str, Any] = {}
        search_query = self.search_query
        if search_query is not None:
            body["query"] = search_query.to_dict()
        if self.offset is not None:
            body["from"] = self.offset
        if self.limit is not None:
            body["size"] = self.limit
        if self.sort:
            body["sort"] = serialize(list(self.sort))
        if self.min_score is not None:
            body["min_score"] = self.min_score
        if self.aggregations:
            body["aggs"] = {agg.agg_name: agg.to_dict() for agg in self.aggregations}
        return body
