"""Incremental search request builder.

Callers register fragments one by one, then finalize the builder into an
immutable ``SearchRequest``. A builder serves a single search: once
finalized, further registration is rejected. It is not thread-safe.
"""

from __future__ import annotations

import copy
from typing import TYPE_CHECKING, Any, Mapping

from ElasticQuery.core.compose import compose_filters, compose_queries
from ElasticQuery.core.request import SearchRequest, Sort
from ElasticQuery.dsl.base import Aggregation, Filter, Query
from ElasticQuery.utils.log import log

if TYPE_CHECKING:
    from ElasticQuery.core.models import ResultSet
    from ElasticQuery.services.document_manager import DocumentManager


class BuilderFinalizedError(RuntimeError):
    """Raised when a finalized builder receives another registration."""


class QueryBuilder:
    """Accumulate query/filter fragments and request options.

    Every registration method returns the builder, so calls can be chained::

        request = (
            QueryBuilder()
            .add_query(queries.Match("title", "jazz"))
            .add_filter(filters.Term("city", "paris"))
            .set_max_results(20)
            .get_search_request()
        )
    """

    def __init__(self, document_manager: DocumentManager | None = None) -> None:
        self._document_manager = document_manager
        self._filters: list[Filter] = []
        self._queries: list[Query] = []
        self._sorts: list[Sort] = []
        self._aggregations: list[Aggregation] = []
        self._first_results: int | None = None
        self._max_results: int | None = None
        self._min_score: float | None = None
        self._finalized = False

    @property
    def filters(self) -> tuple[Filter, ...]:
        return tuple(self._filters)

    @property
    def queries(self) -> tuple[Query, ...]:
        return tuple(self._queries)

    @property
    def sorts(self) -> tuple[Sort, ...]:
        return tuple(self._sorts)

    @property
    def aggregations(self) -> tuple[Aggregation, ...]:
        return tuple(self._aggregations)

    @property
    def finalized(self) -> bool:
        return self._finalized

    def add_filter(self, filter: Filter) -> QueryBuilder:  # noqa: A002
        self._check_open()
        _expect(filter, Filter, "filter")
        self._filters.append(filter)
        return self

    def add_query(self, query: Query) -> QueryBuilder:
        self._check_open()
        _expect(query, Query, "query")
        self._queries.append(query)
        return self

    def add_sort(self, sort: Sort) -> QueryBuilder:
        """Append a sort spec: a field name, ``"_score"`` or a mapping like
        ``{"date": {"order": "desc"}}``."""
        self._check_open()
        if not isinstance(sort, (str, Mapping)):
            raise TypeError(f"sort must be a string or a mapping, got {type(sort).__name__}")
        self._sorts.append(sort if isinstance(sort, str) else copy.deepcopy(dict(sort)))
        return self

    def add_aggregation(self, aggregation: Aggregation) -> QueryBuilder:
        self._check_open()
        _expect(aggregation, Aggregation, "aggregation")
        self._aggregations.append(copy.deepcopy(aggregation))
        return self

    def set_first_results(self, first_results: int | None) -> QueryBuilder:
        self._check_open()
        self._first_results = first_results
        return self

    def set_max_results(self, max_results: int | None) -> QueryBuilder:
        self._check_open()
        self._max_results = max_results
        return self

    def set_min_score(self, min_score: float | None) -> QueryBuilder:
        self._check_open()
        self._min_score = min_score
        return self

    def get_search_request(self) -> SearchRequest:
        """Finalize the builder into a ``SearchRequest``.

        Never fails. Calling it again without further registration (which is
        rejected anyway) returns an equal request.

        Returns:
            The composed request.
        """
        self._finalized = True
        request = SearchRequest(
            query=compose_queries(self._queries),
            filter=compose_filters(self._filters),
            offset=self._first_results,
            limit=self._max_results,
            min_score=self._min_score,
            sort=tuple(copy.deepcopy(self._sorts)),
            aggregations=tuple(copy.deepcopy(self._aggregations)),
        )
        log.debug(
            "Built search request: queries=%d filters=%d sorts=%d aggregations=%d",
            len(self._queries),
            len(self._filters),
            len(self._sorts),
            len(self._aggregations),
        )
        return request

    def get_result(self) -> ResultSet:
        """Finalize and execute through the bound document manager.

        Raises:
            RuntimeError: If the builder has no document manager.
        """
        if self._document_manager is None:
            raise RuntimeError("QueryBuilder has no document manager to execute the request")
        return self._document_manager.execute(self.get_search_request())

    def _check_open(self) -> None:
        if self._finalized:
            raise BuilderFinalizedError("QueryBuilder was already finalized; create a new one per search")


def _expect(value: Any, expected: type, label: str) -> None:
    if not isinstance(value, expected):
        raise TypeError(f"{label} must be a {expected.__name__}, got {type(value).__name__}")
