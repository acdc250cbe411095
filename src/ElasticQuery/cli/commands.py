"""Command implementations for ElasticQuery CLI.

Encapsulates the business logic of ``build`` and ``search``, separated from
CLI parameter handling.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable

from ElasticQuery.config import AppConfig
from ElasticQuery.config.request import RequestConfig
from ElasticQuery.core.builder import QueryBuilder
from ElasticQuery.core.request import SearchRequest
from ElasticQuery.renderers import render_json, render_request_json, render_text
from ElasticQuery.services.document_manager import DocumentManager
from ElasticQuery.utils.log import log

Echo = Callable[[str], None]


def build_request_from_config(request_config: RequestConfig, builder: QueryBuilder) -> QueryBuilder:
    """Register every configured fragment and option on ``builder``.

    Args:
        request_config: Parsed ``request`` section.
        builder: Fresh query builder.

    Returns:
        The same builder, ready to be finalized.
    """
    for query in request_config.queries:
        builder.add_query(query)
    for fragment in request_config.filters:
        builder.add_filter(fragment)
    for sort in request_config.sort:
        builder.add_sort(sort)
    for aggregation in request_config.aggregations:
        builder.add_aggregation(aggregation)
    if request_config.offset is not None:
        builder.set_first_results(request_config.offset)
    if request_config.limit is not None:
        builder.set_max_results(request_config.limit)
    if request_config.min_score is not None:
        builder.set_min_score(request_config.min_score)
    return builder


@dataclass(slots=True)
class BuildCommand:
    """Compose the configured request and print its JSON body."""

    config: AppConfig
    echo: Echo

    def execute(self) -> SearchRequest:
        request = build_request_from_config(self.config.request, QueryBuilder()).get_search_request()
        log.debug("Composed request: %s", request)
        self.echo(render_request_json(request))
        return request


@dataclass(slots=True)
class SearchCommand:
    """Compose the configured request, run it and render the hits."""

    config: AppConfig
    document_manager: DocumentManager
    echo: Echo
    output_format: str = "text"

    def execute(self) -> None:
        request_config = self.config.request
        log.info(
            "Searching: queries=%d filters=%d aggregations=%d",
            len(request_config.queries),
            len(request_config.filters),
            len(request_config.aggregations),
        )
        builder = build_request_from_config(request_config, self.document_manager.create_query_builder())
        result_set = builder.get_result()

        if self.output_format == "json":
            self.echo(json.dumps(render_json(result_set), indent=2, ensure_ascii=False, default=str))
        else:
            self.echo(render_text(result_set).rstrip("\n"))
