"""Request domain configuration: fragments and options of the search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from ElasticQuery.config.common import (
    expect_float,
    expect_int,
    expect_list,
    expect_mapping,
    get_section,
    optional,
)
from ElasticQuery.core.request import Sort
from ElasticQuery.dsl.base import Aggregation, Filter, Query
from ElasticQuery.dsl.loader import load_aggregation, load_filter, load_query


@dataclass(frozen=True, slots=True)
class RequestConfig:
    """Fragments and options registered on the query builder.

    Attributes:
        queries: Query fragments in file order.
        filters: Filter fragments in file order.
        sort: Sort specs (field names or ``{field: {...}}`` mappings).
        aggregations: Named aggregations in file order.
        offset: ``from`` value, if set.
        limit: ``size`` value, if set.
        min_score: Minimum score, if set.
    """

    queries: tuple[Query, ...] = ()
    filters: tuple[Filter, ...] = ()
    sort: tuple[Sort, ...] = ()
    aggregations: tuple[Aggregation, ...] = ()
    offset: int | None = None
    limit: int | None = None
    min_score: float | None = None


def load_request(raw: Mapping[str, Any]) -> RequestConfig:
    """Load the optional ``request`` section.

    Args:
        raw: Root configuration mapping.

    Returns:
        Parsed request configuration.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If fragments use unknown types or malformed shapes.
    """
    section = get_section(raw, "request", required=False)

    queries = tuple(
        load_query(item, f"request.queries[{idx}]")
        for idx, item in enumerate(expect_list(section.get("queries", []), "request.queries"))
    )
    filters = tuple(
        load_filter(item, f"request.filters[{idx}]")
        for idx, item in enumerate(expect_list(section.get("filters", []), "request.filters"))
    )
    aggregations = tuple(
        load_aggregation(str(name), value, "request.aggregations")
        for name, value in expect_mapping(section.get("aggregations", {}), "request.aggregations").items()
    )

    return RequestConfig(
        queries=queries,
        filters=filters,
        sort=_parse_sort(section.get("sort", [])),
        aggregations=aggregations,
        offset=optional(section.get("from"), expect_int, "request.from"),
        limit=optional(section.get("size"), expect_int, "request.size"),
        min_score=optional(section.get("min_score"), expect_float, "request.min_score"),
    )


def check_request(config: RequestConfig) -> None:
    """Validate request constraints.

    The builder itself accepts any value; negative paging is rejected here
    because it can only come from a configuration mistake.

    Raises:
        ValueError: If paging values are negative.
    """
    if config.offset is not None and config.offset < 0:
        raise ValueError("request.from must not be negative")
    if config.limit is not None and config.limit < 0:
        raise ValueError("request.size must not be negative")


def _parse_sort(value: Any) -> tuple[Sort, ...]:
    """Accept a single sort spec or a list of them."""
    if value is None:
        return ()
    items = value if isinstance(value, list) else [value]
    out: list[Sort] = []
    for idx, item in enumerate(items):
        if isinstance(item, str):
            if item.strip():
                out.append(item.strip())
            continue
        out.append(dict(expect_mapping(item, f"request.sort[{idx}]")))
    return tuple(out)
