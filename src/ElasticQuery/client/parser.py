"""Elasticsearch search response parser."""

from __future__ import annotations

from typing import Any, Mapping

from ElasticQuery.core.models import Hit, ResultSet


def parse_search_response(payload: Any) -> ResultSet:
    """Parse a ``_search`` response body into a ``ResultSet``.

    Args:
        payload: Decoded JSON response.

    Returns:
        Parsed result set.

    Raises:
        ValueError: If the payload is not a mapping or reports an error.
    """
    if not isinstance(payload, Mapping):
        raise ValueError("Search response must be a JSON object")
    if "error" in payload:
        raise ValueError(f"Search failed: {_error_reason(payload['error'])}")

    hits_section = payload.get("hits")
    if not isinstance(hits_section, Mapping):
        hits_section = {}

    raw_hits = hits_section.get("hits")
    if not isinstance(raw_hits, list):
        raw_hits = []
    hits = tuple(_parse_hit(item) for item in raw_hits if isinstance(item, Mapping))

    aggregations = payload.get("aggregations")
    return ResultSet(
        hits=hits,
        total=_parse_total(hits_section.get("total"), default=len(hits)),
        max_score=_as_float(hits_section.get("max_score")),
        took=payload.get("took") if isinstance(payload.get("took"), int) else None,
        timed_out=bool(payload.get("timed_out", False)),
        aggregations=aggregations if isinstance(aggregations, Mapping) else {},
    )


def _parse_hit(item: Mapping[str, Any]) -> Hit:
    source = item.get("_source")
    sort = item.get("sort")
    return Hit(
        index=str(item.get("_index", "")),
        id=str(item.get("_id", "")),
        score=_as_float(item.get("_score")),
        source=source if isinstance(source, Mapping) else {},
        doc_type=item.get("_type") if isinstance(item.get("_type"), str) else None,
        sort=tuple(sort) if isinstance(sort, list) else (),
    )


def _parse_total(value: Any, *, default: int) -> int:
    """Read ``hits.total`` in both the 1.x (int) and 7.x (object) shapes."""
    if isinstance(value, Mapping):
        value = value.get("value")
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    return value


def _as_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return float(value)


def _error_reason(error: Any) -> str:
    if isinstance(error, Mapping):
        return str(error.get("reason") or error.get("type") or dict(error))
    return str(error)
