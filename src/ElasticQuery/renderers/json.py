"""JSON output renderers for requests and results."""

from __future__ import annotations

import json
from typing import Any

from ElasticQuery.core.models import ResultSet
from ElasticQuery.core.request import SearchRequest


def render_json(result_set: ResultSet) -> dict[str, Any]:
    """Render a result set into JSON-serializable Python objects."""
    return {
        "total": result_set.total,
        "max_score": result_set.max_score,
        "took": result_set.took,
        "timed_out": result_set.timed_out,
        "hits": [
            {
                "index": hit.index,
                "type": hit.doc_type,
                "id": hit.id,
                "score": hit.score,
                "source": dict(hit.source),
                "sort": list(hit.sort),
            }
            for hit in result_set
        ],
        "aggregations": dict(result_set.aggregations),
    }


def render_request_json(request: SearchRequest, *, indent: int | None = 2) -> str:
    """Render a search request as the JSON body sent to the engine."""
    return json.dumps(request.to_dict(), indent=indent, ensure_ascii=False, sort_keys=False)
