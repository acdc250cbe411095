"""Console text output renderers.

Renders a ``ResultSet`` into human-friendly text.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from ElasticQuery.core.models import ResultSet

_PREVIEW_FIELDS = 4
_PREVIEW_WIDTH = 80


def _fmt_score(score: float | None) -> str:
    if score is None:
        return "-"
    return f"{score:.3f}"


def _preview(source: Mapping[str, Any]) -> list[str]:
    """Return the first few ``_source`` fields, truncated to one line each."""
    lines: list[str] = []
    for key, value in list(source.items())[:_PREVIEW_FIELDS]:
        text = value if isinstance(value, str) else json.dumps(value, ensure_ascii=False, default=str)
        if len(text) > _PREVIEW_WIDTH:
            text = text[: _PREVIEW_WIDTH - 3] + "..."
        lines.append(f"   {key}: {text}")
    return lines


def render_text(result_set: ResultSet) -> str:
    """Render hits into a readable text block.

    Args:
        result_set: Parsed search response.

    Returns:
        A formatted string ready to be printed.
    """
    lines = [f"Total: {result_set.total}  Returned: {len(result_set)}  Max score: {_fmt_score(result_set.max_score)}"]
    for idx, hit in enumerate(result_set, start=1):
        lines.append(f"{idx}. {hit.index}/{hit.id}  score={_fmt_score(hit.score)}")
        lines.extend(_preview(hit.source))
    if result_set.aggregations:
        lines.append("Aggregations:")
        for name, value in result_set.aggregations.items():
            lines.append(f"   {name}: {json.dumps(value, ensure_ascii=False, default=str)}")
    return "\n".join(lines).rstrip() + "\n"
