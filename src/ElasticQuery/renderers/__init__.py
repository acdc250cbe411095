"""Output renderers for search requests and results."""

from __future__ import annotations

from ElasticQuery.renderers.console import render_text
from ElasticQuery.renderers.json import render_json, render_request_json

__all__ = [
    "render_json",
    "render_request_json",
    "render_text",
]
