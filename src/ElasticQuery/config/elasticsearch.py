"""Elasticsearch connection configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Mapping

from ElasticQuery.config.common import (
    expect_float,
    expect_int,
    expect_str,
    get_required_value,
    get_section,
    optional,
)

URL_ENV = "ELASTICSEARCH_URL"


@dataclass(frozen=True, slots=True)
class ElasticsearchConfig:
    """Connection settings for the search cluster."""

    url: str
    index: str | None
    timeout: float
    max_attempts: int


def load_elasticsearch(raw: Mapping[str, Any]) -> ElasticsearchConfig:
    """Load the ``elasticsearch`` section.

    ``ELASTICSEARCH_URL`` in the environment overrides ``elasticsearch.url``.

    Raises:
        TypeError: If config types are invalid.
        ValueError: If required keys are missing.
    """
    section = get_section(raw, "elasticsearch", required=True)
    url = os.getenv(URL_ENV) or expect_str(
        get_required_value(section, "url", "elasticsearch.url"), "elasticsearch.url"
    )
    return ElasticsearchConfig(
        url=url,
        index=optional(section.get("index"), expect_str, "elasticsearch.index"),
        timeout=expect_float(section.get("timeout", 30.0), "elasticsearch.timeout"),
        max_attempts=expect_int(section.get("max_attempts", 4), "elasticsearch.max_attempts"),
    )


def check_elasticsearch(config: ElasticsearchConfig) -> None:
    """Validate connection constraints.

    Raises:
        ValueError: If values violate connection constraints.
    """
    if not config.url.startswith(("http://", "https://")):
        raise ValueError("elasticsearch.url must start with http:// or https://")
    if config.index is not None and not config.index.strip():
        raise ValueError("elasticsearch.index must not be empty")
    if config.timeout <= 0:
        raise ValueError("elasticsearch.timeout must be positive")
    if config.max_attempts <= 0:
        raise ValueError("elasticsearch.max_attempts must be positive")
