from __future__ import annotations

"""Public configuration API for ElasticQuery."""

from ElasticQuery.config.app import (
    AppConfig,
    load_config,
    load_config_with_defaults,
    merge_config_dicts,
    parse_config_dict,
)
from ElasticQuery.config.elasticsearch import ElasticsearchConfig
from ElasticQuery.config.request import RequestConfig
from ElasticQuery.config.runtime import RuntimeConfig

__all__ = [
    "RuntimeConfig",
    "ElasticsearchConfig",
    "RequestConfig",
    "AppConfig",
    "load_config",
    "load_config_with_defaults",
    "merge_config_dicts",
    "parse_config_dict",
]
