"""Search-engine fragment DSL.

``queries``, ``filters`` and ``aggregations`` hold the concrete fragment
types; ``loader`` builds them from wire-format mappings.
"""

from __future__ import annotations

from ElasticQuery.dsl.base import Aggregation, DslObject, Filter, Query

__all__ = ["Aggregation", "DslObject", "Filter", "Query"]
