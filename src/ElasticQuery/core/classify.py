"""Filter classification policy.

Decides whether a filter goes into the shared boolean filter group or is
applied directly as a clause of the AND chain.

Script, numeric-range and geo filters are expensive or cannot be cached as
bitsets, so they are applied directly as AND clauses rather than folded into
the cacheable boolean group. Every other filter type is a cheap, cacheable
bitset filter and is grouped with its peers for the engine to optimize.
See http://www.elasticsearch.org/blog/all-about-elasticsearch-filter-bitsets/
"""

from __future__ import annotations

from enum import Enum
from typing import Final

from ElasticQuery.dsl.base import Filter


class FilterKind(str, Enum):
    AND = "and"
    BOOL = "bool"


_AND_FILTER_NAMES: Final[frozenset[str]] = frozenset({"Script", "NumericRange"})
_AND_FILTER_PREFIX: Final[str] = "Geo"


def filter_type_name(fragment: Filter) -> str:
    """Return the declared filter type name without its module path."""
    return type(fragment).__name__


def classify_filter(fragment: Filter) -> FilterKind:
    """Classify a filter fragment.

    Args:
        fragment: Any filter fragment. Unknown types are accepted.

    Returns:
        ``FilterKind.AND`` for Script, NumericRange and Geo* filters,
        ``FilterKind.BOOL`` for everything else.
    """
    name = filter_type_name(fragment)
    if name in _AND_FILTER_NAMES or name.startswith(_AND_FILTER_PREFIX):
        return FilterKind.AND
    return FilterKind.BOOL


def is_and_filter(fragment: Filter) -> bool:
    return classify_filter(fragment) is FilterKind.AND
