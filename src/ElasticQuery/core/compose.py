"""Reduce accumulated fragments into at most one query and one filter.

Both reductions share the same shape: nothing for an empty list, the bare
fragment for a single one, a composite node for several. Filters add a
classification step so that cacheable filters are grouped into one boolean
filter placed at the head of the AND chain.
"""

from __future__ import annotations

from typing import Callable, Sequence, TypeVar

from ElasticQuery.core.classify import FilterKind, classify_filter
from ElasticQuery.dsl import filters, queries
from ElasticQuery.dsl.base import Filter, Query
from ElasticQuery.utils.log import log

T = TypeVar("T")


def reduce_to_tree(nodes: Sequence[T], wrap: Callable[[list[T]], T]) -> T | None:
    """Reduce a list of nodes to an optional single node.

    Args:
        nodes: Nodes in insertion order.
        wrap: Builds the composite node for two or more nodes.

    Returns:
        None for no nodes, the node itself for one, ``wrap(nodes)`` otherwise.
    """
    if not nodes:
        return None
    if len(nodes) == 1:
        return nodes[0]
    return wrap(list(nodes))


def compose_queries(fragments: Sequence[Query]) -> Query | None:
    """Combine queries as ``must`` clauses of one boolean query."""
    return reduce_to_tree(fragments, lambda clauses: queries.Bool(must=clauses))


def partition_filters(fragments: Sequence[Filter]) -> tuple[list[Filter], list[Filter]]:
    """Split filters into ``(bool_combinable, and_eligible)``, keeping order."""
    bool_filters: list[Filter] = []
    and_filters: list[Filter] = []
    for fragment in fragments:
        if classify_filter(fragment) is FilterKind.AND:
            and_filters.append(fragment)
        else:
            bool_filters.append(fragment)
    return bool_filters, and_filters


def compose_filters(fragments: Sequence[Filter]) -> Filter | None:
    """Combine filters into a minimal tree.

    Cacheable filters are gathered into a single ``filters.Bool`` group (or
    kept bare when alone) at the head of the chain; Script, NumericRange and
    Geo* filters follow in insertion order. A chain of several members is a
    ``filters.And``; a chain of one is returned as is.

    Args:
        fragments: Filters in insertion order.

    Returns:
        The composed filter, or None when there is nothing to filter on.
    """
    if len(fragments) < 2:
        return reduce_to_tree(fragments, filters.And)

    bool_filters, chain = partition_filters(fragments)
    if len(bool_filters) > 1:
        chain.insert(0, filters.Bool(must=bool_filters))
    elif bool_filters:
        chain.insert(0, bool_filters[0])

    log.debug(
        "Composed %d filters: bool_group=%d and_chain=%d",
        len(fragments),
        len(bool_filters),
        len(chain),
    )
    return reduce_to_tree(chain, filters.And)
