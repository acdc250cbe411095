"""Base types for search-engine fragments.

Every fragment serializes to a single-key mapping ``{wire_name: body}``, the
shape Elasticsearch 1.x expects for queries and filters. The wire name is the
snake-cased class name (``GeoDistance`` -> ``geo_distance``) unless a class
sets ``name`` explicitly.

Fragments are opaque values to the composition layer: it only ever reads
their type and places them inside composite nodes.
"""

from __future__ import annotations

import copy
import re
from typing import Any, ClassVar, Mapping, TypeVar

_CAMEL_RE = re.compile(r"(?<!^)(?=[A-Z])")

D = TypeVar("D", bound="DslObject")


def to_snake_case(name: str) -> str:
    """Convert a class name into its wire name."""
    return _CAMEL_RE.sub("_", name).lower()


def serialize(value: Any) -> Any:
    """Recursively convert fragments and containers into JSON-ready values."""
    if isinstance(value, DslObject):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {str(k): serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [serialize(v) for v in value]
    return value


class DslObject:
    """Common behavior of query, filter and aggregation fragments."""

    name: ClassVar[str] = ""

    __slots__ = ("_params",)

    def __init__(self, params: Any = None) -> None:
        self._params = {} if params is None else params

    @classmethod
    def base_name(cls) -> str:
        """Return the wire name of this fragment type."""
        return cls.name or to_snake_case(cls.__name__)

    @classmethod
    def from_body(cls: type[D], body: Any) -> D:
        """Build a fragment from its already wire-shaped body."""
        obj = cls.__new__(cls)
        DslObject.__init__(obj, copy.deepcopy(body))
        return obj

    @property
    def params(self) -> Any:
        """Serialized fragment body (a fresh copy)."""
        return serialize(self._params)

    def to_dict(self) -> dict[str, Any]:
        return {self.base_name(): self.params}

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.params!r})"


class Query(DslObject):
    """Relevance-scoring query fragment."""

    __slots__ = ()


class Filter(DslObject):
    """Boolean inclusion/exclusion filter fragment."""

    __slots__ = ()


class Aggregation(DslObject):
    """Named aggregation definition.

    Unlike queries and filters, an aggregation carries the name it is
    registered under in the request's ``aggs`` section, and may hold nested
    sub-aggregations.
    """

    __slots__ = ("agg_name", "_aggs")

    def __init__(self, agg_name: str, params: Any = None) -> None:
        super().__init__(params)
        self.agg_name = agg_name
        self._aggs: dict[str, Aggregation] = {}

    @classmethod
    def from_body(cls, body: Any, agg_name: str = "") -> Aggregation:  # type: ignore[override]
        obj = cls.__new__(cls)
        Aggregation.__init__(obj, agg_name, copy.deepcopy(body))
        return obj

    def add_aggregation(self, aggregation: Aggregation) -> Aggregation:
        """Nest a sub-aggregation and return ``self`` for chaining."""
        if not isinstance(aggregation, Aggregation):
            raise TypeError(f"Expected Aggregation, got {type(aggregation).__name__}")
        self._aggs[aggregation.agg_name] = aggregation
        return self

    @property
    def aggregations(self) -> Mapping[str, Aggregation]:
        return dict(self._aggs)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {self.base_name(): self.params}
        if self._aggs:
            data["aggs"] = {name: agg.to_dict() for name, agg in self._aggs.items()}
        return data

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.agg_name == other.agg_name and self.to_dict() == other.to_dict()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.agg_name!r}, {self.params!r})"


def compact(params: Mapping[str, Any]) -> dict[str, Any]:
    """Drop unset (``None``) optional parameters."""
    return {k: v for k, v in params.items() if v is not None}
