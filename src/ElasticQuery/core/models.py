from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional, Sequence


@dataclass(frozen=True, slots=True)
class Hit:
    """One document returned by a search.

    Attributes:
        index: Index the document lives in.
        id: Document id.
        score: Relevance score, None when sorting disabled scoring.
        source: Stored document body (``_source``).
        doc_type: Mapping type of the document, if reported.
        sort: Sort values of the hit when the request was sorted.
    """

    index: str
    id: str
    score: Optional[float]
    source: Mapping[str, Any] = field(default_factory=dict)
    doc_type: Optional[str] = None
    sort: Sequence[Any] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "source", MappingProxyType(dict(self.source)))


@dataclass(frozen=True, slots=True)
class ResultSet:
    """Parsed search response.

    Attributes:
        hits: Hits in engine order.
        total: Total number of matching documents (not just returned ones).
        max_score: Highest score among matches.
        took: Engine-side execution time in milliseconds.
        timed_out: Whether the engine hit its own timeout.
        aggregations: Raw aggregation results keyed by aggregation name.
    """

    hits: tuple[Hit, ...]
    total: int
    max_score: Optional[float] = None
    took: Optional[int] = None
    timed_out: bool = False
    aggregations: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "aggregations", MappingProxyType(dict(self.aggregations)))

    def __len__(self) -> int:
        return len(self.hits)

    def __iter__(self) -> Iterator[Hit]:
        return iter(self.hits)
