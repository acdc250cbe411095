"""Document manager: executes composed requests and maps hits to documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from ElasticQuery.client.parser import parse_search_response
from ElasticQuery.core.builder import QueryBuilder
from ElasticQuery.core.models import Hit, ResultSet
from ElasticQuery.core.request import SearchRequest
from ElasticQuery.utils.log import log

HitMapper = Callable[[Hit], Any]


class SearchClient(Protocol):
    """Protocol for the transport that sends search bodies."""

    def search(self, body: dict[str, Any], *, index: str | None = None) -> Any:
        """Run a search and return the decoded response."""
        raise NotImplementedError

    def close(self) -> None:
        """Release transport resources."""
        raise NotImplementedError


@dataclass(slots=True)
class DocumentManager:
    """Bind a search client and index to query builders.

    Attributes:
        client: Transport used to run searches.
        index: Default index searched by executed requests.
        hit_mapper: Optional callable turning a ``Hit`` into a domain object.
    """

    client: SearchClient
    index: str | None = None
    hit_mapper: HitMapper | None = None

    def create_query_builder(self) -> QueryBuilder:
        """Return a fresh builder whose ``get_result`` runs through this manager."""
        return QueryBuilder(document_manager=self)

    def execute(self, request: SearchRequest) -> ResultSet:
        """Serialize, send and parse one search request.

        Args:
            request: Finalized search request.

        Returns:
            Parsed result set.
        """
        body = request.to_dict()
        payload = self.client.search(body, index=self.index)
        result_set = parse_search_response(payload)
        log.info(
            "Search completed: index=%s hits=%d total=%d took=%sms",
            self.index or "_all",
            len(result_set),
            result_set.total,
            result_set.took,
        )
        if result_set.timed_out:
            log.warning("Search timed out on the engine side; results may be partial")
        return result_set

    def to_documents(self, result_set: ResultSet) -> list[Any]:
        """Map hits to domain objects with ``hit_mapper`` (hits as is otherwise)."""
        if self.hit_mapper is None:
            return list(result_set.hits)
        return [self.hit_mapper(hit) for hit in result_set.hits]

    def close(self) -> None:
        self.client.close()
