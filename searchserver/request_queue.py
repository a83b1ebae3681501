"""Track how many of the recent search requests found nothing."""

from __future__ import annotations

from collections import deque

from searchserver.document import Document, DocumentStatus
from searchserver.search_server import Criterion, SearchServer

MINUTES_IN_DAY = 1440


class RequestQueue:
    """Runs queries and remembers the last day's worth of results."""

    def __init__(self, search_server: SearchServer) -> None:
        self._search_server = search_server
        self._requests: deque[list[Document]] = deque()
        self._no_result_requests = 0

    def add_find_request(
        self, raw_query: str, criterion: Criterion = DocumentStatus.ACTUAL
    ) -> list[Document]:
        """Run a query, record its outcome and return its results."""
        result = self._search_server.find_top_documents(raw_query, criterion)
        self._record(result)
        return result

    @property
    def no_result_requests(self) -> int:
        """Number of remembered requests that returned nothing."""
        return self._no_result_requests

    def _record(self, documents: list[Document]) -> None:
        if len(self._requests) >= MINUTES_IN_DAY:
            if not self._requests.popleft():
                self._no_result_requests -= 1
        self._requests.append(documents)
        if not documents:
            self._no_result_requests += 1