"""Demonstration run counting empty search requests over a day."""

from __future__ import annotations

from collections.abc import Sequence

from searchserver.document import DocumentStatus
from searchserver.request_queue import RequestQueue
from searchserver.search_server import SearchServer


def main(argv: Sequence[str] | None = None) -> int:
    """Index sample documents, issue requests and print the empty count."""
    search_server = SearchServer("and in at")
    request_queue = RequestQueue(search_server)
    samples = [
        (1, "curly cat curly tail", [7, 2, 7]),
        (2, "curly dog and fancy collar", [1, 2, 3]),
        (3, "big cat fancy collar ", [1, 2, 8]),
        (4, "big dog sparrow Eugene", [1, 3, 2]),
        (5, "big dog sparrow Vasiliy", [1, 1, 1]),
    ]
    for document_id, text, ratings in samples:
        search_server.add_document(document_id, text, DocumentStatus.ACTUAL, ratings)

    for _ in range(1439):
        request_queue.add_find_request("empty request")
    request_queue.add_find_request("curly dog")
    request_queue.add_find_request("big collar")
    request_queue.add_find_request("sparrow")
    print(f"Total empty requests: {request_queue.no_result_requests}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())