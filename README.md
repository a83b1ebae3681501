# searchserver

An in-memory full-text search server. Documents are indexed by word.
Query results are ranked by TF-IDF relevance. Where two relevances differ by
less than 1e-6, the document with the higher average rating comes first.

Features:

- Stop words are ignored both when documents are indexed and when queries are parsed.
- Minus words (`-word`) drop every document that contains them.
- Results can be filtered by document status, or by any predicate on id, status and rating.
- A query returns at most five results.
- A request queue counts how many of the last 1440 queries found nothing.
- A paginator splits results into pages.
- There are small helpers for reading lines and numbers from a text stream.

## Installation

```
pip install .
```

## Usage

```python
from searchserver.document import DocumentStatus
from searchserver.search_server import SearchServer
from searchserver.request_queue import RequestQueue
from searchserver.paginator import paginate

server = SearchServer("and in at")          # or an iterable of stop words
server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
server.add_document(2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
server.add_document(3, "big cat fancy collar", DocumentStatus.ACTUAL, [1, 2, 8])

for doc in server.find_top_documents("curly -collar"):
    print(doc)   # { document_id = 1, relevance = ..., rating = 5 }

# Filter by status (ACTUAL by default), or by a predicate on (document_id, status, rating)
server.find_top_documents("cat", DocumentStatus.BANNED)
server.find_top_documents("cat", lambda doc_id, status, rating: doc_id % 2 == 1)

len(server)                  # number of indexed documents
server.document_id_at(0)     # id of the first document added

words, status = server.match_document("fancy cat", 3)

queue = RequestQueue(server)
queue.add_find_request("empty request")
print(queue.no_result_requests)   # a property

for page in paginate(server.find_top_documents("curly cat"), 2):
    print(page)                   # the page's documents, concatenated
```

`searchserver.read_input` provides `read_line(stream=None)` and
`read_line_with_number(stream=None)`. Both read from standard input when no
stream is given.

The package raises these errors:

- `ValueError` for a negative or duplicate document id, for words that contain control characters, for query words such as `-` or `--word`, and for a non-positive page size.
- `KeyError` from `match_document` for an unknown document id.
- `IndexError` from `document_id_at` for an index that is out of range.

## Command line

```
searchserver
```

This command runs a fixed demonstration. It indexes five sample documents and
issues 1439 queries that find nothing, followed by three that do. It then
prints how many of the last 1440 requests found nothing. It takes no options
and reads no input.

## Limitations

The index lives only in memory. There is no storage and no network server.
Documents cannot be removed once they are added.

## Tests

```
pip install ".[test]"
pytest
```