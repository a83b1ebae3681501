"""In-memory TF-IDF search over short text documents."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from functools import cmp_to_key
from typing import NamedTuple, Union

from searchserver.document import Document, DocumentStatus
from searchserver.string_processing import (
    make_unique_non_empty_strings,
    split_into_words,
)

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_EPSILON = 1e-6

DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
Criterion = Union[DocumentStatus, DocumentPredicate]


@dataclass(frozen=True)
class _DocumentData:
    rating: int
    status: DocumentStatus


class _QueryWord(NamedTuple):
    data: str
    is_minus: bool
    is_stop: bool


class _Query(NamedTuple):
    plus_words: frozenset[str]
    minus_words: frozenset[str]


def _is_valid_word(word: str) -> bool:
    return not any(ord(c) < 32 for c in word)


def _average_rating(ratings: Iterable[int]) -> int:
    values = list(ratings)
    if not values:
        return 0
    total = sum(values)
    quotient = abs(total) // len(values)
    return quotient if total >= 0 else -quotient


def _ranking(lhs: Document, rhs: Document) -> int:
    if abs(lhs.relevance - rhs.relevance) < RELEVANCE_EPSILON:
        return rhs.rating - lhs.rating
    return -1 if lhs.relevance > rhs.relevance else 1


class SearchServer:
    """Indexes documents and answers queries with plus and minus words."""

    def __init__(self, stop_words: str | Iterable[str]) -> None:
        if isinstance(stop_words, str):
            stop_words = split_into_words(stop_words)
        self._stop_words = frozenset(make_unique_non_empty_strings(stop_words))
        if not all(_is_valid_word(w) for w in self._stop_words):
            raise ValueError("Some of stop words are invalid")
        self._word_to_document_freqs: dict[str, dict[int, float]] = {}
        self._documents: dict[int, _DocumentData] = {}
        self._document_ids: list[int] = []

    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus,
        ratings: Iterable[int],
    ) -> None:
        """Index a document; ids must be non-negative and unique."""
        if document_id < 0 or document_id in self._documents:
            raise ValueError("Invalid document_id")
        words = self._split_into_words_no_stop(document)
        if words:
            inv_word_count = 1.0 / len(words)
            for word in words:
                freqs = self._word_to_document_freqs.setdefault(word, {})
                freqs[document_id] = freqs.get(document_id, 0.0) + inv_word_count
        self._documents[document_id] = _DocumentData(_average_rating(ratings), status)
        self._document_ids.append(document_id)

    def find_top_documents(
        self, raw_query: str, criterion: Criterion = DocumentStatus.ACTUAL
    ) -> list[Document]:
        """Return the best matches, filtered by a status or a predicate."""
        if isinstance(criterion, DocumentStatus):
            wanted = criterion

            def predicate(_id: int, status: DocumentStatus, _rating: int) -> bool:
                return status == wanted

        else:
            predicate = criterion

        query = self._parse_query(raw_query)
        matched = sorted(self._find_all_documents(query, predicate), key=cmp_to_key(_ranking))
        return matched[:MAX_RESULT_DOCUMENT_COUNT]

    def __len__(self) -> int:
        return len(self._documents)

    def document_id_at(self, index: int) -> int:
        """Return the id of the document added at the given position."""
        if not 0 <= index < len(self._document_ids):
            raise IndexError("document index out of range")
        return self._document_ids[index]

    def match_document(
        self, raw_query: str, document_id: int
    ) -> tuple[list[str], DocumentStatus]:
        """Return the query's plus words found in a document, and its status."""
        query = self._parse_query(raw_query)
        matched = [
            word
            for word in sorted(query.plus_words)
            if document_id in self._word_to_document_freqs.get(word, {})
        ]
        if any(
            document_id in self._word_to_document_freqs.get(word, {})
            for word in query.minus_words
        ):
            matched = []
        try:
            data = self._documents[document_id]
        except KeyError:
            raise KeyError(f"Unknown document_id {document_id}") from None
        return matched, data.status

    def _is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        words = []
        for word in split_into_words(text):
            if not _is_valid_word(word):
                raise ValueError(f"Word {word} is invalid")
            if not self._is_stop_word(word):
                words.append(word)
        return words

    def _parse_query_word(self, text: str) -> _QueryWord:
        if not text:
            raise ValueError("Query word is empty")
        word = text
        is_minus = word.startswith("-")
        if is_minus:
            word = word[1:]
        if not word or word.startswith("-") or not _is_valid_word(word):
            raise ValueError(f"Query word {text} is invalid")
        return _QueryWord(word, is_minus, self._is_stop_word(word))

    def _parse_query(self, text: str) -> _Query:
        plus: set[str] = set()
        minus: set[str] = set()
        for raw in split_into_words(text):
            query_word = self._parse_query_word(raw)
            if query_word.is_stop:
                continue
            (minus if query_word.is_minus else plus).add(query_word.data)
        return _Query(frozenset(plus), frozenset(minus))

    def _inverse_document_freq(self, word: str) -> float:
        return math.log(len(self) / len(self._word_to_document_freqs[word]))

    def _find_all_documents(
        self, query: _Query, predicate: DocumentPredicate
    ) -> list[Document]:
        relevance: dict[int, float] = {}
        for word in sorted(query.plus_words):
            freqs = self._word_to_document_freqs.get(word)
            if freqs is None:
                continue
            idf = self._inverse_document_freq(word)
            for document_id in sorted(freqs):
                data = self._documents[document_id]
                if predicate(document_id, data.status, data.rating):
                    relevance[document_id] = relevance.get(document_id, 0.0) + freqs[document_id] * idf

        for word in query.minus_words:
            for document_id in self._word_to_document_freqs.get(word, {}):
                relevance.pop(document_id, None)

        return [
            Document(document_id, value, self._documents[document_id].rating)
            for document_id, value in sorted(relevance.items())
        ]