"""Search result records and document statuses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class DocumentStatus(Enum):
    """Lifecycle status of an indexed document."""

    ACTUAL = auto()
    IRRELEVANT = auto()
    BANNED = auto()
    REMOVED = auto()


@dataclass
class Document:
    """A single search hit: document id, its relevance and average rating."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )