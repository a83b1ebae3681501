"""Helpers for splitting text into words."""

from __future__ import annotations

from collections.abc import Iterable


def split_into_words(text: str) -> list[str]:
    """Split text on spaces, dropping empty pieces."""
    return [word for word in text.split(" ") if word]


def make_unique_non_empty_strings(strings: Iterable[str]) -> set[str]:
    """Return the set of non-empty strings from an iterable."""
    return {s for s in strings if s}