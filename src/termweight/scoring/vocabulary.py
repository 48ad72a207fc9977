"""Vocabulary of terms recognized by a fitted corpus model."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

UNCATEGORIZED: Final = "%UNCATEGORIZED%"


class Vocabulary:
    """Set of known terms, always containing a sentinel for unknown terms.

    The vocabulary only grows. Terms are absorbed from fitted documents and
    never removed; documents added after fitting are remapped against it
    instead of extending it.

    Attributes:
        sentinel: Placeholder term substituted for unrecognized terms.
    """

    def __init__(self, sentinel: str = UNCATEGORIZED) -> None:
        self.sentinel = sentinel
        self._terms: set[str] = {sentinel}

    def recognize(self, term: str) -> bool:
        """Check whether a term is part of the vocabulary."""
        return term in self._terms

    def absorb(self, document: Iterable[str]) -> None:
        """Add every term of a document to the vocabulary.

        Args:
            document: Sequence of terms.
        """
        self._terms.update(document)

    def remap(self, document: Iterable[str]) -> list[str]:
        """Replace every unrecognized term with the sentinel.

        Args:
            document: Sequence of terms.

        Returns:
            New list of terms, same length and order as the input.
        """
        return [term if term in self._terms else self.sentinel for term in document]

    @property
    def terms(self) -> frozenset[str]:
        """Snapshot of the known terms, sentinel included."""
        return frozenset(self._terms)

    def __contains__(self, term: object) -> bool:
        return term in self._terms

    def __len__(self) -> int:
        return len(self._terms)
