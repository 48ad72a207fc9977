"""Cumulative document frequency accumulation with phantom document smoothing."""

from __future__ import annotations

from collections.abc import Iterable, ItemsView, Sequence
from typing import Final

# Every term is assumed to appear once in an implicit master document.
PHANTOM_DOCUMENTS: Final = 1


class DocumentFrequencies:
    """Number of documents each term has appeared in over a model's lifetime.

    Counts start at ``PHANTOM_DOCUMENTS`` for unseen terms and only grow;
    accumulated batches are never rolled back.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def accumulate(self, documents: Sequence[Iterable[str]]) -> int:
        """Count each distinct term of each document once.

        Args:
            documents: Batch of documents.

        Returns:
            Effective document count for the batch, including the phantom
            master document.
        """
        for document in documents:
            # Each term counts once per document, regardless of frequency
            for term in set(document):
                self._counts[term] = self._counts.get(term, PHANTOM_DOCUMENTS) + 1
        return len(documents) + PHANTOM_DOCUMENTS

    def get(self, term: str) -> int:
        """Document frequency of a term, with the implicit default for unseen terms."""
        return self._counts.get(term, PHANTOM_DOCUMENTS)

    def items(self) -> ItemsView[str, int]:
        return self._counts.items()

    def as_dict(self) -> dict[str, int]:
        """Copy of the accumulated counts."""
        return dict(self._counts)

    def __getitem__(self, term: str) -> int:
        return self._counts[term]

    def __contains__(self, term: object) -> bool:
        return term in self._counts

    def __len__(self) -> int:
        return len(self._counts)
