"""Term frequency counting for tokenized documents."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def term_frequency(document: Iterable[str]) -> dict[str, int]:
    """Count raw term occurrences in a document.

    Args:
        document: Sequence of terms.

    Returns:
        Dictionary mapping each term to its occurrence count. Empty for an
        empty document.
    """
    counts: Counter[str] = Counter()
    for term in document:
        counts[term] += 1
    return dict(counts)


def term_frequencies(documents: Sequence[Iterable[str]]) -> list[dict[str, int]]:
    """Count term occurrences for each document of a batch.

    Args:
        documents: Sequence of documents.

    Returns:
        One term frequency map per document, in document order.
    """
    return [term_frequency(document) for document in documents]
