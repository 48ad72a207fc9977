"""Inverse document frequency calculation."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from termweight.exceptions import InvalidInputError

if TYPE_CHECKING:
    from termweight.scoring.document_frequency import DocumentFrequencies


def calculate_idf(document_frequency: int, total_documents: int) -> float:
    """Calculate IDF (Inverse Document Frequency) score.

    Uses ln(N/df) + 1 where N is the effective document count of the current
    batch and df is the cumulative document frequency. The added 1 keeps a
    term seen in every document of the batch from scoring zero.

    Args:
        document_frequency: Smoothed number of documents containing the term.
        total_documents: Effective document count, phantom document included.

    Returns:
        IDF score. At least 1.0 whenever df does not exceed N.

    Raises:
        InvalidInputError: If either count is not positive.
    """
    if document_frequency < 1:
        raise InvalidInputError(
            "Document frequency must be positive",
            argument="document_frequency",
            value=document_frequency,
        )
    if total_documents < 1:
        raise InvalidInputError(
            "Document count must be positive",
            argument="total_documents",
            value=total_documents,
        )
    return math.log(total_documents / document_frequency) + 1


def calculate_idf_map(
    document_frequencies: DocumentFrequencies,
    total_documents: int,
) -> dict[str, float]:
    """Calculate IDF scores for every term tracked so far.

    The result covers all accumulated terms, not only the terms of the
    batch that produced ``total_documents``.

    Args:
        document_frequencies: Cumulative document frequencies.
        total_documents: Effective document count of the current batch.

    Returns:
        Dictionary mapping terms to their IDF scores.
    """
    return {
        term: calculate_idf(doc_freq, total_documents)
        for term, doc_freq in document_frequencies.items()
    }
