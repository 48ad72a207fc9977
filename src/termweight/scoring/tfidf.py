"""TF-IDF combination of term and inverse document frequencies."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Final

# Term frequency assumed for a term the document does not contain.
ABSENT_TERM_FREQUENCY: Final = 1.0


def combine_tfidf(
    term_frequencies: Mapping[str, int],
    idf_scores: Mapping[str, float],
) -> dict[str, float]:
    """Multiply a document's term frequencies by the IDF scores.

    The vector is keyed by every term of ``idf_scores``. Terms missing from
    the document are scored with ``ABSENT_TERM_FREQUENCY`` rather than zero,
    so a vector also carries terms its document never mentions.

    Args:
        term_frequencies: Raw term counts for one document.
        idf_scores: IDF score per term.

    Returns:
        Dictionary mapping terms to unnormalized TF-IDF scores.
    """
    return {
        term: term_frequencies.get(term, ABSENT_TERM_FREQUENCY) * idf
        for term, idf in idf_scores.items()
    }
