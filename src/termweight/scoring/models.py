"""Pydantic models for scored documents."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field


class TermScore(BaseModel, frozen=True):
    """A single term and its TF-IDF score.

    Attributes:
        term: The term as it appears in the vector.
        score: Unnormalized TF-IDF score.
    """

    term: str = Field(..., description="The term, possibly empty")
    score: float = Field(..., description="Unnormalized TF-IDF score")


class DocumentVector(BaseModel, frozen=True):
    """TF-IDF vector of one processed document.

    Attributes:
        index: Zero-based position of the document in processing order.
        scores: Term scores sorted by score descending, then term ascending.
    """

    index: int = Field(..., ge=0, description="Position in processing order")
    scores: tuple[TermScore, ...] = Field(
        default_factory=tuple, description="Term scores sorted by score descending"
    )

    @classmethod
    def from_mapping(cls, index: int, vector: Mapping[str, float]) -> DocumentVector:
        """Build a sorted DocumentVector from a raw term-to-score mapping."""
        ordered = sorted(vector.items(), key=lambda item: (-item[1], item[0]))
        return cls(
            index=index,
            scores=tuple(TermScore(term=term, score=score) for term, score in ordered),
        )

    def top_terms(self, n: int = 10) -> tuple[TermScore, ...]:
        """Return the N highest scoring terms.

        Args:
            n: Number of terms to return.

        Returns:
            Tuple of top N TermScore items.
        """
        return self.scores[:n]

    def as_dict(self) -> dict[str, float]:
        return {item.term: item.score for item in self.scores}


class ModelSummary(BaseModel, frozen=True):
    """Size statistics of a corpus model.

    Attributes:
        documents_processed: Documents scored by fit and add calls.
        vocabulary_size: Known terms, sentinel included.
        tracked_terms: Terms with an accumulated document frequency.
    """

    documents_processed: int = Field(..., ge=0, description="Documents scored so far")
    vocabulary_size: int = Field(..., ge=0, description="Known terms including the sentinel")
    tracked_terms: int = Field(..., ge=0, description="Terms with a document frequency")
