"""Rendering of TF-IDF vectors as JSON, CSV or plain text."""

from __future__ import annotations

import csv
import io
import json
from collections.abc import Sequence
from typing import Any

from termweight.scoring.models import DocumentVector, ModelSummary


def to_records(vectors: Sequence[DocumentVector], top: int) -> list[dict[str, Any]]:
    """Convert vectors to plain dictionaries, keeping the top terms of each.

    Args:
        vectors: Scored documents.
        top: Number of terms to keep per document.

    Returns:
        List of ``{"document": index, "terms": [{"term", "score"}]}`` records.
    """
    return [
        {
            "document": vector.index,
            "terms": [{"term": s.term, "score": s.score} for s in vector.top_terms(top)],
        }
        for vector in vectors
    ]


def format_json(
    vectors: Sequence[DocumentVector],
    summary: ModelSummary,
    top: int,
) -> str:
    """Format vectors and model statistics as a JSON document."""
    data = {
        "documents_processed": summary.documents_processed,
        "vocabulary_size": summary.vocabulary_size,
        "tracked_terms": summary.tracked_terms,
        "vectors": to_records(vectors, top),
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_csv(vectors: Sequence[DocumentVector], top: int) -> str:
    """Format vectors as CSV rows of document, rank, term and score."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(["document", "rank", "term", "score"])
    for vector in vectors:
        for rank, s in enumerate(vector.top_terms(top), 1):
            writer.writerow([vector.index, rank, s.term, s.score])
    return buffer.getvalue().rstrip("\n")


def format_text(
    vectors: Sequence[DocumentVector],
    summary: ModelSummary,
    top: int,
) -> str:
    """Format vectors as tab-separated text for file output."""
    lines = [
        f"Documents processed: {summary.documents_processed}",
        f"Vocabulary size: {summary.vocabulary_size}",
        f"Tracked terms: {summary.tracked_terms}",
    ]
    for vector in vectors:
        lines.append("")
        lines.append(f"Document {vector.index}")
        lines.append("Rank\tTerm\tScore")
        for rank, s in enumerate(vector.top_terms(top), 1):
            lines.append(f"{rank}\t{s.term}\t{s.score:.4f}")
    return "\n".join(lines)
