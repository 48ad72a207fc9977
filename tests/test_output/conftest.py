"""Shared fixtures for output tests."""

import pytest

from termweight.scoring.models import DocumentVector, ModelSummary


@pytest.fixture
def sample_vectors() -> tuple[DocumentVector, ...]:
    """Two scored documents."""
    return (
        DocumentVector.from_mapping(0, {"a": 1.0, "b": 1.5}),
        DocumentVector.from_mapping(1, {"a": 2.0, "b": 1.5, "c": 0.5}),
    )


@pytest.fixture
def sample_summary() -> ModelSummary:
    """Summary matching the sample vectors."""
    return ModelSummary(documents_processed=2, vocabulary_size=4, tracked_terms=3)
