"""Shared test fixtures for scoring tests."""

import pytest

from termweight.scoring.corpus import CorpusModel


@pytest.fixture
def sample_corpus() -> list[list[str]]:
    """Two-document corpus where "a" is common and "b" is rare."""
    return [["a", "b"], ["a"]]


@pytest.fixture
def model() -> CorpusModel:
    """Fresh, never-fitted corpus model."""
    return CorpusModel()


@pytest.fixture
def fitted_model(sample_corpus: list[list[str]]) -> CorpusModel:
    """Corpus model fitted on the sample corpus."""
    corpus_model = CorpusModel()
    corpus_model.fit_documents(sample_corpus)
    return corpus_model
